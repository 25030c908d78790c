"""Catalog Query Shapes — compiled against PostgreSQL, no database needed.

Tests:
    - Owner filter present: WHERE on owner column, no LIMIT
    - Owner filter absent: no WHERE, LIMIT default cap (100, relationships 200)
    - Relationship-by-pantheon joins through the from-endpoint deity
    - Nulls-last ordering is explicit
    - Search binds the pattern and limit as parameters, never inlines them
"""

from uuid import uuid4

from sqlalchemy.dialects import postgresql

from mythos_atlas.db import queries
from mythos_atlas.models import Deity


def _compile(stmt):
    compiled = stmt.compile(dialect=postgresql.dialect())
    return str(compiled), compiled.params


def test_unfiltered_deity_list_is_capped_at_100():
    sql, params = _compile(queries.build_owned_list(queries.DEITY_LIST, None))
    assert "WHERE" not in sql
    assert "LIMIT" in sql
    assert 100 in params.values()


def test_filtered_deity_list_has_no_limit():
    owner = uuid4()
    sql, params = _compile(queries.build_owned_list(queries.DEITY_LIST, owner))
    assert "deities.pantheon_id =" in sql
    assert "LIMIT" not in sql
    assert owner in params.values()


def test_deity_list_orders_by_rank_nulls_last_then_name():
    sql, _ = _compile(queries.build_owned_list(queries.DEITY_LIST, None))
    assert "ORDER BY deities.importance_rank ASC NULLS LAST, deities.name ASC" in sql


def test_event_list_orders_by_sequence_nulls_last_then_title():
    sql, _ = _compile(queries.build_owned_list(queries.EVENT_LIST, uuid4()))
    assert "events.story_id =" in sql
    assert "ORDER BY events.sequence_order ASC NULLS LAST, events.title ASC" in sql


def test_story_and_location_lists_share_the_owner_pattern():
    for spec, table in ((queries.STORY_LIST, "stories"), (queries.LOCATION_LIST, "locations")):
        sql, params = _compile(queries.build_owned_list(spec, None))
        assert "LIMIT" in sql
        assert 100 in params.values()
        sql, _ = _compile(queries.build_owned_list(spec, uuid4()))
        assert f"{table}.pantheon_id =" in sql
        assert "LIMIT" not in sql


def test_unfiltered_relationships_capped_at_200_without_join():
    sql, params = _compile(queries.build_owned_list(queries.RELATIONSHIP_LIST, None))
    assert "JOIN" not in sql
    assert 200 in params.values()
    assert "ORDER BY deity_relationships.relationship_type" in sql


def test_filtered_relationships_join_from_endpoint_pantheon():
    owner = uuid4()
    sql, params = _compile(queries.build_owned_list(queries.RELATIONSHIP_LIST, owner))
    assert "JOIN deities ON deity_relationships.from_deity_id = deities.id" in sql
    assert "deities.pantheon_id =" in sql
    assert "LIMIT" not in sql
    assert owner in params.values()


def test_relationships_for_deity_matches_either_endpoint():
    deity_id = uuid4()
    sql, params = _compile(queries.build_relationships_for_deity(deity_id))
    assert "deity_relationships.from_deity_id =" in sql
    assert " OR deity_relationships.to_deity_id =" in sql
    assert "LIMIT" not in sql
    assert list(params.values()).count(deity_id) == 2


def test_pantheon_list_is_unbounded_and_ordered_by_name():
    sql, _ = _compile(queries.build_all_pantheons())
    assert "ORDER BY pantheons.name ASC" in sql
    assert "LIMIT" not in sql


def test_get_by_id_binds_identifier():
    uid = uuid4()
    sql, params = _compile(queries.build_get_by_id(Deity, uid))
    assert "WHERE deities.id =" in sql
    assert uid in params.values()


def test_search_binds_pattern_and_limit():
    pattern = "%'; DROP TABLE deities; --%"
    sql, params = _compile(queries.build_deity_search(pattern, 5))
    assert "DROP TABLE" not in sql
    assert pattern in params.values()
    assert 5 in params.values()
    assert "ILIKE" in sql
    assert "ESCAPE" in sql


def test_search_orderings_per_entity():
    deity_sql, _ = _compile(queries.build_deity_search("%a%", 10))
    pantheon_sql, _ = _compile(queries.build_pantheon_search("%a%", 10))
    story_sql, _ = _compile(queries.build_story_search("%a%", 10))
    assert "ORDER BY deities.importance_rank ASC NULLS LAST" in deity_sql
    assert "deities.alternate_names_text ILIKE" in deity_sql
    assert "ORDER BY pantheons.name ASC" in pantheon_sql
    assert "pantheons.culture ILIKE" in pantheon_sql
    assert "ORDER BY stories.title ASC" in story_sql
    assert "stories.summary ILIKE" in story_sql
