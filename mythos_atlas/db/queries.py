"""Catalog Queries — pure construction of every bounded, parameterized catalog query.

Invariants:
    - Every function returns a SQLAlchemy Select; nothing here executes or awaits
    - All caller values enter as bound parameters (never formatted into SQL text)
    - Owner filter present -> filtered, no LIMIT; absent -> unfiltered, LIMIT default_cap
    - Nulls-last secondary keys are explicit (NULLS LAST), not dialect defaults
    - Full-row projections only

Design Decisions:
    - One OwnedList spec + one builder replace five near-identical list queries
      (deities, stories, events, locations, relationships)
    - Relationship-by-pantheon is the same pattern with a join: the owner column
      lives on the from-endpoint deity
    - Pure functions so query shape can be tested by compiling against the
      PostgreSQL dialect without a database
"""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy import Select, or_, select

from mythos_atlas.core.query_inputs import LIKE_ESCAPE
from mythos_atlas.models import (
    Deity, DeityRelationship, Event, Location, Pantheon, Story,
)

DEFAULT_LIST_CAP = 100
RELATIONSHIP_LIST_CAP = 200


@dataclass(frozen=True)
class OwnedList:
    """Shape of a "list X, optionally filtered by owning Y" query."""
    model: type
    owner_column: Any
    order_by: tuple
    default_cap: int = DEFAULT_LIST_CAP
    # (target, onclause) joined only when the owner filter is applied
    join: tuple | None = None


DEITY_LIST = OwnedList(
    model=Deity,
    owner_column=Deity.pantheon_id,
    order_by=(Deity.importance_rank.asc().nulls_last(), Deity.name.asc()),
)

STORY_LIST = OwnedList(
    model=Story,
    owner_column=Story.pantheon_id,
    order_by=(Story.title.asc(),),
)

EVENT_LIST = OwnedList(
    model=Event,
    owner_column=Event.story_id,
    order_by=(Event.sequence_order.asc().nulls_last(), Event.title.asc()),
)

LOCATION_LIST = OwnedList(
    model=Location,
    owner_column=Location.pantheon_id,
    order_by=(Location.name.asc(),),
)

RELATIONSHIP_LIST = OwnedList(
    model=DeityRelationship,
    owner_column=Deity.pantheon_id,
    order_by=(DeityRelationship.relationship_type.asc(),),
    default_cap=RELATIONSHIP_LIST_CAP,
    join=(Deity, DeityRelationship.from_deity_id == Deity.id),
)


def build_owned_list(spec: OwnedList, owner_id: UUID | None) -> Select:
    """Filtered + unbounded when owner_id given, else unfiltered + capped."""
    query = select(spec.model)
    if owner_id is not None:
        if spec.join is not None:
            target, onclause = spec.join
            query = query.join(target, onclause)
        return query.where(spec.owner_column == owner_id).order_by(*spec.order_by)
    return query.order_by(*spec.order_by).limit(spec.default_cap)


def build_get_by_id(model: type, entity_id: UUID) -> Select:
    return select(model).where(model.id == entity_id)


def build_all_pantheons() -> Select:
    return select(Pantheon).order_by(Pantheon.name.asc())


def build_relationships_for_deity(deity_id: UUID) -> Select:
    """Undirected lookup over directed edges: match either endpoint."""
    return (
        select(DeityRelationship)
        .where(or_(
            DeityRelationship.from_deity_id == deity_id,
            DeityRelationship.to_deity_id == deity_id,
        ))
        .order_by(DeityRelationship.relationship_type.asc())
    )


# ─── Search ──────────────────────────────────────────────────────

def build_deity_search(pattern: str, limit: int) -> Select:
    return (
        select(Deity)
        .where(or_(
            Deity.name.ilike(pattern, escape=LIKE_ESCAPE),
            Deity.alternate_names_text.ilike(pattern, escape=LIKE_ESCAPE),
            Deity.description.ilike(pattern, escape=LIKE_ESCAPE),
        ))
        .order_by(Deity.importance_rank.asc().nulls_last())
        .limit(limit)
    )


def build_pantheon_search(pattern: str, limit: int) -> Select:
    return (
        select(Pantheon)
        .where(or_(
            Pantheon.name.ilike(pattern, escape=LIKE_ESCAPE),
            Pantheon.culture.ilike(pattern, escape=LIKE_ESCAPE),
            Pantheon.description.ilike(pattern, escape=LIKE_ESCAPE),
        ))
        .order_by(Pantheon.name.asc())
        .limit(limit)
    )


def build_story_search(pattern: str, limit: int) -> Select:
    return (
        select(Story)
        .where(or_(
            Story.title.ilike(pattern, escape=LIKE_ESCAPE),
            Story.summary.ilike(pattern, escape=LIKE_ESCAPE),
        ))
        .order_by(Story.title.asc())
        .limit(limit)
    )
