"""Catalog Queries — the query resolution layer: one async operation per access pattern.

Invariants:
    - Every identifier is parsed BEFORE a session is borrowed: a malformed id
      raises InvalidInputError and never reaches the pool
    - Every operation issues exactly one bounded query (search: one per entity)
      on one borrowed session, released on every exit path
    - get_* return None for a valid id with no row (absent, not an error)
    - list_* return records in store order; a row that fails mapping occupies
      its slot as a DataIntegrityError
    - No retries: StoreError propagates to the caller as-is

Design Decisions:
    - Class holding the injected SessionProvider, no module-level pool access:
      tests hand in a recording provider, the app hands in the pool
    - Query shapes live in db/queries.py; this module only sequences
      validate -> borrow -> execute -> map
"""

import logging
from dataclasses import dataclass, field
from typing import TypeVar
from uuid import UUID

from sqlalchemy import Select

from mythos_atlas.core.errors import DataIntegrityError
from mythos_atlas.core.query_inputs import (
    build_search_pattern, parse_identifier, parse_optional_identifier,
    validate_search_limit,
)
from mythos_atlas.core.repository_protocols import SessionProvider
from mythos_atlas.db import queries
from mythos_atlas.models import Deity, Location, Pantheon, Story
from mythos_atlas.schemas.records import (
    CatalogRecord, DeityRecord, DeityRelationshipRecord, EventRecord,
    LocationRecord, PantheonRecord, StoryRecord,
)
from mythos_atlas.services.record_mapping import map_row, map_rows

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=CatalogRecord)

DEFAULT_SEARCH_LIMIT = 10
MAX_SEARCH_LIMIT = 100


@dataclass(frozen=True)
class SearchResults:
    """Three independently capped result lists."""
    deities: list[DeityRecord | DataIntegrityError] = field(default_factory=list)
    pantheons: list[PantheonRecord | DataIntegrityError] = field(default_factory=list)
    stories: list[StoryRecord | DataIntegrityError] = field(default_factory=list)


class CatalogQueries:
    """Read-only access to the mythology catalog."""

    def __init__(
        self,
        sessions: SessionProvider,
        search_default_limit: int = DEFAULT_SEARCH_LIMIT,
        search_max_limit: int = MAX_SEARCH_LIMIT,
    ):
        self._sessions = sessions
        self._search_default_limit = search_default_limit
        self._search_max_limit = search_max_limit

    # ─── Pantheons ───────────────────────────────────────────────

    async def list_pantheons(self) -> list[PantheonRecord | DataIntegrityError]:
        return await self._fetch_all(
            queries.build_all_pantheons(), PantheonRecord, "list_pantheons",
        )

    async def get_pantheon(self, pantheon_id: str) -> PantheonRecord | None:
        uid = parse_identifier(pantheon_id, "id")
        return await self._fetch_one(
            queries.build_get_by_id(Pantheon, uid), PantheonRecord, "get_pantheon",
        )

    # ─── Deities ─────────────────────────────────────────────────

    async def list_deities(
        self, pantheon_id: str | None = None,
    ) -> list[DeityRecord | DataIntegrityError]:
        owner = parse_optional_identifier(pantheon_id, "pantheonId")
        return await self._fetch_owned(
            queries.DEITY_LIST, owner, DeityRecord, "list_deities",
        )

    async def get_deity(self, deity_id: str) -> DeityRecord | None:
        uid = parse_identifier(deity_id, "id")
        return await self._fetch_one(
            queries.build_get_by_id(Deity, uid), DeityRecord, "get_deity",
        )

    # ─── Relationships ───────────────────────────────────────────

    async def relationships_for_deity(
        self, deity_id: str,
    ) -> list[DeityRelationshipRecord | DataIntegrityError]:
        """Every edge where the deity is either endpoint."""
        uid = parse_identifier(deity_id, "deityId")
        return await self._fetch_all(
            queries.build_relationships_for_deity(uid),
            DeityRelationshipRecord, "relationships_for_deity",
        )

    async def list_relationships(
        self, pantheon_id: str | None = None,
    ) -> list[DeityRelationshipRecord | DataIntegrityError]:
        """Filtered by the from-endpoint's pantheon when pantheon_id is given."""
        owner = parse_optional_identifier(pantheon_id, "pantheonId")
        return await self._fetch_owned(
            queries.RELATIONSHIP_LIST, owner,
            DeityRelationshipRecord, "list_relationships",
        )

    # ─── Stories & Events ────────────────────────────────────────

    async def list_stories(
        self, pantheon_id: str | None = None,
    ) -> list[StoryRecord | DataIntegrityError]:
        owner = parse_optional_identifier(pantheon_id, "pantheonId")
        return await self._fetch_owned(
            queries.STORY_LIST, owner, StoryRecord, "list_stories",
        )

    async def get_story(self, story_id: str) -> StoryRecord | None:
        uid = parse_identifier(story_id, "id")
        return await self._fetch_one(
            queries.build_get_by_id(Story, uid), StoryRecord, "get_story",
        )

    async def list_events(
        self, story_id: str | None = None,
    ) -> list[EventRecord | DataIntegrityError]:
        owner = parse_optional_identifier(story_id, "storyId")
        return await self._fetch_owned(
            queries.EVENT_LIST, owner, EventRecord, "list_events",
        )

    # ─── Locations ───────────────────────────────────────────────

    async def list_locations(
        self, pantheon_id: str | None = None,
    ) -> list[LocationRecord | DataIntegrityError]:
        owner = parse_optional_identifier(pantheon_id, "pantheonId")
        return await self._fetch_owned(
            queries.LOCATION_LIST, owner, LocationRecord, "list_locations",
        )

    async def get_location(self, location_id: str) -> LocationRecord | None:
        uid = parse_identifier(location_id, "id")
        return await self._fetch_one(
            queries.build_get_by_id(Location, uid), LocationRecord, "get_location",
        )

    # ─── Search ──────────────────────────────────────────────────

    async def search(self, query: str, limit: int | None = None) -> SearchResults:
        """Case-insensitive substring search over deities, pantheons, stories.

        The limit applies to each entity list independently.
        """
        per_type = validate_search_limit(
            limit, self._search_default_limit, self._search_max_limit,
        )
        pattern = build_search_pattern(query)
        async with self._sessions.session("search") as db:
            deities = (await db.execute(
                queries.build_deity_search(pattern, per_type),
            )).scalars().all()
            pantheons = (await db.execute(
                queries.build_pantheon_search(pattern, per_type),
            )).scalars().all()
            stories = (await db.execute(
                queries.build_story_search(pattern, per_type),
            )).scalars().all()
        logger.debug(
            f"search matched {len(deities)} deities, {len(pantheons)} pantheons, "
            f"{len(stories)} stories",
            extra={"operation": "search"},
        )
        return SearchResults(
            deities=map_rows(DeityRecord, deities),
            pantheons=map_rows(PantheonRecord, pantheons),
            stories=map_rows(StoryRecord, stories),
        )

    # ─── Helpers ─────────────────────────────────────────────────

    async def _fetch_owned(
        self,
        spec: queries.OwnedList,
        owner_id: UUID | None,
        record_cls: type[R],
        operation: str,
    ) -> list[R | DataIntegrityError]:
        return await self._fetch_all(
            queries.build_owned_list(spec, owner_id), record_cls, operation,
        )

    async def _fetch_all(
        self, query: Select, record_cls: type[R], operation: str,
    ) -> list[R | DataIntegrityError]:
        async with self._sessions.session(operation) as db:
            rows = (await db.execute(query)).scalars().all()
        logger.debug(
            f"{operation} fetched {len(rows)} rows",
            extra={"operation": operation},
        )
        return map_rows(record_cls, rows)

    async def _fetch_one(
        self, query: Select, record_cls: type[R], operation: str,
    ) -> R | None:
        async with self._sessions.session(operation) as db:
            row = (await db.execute(query)).scalar_one_or_none()
        if row is None:
            return None
        return map_row(record_cls, row)
