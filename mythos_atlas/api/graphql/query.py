"""Query Root — one field per catalog access pattern.

Invariants:
    - Field and argument names are the external contract: pantheons, pantheon(id),
      deities(pantheonId), deity(id), deityRelationships(deityId),
      allRelationships(pantheonId), stories(pantheonId), story(id),
      events(storyId), locations(pantheonId), location(id), search(query, limit)
    - Each field fails alone: every root field is nullable, so its error nulls
      only itself, never a sibling field or the whole response
    - List items are nullable: a row that failed mapping becomes null plus a
      located DATA_INTEGRITY_ERROR, the rest of the list is returned

Design Decisions:
    - Identifiers typed String (not UUID scalar): validation is ours, so a
      malformed id is a field-level INVALID_INPUT error, not a document error
"""

from typing import Annotated, Callable, Optional, TypeVar

import strawberry
from strawberry.types import Info

from mythos_atlas.api.graphql.types import (
    Deity, DeityRelationship, Event, Location, Pantheon, SearchResults, Story,
)
from mythos_atlas.core.errors import DataIntegrityError
from mythos_atlas.services.catalog_queries import CatalogQueries

T = TypeVar("T")


def _queries(info: Info) -> CatalogQueries:
    return info.context.queries


def _present(results: list, to_type: Callable[..., T]) -> list[Optional[T]]:
    """Convert records; integrity errors pass through for graphql-core to locate."""
    return [
        r if isinstance(r, DataIntegrityError) else to_type(r)
        for r in results
    ]


def _present_one(record, to_type: Callable[..., T]) -> Optional[T]:
    return None if record is None else to_type(record)


@strawberry.type
class Query:

    @strawberry.field(description="Get all pantheons")
    async def pantheons(self, info: Info) -> Optional[list[Optional[Pantheon]]]:
        return _present(await _queries(info).list_pantheons(), Pantheon.from_record)

    @strawberry.field(description="Get a specific pantheon by ID")
    async def pantheon(self, info: Info, id: str) -> Optional[Pantheon]:
        return _present_one(await _queries(info).get_pantheon(id), Pantheon.from_record)

    @strawberry.field(description="Get all deities, optionally filtered by pantheon")
    async def deities(
        self, info: Info, pantheon_id: Optional[str] = None,
    ) -> Optional[list[Optional[Deity]]]:
        return _present(
            await _queries(info).list_deities(pantheon_id), Deity.from_record,
        )

    @strawberry.field(description="Get a specific deity by ID")
    async def deity(self, info: Info, id: str) -> Optional[Deity]:
        return _present_one(await _queries(info).get_deity(id), Deity.from_record)

    @strawberry.field(description="Get relationships for a specific deity")
    async def deity_relationships(
        self, info: Info, deity_id: str,
    ) -> Optional[list[Optional[DeityRelationship]]]:
        return _present(
            await _queries(info).relationships_for_deity(deity_id),
            DeityRelationship.from_record,
        )

    @strawberry.field(description="Get all relationships, optionally filtered by pantheon")
    async def all_relationships(
        self, info: Info, pantheon_id: Optional[str] = None,
    ) -> Optional[list[Optional[DeityRelationship]]]:
        return _present(
            await _queries(info).list_relationships(pantheon_id),
            DeityRelationship.from_record,
        )

    @strawberry.field(description="Get all stories, optionally filtered by pantheon")
    async def stories(
        self, info: Info, pantheon_id: Optional[str] = None,
    ) -> Optional[list[Optional[Story]]]:
        return _present(
            await _queries(info).list_stories(pantheon_id), Story.from_record,
        )

    @strawberry.field(description="Get a specific story by ID")
    async def story(self, info: Info, id: str) -> Optional[Story]:
        return _present_one(await _queries(info).get_story(id), Story.from_record)

    @strawberry.field(description="Get events, optionally filtered by story")
    async def events(
        self, info: Info, story_id: Optional[str] = None,
    ) -> Optional[list[Optional[Event]]]:
        return _present(
            await _queries(info).list_events(story_id), Event.from_record,
        )

    @strawberry.field(description="Get locations, optionally filtered by pantheon")
    async def locations(
        self, info: Info, pantheon_id: Optional[str] = None,
    ) -> Optional[list[Optional[Location]]]:
        return _present(
            await _queries(info).list_locations(pantheon_id), Location.from_record,
        )

    @strawberry.field(description="Get a specific location by ID")
    async def location(self, info: Info, id: str) -> Optional[Location]:
        return _present_one(await _queries(info).get_location(id), Location.from_record)

    @strawberry.field(description="Search across deities, stories, and pantheons")
    async def search(
        self,
        info: Info,
        query: str,
        limit: Annotated[
            Optional[int],
            strawberry.argument(description="Limit results per entity type"),
        ] = None,
    ) -> Optional[SearchResults]:
        results = await _queries(info).search(query, limit)
        return SearchResults(
            deities=_present(results.deities, Deity.from_record),
            pantheons=_present(results.pantheons, Pantheon.from_record),
            stories=_present(results.stories, Story.from_record),
        )
