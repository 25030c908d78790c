"""GraphQL Types — the wire shape of catalog records.

Invariants:
    - Field names are the external contract (camelCased by Strawberry)
    - Enum members are exposed by name (PARENT_OF, HIGH, CREATION_MYTH, ...)
    - JSON columns use the JSON scalar and are emitted exactly as stored
    - Location.latitude / longitude are decimal text, never floats

Design Decisions:
    - Explicit types with from_record over auto-generation from Pydantic: the
      wire contract is readable in one file and decoupled from record internals
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

import strawberry
from strawberry.scalars import JSON

from mythos_atlas.core.domain_types import (
    ConfidenceLevel, EventType, LocationType, RelationshipType, StoryCategory,
)
from mythos_atlas.schemas.records import (
    DeityRecord, DeityRelationshipRecord, EventRecord, LocationRecord,
    PantheonRecord, StoryRecord,
)

# Register the domain vocabularies as GraphQL enums
strawberry.enum(RelationshipType)
strawberry.enum(ConfidenceLevel)
strawberry.enum(StoryCategory)
strawberry.enum(EventType)
strawberry.enum(LocationType)


@strawberry.type
class Pantheon:
    id: UUID
    name: str
    slug: str
    culture: str
    region: str
    time_period_start: Optional[int]
    time_period_end: Optional[int]
    description: Optional[str]
    citation_sources: Optional[JSON]
    created_at: datetime

    @classmethod
    def from_record(cls, record: PantheonRecord) -> "Pantheon":
        return cls(**record.model_dump())


@strawberry.type
class Deity:
    id: UUID
    pantheon_id: UUID
    name: str
    slug: str
    alternate_names: Optional[list[str]]
    alternate_names_text: Optional[str]
    gender: Optional[str]
    domain: Optional[list[str]]
    symbols: Optional[list[str]]
    description: Optional[str]
    origin_story: Optional[str]
    importance_rank: Optional[int]
    image_url: Optional[str]
    citation_sources: Optional[JSON]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: DeityRecord) -> "Deity":
        return cls(**record.model_dump())


@strawberry.type
class DeityRelationship:
    id: UUID
    from_deity_id: UUID
    to_deity_id: UUID
    relationship_type: RelationshipType
    confidence_level: Optional[ConfidenceLevel]
    notes: Optional[str]
    is_disputed: bool
    dispute_notes: Optional[str]
    citation_sources: Optional[JSON]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: DeityRelationshipRecord) -> "DeityRelationship":
        return cls(**record.model_dump())


@strawberry.type
class Story:
    id: UUID
    pantheon_id: UUID
    title: str
    slug: str
    summary: Optional[str]
    full_narrative: Optional[str]
    key_excerpts: Optional[JSON]
    category: Optional[StoryCategory]
    moral_themes: Optional[list[str]]
    cultural_significance: Optional[str]
    related_festivals: Optional[list[str]]
    external_links: Optional[JSON]
    citation_sources: Optional[JSON]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: StoryRecord) -> "Story":
        return cls(**record.model_dump())


@strawberry.type
class Event:
    id: UUID
    story_id: Optional[UUID]
    title: str
    description: Optional[str]
    event_type: Optional[EventType]
    sequence_order: Optional[int]
    mythological_era: Optional[str]
    citation_sources: Optional[JSON]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: EventRecord) -> "Event":
        return cls(**record.model_dump())


@strawberry.type
class Location:
    id: UUID
    name: str
    location_type: Optional[LocationType]
    pantheon_id: Optional[UUID]
    description: Optional[str]
    latitude: Optional[str]
    longitude: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: LocationRecord) -> "Location":
        data = record.model_dump()
        for key in ("latitude", "longitude"):
            if data[key] is not None:
                data[key] = str(data[key])
        return cls(**data)


@strawberry.type
class SearchResults:
    deities: list[Optional[Deity]]
    pantheons: list[Optional[Pantheon]]
    stories: list[Optional[Story]]
