"""Catalog Records — Pydantic models for the six catalog entities.

Invariants:
    - Records are frozen: the resolution layer hands out values, never live rows
    - Enum columns validate against the closed vocabularies in core/domain_types
    - JSON columns are JsonValue: any JSON document passes unchanged, nothing else does
    - latitude/longitude stay Decimal here; the API surface formats them as text

Design Decisions:
    - from_attributes=True: records validate straight off ORM instances
    - Pydantic over hand-written mapping: enum and JSON checks come with a
      ValidationError that record_mapping turns into DataIntegrityError
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, JsonValue

from mythos_atlas.core.domain_types import (
    ConfidenceLevel, EventType, LocationType, RelationshipType, StoryCategory,
)


class CatalogRecord(BaseModel):
    """Base for all records — immutable, built from ORM attributes."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID


class PantheonRecord(CatalogRecord):
    name: str
    slug: str
    culture: str
    region: str
    time_period_start: int | None = None
    time_period_end: int | None = None
    description: str | None = None
    citation_sources: JsonValue = None
    created_at: datetime


class DeityRecord(CatalogRecord):
    pantheon_id: UUID
    name: str
    slug: str
    alternate_names: list[str] | None = None
    alternate_names_text: str | None = None
    gender: str | None = None
    domain: list[str] | None = None
    symbols: list[str] | None = None
    description: str | None = None
    origin_story: str | None = None
    importance_rank: int | None = None
    image_url: str | None = None
    citation_sources: JsonValue = None
    created_at: datetime
    updated_at: datetime


class DeityRelationshipRecord(CatalogRecord):
    from_deity_id: UUID
    to_deity_id: UUID
    relationship_type: RelationshipType
    confidence_level: ConfidenceLevel | None = None
    notes: str | None = None
    is_disputed: bool = False
    dispute_notes: str | None = None
    citation_sources: JsonValue = None
    created_at: datetime
    updated_at: datetime


class StoryRecord(CatalogRecord):
    pantheon_id: UUID
    title: str
    slug: str
    summary: str | None = None
    full_narrative: str | None = None
    key_excerpts: JsonValue = None
    category: StoryCategory | None = None
    moral_themes: list[str] | None = None
    cultural_significance: str | None = None
    related_festivals: list[str] | None = None
    external_links: JsonValue = None
    citation_sources: JsonValue = None
    created_at: datetime
    updated_at: datetime


class EventRecord(CatalogRecord):
    story_id: UUID | None = None
    title: str
    description: str | None = None
    event_type: EventType | None = None
    sequence_order: int | None = None
    mythological_era: str | None = None
    citation_sources: JsonValue = None
    created_at: datetime
    updated_at: datetime


class LocationRecord(CatalogRecord):
    name: str
    location_type: LocationType | None = None
    pantheon_id: UUID | None = None
    description: str | None = None
    latitude: Decimal | None = None
    longitude: Decimal | None = None
    created_at: datetime
    updated_at: datetime
