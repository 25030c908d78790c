"""DeityRelationship ORM — directed, typed edges over Deity nodes.

Invariants:
    - from_deity_id -> to_deity_id, both required
    - relationship_type is one of RelationshipType values
    - confidence_level is one of ConfidenceLevel values or NULL

Design Decisions:
    - No same-deity check constraint: self-loops are structurally allowed
    - No unique constraint on (from, to, type): sources may disagree, each claim
      is its own row with its own dispute flag
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Boolean, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from mythos_atlas.db.base import Base
from mythos_atlas.db.types import JsonDocument


def _now() -> datetime:
    return datetime.now(timezone.utc)


class DeityRelationship(Base):
    """Typed edge in the deity graph."""
    __tablename__ = "deity_relationships"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    from_deity_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("deities.id"), nullable=False,
        index=True,
    )
    to_deity_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("deities.id"), nullable=False,
        index=True,
    )
    relationship_type: Mapped[str] = mapped_column(String(32), nullable=False)
    confidence_level: Mapped[str | None] = mapped_column(
        String(16), nullable=True,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_disputed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    dispute_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    citation_sources: Mapped[Any] = mapped_column(
        JsonDocument, nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
