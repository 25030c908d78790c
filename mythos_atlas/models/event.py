"""Event ORM — a narrative beat, optionally attached to a story.

Invariants:
    - story_id is nullable (events may exist unattached)
    - sequence_order orders beats within a story, NULL sorts last
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from mythos_atlas.db.base import Base
from mythos_atlas.db.types import JsonDocument


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Event(Base):
    """Event entity."""
    __tablename__ = "events"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    story_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("stories.id"), nullable=True,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    event_type: Mapped[str | None] = mapped_column(String(32), nullable=True)
    sequence_order: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mythological_era: Mapped[str | None] = mapped_column(
        String(100), nullable=True,
    )
    citation_sources: Mapped[Any] = mapped_column(
        JsonDocument, nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
