"""Story ORM — a narrative belonging to a pantheon.

Invariants:
    - pantheon_id is non-nullable
    - category is one of StoryCategory values or NULL
    - key_excerpts, external_links, citation_sources are opaque JSON documents
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from mythos_atlas.db.base import Base
from mythos_atlas.db.types import JsonDocument, TextArray


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Story(Base):
    """Story entity."""
    __tablename__ = "stories"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    pantheon_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("pantheons.id"), nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    full_narrative: Mapped[str | None] = mapped_column(Text, nullable=True)
    key_excerpts: Mapped[Any] = mapped_column(
        JsonDocument, nullable=True,
    )
    category: Mapped[str | None] = mapped_column(String(40), nullable=True)
    moral_themes: Mapped[list | None] = mapped_column(TextArray, nullable=True)
    cultural_significance: Mapped[str | None] = mapped_column(
        Text, nullable=True,
    )
    related_festivals: Mapped[list | None] = mapped_column(
        TextArray, nullable=True,
    )
    external_links: Mapped[Any] = mapped_column(
        JsonDocument, nullable=True,
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
