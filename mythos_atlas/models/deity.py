"""Deity ORM — a mythological figure belonging to exactly one pantheon.

Invariants:
    - pantheon_id is non-nullable (mandatory ownership)
    - importance_rank: lower = more important, NULL sorts last
    - alternate_names_text is the flattened alternate_names, maintained by
      ingestion for substring search

Design Decisions:
    - alternate_names_text denormalized: ILIKE over one text column instead of
      unnesting an array per search
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from mythos_atlas.db.base import Base
from mythos_atlas.db.types import JsonDocument, TextArray


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Deity(Base):
    """Deity entity."""
    __tablename__ = "deities"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    pantheon_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("pantheons.id"), nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    alternate_names: Mapped[list | None] = mapped_column(TextArray, nullable=True)
    alternate_names_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(50), nullable=True)
    domain: Mapped[list | None] = mapped_column(TextArray, nullable=True)
    symbols: Mapped[list | None] = mapped_column(TextArray, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    origin_story: Mapped[str | None] = mapped_column(Text, nullable=True)
    importance_rank: Mapped[int | None] = mapped_column(Integer, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    citation_sources: Mapped[Any] = mapped_column(
        JsonDocument, nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
