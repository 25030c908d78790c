"""Pantheon ORM — a named cultural collection of deities.

Invariants:
    - slug is unique (enforced by the store)
    - Owns deities (required), stories (required) and locations (optional)
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import String, Text, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from mythos_atlas.db.base import Base
from mythos_atlas.db.types import JsonDocument


class Pantheon(Base):
    """Pantheon entity."""
    __tablename__ = "pantheons"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    culture: Mapped[str] = mapped_column(String(100), nullable=False)
    region: Mapped[str] = mapped_column(String(100), nullable=False)
    # Years; negative = BCE
    time_period_start: Mapped[int | None] = mapped_column(Integer, nullable=True)
    time_period_end: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    citation_sources: Mapped[Any] = mapped_column(
        JsonDocument, nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
