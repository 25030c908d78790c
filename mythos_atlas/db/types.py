"""Portable Column Types — PostgreSQL types with SQLite fallbacks for tests.

Invariants:
    - PostgreSQL: text[] and jsonb, exactly as the ingestion schema declares them
    - SQLite (test fixtures only): JSON-encoded text for both

Design Decisions:
    - with_variant over separate test models: one model definition, the dialect
      picks the storage type
"""

from sqlalchemy import JSON, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB

TextArray = ARRAY(Text).with_variant(JSON(), "sqlite")
JsonDocument = JSON().with_variant(JSONB(), "postgresql")
