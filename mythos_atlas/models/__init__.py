"""ORM Models — SQLAlchemy declarative models for the six catalog entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Read-only from this service's perspective: no model is ever added or flushed
      by application code (ingestion owns writes)

Design Decisions:
    - One file per entity for locality
    - Enum-vocabulary columns mapped as String: the PostgreSQL column is a native
      enum (ordering follows declaration order), but the raw value is handed to
      record mapping so an unknown value fails one row, not the whole fetch
    - No relationship() attributes: every query is a single explicit select,
      nothing is lazy-loaded in async context
"""

from mythos_atlas.models.pantheon import Pantheon  # noqa: F401
from mythos_atlas.models.deity import Deity  # noqa: F401
from mythos_atlas.models.deity_relationship import DeityRelationship  # noqa: F401
from mythos_atlas.models.story import Story  # noqa: F401
from mythos_atlas.models.event import Event  # noqa: F401
from mythos_atlas.models.location import Location  # noqa: F401
