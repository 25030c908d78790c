"""Domain Types — closed vocabularies of the mythology catalog.

Invariants:
    - Enum values equal the stored column values (snake_case / lowercase)
    - Enum member names are the GraphQL enum names (PARENT_OF, HIGH, ...)
    - Vocabularies are closed: an unknown stored value is a data-integrity failure

Design Decisions:
    - str Enums: serialize to JSON without custom encoders, compare equal to the
      raw column value
"""

from enum import Enum


# ─── Vocabularies ────────────────────────────────────────────────

class RelationshipType(str, Enum):
    """Directed edge kinds between two deities."""
    PARENT_OF = "parent_of"
    SPOUSE_OF = "spouse_of"
    SIBLING_OF = "sibling_of"
    CREATED = "created"
    KILLED = "killed"
    TRANSFORMED = "transformed"
    ENEMY_OF = "enemy_of"
    ALLY_OF = "ally_of"
    TAUGHT = "taught"
    SERVED = "served"


class ConfidenceLevel(str, Enum):
    """Qualitative certainty of a relationship claim."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class StoryCategory(str, Enum):
    CREATION_MYTH = "creation_myth"
    HEROIC_EPIC = "heroic_epic"
    COSMOGONY_THEOGONY = "cosmogony_theogony"
    TRANSFORMATION_METAMORPHOSIS = "transformation_metamorphosis"
    WAR_BATTLE = "war_battle"
    LOVE_ROMANCE = "love_romance"
    TRICKERY_DECEPTION = "trickery_deception"
    QUEST_JOURNEY = "quest_journey"
    PUNISHMENT_RETRIBUTION = "punishment_retribution"
    DIVINE_BIRTH = "divine_birth"


class EventType(str, Enum):
    BIRTH = "birth"
    DEATH = "death"
    BATTLE = "battle"
    TRANSFORMATION = "transformation"
    CREATION = "creation"
    MARRIAGE = "marriage"
    ASCENSION = "ascension"
    JOURNEY = "journey"
    PUNISHMENT = "punishment"


class LocationType(str, Enum):
    MOUNTAIN = "mountain"
    TEMPLE = "temple"
    UNDERWORLD = "underworld"
    HEAVEN = "heaven"
    RIVER = "river"
    CITY = "city"
    SEA = "sea"
    FOREST = "forest"
    CAVE = "cave"
    PALACE = "palace"
