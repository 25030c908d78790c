"""Domain Types — verifies the closed vocabularies match the stored values.

Tests:
    - Each vocabulary has the expected size
    - Enum values are the stored (snake_case) strings
    - Lookup by stored value works; unknown values are rejected
"""

import pytest

from mythos_atlas.core.domain_types import (
    ConfidenceLevel, EventType, LocationType, RelationshipType, StoryCategory,
)


def test_relationship_type_has_ten_kinds():
    assert len(RelationshipType) == 10
    assert RelationshipType("parent_of") is RelationshipType.PARENT_OF
    assert RelationshipType.ALLY_OF.value == "ally_of"


def test_confidence_level_has_three_grades():
    assert [c.value for c in ConfidenceLevel] == ["high", "medium", "low"]


def test_story_category_has_ten_categories():
    assert len(StoryCategory) == 10
    assert StoryCategory("cosmogony_theogony") is StoryCategory.COSMOGONY_THEOGONY


def test_event_type_has_nine_kinds():
    assert len(EventType) == 9


def test_location_type_has_ten_kinds():
    assert len(LocationType) == 10
    assert LocationType("underworld") is LocationType.UNDERWORLD


def test_unknown_stored_value_is_rejected():
    with pytest.raises(ValueError):
        RelationshipType("married_to")


def test_str_enums_compare_equal_to_stored_value():
    assert RelationshipType.SPOUSE_OF == "spouse_of"
