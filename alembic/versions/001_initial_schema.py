"""Initial schema — catalog tables and their enum vocabularies.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Enum types are native PostgreSQL enums so ORDER BY relationship_type follows
declaration order. The application maps these columns as plain strings.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY, ENUM, JSONB, UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

relationship_type = ENUM(
    "parent_of", "spouse_of", "sibling_of", "created", "killed",
    "transformed", "enemy_of", "ally_of", "taught", "served",
    name="relationship_type", create_type=False,
)
confidence_level = ENUM(
    "high", "medium", "low", name="confidence_level", create_type=False,
)
story_category = ENUM(
    "creation_myth", "heroic_epic", "cosmogony_theogony",
    "transformation_metamorphosis", "war_battle", "love_romance",
    "trickery_deception", "quest_journey", "punishment_retribution",
    "divine_birth",
    name="story_category", create_type=False,
)
event_type = ENUM(
    "birth", "death", "battle", "transformation", "creation", "marriage",
    "ascension", "journey", "punishment",
    name="event_type", create_type=False,
)
location_type = ENUM(
    "mountain", "temple", "underworld", "heaven", "river", "city", "sea",
    "forest", "cave", "palace",
    name="location_type", create_type=False,
)

_ENUMS = (
    relationship_type, confidence_level, story_category, event_type,
    location_type,
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    bind = op.get_bind()
    for enum_type in _ENUMS:
        enum_type.create(bind, checkfirst=True)

    op.create_table(
        "pantheons",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False, unique=True),
        sa.Column("culture", sa.String(100), nullable=False),
        sa.Column("region", sa.String(100), nullable=False),
        sa.Column("time_period_start", sa.Integer, nullable=True),
        sa.Column("time_period_end", sa.Integer, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("citation_sources", JSONB, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "deities",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("pantheon_id", UUID(as_uuid=True), sa.ForeignKey("pantheons.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False, unique=True),
        sa.Column("alternate_names", ARRAY(sa.Text), nullable=True),
        sa.Column("alternate_names_text", sa.Text, nullable=True),
        sa.Column("gender", sa.String(50), nullable=True),
        sa.Column("domain", ARRAY(sa.Text), nullable=True),
        sa.Column("symbols", ARRAY(sa.Text), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("origin_story", sa.Text, nullable=True),
        sa.Column("importance_rank", sa.Integer, nullable=True),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("citation_sources", JSONB, nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_deities_pantheon_id", "deities", ["pantheon_id"])

    op.create_table(
        "deity_relationships",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("from_deity_id", UUID(as_uuid=True), sa.ForeignKey("deities.id", ondelete="CASCADE"), nullable=False),
        sa.Column("to_deity_id", UUID(as_uuid=True), sa.ForeignKey("deities.id", ondelete="CASCADE"), nullable=False),
        sa.Column("relationship_type", relationship_type, nullable=False),
        sa.Column("confidence_level", confidence_level, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("is_disputed", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("dispute_notes", sa.Text, nullable=True),
        sa.Column("citation_sources", JSONB, nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_deity_relationships_from_deity_id", "deity_relationships", ["from_deity_id"])
    op.create_index("ix_deity_relationships_to_deity_id", "deity_relationships", ["to_deity_id"])

    op.create_table(
        "stories",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("pantheon_id", UUID(as_uuid=True), sa.ForeignKey("pantheons.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False, unique=True),
        sa.Column("summary", sa.Text, nullable=True),
        sa.Column("full_narrative", sa.Text, nullable=True),
        sa.Column("key_excerpts", JSONB, nullable=True),
        sa.Column("category", story_category, nullable=True),
        sa.Column("moral_themes", ARRAY(sa.Text), nullable=True),
        sa.Column("cultural_significance", sa.Text, nullable=True),
        sa.Column("related_festivals", ARRAY(sa.Text), nullable=True),
        sa.Column("external_links", JSONB, nullable=True),
        sa.Column("citation_sources", JSONB, nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_stories_pantheon_id", "stories", ["pantheon_id"])

    op.create_table(
        "events",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("story_id", UUID(as_uuid=True), sa.ForeignKey("stories.id", ondelete="SET NULL"), nullable=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("event_type", event_type, nullable=True),
        sa.Column("sequence_order", sa.Integer, nullable=True),
        sa.Column("mythological_era", sa.String(100), nullable=True),
        sa.Column("citation_sources", JSONB, nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_events_story_id", "events", ["story_id"])

    op.create_table(
        "locations",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("location_type", location_type, nullable=True),
        sa.Column("pantheon_id", UUID(as_uuid=True), sa.ForeignKey("pantheons.id", ondelete="SET NULL"), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("latitude", sa.Numeric(9, 6), nullable=True),
        sa.Column("longitude", sa.Numeric(9, 6), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_locations_pantheon_id", "locations", ["pantheon_id"])


def downgrade() -> None:
    op.drop_table("locations")
    op.drop_table("events")
    op.drop_table("stories")
    op.drop_table("deity_relationships")
    op.drop_table("deities")
    op.drop_table("pantheons")
    bind = op.get_bind()
    for enum_type in reversed(_ENUMS):
        enum_type.drop(bind, checkfirst=True)
