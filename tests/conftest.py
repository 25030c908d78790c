"""Root conftest — shared test configuration, in-memory store and seed catalog.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The resolution layer sees a DatabaseSessionManager backed by that database
    - The seed catalog is small and fixed so ordering assertions are exact

Design Decisions:
    - SQLite in-memory: fast, no external dependency; NULLS LAST, ILIKE (as
      lower() LIKE lower()) and UUID columns behave the same for these queries
    - Manager built with __new__: the real constructor sizes a pool, which
      SQLite's StaticPool does not accept
"""

import os
from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

# Never touch a real database from tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from mythos_atlas.db.base import Base  # noqa: E402
from mythos_atlas.infrastructure.database import DatabaseSessionManager  # noqa: E402
from mythos_atlas.models import (  # noqa: E402
    Deity, DeityRelationship, Event, Location, Pantheon, Story,
)
from mythos_atlas.services.catalog_queries import CatalogQueries  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def db_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def queries(db_manager):
    return CatalogQueries(db_manager)


def _deity(pantheon, name, rank=None, **fields):
    return Deity(
        id=uuid4(), pantheon_id=pantheon.id, name=name,
        slug=f"{pantheon.slug}-{name.lower()}", importance_rank=rank, **fields,
    )


@pytest.fixture
async def catalog(test_db):
    """Seed a small, fixed catalog and return its rows by name."""
    greek = Pantheon(
        id=uuid4(), name="Greek", slug="greek", culture="Hellenic",
        region="Mediterranean", time_period_start=-800, time_period_end=400,
        description="Gods of Olympus",
        citation_sources=[{"source": "Theogony", "author": "Hesiod"}],
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    norse = Pantheon(
        id=uuid4(), name="Norse", slug="norse", culture="Germanic",
        region="Scandinavia", description="Gods of Asgard",
    )
    egyptian = Pantheon(
        id=uuid4(), name="Egyptian", slug="egyptian", culture="Kemetic",
        region="Nile Valley",
    )
    test_db.add_all([greek, norse, egyptian])
    await test_db.flush()

    zeus = _deity(
        greek, "Zeus", 1,
        alternate_names=["Dias", "Jupiter"], alternate_names_text="Dias Jupiter",
        domain=["sky", "thunder"], description="King of the gods",
    )
    hera = _deity(greek, "Hera", 2, description="Queen of the gods, wife of Zeus")
    hermes = _deity(greek, "Hermes", 3, description="Messenger, son of Zeus")
    athena = _deity(greek, "Athena", None, description="Daughter of Zeus")
    apollo = _deity(greek, "Apollo", None)
    odin = _deity(norse, "Odin", 1, description="Allfather")
    thor = _deity(norse, "Thor", 2, alternate_names_text="Donar Thunor")
    test_db.add_all([zeus, hera, hermes, athena, apollo, odin, thor])
    await test_db.flush()

    spouse = DeityRelationship(
        id=uuid4(), from_deity_id=zeus.id, to_deity_id=hera.id,
        relationship_type="spouse_of", confidence_level="high",
    )
    parent = DeityRelationship(
        id=uuid4(), from_deity_id=zeus.id, to_deity_id=athena.id,
        relationship_type="parent_of", is_disputed=True,
        dispute_notes="Some accounts credit Metis",
    )
    sibling = DeityRelationship(
        id=uuid4(), from_deity_id=apollo.id, to_deity_id=hermes.id,
        relationship_type="sibling_of",
    )
    hermes_zeus = DeityRelationship(
        id=uuid4(), from_deity_id=hermes.id, to_deity_id=zeus.id,
        relationship_type="served",
    )
    norse_edge = DeityRelationship(
        id=uuid4(), from_deity_id=odin.id, to_deity_id=thor.id,
        relationship_type="parent_of", confidence_level="medium",
    )
    test_db.add_all([spouse, parent, sibling, hermes_zeus, norse_edge])

    titanomachy = Story(
        id=uuid4(), pantheon_id=greek.id, title="Titanomachy",
        slug="titanomachy", summary="Zeus leads the Olympians against the Titans",
        category="war_battle", moral_themes=["order", "succession"],
        key_excerpts={"lines": ["Then Zeus no longer held back his might"]},
    )
    birth_of_athena = Story(
        id=uuid4(), pantheon_id=greek.id, title="Birth of Athena",
        slug="birth-of-athena", category="divine_birth",
    )
    ragnarok = Story(
        id=uuid4(), pantheon_id=norse.id, title="Ragnarok", slug="ragnarok",
        summary="The twilight of the gods", category="war_battle",
    )
    test_db.add_all([titanomachy, birth_of_athena, ragnarok])
    await test_db.flush()

    events = [
        Event(id=uuid4(), story_id=titanomachy.id, title="Aftermath", sequence_order=None),
        Event(id=uuid4(), story_id=titanomachy.id, title="War begins", sequence_order=1, event_type="battle"),
        Event(id=uuid4(), story_id=titanomachy.id, title="Cyclopes freed", sequence_order=2),
        Event(id=uuid4(), story_id=None, title="Unattached omen"),
    ]
    test_db.add_all(events)

    olympus = Location(
        id=uuid4(), name="Mount Olympus", location_type="mountain",
        pantheon_id=greek.id, latitude=Decimal("40.085600"),
        longitude=Decimal("22.358600"),
    )
    delphi = Location(
        id=uuid4(), name="Delphi", location_type="temple", pantheon_id=greek.id,
    )
    asgard = Location(
        id=uuid4(), name="Asgard", location_type="heaven", pantheon_id=norse.id,
    )
    test_db.add_all([olympus, delphi, asgard])
    await test_db.commit()

    return SimpleNamespace(
        greek=greek, norse=norse, egyptian=egyptian,
        zeus=zeus, hera=hera, hermes=hermes, athena=athena, apollo=apollo,
        odin=odin, thor=thor,
        spouse=spouse, parent=parent, sibling=sibling,
        hermes_zeus=hermes_zeus, norse_edge=norse_edge,
        titanomachy=titanomachy, birth_of_athena=birth_of_athena,
        ragnarok=ragnarok, events=events,
        olympus=olympus, delphi=delphi, asgard=asgard,
    )
