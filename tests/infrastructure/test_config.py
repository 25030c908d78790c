"""Settings — URL normalization and defaults."""

from mythos_atlas.config import Settings


def test_plain_postgres_url_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@db:5432/mythos")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/mythos"


def test_short_postgres_scheme_rewritten():
    settings = Settings(database_url="postgres://u:p@db/mythos")
    assert settings.database_url.startswith("postgresql+asyncpg://")


def test_defaults_allow_any_origin_and_search_limits():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.cors_origins == ["*"]
    assert settings.search_default_limit == 10
    assert settings.search_max_limit == 100
    assert settings.port == 8000
