"""Health & Readiness — fixed liveness payload, readiness tied to the store, CORS."""

from mythos_atlas import __version__
from mythos_atlas.infrastructure import database


async def test_liveness_returns_fixed_payload(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy",
        "service": "mythos-atlas-api",
        "version": __version__,
    }


async def test_readiness_ok_with_live_store(client, db_manager, monkeypatch):
    monkeypatch.setattr(database, "db_manager", db_manager)
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_503_without_store(client, monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_cors_allows_any_origin(client):
    res = await client.options(
        "/graphql",
        headers={
            "Origin": "https://mythos.example",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"
