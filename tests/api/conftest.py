"""API test fixtures — FastAPI app over the seeded in-memory store.

Invariants:
    - get_db_manager overridden: GraphQL context receives the test manager
    - Lifespan not run (ASGITransport): no real pool is ever created
"""

import pytest
from httpx import ASGITransport, AsyncClient

from mythos_atlas.infrastructure.database import get_db_manager
from mythos_atlas.main import app


@pytest.fixture
async def client(db_manager):
    app.dependency_overrides[get_db_manager] = lambda: db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def gql(client):
    """POST a GraphQL document, return the decoded body."""
    async def _execute(query: str, variables: dict | None = None) -> dict:
        res = await client.post(
            "/graphql", json={"query": query, "variables": variables or {}},
        )
        assert res.status_code == 200, res.text
        return res.json()
    return _execute
