"""GraphQL Context — per-request wiring of the resolution layer.

Invariants:
    - One CatalogQueries per request, built around the process-wide pool
    - The pool arrives through a FastAPI dependency, so tests override it with
      app.dependency_overrides like any other dependency
"""

from fastapi import Depends
from strawberry.fastapi import BaseContext

from mythos_atlas.config import get_settings
from mythos_atlas.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from mythos_atlas.services.catalog_queries import CatalogQueries


class GraphQLContext(BaseContext):
    def __init__(self, queries: CatalogQueries):
        super().__init__()
        self.queries = queries


async def get_context(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> GraphQLContext:
    settings = get_settings()
    return GraphQLContext(CatalogQueries(
        db,
        search_default_limit=settings.search_default_limit,
        search_max_limit=settings.search_max_limit,
    ))
