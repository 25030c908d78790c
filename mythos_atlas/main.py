"""Mythos Atlas API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - GraphQL mounted at /graphql, liveness at /health, readiness at /health/ready
    - CORS configured from settings; default allows any origin, method and header
    - Connection pool created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Strawberry GraphQLRouter over a hand-rolled endpoint: GET/POST handling,
      GraphiQL and FastAPI dependency injection into the context come with it
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from mythos_atlas import __version__
from mythos_atlas.api.error_handlers import register_error_handlers
from mythos_atlas.api.graphql.context import get_context
from mythos_atlas.api.graphql.schema import schema
from mythos_atlas.api.routes import health
from mythos_atlas.config import get_settings
from mythos_atlas.infrastructure.database import close_db, init_db
from mythos_atlas.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
    )
    logger.info("Mythos Atlas API started")
    yield
    await close_db()
    logger.info("Mythos Atlas API shut down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Mythos Atlas API", version=__version__, lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    graphql_router = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphql_ide else None,
    )
    app.include_router(health.router)
    app.include_router(graphql_router, prefix="/graphql")
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "mythos_atlas.main:app", host=settings.host, port=settings.port,
        log_config=None,
    )
