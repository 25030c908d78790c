"""Database Session Manager — async connection pool, per-operation sessions, health checks.

Invariants:
    - One engine (one pool) per process, created by init_db, disposed by close_db
    - Every borrowed session is closed on every exit path (success, error,
      cancellation), returning its connection to the pool
    - All SQLAlchemy / driver exceptions mapped to StoreError (core/errors.py)
    - Read-only: sessions never commit

Design Decisions:
    - db_manager initialized on startup: FastAPI lifespan manages lifecycle,
      GraphQL context receives it through get_db_manager (no import side effects)
    - One session per resolved field: sibling GraphQL fields run concurrently and
      an AsyncSession must not be shared across tasks
    - pool_timeout bounds how long a field waits for a connection; exhaustion
      surfaces as StoreUnavailableError, never as a hang
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    OperationalError, InterfaceError, DBAPIError, SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy import text

from mythos_atlas.core.errors import StoreError, StoreUnavailableError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 5,
        pool_timeout: float = 30.0,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def session(
        self, operation: str = "query",
    ) -> AsyncGenerator[AsyncSession, None]:
        """Borrow a session; store failures become StoreError subclasses."""
        session = self._session_factory()
        try:
            yield session
        except (OperationalError, InterfaceError, PoolTimeoutError) as e:
            logger.error(
                f"DB unavailable during {operation}: {e}",
                extra={"operation": operation, "error_code": "STORE_UNAVAILABLE"},
            )
            raise StoreUnavailableError("Store unavailable", operation) from e
        except DBAPIError as e:
            logger.error(
                f"DB driver error during {operation}: {e}",
                extra={"operation": operation, "error_code": "STORE_ERROR"},
            )
            raise StoreError("Database driver error", operation) from e
        except SQLAlchemyError as e:
            logger.error(
                f"SQLAlchemy error during {operation}: {e}",
                extra={"operation": operation, "error_code": "STORE_ERROR"},
            )
            raise StoreError("Database operation failed", operation) from e
        except OSError as e:
            logger.error(
                f"DB connection failed during {operation}: {e}",
                extra={"operation": operation, "error_code": "STORE_UNAVAILABLE"},
            )
            raise StoreUnavailableError("Store unreachable", operation) from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session("health_check") as db:
                await db.execute(text("SELECT 1"))
            return True
        except StoreError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


# Process-scoped (initialized on startup, disposed on shutdown)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.close()
        db_manager = None


def get_db_manager() -> DatabaseSessionManager:
    """FastAPI dependency for the shared session manager."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    return db_manager
