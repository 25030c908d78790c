"""Boundary Protocols — contracts between the resolution layer and the store.

Invariants:
    - The resolution layer only ever borrows a session per operation; it never
      owns or creates the pool
    - Implementations provided by infrastructure via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass any object with a
      matching session() (ADR: no inheritance hierarchy)
"""

from typing import Any, AsyncContextManager, Protocol


class SessionProvider(Protocol):
    """Anything that lends out an AsyncSession-like handle for one operation."""
    def session(self, operation: str = "query") -> AsyncContextManager[Any]: ...
