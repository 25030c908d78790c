"""Route Modules — plain HTTP endpoints outside the GraphQL surface.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
"""
