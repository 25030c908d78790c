"""GraphQL API Surface — Strawberry schema exposing the catalog query root.

Invariants:
    - Query-only schema: no mutation, no subscription type
    - Resolvers delegate to CatalogQueries; no query logic lives here
"""
