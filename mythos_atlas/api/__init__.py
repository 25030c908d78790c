"""API Layer — HTTP routes, GraphQL surface and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - No query logic here: GraphQL resolvers delegate to services.catalog_queries
"""
