"""Services Layer — the query resolution layer and record mapping.

Invariants:
    - Services borrow sessions from an injected SessionProvider, one per operation
    - Services never write
"""
