"""Infrastructure Layer — connection pool and logging setup.

Invariants:
    - Infrastructure depends on core/errors only, never on services or api
    - Every store exception leaves this layer as a StoreError subclass
"""
