"""Mythos Atlas — read-only GraphQL gateway over the mythology catalog.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "0.1.0"
