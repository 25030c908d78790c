"""GraphQL Schema — query-only Strawberry schema with domain-aware error handling.

Invariants:
    - MythosError messages and extensions (code, category, severity) reach the client
    - Any other exception is masked: never leaks internal details
    - Every field error is logged once, at a level matching its category

Design Decisions:
    - process_errors override over Strawberry's default logger: invalid input is
      routine (info), data-integrity is actionable (warning), store failures
      are operational (error)
    - MaskErrors registered as a factory: Strawberry builds a fresh extension
      per request, no extension state outlives one operation
"""

import logging

import strawberry
from graphql import GraphQLError
from strawberry.extensions import MaskErrors

from mythos_atlas.api.graphql.query import Query
from mythos_atlas.core.errors import (
    DataIntegrityError, InvalidInputError, MythosError, StoreError,
)

logger = logging.getLogger(__name__)


def should_mask_error(error: GraphQLError) -> bool:
    """Mask unexpected exceptions; keep domain and GraphQL validation errors."""
    original = error.original_error
    return original is not None and not isinstance(original, MythosError)


class MythosSchema(strawberry.Schema):

    def process_errors(self, errors, execution_context=None) -> None:
        for error in errors:
            _log_graphql_error(error)


def _log_graphql_error(error: GraphQLError) -> None:
    original = error.original_error
    path = ".".join(str(p) for p in error.path or [])
    if original is None:
        logger.info(f"GraphQL request error: {error.message}", extra={"path": path})
    elif isinstance(original, InvalidInputError):
        logger.info(
            f"Invalid input: {original.message}",
            extra={"path": path, "field": original.field, "error_code": original.code},
        )
    elif isinstance(original, DataIntegrityError):
        logger.warning(
            f"Data integrity error: {original.message}",
            extra={"path": path, "error_code": original.code},
        )
    elif isinstance(original, StoreError):
        logger.error(
            f"Store error: {original.message}",
            extra={"path": path, "error_code": original.code},
        )
    elif isinstance(original, MythosError):
        logger.error(
            f"MythosError: {original.message}",
            extra={"path": path, "error_code": original.code},
        )
    else:
        logger.error(
            f"Unhandled exception resolving {path}: {original}",
            exc_info=original,
            extra={"path": path},
        )


def build_schema() -> MythosSchema:
    return MythosSchema(
        query=Query,
        extensions=[
            lambda: MaskErrors(
                should_mask_error=should_mask_error,
                error_message="An unexpected error occurred",
            ),
        ],
    )


schema = build_schema()
