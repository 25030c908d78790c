"""Error Hierarchy — typed, categorized exceptions for all Mythos Atlas failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors (400-level) are the caller's fault; store errors (500-level) are ours
    - to_response() produces the REST envelope; extensions feeds GraphQL error extensions
    - Not-found is NOT an error: single-entity lookups return None
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with MythosError base: FastAPI handler and GraphQL error
      processing both branch on it (ADR: uniform error shape)
    - extensions property: graphql-core copies original_error.extensions into the
      located error, so field errors carry code/category without a custom formatter
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATA_INTEGRITY = "data_integrity"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    entity: str | None = None
    row_id: str | None = None
    debug_info: dict[str, Any] | None = None


class MythosError(Exception):
    """Base exception for all Mythos Atlas errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def extensions(self) -> dict[str, Any]:
        """GraphQL error extensions (picked up by graphql-core)."""
        return {
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
        }

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "entity": self.context.entity,
                    "row_id": self.context.row_id,
                },
            }
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class InvalidInputError(MythosError):
    """Caller supplied a malformed argument (identifier, limit)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field

    @property
    def extensions(self) -> dict[str, Any]:
        return {**super().extensions, "field": self.field}


# ─── Store / Data Errors (500-level) ────────────────────────────

class DataIntegrityError(MythosError):
    """A fetched row could not be mapped into its typed record."""
    def __init__(
        self, entity: str, row_id: str | None, reason: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = entity
        ctx.row_id = row_id
        super().__init__(
            f"{entity} row '{row_id}' failed to map: {reason}",
            "DATA_INTEGRITY_ERROR", ErrorCategory.DATA_INTEGRITY,
            ErrorSeverity.ERROR, ctx, 500,
        )
        self.entity = entity
        self.row_id = row_id


class StoreError(MythosError):
    """Query or driver failure while talking to the store."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class StoreUnavailableError(StoreError):
    """Store unreachable: connection refused, pool exhausted, operational failure."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(message, operation, context)
        self.code = "STORE_UNAVAILABLE"
