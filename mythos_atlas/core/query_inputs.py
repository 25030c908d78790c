"""Query Inputs — validation of caller-supplied arguments before any store access.

Invariants:
    - Pure functions: no IO, no session, no logging side effects
    - parse_identifier either returns a UUID or raises InvalidInputError; only
      the canonical textual forms are accepted, no padding, no stray separators
    - Search limit: negative is rejected, zero means empty results, anything
      above the configured maximum is clamped
    - build_search_pattern output is only ever used as a bound parameter
    - LIKE metacharacters in user text match literally (escaped with LIKE_ESCAPE)

Design Decisions:
    - Validation lives in core so resolution code can call it before borrowing
      a connection; a malformed id never reaches the pool
"""

import re
from uuid import UUID

from mythos_atlas.core.errors import InvalidInputError

LIKE_ESCAPE = "\\"
_LIKE_SPECIALS = (LIKE_ESCAPE, "%", "_")

_HYPHENATED = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
# hyphenated, braced, urn:uuid: prefixed, or 32 bare hex digits
_UUID_TEXT = re.compile(
    rf"{_HYPHENATED}|\{{{_HYPHENATED}\}}|urn:uuid:{_HYPHENATED}|[0-9a-fA-F]{{32}}",
)


def parse_identifier(raw: str, field: str = "id") -> UUID:
    """Parse textual UUID. Raises InvalidInputError on malformed input."""
    if not isinstance(raw, str):
        raise InvalidInputError(f"{field} must be a UUID string", field)
    if _UUID_TEXT.fullmatch(raw) is None:
        raise InvalidInputError(
            f"Invalid {field}: '{raw}' is not a valid UUID", field,
        )
    return UUID(raw)


def parse_optional_identifier(raw: str | None, field: str) -> UUID | None:
    if raw is None:
        return None
    return parse_identifier(raw, field)


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so user text matches literally."""
    for ch in _LIKE_SPECIALS:
        text = text.replace(ch, LIKE_ESCAPE + ch)
    return text


def build_search_pattern(query: str) -> str:
    """Wrap escaped text in wildcards for a substring match."""
    return f"%{escape_like(query)}%"


def validate_search_limit(limit: int | None, default: int, maximum: int) -> int:
    """Resolve the per-entity search limit.

    Zero yields empty results; values above maximum are clamped to it.
    Raises InvalidInputError for a negative limit.
    """
    if limit is None:
        return default
    if limit < 0:
        raise InvalidInputError(
            f"limit must not be negative, got {limit}", "limit",
        )
    return min(limit, maximum)
