"""Product identifiers.

Identifiers are UUIDv7 values (time-ordered, via ``uuid6``).  The textual
form is the canonical hyphenated UUID string returned by ``str()``.
"""

from __future__ import annotations

from uuid import UUID

import uuid6


class InvalidIdentifier(ValueError):
    """The value is not a syntactically valid identifier."""


def new_id() -> UUID:
    """Generate a fresh identifier."""
    return uuid6.uuid7()


def parse_id(value: str) -> UUID:
    """Parse the textual form of an identifier.

    Raises:
        InvalidIdentifier: if ``value`` is empty or malformed.
    """
    if not value:
        raise InvalidIdentifier("identifier is empty")
    try:
        return UUID(str(value))
    except (TypeError, ValueError) as exc:
        raise InvalidIdentifier(f"invalid identifier: {value!r}") from exc
