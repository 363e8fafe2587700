"""Parsers for user-supplied lookup inputs.

Each parser raises ``ValueError`` with a short human-readable reason; the CLI
turns those into usage errors before any store I/O happens.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from uuid import UUID


def parse_event_id(value: str) -> UUID:
    """Parse an event id in any standard UUID spelling."""
    try:
        return UUID(value.strip())
    except (AttributeError, ValueError) as exc:
        raise ValueError(f"not a valid UUID: {value!r}") from exc


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 / RFC 3339 timestamp and normalize it to UTC.

    A trailing ``Z`` is accepted and a timestamp without offset is read as UTC.
    """
    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(
            f"not a valid timestamp: {value!r} (expected e.g. 2024-01-01T00:00:00Z)"
        ) from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def parse_day(value: str) -> date:
    """Parse one calendar day in ``YYYY-MM-DD`` form."""
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise ValueError(f"not a valid day: {value!r} (expected YYYY-MM-DD)") from exc
