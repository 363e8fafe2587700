"""Human-readable rendering of decoded outcome records."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Callable, TypeVar

from services.state.outcome_lookup.domain import OutcomeRecord, outcome_label

T = TypeVar("T")

PLACEHOLDER = "-"
NO_OUTCOMES_MESSAGE = "no outcomes found"


def format_optional(value: T | None, formatter: Callable[[T], str] = str) -> str:
    """Format a nullable value, rendering ``None`` as the shared placeholder."""
    if value is None:
        return PLACEHOLDER
    return formatter(value)


def format_timestamp(value: datetime) -> str:
    """Render a timestamp with its zone name; naive values are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.strftime("%Y-%m-%d %H:%M:%S %Z")


def render_record(record: OutcomeRecord) -> list[str]:
    """Return one ``label: value`` line per field in fixed order."""
    return [
        f"event_id: {format_optional(record.event_id)}",
        f"project_id: {record.project_id}",
        f"org_id: {record.org_id}",
        f"key_id: {format_optional(record.key_id)}",
        f"timestamp: {format_timestamp(record.timestamp)}",
        f"outcome: {outcome_label(record.outcome)}",
        f"reason: {format_optional(record.reason)}",
    ]
