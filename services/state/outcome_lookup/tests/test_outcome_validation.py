"""Unit tests for lookup input parsers."""

from __future__ import annotations

from datetime import UTC, date, datetime
from uuid import UUID

import pytest

from services.state.outcome_lookup.validation import (
    parse_day,
    parse_event_id,
    parse_timestamp,
)


@pytest.mark.parametrize(
    "value",
    [
        "11111111-1111-1111-1111-111111111111",
        "11111111111111111111111111111111",
        "{11111111-1111-1111-1111-111111111111}",
    ],
)
def test_parse_event_id_accepts_standard_spellings(value: str) -> None:
    """Hyphenated, simple and braced UUID forms should parse."""
    assert parse_event_id(value) == UUID("11111111-1111-1111-1111-111111111111")


def test_parse_event_id_rejects_garbage() -> None:
    """Non-UUID text should fail with the offending value."""
    with pytest.raises(ValueError, match="not a valid UUID: 'not-a-uuid'"):
        parse_event_id("not-a-uuid")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-01-01T00:00:00Z", datetime(2024, 1, 1, tzinfo=UTC)),
        ("2024-01-01T02:00:00+02:00", datetime(2024, 1, 1, tzinfo=UTC)),
        ("2024-01-01 00:00:00", datetime(2024, 1, 1, tzinfo=UTC)),
    ],
)
def test_parse_timestamp_normalizes_to_utc(value: str, expected: datetime) -> None:
    """Offsets are converted and offset-less values are read as UTC."""
    parsed = parse_timestamp(value)

    assert parsed == expected
    assert parsed.utcoffset() == expected.utcoffset()


def test_parse_timestamp_rejects_garbage() -> None:
    """Unparseable timestamps should fail before any store access."""
    with pytest.raises(ValueError, match="not a valid timestamp"):
        parse_timestamp("yesterday")


def test_parse_day_accepts_iso_date() -> None:
    """Days use the ``YYYY-MM-DD`` form."""
    assert parse_day("2024-02-29") == date(2024, 2, 29)


@pytest.mark.parametrize("value", ["2023-02-29", "20240101x", "01/02/2024"])
def test_parse_day_rejects_invalid_days(value: str) -> None:
    """Impossible or mis-formatted days are usage errors."""
    with pytest.raises(ValueError, match="not a valid day"):
        parse_day(value)
