"""Unit tests for outcome lookup domain types."""

from __future__ import annotations

from datetime import UTC, date, datetime
from uuid import UUID

import pytest
from pydantic import ValidationError

from services.state.outcome_lookup.domain import (
    LookupRequest,
    Outcome,
    OutcomeRecord,
    UnknownOutcome,
    day_bounds,
    decode_outcome,
    encode_outcome,
    outcome_label,
)

EVENT_ID = UUID("11111111-1111-1111-1111-111111111111")


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (0, Outcome.ACCEPTED),
        (1, Outcome.FILTERED),
        (2, Outcome.RATE_LIMITED),
        (3, Outcome.INVALID),
        (4, Outcome.ABUSE),
    ],
)
def test_decode_outcome_maps_known_codes(code: int, expected: Outcome) -> None:
    """Known codes should decode to their named variants."""
    assert decode_outcome(code) is expected


def test_decode_outcome_falls_back_for_every_other_byte() -> None:
    """Bytes 5..255 should decode to the fallback carrying the same code."""
    for code in range(5, 256):
        decoded = decode_outcome(code)

        assert decoded == UnknownOutcome(code=code)
        assert encode_outcome(decoded) == code


def test_decode_outcome_is_exhaustive_over_bytes() -> None:
    """Every byte should map to exactly one variant and encode back unchanged."""
    decoded = [decode_outcome(code) for code in range(256)]

    assert [encode_outcome(value) for value in decoded] == list(range(256))
    assert sum(isinstance(value, Outcome) for value in decoded) == len(Outcome)


@pytest.mark.parametrize("code", [-1, 256, 1000])
def test_decode_outcome_rejects_values_outside_byte_range(code: int) -> None:
    """Non-byte values are not outcome codes at all."""
    with pytest.raises(ValueError, match="byte range"):
        decode_outcome(code)


def test_outcome_labels_match_printed_form() -> None:
    """Labels should use CamelCase names and ``Unknown(code)`` for the fallback."""
    assert outcome_label(Outcome.ACCEPTED) == "Accepted"
    assert outcome_label(Outcome.RATE_LIMITED) == "RateLimited"
    assert outcome_label(Outcome.ABUSE) == "Abuse"
    assert outcome_label(UnknownOutcome(code=9)) == "Unknown(9)"


def test_day_bounds_cover_one_utc_day() -> None:
    """A day should expand to ``[00:00 UTC, next day 00:00 UTC)``."""
    start, end = day_bounds(date(2024, 2, 28))

    assert start == datetime(2024, 2, 28, tzinfo=UTC)
    assert end == datetime(2024, 2, 29, tzinfo=UTC)


def test_day_bounds_cross_year_boundary() -> None:
    """The end bound should roll over month and year."""
    start, end = day_bounds(date(2023, 12, 31))

    assert start == datetime(2023, 12, 31, tzinfo=UTC)
    assert end == datetime(2024, 1, 1, tzinfo=UTC)


def test_lookup_request_day_overrides_explicit_window() -> None:
    """``day`` should win over independently supplied from/to bounds."""
    request = LookupRequest(
        event_id=EVENT_ID,
        time_from=datetime(2020, 1, 1, tzinfo=UTC),
        time_to=datetime(2020, 6, 1, tzinfo=UTC),
        day=date(2024, 1, 1),
    )

    assert request.has_explicit_window is True
    assert request.time_bounds() == (
        datetime(2024, 1, 1, tzinfo=UTC),
        datetime(2024, 1, 2, tzinfo=UTC),
    )


def test_lookup_request_keeps_open_ended_window() -> None:
    """Without ``day`` the explicit bounds are used as given, including gaps."""
    time_from = datetime(2024, 1, 1, 12, tzinfo=UTC)
    request = LookupRequest(event_id=EVENT_ID, time_from=time_from)

    assert request.time_bounds() == (time_from, None)


def test_lookup_request_rejects_negative_ids() -> None:
    """Org and project ids are unsigned."""
    with pytest.raises(ValidationError):
        LookupRequest(event_id=EVENT_ID, project_id=-1)


def test_outcome_record_exposes_decoded_outcome() -> None:
    """Records should keep the raw code and decode it on access."""
    record = OutcomeRecord(
        event_id=None,
        project_id=42,
        org_id=7,
        key_id=None,
        timestamp=datetime(2024, 1, 1, tzinfo=UTC),
        outcome_code=200,
        reason=None,
    )

    assert record.outcome == UnknownOutcome(code=200)
