"""Domain contracts for outcome lookup requests and decoded rows."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from enum import IntEnum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

UINT64_MAX = 2**64 - 1
UINT8_MAX = 2**8 - 1


class Outcome(IntEnum):
    """Known outcome codes stored in the ``outcome`` column."""

    ACCEPTED = 0
    FILTERED = 1
    RATE_LIMITED = 2
    INVALID = 3
    ABUSE = 4


@dataclass(frozen=True)
class UnknownOutcome:
    """Fallback variant carrying an outcome code outside the known set."""

    code: int


OutcomeValue = Outcome | UnknownOutcome

_OUTCOME_LABELS = {
    Outcome.ACCEPTED: "Accepted",
    Outcome.FILTERED: "Filtered",
    Outcome.RATE_LIMITED: "RateLimited",
    Outcome.INVALID: "Invalid",
    Outcome.ABUSE: "Abuse",
}


def decode_outcome(code: int) -> OutcomeValue:
    """Map one outcome byte onto its variant; unknown bytes never fail."""
    if not 0 <= code <= UINT8_MAX:
        raise ValueError(f"outcome code out of byte range: {code}")
    try:
        return Outcome(code)
    except ValueError:
        return UnknownOutcome(code=code)


def encode_outcome(value: OutcomeValue) -> int:
    """Return the stored byte for one outcome variant."""
    if isinstance(value, UnknownOutcome):
        return value.code
    return int(value)


def outcome_label(value: OutcomeValue) -> str:
    """Return the display label used in printed rows."""
    if isinstance(value, UnknownOutcome):
        return f"Unknown({value.code})"
    return _OUTCOME_LABELS[value]


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Return ``[start of day, start of next day)`` in UTC."""
    start = datetime.combine(day, time.min, tzinfo=UTC)
    return start, start + timedelta(days=1)


class LookupRequest(BaseModel):
    """One validated outcome lookup request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    event_id: UUID
    org_id: int | None = Field(default=None, ge=0, le=UINT64_MAX)
    project_id: int | None = Field(default=None, ge=0, le=UINT64_MAX)
    time_from: datetime | None = None
    time_to: datetime | None = None
    day: date | None = None

    @property
    def has_explicit_window(self) -> bool:
        """Return whether ``time_from`` or ``time_to`` was supplied."""
        return self.time_from is not None or self.time_to is not None

    def time_bounds(self) -> tuple[datetime | None, datetime | None]:
        """Return the effective window; ``day`` overrides explicit bounds."""
        if self.day is not None:
            return day_bounds(self.day)
        return self.time_from, self.time_to


class OutcomeRecord(BaseModel):
    """One decoded row of the outcomes table."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    event_id: UUID | None
    project_id: int = Field(ge=0, le=UINT64_MAX)
    org_id: int = Field(ge=0, le=UINT64_MAX)
    key_id: int | None = Field(ge=0, le=UINT64_MAX)
    timestamp: datetime
    outcome_code: int = Field(ge=0, le=UINT8_MAX)
    reason: str | None

    @property
    def outcome(self) -> OutcomeValue:
        """Return the decoded outcome variant."""
        return decode_outcome(self.outcome_code)
