"""Tests for the shared lookup error taxonomy."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from packages.outcomes_shared.errors import (
    ConfigurationError,
    ErrorCategory,
    OrgResolutionError,
    OutcomesLookupError,
    RowDecodeError,
    StoreQueryError,
    StoreUnavailableError,
    codes,
)


@pytest.mark.parametrize(
    ("error_type", "code", "category", "retryable"),
    [
        (StoreUnavailableError, codes.DEPENDENCY_UNAVAILABLE, ErrorCategory.DEPENDENCY, True),
        (StoreQueryError, codes.DEPENDENCY_FAILURE, ErrorCategory.DEPENDENCY, False),
        (OrgResolutionError, codes.ORG_NOT_RESOLVED, ErrorCategory.NOT_FOUND, False),
        (RowDecodeError, codes.ROW_DECODE_FAILED, ErrorCategory.DATA, False),
        (ConfigurationError, codes.INVALID_CONFIGURATION, ErrorCategory.VALIDATION, False),
    ],
)
def test_error_subclasses_carry_their_defaults(
    error_type: type[OutcomesLookupError],
    code: str,
    category: ErrorCategory,
    retryable: bool,
) -> None:
    """Each subclass should default code, category and retryability."""
    error = error_type(message="failed")

    assert isinstance(error, OutcomesLookupError)
    assert error.code == code
    assert error.category == category
    assert error.retryable is retryable
    assert str(error) == "failed"


def test_errors_are_immutable() -> None:
    """Error payloads should not change after construction."""
    error = StoreQueryError(message="failed")

    with pytest.raises(FrozenInstanceError):
        error.message = "changed"  # type: ignore[misc]


def test_errors_can_be_raised_and_chained() -> None:
    """Errors should behave like ordinary exceptions when raised from a cause."""
    cause = RuntimeError("driver")

    with pytest.raises(StoreQueryError) as exc_info:
        try:
            raise cause
        except RuntimeError as exc:
            raise StoreQueryError(message="wrapped") from exc

    assert exc_info.value.__cause__ is cause
