"""Canonical error types for outcome lookups.

This module defines the error taxonomy raised by the store substrate and the
lookup service. The CLI maps each category onto one process exit code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from . import codes


class ErrorCategory(str, Enum):
    """High-level error categories shared across component boundaries."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    DEPENDENCY = "dependency"
    DATA = "data"
    INTERNAL = "internal"


@dataclass(frozen=True)
class OutcomesLookupError(Exception):
    """Base error type for lookup failures."""

    message: str
    code: str = codes.INTERNAL_ERROR
    category: ErrorCategory = ErrorCategory.INTERNAL
    retryable: bool = False
    metadata: Mapping[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self.message


@dataclass(frozen=True)
class StoreUnavailableError(OutcomesLookupError):
    """The store could not be reached or the connection broke."""

    code: str = codes.DEPENDENCY_UNAVAILABLE
    category: ErrorCategory = ErrorCategory.DEPENDENCY
    retryable: bool = True


@dataclass(frozen=True)
class StoreQueryError(OutcomesLookupError):
    """The store was reachable but rejected or failed one query."""

    code: str = codes.DEPENDENCY_FAILURE
    category: ErrorCategory = ErrorCategory.DEPENDENCY


@dataclass(frozen=True)
class OrgResolutionError(OutcomesLookupError):
    """A project id was given but no owning organization could be found."""

    code: str = codes.ORG_NOT_RESOLVED
    category: ErrorCategory = ErrorCategory.NOT_FOUND


@dataclass(frozen=True)
class RowDecodeError(OutcomesLookupError):
    """A returned row does not match the expected column shape."""

    code: str = codes.ROW_DECODE_FAILED
    category: ErrorCategory = ErrorCategory.DATA


@dataclass(frozen=True)
class ConfigurationError(OutcomesLookupError):
    """Settings from flags, environment or the config file failed validation."""

    code: str = codes.INVALID_CONFIGURATION
    category: ErrorCategory = ErrorCategory.VALIDATION
