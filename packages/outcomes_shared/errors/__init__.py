"""Public API for shared lookup error contracts."""

from . import codes
from .types import (
    ConfigurationError,
    ErrorCategory,
    OrgResolutionError,
    OutcomesLookupError,
    RowDecodeError,
    StoreQueryError,
    StoreUnavailableError,
)

__all__ = [
    "codes",
    "ConfigurationError",
    "ErrorCategory",
    "OrgResolutionError",
    "OutcomesLookupError",
    "RowDecodeError",
    "StoreQueryError",
    "StoreUnavailableError",
]
