"""ClickHouse driver exception normalization helpers."""

from __future__ import annotations

from packages.outcomes_shared.errors import (
    OutcomesLookupError,
    StoreQueryError,
    StoreUnavailableError,
    codes,
)
from packages.outcomes_shared.logging import fields


def normalize_clickhouse_error(exc: Exception, *, operation: str) -> OutcomesLookupError:
    """Map low-level driver exceptions into typed lookup errors."""
    if isinstance(exc, OutcomesLookupError):
        return exc

    exc_type_name = type(exc).__name__
    detail = str(exc).strip() or exc_type_name
    metadata = {fields.EXCEPTION_TYPE: exc_type_name, fields.OPERATION: operation}

    if isinstance(exc, TimeoutError) or "timeout" in detail.lower():
        return StoreUnavailableError(
            message=f"clickhouse {operation} timed out: {detail}",
            code=codes.DEPENDENCY_TIMEOUT,
            metadata=metadata,
        )

    if isinstance(exc, ConnectionError) or "OperationalError" in exc_type_name:
        return StoreUnavailableError(
            message=f"clickhouse unavailable during {operation}: {detail}",
            metadata=metadata,
        )

    if any(
        name in exc_type_name
        for name in ("DatabaseError", "ProgrammingError", "DataError", "InterfaceError")
    ):
        return StoreQueryError(
            message=f"clickhouse {operation} failed: {detail}",
            metadata=metadata,
        )

    return StoreQueryError(
        message=f"unexpected clickhouse failure during {operation}: {detail}",
        code=codes.UNEXPECTED_EXCEPTION,
        metadata=metadata,
    )
