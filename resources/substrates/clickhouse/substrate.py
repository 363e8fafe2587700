"""Transport-agnostic substrate contract for ClickHouse-backed reads."""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Protocol


class ClickHouseSubstrate(Protocol):
    """Protocol for parameter-bound, read-only ClickHouse queries."""

    def query_rows(
        self, *, query: str, parameters: Mapping[str, object]
    ) -> Iterator[dict[str, Any]]:
        """Execute one query and return its rows keyed by column name."""

    def close(self) -> None:
        """Release the underlying connection resources."""
