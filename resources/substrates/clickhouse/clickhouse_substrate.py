"""ClickHouse client-backed substrate implementation."""

from __future__ import annotations

import time
from typing import Any, Iterator, Mapping

from packages.outcomes_shared.logging import fields, get_logger
from resources.substrates.clickhouse.client import create_clickhouse_client
from resources.substrates.clickhouse.config import ClickHouseSettings
from resources.substrates.clickhouse.errors import normalize_clickhouse_error

_LOGGER = get_logger(__name__)


class ClickHouseClientSubstrate:
    """Concrete ClickHouse substrate using ``clickhouse-connect`` queries."""

    def __init__(self, *, settings: ClickHouseSettings) -> None:
        try:
            self._client = create_clickhouse_client(settings)
        except Exception as exc:  # noqa: BLE001
            raise normalize_clickhouse_error(exc, operation="connect") from exc

    def query_rows(
        self, *, query: str, parameters: Mapping[str, object]
    ) -> Iterator[dict[str, Any]]:
        """Execute one query with server-side bound parameters.

        The whole result is fetched before returning; rows are yielded as
        column-name mappings in server order.
        """
        started = time.perf_counter()
        try:
            result = self._client.query(query, parameters=dict(parameters))
            rows = list(result.named_results())
        except Exception as exc:  # noqa: BLE001
            raise normalize_clickhouse_error(exc, operation="query") from exc

        _LOGGER.debug(
            "clickhouse query completed",
            extra={
                fields.ROW_COUNT: len(rows),
                fields.DURATION_MS: round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return iter(rows)

    def close(self) -> None:
        """Close the HTTP client and its connection pool."""
        self._client.close()
