"""ClickHouse client construction helpers."""

from __future__ import annotations

import clickhouse_connect
from clickhouse_connect.driver.client import Client

from resources.substrates.clickhouse.config import ClickHouseSettings


def create_clickhouse_client(settings: ClickHouseSettings) -> Client:
    """Construct a connected ClickHouse HTTP client from substrate settings.

    The client checks the server version on construction, so an unreachable
    endpoint fails here rather than on the first query.
    """
    return clickhouse_connect.get_client(
        dsn=settings.dsn,
        interface="https" if settings.secure else "http",
        connect_timeout=settings.connect_timeout_seconds,
        send_receive_timeout=settings.send_receive_timeout_seconds,
    )
