"""ClickHouse substrate modules for read-only outcome store access."""

from resources.substrates.clickhouse.clickhouse_substrate import ClickHouseClientSubstrate
from resources.substrates.clickhouse.config import (
    DEFAULT_DSN,
    DSN_ENV,
    RESOURCE_COMPONENT_ID,
    ClickHouseSettings,
    resolve_clickhouse_settings,
)
from resources.substrates.clickhouse.errors import normalize_clickhouse_error
from resources.substrates.clickhouse.substrate import ClickHouseSubstrate

__all__ = [
    "DEFAULT_DSN",
    "DSN_ENV",
    "RESOURCE_COMPONENT_ID",
    "ClickHouseClientSubstrate",
    "ClickHouseSettings",
    "ClickHouseSubstrate",
    "normalize_clickhouse_error",
    "resolve_clickhouse_settings",
]
