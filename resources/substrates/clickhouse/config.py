"""Pydantic settings for the ClickHouse substrate component."""

from __future__ import annotations

from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

from packages.outcomes_shared.config import (
    OutcomesLookupSettings,
    resolve_component_settings,
)

RESOURCE_COMPONENT_ID = "substrate_clickhouse"
DSN_ENV = "OUTCOMES_LOOKUP_DSN"
DEFAULT_DSN = "http://127.0.0.1:8123"

_PLAIN_SCHEMES = frozenset({"http", "clickhouse"})
_SECURE_SCHEMES = frozenset({"https", "clickhouses"})


class ClickHouseSettings(BaseModel):
    """ClickHouse connectivity settings for read-only outcome queries."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    dsn: str = DEFAULT_DSN
    connect_timeout_seconds: float = Field(default=10.0, gt=0)
    send_receive_timeout_seconds: float = Field(default=300.0, gt=0)

    @field_validator("dsn")
    @classmethod
    def _validate_dsn(cls, value: str) -> str:
        """Require an HTTP(S) style DSN with a host."""
        dsn = value.strip()
        parsed = urlparse(dsn)
        scheme = parsed.scheme.lower()
        if scheme not in _PLAIN_SCHEMES | _SECURE_SCHEMES:
            raise ValueError(
                "substrate.clickhouse.dsn scheme must be one of: "
                "http, https, clickhouse, clickhouses"
            )
        if not parsed.hostname:
            raise ValueError("substrate.clickhouse.dsn must include a host")
        return dsn

    @property
    def secure(self) -> bool:
        """Return whether the DSN requests a TLS connection."""
        return urlparse(self.dsn).scheme.lower() in _SECURE_SCHEMES


def resolve_clickhouse_settings(settings: OutcomesLookupSettings) -> ClickHouseSettings:
    """Resolve ClickHouse substrate settings from ``components.substrate.clickhouse``."""
    return resolve_component_settings(
        settings=settings,
        component_id=RESOURCE_COMPONENT_ID,
        model=ClickHouseSettings,
    )
