"""Authoritative in-process Python API for outcome lookups."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from packages.outcomes_shared.config import OutcomesLookupSettings
from resources.substrates.clickhouse import ClickHouseSubstrate
from services.state.outcome_lookup.domain import LookupRequest, OutcomeRecord


class OutcomeLookupService(ABC):
    """Public API for finding outcome rows of one event."""

    @abstractmethod
    def resolve_org_id(self, project_id: int) -> int | None:
        """Return the first non-zero org id seen for a project, if any."""

    @abstractmethod
    def lookup(self, request: LookupRequest) -> Iterator[OutcomeRecord]:
        """Run the lookup query and return lazily decoded records."""

    @abstractmethod
    def close(self) -> None:
        """Release store resources held by the service."""

    def __enter__(self) -> OutcomeLookupService:
        """Enter context manager scope."""
        return self

    def __exit__(self, *_: object) -> None:
        """Exit context manager scope and release store resources."""
        self.close()


def build_outcome_lookup_service(
    *,
    settings: OutcomesLookupSettings,
    backend: ClickHouseSubstrate | None = None,
) -> OutcomeLookupService:
    """Build default outcome lookup implementation from typed settings."""
    from resources.substrates.clickhouse import (
        ClickHouseClientSubstrate,
        resolve_clickhouse_settings,
    )
    from services.state.outcome_lookup.config import resolve_outcome_lookup_settings
    from services.state.outcome_lookup.implementation import (
        DefaultOutcomeLookupService,
    )

    service_settings = resolve_outcome_lookup_settings(settings)
    if backend is None:
        backend = ClickHouseClientSubstrate(
            settings=resolve_clickhouse_settings(settings)
        )
    return DefaultOutcomeLookupService(settings=service_settings, backend=backend)
