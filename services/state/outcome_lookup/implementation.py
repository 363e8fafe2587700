"""Concrete outcome lookup implementation backed by the ClickHouse substrate."""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from pydantic import ValidationError

from packages.outcomes_shared.errors import OrgResolutionError, RowDecodeError
from packages.outcomes_shared.logging import fields, get_logger, log_context
from resources.substrates.clickhouse import ClickHouseSubstrate
from services.state.outcome_lookup.config import OutcomeLookupSettings
from services.state.outcome_lookup.domain import LookupRequest, OutcomeRecord
from services.state.outcome_lookup.query import (
    OUTCOME_COLUMNS,
    build_org_probe_query,
    build_outcome_query,
)
from services.state.outcome_lookup.service import OutcomeLookupService

_LOGGER = get_logger(__name__)


class DefaultOutcomeLookupService(OutcomeLookupService):
    """Default lookup implementation issuing at most two sequential queries."""

    def __init__(
        self,
        *,
        settings: OutcomeLookupSettings,
        backend: ClickHouseSubstrate,
    ) -> None:
        self._settings = settings
        self._backend = backend

    def resolve_org_id(self, project_id: int) -> int | None:
        """Probe the outcomes table for the organization owning a project."""
        probe = build_org_probe_query(project_id=project_id, table=self._settings.table)
        _LOGGER.debug("probing org_id for project", extra={fields.PROJECT_ID: project_id})

        for row in self._backend.query_rows(query=probe.sql, parameters=probe.parameters):
            org_id = _require_unsigned(row, "org_id")
            if org_id != 0:
                return org_id
        return None

    def lookup(self, request: LookupRequest) -> Iterator[OutcomeRecord]:
        """Resolve scoping, execute the main query and decode rows lazily.

        The query runs before this method returns; decoding happens while the
        caller iterates, so a malformed row surfaces after earlier rows have
        already been handed out.
        """
        org_id = request.org_id
        if org_id is None and request.project_id is not None:
            org_id = self.resolve_org_id(request.project_id)
            if org_id is None:
                raise OrgResolutionError(
                    message=(
                        "could not resolve organization for project "
                        f"{request.project_id}"
                    ),
                    metadata={fields.PROJECT_ID: str(request.project_id)},
                )

        with log_context({fields.ORG_ID: org_id}):
            if org_id != request.org_id:
                _LOGGER.info("resolved org_id from project")

            query = build_outcome_query(
                request, org_id=org_id, table=self._settings.table
            )
            _LOGGER.debug(
                "executing outcome lookup",
                extra={"prewhere_clauses": len(query.prewhere)},
            )
            rows = self._backend.query_rows(
                query=query.sql, parameters=query.parameters
            )
        return (decode_outcome_row(row) for row in rows)

    def close(self) -> None:
        """Close the owned store substrate."""
        self._backend.close()


def decode_outcome_row(row: Mapping[str, Any]) -> OutcomeRecord:
    """Decode one result row into an ``OutcomeRecord`` or raise ``RowDecodeError``."""
    missing = [column for column in OUTCOME_COLUMNS if column not in row]
    if missing:
        raise RowDecodeError(
            message=f"outcome row is missing columns: {', '.join(missing)}",
            metadata={"missing": ",".join(missing)},
        )

    payload = {column: row[column] for column in OUTCOME_COLUMNS}
    payload["outcome_code"] = payload.pop("outcome")
    try:
        return OutcomeRecord.model_validate(payload)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise RowDecodeError(message=f"could not decode outcome row: {problems}") from exc


def _require_unsigned(row: Mapping[str, Any], column: str) -> int:
    """Read one unsigned integer column from a probe row."""
    value = row.get(column)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise RowDecodeError(
            message=f"probe row column {column!r} is not an unsigned integer: {value!r}"
        )
    return value
