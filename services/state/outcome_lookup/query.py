"""Parameter-bound query construction for outcome lookups.

Coarse clauses on indexed columns go to ``PREWHERE`` so ClickHouse prunes
granules before the exact ``event_id`` match in ``WHERE`` is evaluated. Every
user value is a server-side query parameter (``{name:Type}``); only
configuration-controlled identifiers appear in the SQL text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Mapping

from services.state.outcome_lookup.domain import LookupRequest

OUTCOME_COLUMNS = (
    "event_id",
    "project_id",
    "org_id",
    "key_id",
    "timestamp",
    "outcome",
    "reason",
)

CLICKHOUSE_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


def validate_table_name(table: str) -> str:
    """Require a plain, optionally database-qualified, table identifier."""
    if _IDENTIFIER_RE.fullmatch(table) is None:
        raise ValueError(f"invalid table identifier: {table!r}")
    return table


@dataclass(frozen=True)
class OutcomeQuery:
    """One SELECT with ordered PREWHERE/WHERE clause groups and bound values."""

    table: str
    columns: tuple[str, ...]
    prewhere: tuple[str, ...] = ()
    where: tuple[str, ...] = ()
    parameters: Mapping[str, object] = field(default_factory=dict)
    limit: int | None = None

    @property
    def sql(self) -> str:
        """Render the query text; values stay in ``parameters``."""
        parts = [f"SELECT {', '.join(self.columns)} FROM {validate_table_name(self.table)}"]
        if self.prewhere:
            parts.append(f"PREWHERE {' AND '.join(self.prewhere)}")
        if self.where:
            parts.append(f"WHERE {' AND '.join(self.where)}")
        if self.limit is not None:
            parts.append(f"LIMIT {int(self.limit)}")
        return " ".join(parts)


def format_clickhouse_timestamp(value: datetime) -> str:
    """Format one timestamp in UTC at second precision for ``toDateTime``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime(CLICKHOUSE_TIMESTAMP_FORMAT)


def build_outcome_query(
    request: LookupRequest, *, org_id: int | None, table: str
) -> OutcomeQuery:
    """Build the main lookup query for one request.

    ``org_id`` is passed separately because it may come from the probe rather
    than from the request itself.
    """
    prewhere: list[str] = []
    parameters: dict[str, object] = {}

    if request.project_id is not None:
        prewhere.append("project_id = {project_id:UInt64}")
        parameters["project_id"] = request.project_id

    if org_id is not None:
        prewhere.append("org_id = {org_id:UInt64}")
        parameters["org_id"] = org_id

    time_from, time_to = request.time_bounds()
    if time_from is not None:
        prewhere.append("timestamp >= toDateTime({time_from:String}, 'UTC')")
        parameters["time_from"] = format_clickhouse_timestamp(time_from)

    if time_to is not None:
        prewhere.append("timestamp < toDateTime({time_to:String}, 'UTC')")
        parameters["time_to"] = format_clickhouse_timestamp(time_to)

    parameters["event_id"] = str(request.event_id)

    return OutcomeQuery(
        table=table,
        columns=OUTCOME_COLUMNS,
        prewhere=tuple(prewhere),
        where=("event_id = {event_id:UUID}",),
        parameters=parameters,
    )


def build_org_probe_query(*, project_id: int, table: str) -> OutcomeQuery:
    """Build the single-row probe that finds a project's organization."""
    return OutcomeQuery(
        table=table,
        columns=("org_id",),
        prewhere=("project_id = {project_id:UInt64}",),
        where=("org_id != 0",),
        parameters={"project_id": project_id},
        limit=1,
    )
