"""Outcomes lookup CLI actor implemented with Typer."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, TypeVar
from uuid import UUID

import typer
import yaml

from packages.outcomes_shared.config import OutcomesLookupSettings, load_settings
from packages.outcomes_shared.errors import (
    ConfigurationError,
    ErrorCategory,
    OutcomesLookupError,
)
from packages.outcomes_shared.logging import (
    configure_logging,
    fields,
    get_logger,
    log_context,
)
from resources.substrates.clickhouse import DSN_ENV, resolve_clickhouse_settings
from services.state.outcome_lookup import (
    NO_OUTCOMES_MESSAGE,
    LookupRequest,
    build_outcome_lookup_service,
    render_record,
    resolve_outcome_lookup_settings,
)
from services.state.outcome_lookup.domain import UINT64_MAX
from services.state.outcome_lookup.validation import (
    parse_day,
    parse_event_id,
    parse_timestamp,
)

SUCCESS_EXIT_CODE = 0
LOOKUP_ERROR_EXIT_CODE = 1
USAGE_ERROR_EXIT_CODE = 2
RESOLUTION_ERROR_EXIT_CODE = 3
STORE_ERROR_EXIT_CODE = 4
DECODE_ERROR_EXIT_CODE = 5

_EXIT_CODES_BY_CATEGORY = {
    ErrorCategory.VALIDATION: USAGE_ERROR_EXIT_CODE,
    ErrorCategory.NOT_FOUND: RESOLUTION_ERROR_EXIT_CODE,
    ErrorCategory.DEPENDENCY: STORE_ERROR_EXIT_CODE,
    ErrorCategory.DATA: DECODE_ERROR_EXIT_CODE,
}

_LOGGER = get_logger(__name__)

T = TypeVar("T")


class LogLevel(str, Enum):
    """Supported diagnostic log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _usage_parser(parse: Callable[[str], T]) -> Callable[[str], T]:
    """Wrap one value parser so its ``ValueError`` becomes a usage error."""

    def _parse(value: str) -> T:
        try:
            return parse(value)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc

    return _parse


def _emit_error(message: object) -> None:
    """Render one failure to stderr."""
    typer.echo(f"error: {message}", err=True)


def _exit_code_for(exc: OutcomesLookupError) -> int:
    """Map one typed lookup error onto its process exit code."""
    return _EXIT_CODES_BY_CATEGORY.get(exc.category, LOOKUP_ERROR_EXIT_CODE)


def _load_validated_settings(cli_params: dict[str, Any]) -> OutcomesLookupSettings:
    """Load settings and resolve every component block, or raise ``ConfigurationError``."""
    try:
        settings = load_settings(cli_params=cli_params)
        resolve_clickhouse_settings(settings)
        resolve_outcome_lookup_settings(settings)
    except (ValueError, TypeError, yaml.YAMLError) as exc:
        raise ConfigurationError(
            message=f"invalid configuration: {exc}",
            metadata={fields.EXCEPTION_TYPE: type(exc).__name__},
        ) from exc
    return settings


def _load_settings_or_exit(cli_params: dict[str, Any]) -> OutcomesLookupSettings:
    """Load settings, exiting with the validation exit code when invalid."""
    try:
        return _load_validated_settings(cli_params)
    except ConfigurationError as exc:
        _emit_error(exc)
        raise typer.Exit(code=_exit_code_for(exc)) from exc


def _run_lookup(settings: OutcomesLookupSettings, request: LookupRequest) -> None:
    """Execute one lookup and map outputs/errors to process semantics."""
    found = False
    try:
        with build_outcome_lookup_service(settings=settings) as service:
            for record in service.lookup(request):
                for line in render_record(record):
                    typer.echo(line)
                found = True
    except OutcomesLookupError as exc:
        _LOGGER.debug("lookup failed", extra={fields.ERROR_CODE: exc.code})
        _emit_error(exc)
        raise typer.Exit(code=_exit_code_for(exc)) from exc

    if not found:
        typer.echo(NO_OUTCOMES_MESSAGE)
    raise typer.Exit(code=SUCCESS_EXIT_CODE)


app = typer.Typer(
    add_completion=False,
    help="Look up outcomes recorded for one event in the outcomes dataset.",
)


@app.command()
def lookup(
    event_id: UUID = typer.Argument(
        ...,
        metavar="EVENT_ID",
        parser=_usage_parser(parse_event_id),
        help="The event ID to look up",
    ),
    dsn: str | None = typer.Option(
        None,
        "--dsn",
        "--endpoint",
        envvar=DSN_ENV,
        show_envvar=True,
        help="ClickHouse endpoint to connect to",
    ),
    org_id: int | None = typer.Option(
        None,
        "--org-id",
        "-o",
        min=0,
        max=UINT64_MAX,
        help="The org ID to scope the search down to",
    ),
    project_id: int | None = typer.Option(
        None,
        "--project-id",
        "-p",
        min=0,
        max=UINT64_MAX,
        help="The project ID to scope the search down to",
    ),
    time_from: datetime | None = typer.Option(
        None,
        "--from",
        metavar="TIMESTAMP",
        parser=_usage_parser(parse_timestamp),
        help="Start time (inclusive) to narrow down the search",
    ),
    time_to: datetime | None = typer.Option(
        None,
        "--to",
        metavar="TIMESTAMP",
        parser=_usage_parser(parse_timestamp),
        help="End time (exclusive) to narrow down the search",
    ),
    day: date | None = typer.Option(
        None,
        "--day",
        metavar="YYYY-MM-DD",
        parser=_usage_parser(parse_day),
        help="The UTC day to narrow the search down to (overrides --from/--to)",
    ),
    log_level: LogLevel | None = typer.Option(
        None,
        "--log-level",
        case_sensitive=False,
        help="Diagnostic log level on stderr",
    ),
    log_json: bool = typer.Option(
        False,
        "--log-json",
        help="Emit diagnostics as JSON lines",
    ),
) -> None:
    """Look up outcomes for EVENT_ID."""
    settings = _load_settings_or_exit(
        {
            "logging": {
                "level": log_level.value if log_level is not None else None,
                "json_output": True if log_json else None,
            },
            "components": {"substrate": {"clickhouse": {"dsn": dsn}}},
        }
    )
    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
    )

    request = LookupRequest(
        event_id=event_id,
        org_id=org_id,
        project_id=project_id,
        time_from=time_from,
        time_to=time_to,
        day=day,
    )

    time_from, time_to = request.time_bounds()
    with log_context(
        {
            fields.EVENT_ID: request.event_id,
            fields.PROJECT_ID: request.project_id,
            fields.ORG_ID: request.org_id,
            fields.TIME_FROM: time_from.isoformat() if time_from else None,
            fields.TIME_TO: time_to.isoformat() if time_to else None,
        }
    ):
        if request.day is not None and request.has_explicit_window:
            _LOGGER.warning("--day overrides --from/--to; searching the whole UTC day")
        _run_lookup(settings, request)


if __name__ == "__main__":
    app()
