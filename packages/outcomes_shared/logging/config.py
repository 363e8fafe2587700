"""Stderr logging configuration for the outcomes lookup CLI.

Standard output carries lookup results only, so every diagnostic goes to
stderr. Records are either human-readable lines or newline-delimited JSON, and
both shapes append the fields bound through :mod:`.context`.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

from . import fields
from .context import get_context

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None))
) | {"message", "asctime", "context"}


class ContextFilter(logging.Filter):
    """Snapshot the bound lookup context onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = get_context()
        return True


class _StructuredFormatter(logging.Formatter):
    """Base formatter exposing bound context and ``extra`` values together."""

    @staticmethod
    def structured_fields(record: logging.LogRecord) -> dict[str, Any]:
        snapshot = getattr(record, "context", None)
        merged: dict[str, Any] = dict(snapshot) if isinstance(snapshot, dict) else {}
        merged.update(
            (name, value)
            for name, value in vars(record).items()
            if name not in _STANDARD_ATTRS
        )
        return merged


class JsonFormatter(_StructuredFormatter):
    """One JSON object per line, core keys first."""

    def format(self, record: logging.LogRecord) -> str:
        document: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
            **self.structured_fields(record),
        }
        if record.exc_info:
            document["exception"] = self.formatException(record.exc_info)
        return json.dumps(document, default=str, separators=(",", ":"))


class PlainFormatter(_StructuredFormatter):
    """``<time> <LEVEL> <logger> <message> key=value ...`` lines."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = sorted(self.structured_fields(record).items())
        if pairs:
            line += " " + " ".join(f"{name}={value}" for name, value in pairs)
        return line


def configure_logging(
    *,
    level: str = "WARNING",
    json_output: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route all diagnostics through one handler writing to ``stream`` or stderr.

    Previously installed root handlers are dropped, so calling this once per
    CLI invocation (including repeated invocations inside a test runner) never
    duplicates output.
    """
    threshold = level.upper()
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(threshold)
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.setLevel(threshold)
    root.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger from the standard hierarchy."""
    return logging.getLogger(name)
