"""Lookup-scoped logging context.

Request identifiers (event, project, org) are held in a ``contextvars`` map so
every diagnostic emitted during one lookup carries them without threading the
values through each call site.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

_LOOKUP_CONTEXT: ContextVar[dict[str, str]] = ContextVar(
    "outcomes_lookup_context", default={}
)


def get_context() -> dict[str, str]:
    """Return a copy of the fields bound for the current lookup."""
    return dict(_LOOKUP_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Add fields to the current lookup context, skipping ``None`` values."""
    present = {key: str(value) for key, value in values.items() if value is not None}
    if not present:
        return
    _LOOKUP_CONTEXT.set({**_LOOKUP_CONTEXT.get(), **present})


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of one block, then restore the previous map."""
    token = _LOOKUP_CONTEXT.set(_LOOKUP_CONTEXT.get().copy())
    try:
        bind_context(**dict(values))
        yield
    finally:
        _LOOKUP_CONTEXT.reset(token)
