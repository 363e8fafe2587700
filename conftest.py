"""Pytest configuration for the outcomes lookup test suite."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

import pytest

from packages.outcomes_shared.config import CONFIG_FILE_ENV
from packages.outcomes_shared.config.models import ENV_PREFIX
from packages.outcomes_shared.logging.context import _LOOKUP_CONTEXT


@pytest.fixture(autouse=True)
def _isolate_settings_sources(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Keep host environment and the user's config file out of every test."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv(CONFIG_FILE_ENV, str(tmp_path / "absent-config.yaml"))


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo handlers installed by ``configure_logging`` during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _reset_lookup_context() -> Iterator[None]:
    """Start every test with an empty logging context and restore it after."""
    token = _LOOKUP_CONTEXT.set({})
    yield
    _LOOKUP_CONTEXT.reset(token)
