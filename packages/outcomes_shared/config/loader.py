"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ``~/.config/outcomes-lookup/config.yaml`` (or ``OUTCOMES_LOOKUP_CONFIG_FILE``)
4) Model defaults

Environment variable format:
- Prefix: ``OUTCOMES_LOOKUP_``
- Nested keys: ``__`` separator
- Example: ``OUTCOMES_LOOKUP_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``
"""

from __future__ import annotations

from typing import Any, Mapping

from .models import OutcomesLookupSettings


def load_settings(
    *, cli_params: Mapping[str, Any] | None = None
) -> OutcomesLookupSettings:
    """Load root settings, layering CLI params over env, YAML and defaults.

    Only non-``None`` CLI values are applied so unset flags never mask values
    from lower-precedence sources.
    """
    overrides = _drop_unset(cli_params) if cli_params is not None else {}
    return OutcomesLookupSettings(**overrides)


def _drop_unset(values: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively remove ``None`` leaves and mappings left empty by removal."""
    output: dict[str, Any] = {}
    for key, value in values.items():
        if isinstance(value, Mapping):
            nested = _drop_unset(value)
            if nested:
                output[str(key)] = nested
            continue
        if value is not None:
            output[str(key)] = value
    return output
