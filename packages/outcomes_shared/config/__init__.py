"""Public API for shared outcomes lookup configuration utilities."""

from .loader import load_settings
from .models import (
    CONFIG_FILE_ENV,
    DEFAULT_CONFIG_PATH,
    ComponentsSettings,
    LoggingSettings,
    OutcomesLookupSettings,
    resolve_component_settings,
    resolve_config_path,
)

__all__ = [
    "CONFIG_FILE_ENV",
    "DEFAULT_CONFIG_PATH",
    "ComponentsSettings",
    "LoggingSettings",
    "OutcomesLookupSettings",
    "load_settings",
    "resolve_component_settings",
    "resolve_config_path",
]
