"""Outcome lookup service settings resolved from the components subtree."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from packages.outcomes_shared.config import (
    OutcomesLookupSettings,
    resolve_component_settings,
)
from services.state.outcome_lookup.query import validate_table_name

SERVICE_COMPONENT_ID = "service_outcome_lookup"
DEFAULT_OUTCOMES_TABLE = "outcomes_raw_local"


class OutcomeLookupSettings(BaseModel):
    """Store layout settings for outcome lookups."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    table: str = DEFAULT_OUTCOMES_TABLE

    @field_validator("table")
    @classmethod
    def _validate_table(cls, value: str) -> str:
        return validate_table_name(value.strip())


def resolve_outcome_lookup_settings(
    settings: OutcomesLookupSettings,
) -> OutcomeLookupSettings:
    """Resolve service settings from ``components.service.outcome_lookup``."""
    return resolve_component_settings(
        settings=settings,
        component_id=SERVICE_COMPONENT_ID,
        model=OutcomeLookupSettings,
    )
