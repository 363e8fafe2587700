"""Outcome lookup service package."""

from services.state.outcome_lookup.config import (
    SERVICE_COMPONENT_ID,
    OutcomeLookupSettings,
    resolve_outcome_lookup_settings,
)
from services.state.outcome_lookup.domain import (
    LookupRequest,
    Outcome,
    OutcomeRecord,
    OutcomeValue,
    UnknownOutcome,
    decode_outcome,
    encode_outcome,
    outcome_label,
)
from services.state.outcome_lookup.render import NO_OUTCOMES_MESSAGE, render_record
from services.state.outcome_lookup.service import (
    OutcomeLookupService,
    build_outcome_lookup_service,
)

__all__ = [
    "NO_OUTCOMES_MESSAGE",
    "SERVICE_COMPONENT_ID",
    "LookupRequest",
    "Outcome",
    "OutcomeLookupService",
    "OutcomeLookupSettings",
    "OutcomeRecord",
    "OutcomeValue",
    "UnknownOutcome",
    "build_outcome_lookup_service",
    "decode_outcome",
    "encode_outcome",
    "outcome_label",
    "render_record",
    "resolve_outcome_lookup_settings",
]
