"""Canonical logging field names for structured lookup diagnostics.

Keeping names centralized prevents drift between the CLI, the service and the
store substrate when they bind context or emit ``extra`` fields.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"

# Lookup request fields.
EVENT_ID = "event_id"
ORG_ID = "org_id"
PROJECT_ID = "project_id"
TIME_FROM = "time_from"
TIME_TO = "time_to"

# Store interaction fields.
OPERATION = "operation"
DURATION_MS = "duration_ms"
ROW_COUNT = "row_count"
ERROR_CODE = "error_code"
EXCEPTION_TYPE = "exception_type"
