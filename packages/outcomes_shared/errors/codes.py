"""Shared error code constants.

These constants are stable machine-readable identifiers attached to every
typed lookup failure. Component-specific codes should extend this set in local
modules rather than modifying shared constants for one component.
"""

# Validation
INVALID_CONFIGURATION = "INVALID_CONFIGURATION"

# Not found
ORG_NOT_RESOLVED = "ORG_NOT_RESOLVED"

# Dependency / external system
DEPENDENCY_FAILURE = "DEPENDENCY_FAILURE"
DEPENDENCY_TIMEOUT = "DEPENDENCY_TIMEOUT"
DEPENDENCY_UNAVAILABLE = "DEPENDENCY_UNAVAILABLE"

# Data shape
ROW_DECODE_FAILED = "ROW_DECODE_FAILED"

# Internal
INTERNAL_ERROR = "INTERNAL_ERROR"
UNEXPECTED_EXCEPTION = "UNEXPECTED_EXCEPTION"
