"""Canonical logging field names for error-stack log records.

Boundary layers that log a stack should use these keys so structured output
stays consistent between services.
"""

EVENT = "event"

ERROR_KIND = "error_kind"
ERROR_STATUS = "error_status"
ERROR_MESSAGE = "error_message"
ERROR_DEPTH = "error_depth"
ERROR_ROOT_KIND = "error_root_kind"
