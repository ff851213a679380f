"""Log field helpers for boundary layers that log an ``ErrorStack``."""

from . import fields
from .stack import stack_log_fields

__all__ = [
    "fields",
    "stack_log_fields",
]
