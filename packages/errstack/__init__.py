"""Public error-stack API.

Wrap a cause with a classified kind and HTTP status, chain wraps into one
``ErrorStack``, inspect it by kind and move it across service boundaries as
JSON.
"""

from . import kinds
from .codec import (
    ErrorEntryPayload,
    ErrorStackPayload,
    marshal,
    marshal_entry,
    to_payload,
    unmarshal,
)
from .factories import (
    assertion,
    cause_to_message,
    create,
    database,
    default,
    delete,
    duplicated,
    forbidden,
    method_not_allowed,
    not_found,
    unauthorized,
    update,
    validation,
    wrap,
)
from .inspection import is_kind, is_root_of_kind
from .kinds import Classification, ErrorKind
from .normalize import exception_to_stack
from .types import ErrorEntry, ErrorStack, SupportsStatusCode, SupportsTextual

__all__ = [
    "Classification",
    "ErrorEntry",
    "ErrorEntryPayload",
    "ErrorKind",
    "ErrorStack",
    "ErrorStackPayload",
    "SupportsStatusCode",
    "SupportsTextual",
    "assertion",
    "cause_to_message",
    "create",
    "database",
    "default",
    "delete",
    "duplicated",
    "exception_to_stack",
    "forbidden",
    "is_kind",
    "is_root_of_kind",
    "kinds",
    "marshal",
    "marshal_entry",
    "method_not_allowed",
    "not_found",
    "to_payload",
    "unauthorized",
    "unmarshal",
    "update",
    "validation",
    "wrap",
]
