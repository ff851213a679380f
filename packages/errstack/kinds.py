"""Closed error-kind taxonomy and its fixed HTTP status classification.

Kinds are identities: equality is defined on the enum member, never on the
textual name carried as its value. Each public constructor maps to exactly one
module-level ``Classification``; the reverse status lookup used by
deserialization lives in ``STATUS_TO_CONSTRUCTOR``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Final, Mapping


class ErrorKind(Enum):
    """Fixed classification tags attached to error entries."""

    INTERNAL = "Internal"
    DATABASE = "Database"
    FORBIDDEN = "Forbidden"
    UNAUTHORIZED = "Unauthorized"
    NOT_FOUND = "Record not found"
    DUPLICATED = "Duplicated record"
    CREATE = "Cannot create record"
    UPDATE = "Cannot update record"
    DELETE = "Cannot delete record"
    VALIDATION = "Validation"
    ASSERTION = "Assertion"

    def __str__(self) -> str:
        """Return the kind's textual name."""
        return self.value


@dataclass(frozen=True, slots=True)
class Classification:
    """Kind and HTTP status pair assigned by one constructor."""

    kind: ErrorKind
    status: int


# ---- constructor classifications (stable public contract) ----
DEFAULT: Final = Classification(ErrorKind.INTERNAL, HTTPStatus.INTERNAL_SERVER_ERROR)
DATABASE: Final = Classification(ErrorKind.DATABASE, HTTPStatus.INTERNAL_SERVER_ERROR)
FORBIDDEN: Final = Classification(ErrorKind.FORBIDDEN, HTTPStatus.FORBIDDEN)
UNAUTHORIZED: Final = Classification(ErrorKind.UNAUTHORIZED, HTTPStatus.UNAUTHORIZED)
NOT_FOUND: Final = Classification(ErrorKind.NOT_FOUND, HTTPStatus.NOT_FOUND)
CREATE: Final = Classification(ErrorKind.CREATE, HTTPStatus.INTERNAL_SERVER_ERROR)
UPDATE: Final = Classification(ErrorKind.UPDATE, HTTPStatus.INTERNAL_SERVER_ERROR)
DELETE: Final = Classification(ErrorKind.DELETE, HTTPStatus.INTERNAL_SERVER_ERROR)
VALIDATION: Final = Classification(
    ErrorKind.VALIDATION, HTTPStatus.UNPROCESSABLE_ENTITY
)
DUPLICATED: Final = Classification(ErrorKind.DUPLICATED, HTTPStatus.CONFLICT)
ASSERTION: Final = Classification(ErrorKind.ASSERTION, HTTPStatus.BAD_REQUEST)
# Shares the ASSERTION tag; kind checks cannot tell the two apart.
METHOD_NOT_ALLOWED: Final = Classification(
    ErrorKind.ASSERTION, HTTPStatus.METHOD_NOT_ALLOWED
)

# Status used whenever a stack has no entries to report.
FALLBACK_STATUS: Final[int] = HTTPStatus.INTERNAL_SERVER_ERROR

# Best-effort reverse lookup for deserialization; unlisted codes map to default.
STATUS_TO_CONSTRUCTOR: Final[Mapping[int, str]] = {
    HTTPStatus.FORBIDDEN: "forbidden",
    HTTPStatus.UNAUTHORIZED: "unauthorized",
    HTTPStatus.NOT_FOUND: "not_found",
    HTTPStatus.UNPROCESSABLE_ENTITY: "validation",
    HTTPStatus.CONFLICT: "duplicated",
    HTTPStatus.BAD_REQUEST: "assertion",
    HTTPStatus.METHOD_NOT_ALLOWED: "method_not_allowed",
}
