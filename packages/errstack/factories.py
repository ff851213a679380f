"""Factory helpers for creating and extending classified error stacks."""

from __future__ import annotations

from typing import Sequence

from . import kinds
from .kinds import Classification
from .types import ErrorStack, SupportsTextual


def wrap(
    classification: Classification,
    cause: object,
    *,
    resources: Sequence[str] = (),
) -> ErrorStack:
    """Classify ``cause`` and append it to its stack, or start a new stack.

    When ``cause`` is already an ``ErrorStack`` the new entry is appended to
    that same object, which is returned. Any other cause starts a fresh
    one-entry stack.
    """
    message = cause_to_message(cause, resources=resources)
    if isinstance(cause, ErrorStack):
        return cause.push(classification, message)
    return ErrorStack().push(classification, message)


def cause_to_message(cause: object, *, resources: Sequence[str] = ()) -> str:
    """Normalize a cause into message text with optional ``[resource]`` tags."""
    message = ""
    if isinstance(cause, str):
        message = cause
    elif isinstance(cause, BaseException):
        message = str(cause)
    elif isinstance(cause, SupportsTextual):
        message = cause.textual()

    if resources:
        prefix = "".join(f"[{resource}]" for resource in resources)
        message = f"{prefix} {message}"
    return message


def default(cause: object) -> ErrorStack:
    """Create an internal-category error (500)."""
    return wrap(kinds.DEFAULT, cause)


def database(cause: object) -> ErrorStack:
    """Create a database-category error (500)."""
    return wrap(kinds.DATABASE, cause)


def forbidden(cause: object) -> ErrorStack:
    """Create a forbidden-category error (403)."""
    return wrap(kinds.FORBIDDEN, cause)


def unauthorized(cause: object) -> ErrorStack:
    """Create an unauthorized-category error (401)."""
    return wrap(kinds.UNAUTHORIZED, cause)


def not_found(cause: object) -> ErrorStack:
    """Create a not-found-category error (404)."""
    return wrap(kinds.NOT_FOUND, cause)


def create(cause: object, *, resources: Sequence[str] = ()) -> ErrorStack:
    """Create a record-creation error (500) tagged with affected resources."""
    return wrap(kinds.CREATE, cause, resources=resources)


def update(cause: object) -> ErrorStack:
    """Create a record-update error (500)."""
    return wrap(kinds.UPDATE, cause)


def delete(cause: object) -> ErrorStack:
    """Create a record-deletion error (500)."""
    return wrap(kinds.DELETE, cause)


def validation(cause: object, *, resources: Sequence[str] = ()) -> ErrorStack:
    """Create a validation error (422) tagged with affected resources."""
    return wrap(kinds.VALIDATION, cause, resources=resources)


def duplicated(cause: object) -> ErrorStack:
    """Create a duplicated-record error (409)."""
    return wrap(kinds.DUPLICATED, cause)


def assertion(cause: object) -> ErrorStack:
    """Create an assertion error (400)."""
    return wrap(kinds.ASSERTION, cause)


def method_not_allowed(cause: object) -> ErrorStack:
    """Create a method-not-allowed error (405) with the assertion kind."""
    return wrap(kinds.METHOD_NOT_ALLOWED, cause)


CONSTRUCTORS = {
    "default": default,
    "database": database,
    "forbidden": forbidden,
    "unauthorized": unauthorized,
    "not_found": not_found,
    "create": create,
    "update": update,
    "delete": delete,
    "validation": validation,
    "duplicated": duplicated,
    "assertion": assertion,
    "method_not_allowed": method_not_allowed,
}
