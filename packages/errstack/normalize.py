"""Exception normalization into classified error stacks."""

from __future__ import annotations

from . import factories
from .types import ErrorStack


def exception_to_stack(exc: BaseException) -> ErrorStack:
    """Classify an arbitrary Python exception into an ``ErrorStack``.

    The mapping is intentionally conservative and generic. Applications can
    layer domain-specific classification before falling back to this function.
    Existing stacks are returned unchanged.
    """
    if isinstance(exc, ErrorStack):
        return exc

    message = str(exc) or type(exc).__name__

    if isinstance(exc, ValueError):
        return factories.validation(message)

    if isinstance(exc, PermissionError):
        return factories.forbidden(message)

    if isinstance(exc, LookupError):
        return factories.not_found(message)

    if isinstance(exc, NotImplementedError):
        return factories.method_not_allowed(message)

    if isinstance(exc, AssertionError):
        return factories.assertion(message)

    return factories.default(message)
