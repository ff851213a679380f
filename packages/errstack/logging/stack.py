"""Structured log fields derived from an error stack."""

from __future__ import annotations

from ..types import ErrorStack
from . import fields


def stack_log_fields(stack: ErrorStack) -> dict[str, str]:
    """Return stable log fields describing the stack's newest and root entries.

    Intended for ``logger.error(..., extra=stack_log_fields(stack))`` at a
    boundary layer. Empty stacks report the fallback status and omit kind
    fields.
    """
    output = {
        fields.ERROR_STATUS: str(stack.status_code),
        fields.ERROR_MESSAGE: stack.message,
        fields.ERROR_DEPTH: str(len(stack)),
    }
    if stack.last is not None:
        output[fields.ERROR_KIND] = stack.last.kind.value
    if stack.root is not None:
        output[fields.ERROR_ROOT_KIND] = stack.root.kind.value
    return output
