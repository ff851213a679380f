"""Kind predicates over arbitrary error values."""

from __future__ import annotations

from .kinds import ErrorKind
from .types import ErrorStack


def is_kind(err: object, kind: ErrorKind) -> bool:
    """Return ``True`` when ``err`` is a stack whose newest entry is ``kind``.

    Kinds are compared by identity, not by their textual names, so messages
    never influence the result.
    """
    if not isinstance(err, ErrorStack):
        return False
    last = err.last
    return last is not None and last.kind is kind


def is_root_of_kind(err: object, kind: ErrorKind) -> bool:
    """Return ``True`` when ``err`` is a stack whose root entry is ``kind``."""
    if not isinstance(err, ErrorStack):
        return False
    root = err.root
    return root is not None and root.kind is kind
