"""Canonical error entry and error stack types.

An ``ErrorStack`` is an ordered, append-only chain of classified
``ErrorEntry`` values, oldest first: index 0 is the root cause and the last
entry is the most recent wrap. Wrapping mutates the stack in place and returns
the same object, so one stack is owned by one logical call chain. Concurrent
wraps of a shared stack must be synchronized by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Protocol, runtime_checkable

from .kinds import FALLBACK_STATUS, Classification, ErrorKind


@runtime_checkable
class SupportsTextual(Protocol):
    """Object exposing an error-like textual representation."""

    def textual(self) -> str:
        """Return the human-readable error text."""
        ...


@runtime_checkable
class SupportsStatusCode(Protocol):
    """Object carrying an HTTP status code for a transport boundary."""

    @property
    def status_code(self) -> int:
        """Return the HTTP status code to respond with."""
        ...


@dataclass(frozen=True, slots=True)
class ErrorEntry:
    """One classified error occurrence within a stack."""

    sequence: int
    message: str
    kind: ErrorKind
    http_status_code: int

    @property
    def status_code(self) -> int:
        """Return this entry's HTTP status code."""
        return self.http_status_code

    def textual(self) -> str:
        return self.message

    def __str__(self) -> str:
        return self.message


class ErrorStack(Exception):
    """Ordered chain of classified errors, raised as one exception."""

    def __init__(self, entries: Iterable[ErrorEntry] = ()) -> None:
        """Build a stack, usually empty; prefer the kind constructors.

        Raises ``ValueError`` when ``entries`` are not numbered ``0..N-1``.
        """
        self._entries: list[ErrorEntry] = list(entries)
        for position, entry in enumerate(self._entries):
            if entry.sequence != position:
                raise ValueError(
                    f"entry at position {position} has sequence {entry.sequence}"
                )
        super().__init__(self.message)

    # -------- chain access --------

    @property
    def entries(self) -> tuple[ErrorEntry, ...]:
        """Return a snapshot of the chain, root first."""
        return tuple(self._entries)

    @property
    def root(self) -> ErrorEntry | None:
        """Return the original underlying cause, if any."""
        return self._entries[0] if self._entries else None

    @property
    def last(self) -> ErrorEntry | None:
        """Return the most recent wrap, if any."""
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ErrorEntry]:
        return iter(tuple(self._entries))

    def __bool__(self) -> bool:
        # An empty stack is still an error value.
        return True

    def __reduce__(self) -> tuple[type[ErrorStack], tuple[tuple[ErrorEntry, ...]]]:
        return (type(self), (tuple(self._entries),))

    # -------- status / message --------

    @property
    def status_code(self) -> int:
        """Return the last entry's HTTP status, or 500 when empty."""
        last = self.last
        if last is None:
            return int(FALLBACK_STATUS)
        return last.http_status_code

    @property
    def message(self) -> str:
        """Return the last entry's message, or ``""`` when empty."""
        last = self.last
        return "" if last is None else last.message

    def textual(self) -> str:
        return self.message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        chain = ", ".join(
            f"{entry.sequence}:{entry.kind.name}({entry.http_status_code})"
            for entry in self._entries
        )
        return f"ErrorStack([{chain}], message={self.message!r})"

    # -------- mutation --------

    def push(self, classification: Classification, message: str) -> ErrorStack:
        """Append one classified entry in place and return this same stack."""
        last = self.last
        sequence = 0 if last is None else last.sequence + 1
        self._entries.append(
            ErrorEntry(
                sequence=sequence,
                message=message,
                kind=classification.kind,
                http_status_code=int(classification.status),
            )
        )
        self.args = (self.message,)
        return self

    def _replace_last_message(self, message: str) -> None:
        """Overwrite the newest entry's message; used by deserialization only."""
        last = self.last
        if last is None:
            return
        self._entries[-1] = ErrorEntry(
            sequence=last.sequence,
            message=message,
            kind=last.kind,
            http_status_code=last.http_status_code,
        )
        self.args = (self.message,)

    # -------- serialization --------

    def to_payload(self) -> dict[str, Any] | None:
        """Return the wire structure as plain data, or ``None`` when empty."""
        from .codec import to_payload

        return to_payload(self)

    def to_json(self) -> bytes:
        """Return the compact JSON wire form; empty bytes for an empty stack."""
        from .codec import marshal

        return marshal(self)

    @classmethod
    def from_json(cls, data: bytes | str) -> ErrorStack:
        """Rebuild a one-entry stack from its wire form (lossy, never raises)."""
        from .codec import unmarshal

        return unmarshal(data)
