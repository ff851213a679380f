"""Tests for ``ErrorEntry`` and ``ErrorStack`` accessors."""

from __future__ import annotations

import dataclasses
import pickle

import pytest

from packages.errstack import (
    ErrorEntry,
    ErrorKind,
    ErrorStack,
    SupportsStatusCode,
    SupportsTextual,
    forbidden,
    kinds,
    not_found,
)


def test_empty_stack_falls_back_to_500_and_empty_message() -> None:
    """Zero-entry stacks should report status 500 and an empty message."""
    stack = ErrorStack()

    assert stack.status_code == 500
    assert stack.message == ""
    assert str(stack) == ""
    assert stack.root is None
    assert stack.last is None
    assert len(stack) == 0


def test_constructor_accepts_entries_numbered_from_zero() -> None:
    """Entries numbered 0..N-1 should be accepted as-is."""
    entries = forbidden(not_found("missing")).entries

    assert ErrorStack(entries).entries == entries


@pytest.mark.parametrize("sequences", [(1,), (0, 2), (0, 0), (1, 0)])
def test_constructor_rejects_caller_chosen_sequences(sequences: tuple[int, ...]) -> None:
    """Sequences out of 0..N-1 order should be rejected."""
    entries = [
        ErrorEntry(
            sequence=sequence,
            message="x",
            kind=ErrorKind.INTERNAL,
            http_status_code=500,
        )
        for sequence in sequences
    ]

    with pytest.raises(ValueError, match="sequence"):
        ErrorStack(entries)


def test_empty_stack_is_still_truthy() -> None:
    """An empty stack should remain a truthy error value."""
    assert bool(ErrorStack()) is True


def test_push_assigns_sequences_and_returns_self() -> None:
    """``push`` should append in place with auto-incremented sequences."""
    stack = ErrorStack()

    assert stack.push(kinds.VALIDATION, "first") is stack
    assert stack.push(kinds.DEFAULT, "second") is stack
    assert [(entry.sequence, entry.message) for entry in stack] == [
        (0, "first"),
        (1, "second"),
    ]
    assert stack.args == ("second",)


def test_entries_snapshot_does_not_expose_internal_list() -> None:
    """``entries`` should be an immutable snapshot of the chain."""
    stack = not_found("missing")
    snapshot = stack.entries
    stack.push(kinds.FORBIDDEN, "denied")

    assert len(snapshot) == 1
    assert len(stack.entries) == 2


def test_entry_is_immutable() -> None:
    """Entry kind and fields must not be reassignable after creation."""
    entry = not_found("missing").entries[0]

    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.kind = ErrorKind.FORBIDDEN  # type: ignore[misc]


def test_entry_exposes_status_and_text() -> None:
    """Entries should expose their own status code and message text."""
    entry = ErrorEntry(
        sequence=3,
        message="row locked",
        kind=ErrorKind.UPDATE,
        http_status_code=500,
    )

    assert entry.status_code == 500
    assert str(entry) == "row locked"
    assert entry.textual() == "row locked"


def test_stack_satisfies_boundary_protocols() -> None:
    """Stacks should satisfy the status-code and textual capabilities."""
    stack = not_found("missing")

    assert isinstance(stack, SupportsStatusCode)
    assert isinstance(stack, SupportsTextual)
    assert stack.textual() == "missing"


def test_stack_pickles_with_its_chain() -> None:
    """Pickled stacks should restore every entry in order."""
    stack = not_found("missing")
    stack.push(kinds.FORBIDDEN, "denied")

    restored = pickle.loads(pickle.dumps(stack))

    assert restored.entries == stack.entries
    assert restored.status_code == 403


def test_repr_lists_chain() -> None:
    """``repr`` should summarize each entry's sequence, kind and status."""
    stack = not_found("missing")
    stack.push(kinds.FORBIDDEN, "denied")

    assert repr(stack) == (
        "ErrorStack([0:NOT_FOUND(404), 1:FORBIDDEN(403)], message='denied')"
    )


def test_kind_textual_names_are_stable() -> None:
    """Kind values are the textual names used on the wire."""
    assert str(ErrorKind.NOT_FOUND) == "Record not found"
    assert ErrorKind.DUPLICATED.value == "Duplicated record"
    assert ErrorKind.NOT_FOUND != "Record not found"
