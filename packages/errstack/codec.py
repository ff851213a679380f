"""JSON wire codec for error stacks.

Marshal exposes the newest entry at the top level and every older entry under
``parent_errors``. Unmarshal is a best-effort, lossy reconstruction: only
``code`` and ``error`` are read back, ``code`` is mapped to a constructor via
``kinds.STATUS_TO_CONSTRUCTOR``, and ancestors plus the original ``type`` are
discarded. Unmarshal is total and never raises.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from . import factories, kinds
from .logging import fields
from .types import ErrorEntry, ErrorStack

_LOGGER = logging.getLogger(__name__)


class ErrorEntryPayload(BaseModel):
    """Wire shape of one serialized entry."""

    model_config = ConfigDict(frozen=True)

    id: int
    code: int
    error: str
    type: str


class ErrorStackPayload(BaseModel):
    """Wire shape of a serialized stack."""

    model_config = ConfigDict(frozen=True)

    code: int
    error: str
    type: str
    parent_errors: list[ErrorEntryPayload] | None = None


class _InboundStackPayload(BaseModel):
    """Validation-only model for payloads read back by ``unmarshal``.

    ``null`` stands for the zero value of any field. Keys match
    case-insensitively; when several spellings of one key appear, the last
    one wins.
    """

    model_config = ConfigDict(extra="ignore")

    code: StrictInt | None = None
    error: StrictStr | None = None
    type: StrictStr | None = None
    parent_errors: list[dict[str, Any] | None] | None = None

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, value: object) -> object:
        """Map differently cased keys onto the declared field names."""
        if not isinstance(value, dict):
            return value
        folded: dict[str, object] = {}
        for key, item in value.items():
            lowered = str(key).lower()
            if lowered in _INBOUND_KEYS:
                folded[lowered] = item
        return folded


_INBOUND_KEYS: frozenset[str] = frozenset(_InboundStackPayload.model_fields)
_INBOUND_ADAPTER: TypeAdapter[_InboundStackPayload | None] = TypeAdapter(
    _InboundStackPayload | None
)


def entry_to_payload(entry: ErrorEntry) -> ErrorEntryPayload:
    """Map one entry to its wire model."""
    return ErrorEntryPayload(
        id=entry.sequence,
        code=entry.http_status_code,
        error=entry.message,
        type=entry.kind.value,
    )


def to_payload_model(stack: ErrorStack) -> ErrorStackPayload | None:
    """Map a stack to its wire model; ``None`` when the stack is empty."""
    entries = stack.entries
    if not entries:
        return None
    *parents, last = entries
    return ErrorStackPayload(
        code=last.http_status_code,
        error=last.message,
        type=last.kind.value,
        parent_errors=[entry_to_payload(item) for item in parents] or None,
    )


def to_payload(stack: ErrorStack) -> dict[str, Any] | None:
    """Return the wire structure as plain Python data."""
    model = to_payload_model(stack)
    if model is None:
        return None
    return model.model_dump(mode="json", exclude_none=True)


def marshal(stack: ErrorStack) -> bytes:
    """Serialize a stack to compact JSON; empty bytes for an empty stack."""
    model = to_payload_model(stack)
    if model is None:
        return b""
    return model.model_dump_json(exclude_none=True).encode("utf-8")


def marshal_entry(entry: ErrorEntry) -> bytes:
    """Serialize a single entry, including its ``id``."""
    return entry_to_payload(entry).model_dump_json().encode("utf-8")


def unmarshal(data: bytes | str) -> ErrorStack:
    """Rebuild a one-entry stack from its wire form.

    Unparseable input yields a default (internal) entry whose message is the
    raw input text. ``null`` values, including a top-level ``null``, read as
    zero values and do not count as unparseable.
    """
    try:
        payload = _INBOUND_ADAPTER.validate_json(data)
    except ValidationError as exc:
        _LOGGER.debug(
            "error stack payload rejected; falling back to internal kind",
            extra={fields.EVENT: "unmarshal_fallback", "reason": exc.errors()[0]["type"]},
        )
        return factories.default(_raw_text(data))

    if payload is None:
        payload = _InboundStackPayload()
    constructor = factories.CONSTRUCTORS[
        kinds.STATUS_TO_CONSTRUCTOR.get(payload.code or 0, "default")
    ]
    stack = constructor("")
    stack._replace_last_message(payload.error or "")
    return stack


def _raw_text(data: bytes | str) -> str:
    """Decode raw wire input for use as a fallback message."""
    if isinstance(data, str):
        return data
    return data.decode("utf-8", errors="replace")
