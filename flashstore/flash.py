"""
Session-backed one-time flash data.

Three independent slots live in the session: notification messages, form
validation errors and the previously posted form values. They are written
before a redirect and read back (and wiped) together on the next request.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, TypedDict, Union

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError, field_validator

from flashstore.config import get_settings
from flashstore.errors import InvalidMessageError, InvalidPostedValueError
from flashstore.session import Session

logger = logging.getLogger(__name__)

_SCALARS = (str, int, float, Decimal)
# ASCII whitespace and NUL only; NBSP and other Unicode spaces are content
_TRIMMED = " \t\n\r\0\x0b"


class MessageType(str, Enum):
    SUCCESS = "success"
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"


class Message(TypedDict):
    text: str
    type: str  # success|danger|warning|info


class FlashData(TypedDict):
    messages: list[Message]
    errors: Any
    values: dict[str, str]


class FlashMessage(BaseModel):
    """A message item as accepted by FlashStore.set()."""

    model_config = ConfigDict(frozen=True)

    text: StrictStr
    type: MessageType = MessageType.INFO

    @field_validator("type", mode="before")
    @classmethod
    def _default_type(cls, value: Any) -> Any:
        return MessageType.INFO if value is None else value

    def as_session_item(self) -> Message:
        return {"text": self.text, "type": self.type.value}


MessageInput = Union[FlashMessage, Mapping[str, Any]]


def sanitize_value(field: str, value: Any) -> str:
    """Trim then HTML-escape a single posted value."""
    if value is None:
        return ""
    if not isinstance(value, _SCALARS):
        raise InvalidPostedValueError(field, value)
    return html.escape(str(value).strip(_TRIMMED), quote=True)


def sanitize_posted_values(values: Mapping[Any, Any]) -> dict[str, str]:
    """
    Make posted form values safe to redisplay.

    Strings are stripped and have ``& < > " '`` escaped. Numbers are
    stringified first and None becomes an empty string. Containers and
    uploads are rejected with InvalidPostedValueError.
    """
    return {str(key): sanitize_value(str(key), value) for key, value in values.items()}


def _validate_messages(messages: Iterable[MessageInput]) -> list[Message]:
    if isinstance(messages, (str, bytes, Mapping)) or not isinstance(messages, Iterable):
        raise InvalidMessageError("messages must be a sequence of message items")

    items: list[Message] = []
    for index, item in enumerate(messages):
        if isinstance(item, FlashMessage):
            items.append(item.as_session_item())
            continue
        if not isinstance(item, Mapping):
            raise InvalidMessageError(
                f"Message #{index} must be a mapping with a 'text' key, got {type(item).__name__}"
            )
        try:
            items.append(FlashMessage.model_validate(dict(item)).as_session_item())
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            raise InvalidMessageError(f"Message #{index} {location}: {first['msg']}") from exc
    return items


class FlashStore:
    """Write flash data before a redirect, read and clear it after."""

    SUCCESS = MessageType.SUCCESS
    DANGER = MessageType.DANGER
    WARNING = MessageType.WARNING
    INFO = MessageType.INFO

    def __init__(self, session: Session, *, key_prefix: str | None = None) -> None:
        prefix = get_settings().flash_key_prefix if key_prefix is None else key_prefix
        self.session = session
        self.messages_key = f"{prefix}messages"
        self.errors_key = f"{prefix}errors"
        self.values_key = f"{prefix}values"

    def set(
        self,
        messages: Iterable[MessageInput] | None = None,
        errors: Any = None,
        posted_values: Mapping[Any, Any] | None = None,
    ) -> None:
        """
        Store flash data for the next request.

        Any argument left as None keeps its slot untouched. Messages are
        appended to those already pending, errors and posted values replace
        the previous slot content. All input is validated before any slot
        is written, so a rejected call leaves the session unchanged.
        """
        new_items: list[Message] | None = None
        sanitized: dict[str, str] | None = None
        try:
            if messages is not None:
                new_items = _validate_messages(messages)
            if posted_values is not None:
                sanitized = sanitize_posted_values(posted_values)
        except (InvalidMessageError, InvalidPostedValueError) as exc:
            logger.warning("Rejected flash data: %s", exc)
            raise

        if new_items is not None:
            pending = list(self.session.get(self.messages_key) or [])
            pending.extend(new_items)
            self.session.set(self.messages_key, pending)
            logger.debug("Queued %d flash message(s), %d pending", len(new_items), len(pending))

        if errors is not None:
            self.session.set(self.errors_key, errors)
            logger.debug("Stored flash errors")

        if sanitized is not None:
            self.session.set(self.values_key, sanitized)
            logger.debug("Stored %d posted value(s)", len(sanitized))

    def add_message(self, text: str, type: MessageType | str = MessageType.INFO) -> None:
        """Queue a single message."""
        self.set(messages=[{"text": text, "type": type}])

    def has_pending(self) -> bool:
        """Whether any slot holds data, without clearing it."""
        keys = (self.messages_key, self.errors_key, self.values_key)
        return any(self.session.get(key) is not None for key in keys)

    def display(self) -> FlashData:
        """Return all pending flash data and remove it from the session."""
        data: FlashData = {
            "messages": self._get(self.messages_key, []),
            "errors": self._get(self.errors_key, []),
            "values": self._get(self.values_key, {}),
        }
        self.clear()
        return data

    def clear(self) -> None:
        """Drop all three slots, present or not."""
        self.session.unset(self.messages_key)
        self.session.unset(self.errors_key)
        self.session.unset(self.values_key)
        logger.debug("Cleared flash data")

    def _get(self, key: str, default: Any) -> Any:
        value = self.session.get(key)
        return default if value is None else value
