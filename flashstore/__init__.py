"""Session-backed flash messages, form errors and posted values."""

from flashstore.errors import (
    FlashError,
    InvalidMessageError,
    InvalidPostedValueError,
    SessionUnavailableError,
)
from flashstore.flash import (
    FlashData,
    FlashMessage,
    FlashStore,
    Message,
    MessageType,
    sanitize_posted_values,
)
from flashstore.session import MappingSession, Session

__all__ = [
    "FlashData",
    "FlashError",
    "FlashMessage",
    "FlashStore",
    "InvalidMessageError",
    "InvalidPostedValueError",
    "MappingSession",
    "Message",
    "MessageType",
    "Session",
    "SessionUnavailableError",
    "sanitize_posted_values",
]
