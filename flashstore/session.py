"""Session collaborator: the key-value store flash data is written to."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Protocol

from starlette.requests import HTTPConnection

from flashstore.errors import SessionUnavailableError


class Session(Protocol):
    """Per-client key-value store, initialised outside the flash store."""

    def get(self, key: str) -> Any | None:
        """Return the value stored under ``key``, or None when absent."""
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def unset(self, key: str) -> None:
        """Remove ``key``; absent keys are ignored."""
        ...


class MappingSession:
    """
    Adapt a mutable mapping to the Session protocol.

    Wraps Starlette's ``request.session`` dict in the web app, or a plain
    in-memory dict when no session backend is involved (tests, scripts).
    """

    def __init__(self, data: MutableMapping[str, Any] | None = None) -> None:
        self._data: MutableMapping[str, Any] = {} if data is None else data

    @classmethod
    def from_request(cls, conn: HTTPConnection) -> MappingSession:
        """Bind to the session SessionMiddleware attached to this request."""
        if "session" not in conn.scope:
            raise SessionUnavailableError("SessionMiddleware must be installed to use flash data")
        return cls(conn.session)

    def get(self, key: str) -> Any | None:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def unset(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._data)!r})"
