import pytest
from starlette.requests import Request

from flashstore.errors import SessionUnavailableError
from flashstore.session import MappingSession


def _request(scope_extra: dict) -> Request:
    scope = {"type": "http", "method": "GET", "path": "/", "headers": [], **scope_extra}
    return Request(scope)


def test_get_set_unset_on_backing_mapping() -> None:
    backing: dict = {}
    session = MappingSession(backing)

    assert session.get("k") is None
    session.set("k", [1, 2])
    assert backing == {"k": [1, 2]}
    assert session.get("k") == [1, 2]
    assert "k" in session

    session.unset("k")
    session.unset("k")
    assert backing == {}


def test_from_request_binds_to_request_session() -> None:
    data = {"existing": True}
    session = MappingSession.from_request(_request({"session": data}))

    session.set("added", 1)

    assert data == {"existing": True, "added": 1}


def test_from_request_without_session_middleware() -> None:
    with pytest.raises(SessionUnavailableError):
        MappingSession.from_request(_request({}))
