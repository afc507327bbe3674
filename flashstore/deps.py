"""FastAPI dependencies."""

from fastapi import Request

from flashstore.flash import FlashStore
from flashstore.session import MappingSession


def get_flash(request: Request) -> FlashStore:
    """Flash store bound to the current request's session."""
    return FlashStore(MappingSession.from_request(request))
