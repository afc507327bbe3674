"""Application middlewares (sessions)."""

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from flashstore.config import get_settings


def install_middlewares(app: FastAPI) -> None:
    """Install the session middleware flash data lives in."""
    settings = get_settings()
    app.add_middleware(
        SessionMiddleware, secret_key=settings.secret_key, max_age=settings.session_max_age
    )
