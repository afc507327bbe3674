"""Demo application entrypoint and composition."""

from fastapi import FastAPI

from flashstore.config import get_settings
from flashstore.errors import register_exception_handlers
from flashstore.logging import configure_logging
from flashstore.middleware import install_middlewares
from flashstore.routes import demo, health

configure_logging()


def create_app(*, force_debug: bool | None = None, sessions: bool = True) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    force_debug:
        - None: use settings.debug.
        - True/False: override it (False lets tests hit the 500 handler).
    sessions:
        - False: skip SessionMiddleware (exercises the missing-session path).
    """
    # Settings may be monkeypatched between app creations in tests
    get_settings.cache_clear()
    settings = get_settings()

    debug = settings.debug if force_debug is None else bool(force_debug)
    app = FastAPI(title=settings.app_name, debug=debug)

    if sessions:
        install_middlewares(app)

    app.include_router(health.router)
    app.include_router(demo.router)

    register_exception_handlers(app)

    return app


app = create_app()
