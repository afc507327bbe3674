"""Basic logging configuration."""

import logging

from flashstore.config import get_settings


def configure_logging() -> None:
    """Configure logging for the application."""
    # Uvicorn keeps its own config for access logs
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
