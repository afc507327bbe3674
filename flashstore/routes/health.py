"""Infra endpoints: health."""

from fastapi import APIRouter

from flashstore.config import get_settings

router = APIRouter()


@router.get("/health", tags=["Infra"])
def health() -> dict[str, str]:
    """Return service health and the running environment."""
    return {"status": "ok", "env": get_settings().env}
