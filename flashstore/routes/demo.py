"""Demo routes exercising the post/redirect/get flash flow."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse

from flashstore.config import get_settings
from flashstore.deps import get_flash
from flashstore.flash import FlashStore, MessageType

router = APIRouter()

CONTACT_REQUIRED = ("name", "email")


@router.get("/", tags=["demo"])
def index(flash: FlashStore = Depends(get_flash)) -> dict[str, Any]:
    """Show (and consume) whatever was flashed before the redirect."""
    return {"flash": flash.display()}


@router.get("/demo/flash", tags=["demo"])
def demo_flash(
    msg: str = "Operation completed",
    type: MessageType = MessageType.SUCCESS,
    flash: FlashStore = Depends(get_flash),
) -> RedirectResponse:
    """Add a one-time message and redirect to home."""
    flash.add_message(msg, type)
    return RedirectResponse("/", status_code=303)


@router.get("/demo/contact", tags=["demo"])
def contact_form(flash: FlashStore = Depends(get_flash)) -> dict[str, Any]:
    """Data a template would use to redisplay the form."""
    return {"flash": flash.display()}


@router.post("/demo/contact", tags=["demo"])
async def contact_submit(request: Request, flash: FlashStore = Depends(get_flash)) -> RedirectResponse:
    """Validate the contact form; on failure send the user back with their input."""
    form = await request.form()
    errors = {
        field: f"{field.capitalize()} is required"
        for field in CONTACT_REQUIRED
        if not str(form.get(field) or "").strip()
    }
    if errors:
        flash.set(
            messages=[{"text": "Please fix the highlighted fields", "type": FlashStore.DANGER}],
            errors=errors,
            posted_values=form,
        )
        return RedirectResponse("/demo/contact", status_code=303)

    flash.set(messages=[{"text": "Thanks, your message was sent", "type": FlashStore.SUCCESS}])
    return RedirectResponse("/", status_code=303)


@router.get("/debug/error", tags=["infra"])
def debug_error() -> None:
    """Intentionally raise an error to exercise the 500 handler in non-prod."""
    settings = get_settings()
    if settings.env == "prod":
        raise HTTPException(404, "Not found")
    raise RuntimeError("Simulated failure for testing purposes")
