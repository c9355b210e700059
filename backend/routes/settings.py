"""Health check and display language endpoints."""

from fastapi import APIRouter, Depends

from lodging_watch.console import Console

from .models import LanguageBody, get_console

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.post("/language")
async def set_language(body: LanguageBody, console: Console = Depends(get_console)):
    """Set the display language, or toggle it when none is given."""
    if body.language is None:
        console.toggle_language()
    else:
        console.set_language(body.language)
    return {"language": console.state.language}
