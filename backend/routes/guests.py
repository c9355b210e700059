"""Guest registration and history endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from lodging_watch.console import Console
from lodging_watch.models import GuestDraft
from lodging_watch.reports import search_guests

from .models import get_console

router = APIRouter()


@router.get("/guests")
async def list_guests(q: str = "", console: Console = Depends(get_console)):
    """Registered guests, newest first, optionally filtered by name."""
    guests = console.guests
    if q:
        guests = search_guests(guests, q)
    return guests


@router.post("/guests")
async def register_guest(body: GuestDraft, console: Console = Depends(get_console)):
    """Register a guest and run the watchlist check."""
    try:
        result = console.register_guest(body)
    except PermissionError as e:
        raise HTTPException(403, str(e))
    return {
        "outcome": result.outcome,
        "guest": result.guest,
        "alert": result.alert,
    }
