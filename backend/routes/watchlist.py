"""Watchlist endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from lodging_watch.console import Console

from .models import CreateWatchlistEntry, get_console

router = APIRouter()


@router.get("/watchlist")
async def list_watchlist(console: Console = Depends(get_console)):
    """Watchlist entries, newest first."""
    return console.watchlist


@router.post("/watchlist")
async def add_watchlist_entry(body: CreateWatchlistEntry, console: Console = Depends(get_console)):
    """Add a wanted person (police only)."""
    try:
        return console.add_watchlist_entry(
            body.full_name, body.description, photo=body.photo,
        )
    except PermissionError as e:
        raise HTTPException(403, str(e))
    except ValueError as e:
        raise HTTPException(400, str(e))
