"""Login, logout and hotel profile endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from lodging_watch.console import Console
from lodging_watch.session import AuthenticationError, IncompleteProfileError

from .models import LoginBody, ProfileBody, get_console

router = APIRouter()


def _session_payload(console: Console) -> dict:
    session = console.session
    return {
        "status": console.status,
        "view": console.view,
        "session": session.model_dump() if session else None,
    }


@router.get("/session")
async def get_session(console: Console = Depends(get_console)):
    """Current session, gate status and which top-level view to show."""
    return _session_payload(console)


@router.post("/session/login")
async def login(body: LoginBody, console: Console = Depends(get_console)):
    """Check credentials and open a session."""
    try:
        console.login(body.username, body.password)
    except AuthenticationError as e:
        raise HTTPException(401, str(e))
    return _session_payload(console)


@router.post("/session/logout")
async def logout(console: Console = Depends(get_console)):
    """Close the session. Guests, watchlist and messages are kept."""
    console.logout()
    return _session_payload(console)


@router.post("/session/profile")
async def submit_profile(body: ProfileBody, console: Console = Depends(get_console)):
    """Complete (or edit) the hotel profile of a reception session."""
    fields = body.model_dump()
    try:
        if console.status == "ready":
            console.update_profile(fields)
        else:
            console.submit_profile(fields)
    except IncompleteProfileError as e:
        raise HTTPException(422, {"message": str(e), "missing": e.missing})
    except PermissionError as e:
        raise HTTPException(403, str(e))
    return _session_payload(console)
