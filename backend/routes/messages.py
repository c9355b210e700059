"""Communication log endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from lodging_watch.console import Console

from .models import MessageBody, get_console

router = APIRouter()


@router.get("/messages")
async def list_messages(console: Console = Depends(get_console)):
    """All log messages, newest first (alerts and chat)."""
    return console.messages


@router.post("/messages")
async def post_message(body: MessageBody, console: Console = Depends(get_console)):
    """Post an operator message as the current session."""
    try:
        return console.post_message(body.text)
    except PermissionError as e:
        raise HTTPException(403, str(e))
    except ValueError as e:
        raise HTTPException(400, str(e))
