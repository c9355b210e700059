"""Pydantic request models and shared helpers for API endpoints."""

from fastapi import Request
from pydantic import BaseModel

from lodging_watch.console import Console
from lodging_watch.models import Language


def get_console(request: Request) -> Console:
    return request.app.state.console


class LoginBody(BaseModel):
    username: str
    password: str


class ProfileBody(BaseModel):
    name: str = ""
    address: str = ""
    receptionist_name: str = ""
    phone: str = ""


class CreateWatchlistEntry(BaseModel):
    full_name: str
    description: str = ""
    photo: str | None = None


class MessageBody(BaseModel):
    text: str


class LanguageBody(BaseModel):
    language: Language | None = None
