"""Core domain models.

Every component (store, matcher, pipeline, log, session gate) operates on
these types. Pydantic is used for validation and serialisation at the
storage and HTTP boundaries.

The whole console lives in one ``ApplicationState`` aggregate. Its three
collections are kept newest-first: new items are inserted at index 0 and
nothing reorders them on read.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field

Language = Literal["am", "en"]
Role = Literal["reception", "police"]
Purpose = Literal[
    "visit",
    "business",
    "health",
    "personal",
    "governmentWork",
    "others",
]
GuestStatus = Literal["sent", "received"]

PURPOSES: tuple[str, ...] = (
    "visit",
    "business",
    "health",
    "personal",
    "governmentWork",
    "others",
)

# Sender of automated watchlist alerts. Reports and views use it to tell
# alerts apart from operator chat, so it must never change.
SYSTEM_BOT_SENDER = "SEC-AUTO-BOT"
SYSTEM_BOT_ROLE: Role = "police"


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HotelProfile(BaseModel):
    """Identity of the registering establishment (a "node")."""

    name: str
    address: str
    receptionist_name: str
    phone: str


class Session(BaseModel):
    username: str
    role: Role
    hotel_profile: HotelProfile | None = None


class GuestDraft(BaseModel):
    """Guest fields as typed at the front desk; nothing is required here."""

    full_name: str = ""
    nationality: str = ""
    origin_location: str = ""
    purpose: Purpose = "visit"
    bed_number: str = ""
    id_photo: str = ""  # data URI
    permit_photo: str | None = None  # data URI


class GuestRecord(BaseModel):
    """A registered guest. Only ``status`` may change after creation."""

    id: str = Field(default_factory=new_id)
    origin_id: str
    origin_name: str
    full_name: str
    nationality: str = ""
    origin_location: str = ""
    purpose: Purpose = "visit"
    bed_number: str = ""
    id_photo: str = ""
    permit_photo: str | None = None
    timestamp: datetime = Field(default_factory=utcnow)
    status: GuestStatus = "sent"


class WatchlistEntry(BaseModel):
    """A name the authority wants flagged. Append-only."""

    id: str = Field(default_factory=new_id)
    full_name: str
    description: str = ""
    added_by: str = ""
    timestamp: datetime = Field(default_factory=utcnow)
    photo: str | None = None


class LogMessage(BaseModel):
    """A single entry in the shared communication log."""

    id: str = Field(default_factory=new_id)
    sender: str
    sender_role: Role
    text: str
    timestamp: datetime = Field(default_factory=utcnow)


class ApplicationState(BaseModel):
    """Root aggregate, persisted as one JSON document."""

    language: Language = "am"
    session: Session | None = None
    guests: list[GuestRecord] = Field(default_factory=list)
    watchlist: list[WatchlistEntry] = Field(default_factory=list)
    messages: list[LogMessage] = Field(default_factory=list)
    # Reception profiles by username, kept across logout.
    profiles: dict[str, HotelProfile] = Field(default_factory=dict)


def default_state() -> ApplicationState:
    """The state a fresh install starts from: one sample watchlist entry."""
    return ApplicationState(
        language="am",
        watchlist=[
            WatchlistEntry(
                id="1",
                full_name="Sample Wanted Name",
                description="Testing matching system",
                added_by="Police Admin",
            )
        ],
    )
