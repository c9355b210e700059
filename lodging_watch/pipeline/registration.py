"""Registration pipeline: draft -> GuestRecord (+ optional alert)."""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel

from lodging_watch.matcher import matches
from lodging_watch.models import (
    SYSTEM_BOT_ROLE,
    SYSTEM_BOT_SENDER,
    ApplicationState,
    GuestDraft,
    GuestRecord,
    LogMessage,
    Session,
)
from lodging_watch.storage import Storage

logger = logging.getLogger(__name__)

FALLBACK_ORIGIN_NAME = "Local Node"
FALLBACK_ORIGIN_ADDRESS = "Benishangul Region"

Outcome = Literal["alert", "success"]


class RegistrationResult(BaseModel):
    guest: GuestRecord
    alert: LogMessage | None

    @property
    def outcome(self) -> Outcome:
        return "alert" if self.alert is not None else "success"


def resolve_origin(session: Session | None) -> tuple[str, str]:
    """Return (name, address) of the registering node."""
    profile = session.hotel_profile if session else None
    name = profile.name if profile and profile.name else FALLBACK_ORIGIN_NAME
    address = profile.address if profile and profile.address else FALLBACK_ORIGIN_ADDRESS
    return name, address


def alert_text(guest: GuestRecord, origin_address: str) -> str:
    return (
        f"🚩 WATCHLIST MATCH: [{guest.full_name}] registered at "
        f"[{guest.origin_name}]. Bed number: {guest.bed_number}. "
        f"Address: {origin_address}."
    )


def register(
    state: ApplicationState,
    draft: GuestDraft,
    storage: Storage | None = None,
) -> RegistrationResult:
    """Register one guest against ``state`` and return what was recorded.

    The guest is always prepended to ``state.guests``. When the name is on
    the watchlist exactly one alert is prepended to ``state.messages``.
    Both land in the state before it is persisted, so a reader never sees
    one without the other.
    """
    origin_name, origin_address = resolve_origin(state.session)

    guest = GuestRecord(
        origin_id=origin_name,
        origin_name=origin_name,
        **draft.model_dump(),
    )

    alert: LogMessage | None = None
    hit = matches(guest.full_name, state.watchlist)
    if hit is not None:
        alert = LogMessage(
            sender=SYSTEM_BOT_SENDER,
            sender_role=SYSTEM_BOT_ROLE,
            text=alert_text(guest, origin_address),
        )
        logger.warning(
            "watchlist match guest=%s entry=%s origin=%s",
            guest.id, hit.id, origin_name,
        )
        state.messages.insert(0, alert)
    else:
        logger.info("guest registered guest=%s origin=%s", guest.id, origin_name)

    state.guests.insert(0, guest)

    if storage is not None:
        storage.save(state)

    return RegistrationResult(guest=guest, alert=alert)
