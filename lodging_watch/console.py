"""Console controller: the single owner of the application state.

Every user action goes through one method here. Each method mutates the
owned ``ApplicationState``, writes it through to storage, then notifies
subscribers. Nothing is batched: two actions mean two writes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Literal

from lodging_watch.chatlog import DEFAULT_AGENCY_NAME, CommunicationLog
from lodging_watch.models import (
    ApplicationState,
    GuestDraft,
    GuestRecord,
    Language,
    LogMessage,
    Session,
    WatchlistEntry,
)
from lodging_watch.pipeline import RegistrationResult, register
from lodging_watch.session import Credentials, GateStatus, SessionGate
from lodging_watch.storage import Storage

logger = logging.getLogger(__name__)

View = Literal["login", "setup", "dashboard"]
Listener = Callable[[ApplicationState], Any]

_VIEWS: dict[GateStatus, View] = {
    "unauthenticated": "login",
    "incomplete_profile": "setup",
    "ready": "dashboard",
}


class Console:
    def __init__(
        self,
        storage: Storage,
        credentials: Credentials | None = None,
        agency_name: str = DEFAULT_AGENCY_NAME,
    ) -> None:
        self._storage = storage
        self._state = storage.load()
        self._gate = SessionGate(self._state, credentials)
        self._log = CommunicationLog(self._state, agency_name)
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Read views
    # ------------------------------------------------------------------

    @property
    def state(self) -> ApplicationState:
        return self._state

    @property
    def session(self) -> Session | None:
        return self._state.session

    @property
    def status(self) -> GateStatus:
        return self._gate.status

    @property
    def view(self) -> View:
        return _VIEWS[self._gate.status]

    @property
    def guests(self) -> list[GuestRecord]:
        return list(self._state.guests)

    @property
    def watchlist(self) -> list[WatchlistEntry]:
        return list(self._state.watchlist)

    @property
    def messages(self) -> list[LogMessage]:
        return self._log.list()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(state)`` after every change. Returns an unsubscribe."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def login(self, identity: str, secret: str) -> GateStatus:
        status = self._gate.login(identity, secret)
        self._commit()
        return status

    def logout(self) -> None:
        self._gate.logout()
        self._commit()

    def submit_profile(self, fields: dict[str, str]) -> GateStatus:
        status = self._gate.submit_profile(fields)
        self._commit()
        return status

    def update_profile(self, fields: dict[str, str]) -> GateStatus:
        status = self._gate.update_profile(fields)
        self._commit()
        return status

    # ------------------------------------------------------------------
    # Guests, watchlist, chat
    # ------------------------------------------------------------------

    def register_guest(self, draft: GuestDraft) -> RegistrationResult:
        session = self._state.session
        if session is None or session.role != "reception" or self.status != "ready":
            raise PermissionError("Guest registration needs a ready reception session")
        result = register(self._state, draft, self._storage)
        self._notify()
        return result

    def add_watchlist_entry(
        self,
        full_name: str,
        description: str = "",
        photo: str | None = None,
        added_by: str = "HQ",
    ) -> WatchlistEntry:
        session = self._state.session
        if session is None or session.role != "police":
            raise PermissionError("Only police sessions may edit the watchlist")
        if not full_name.strip():
            raise ValueError("Watchlist entry needs a full name")
        entry = WatchlistEntry(
            full_name=full_name,
            description=description,
            photo=photo,
            added_by=added_by,
        )
        self._state.watchlist.insert(0, entry)
        logger.info("watchlist entry added id=%s by=%s", entry.id, added_by)
        self._commit()
        return entry

    def post_message(self, text: str) -> LogMessage:
        session = self._state.session
        if session is None:
            raise PermissionError("Log in to post messages")
        message = self._log.post(text, session)
        self._commit()
        return message

    # ------------------------------------------------------------------
    # Preferences
    # ------------------------------------------------------------------

    def set_language(self, language: Language) -> None:
        self._state.language = language
        self._commit()

    def toggle_language(self) -> Language:
        self.set_language("en" if self._state.language == "am" else "am")
        return self._state.language

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _commit(self) -> None:
        self._storage.save(self._state)
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)
