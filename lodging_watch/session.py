"""Session and role gate.

States a console instance moves through:

    unauthenticated --login(reception, no profile)--> incomplete_profile
    unauthenticated --login(police | reception with profile)--> ready
    incomplete_profile --submit_profile(all fields)--> ready
    ready --logout--> unauthenticated

Credential checking is a stub: two fixed identity/secret pairs, one per
role, supplied through configuration. It is not an authentication system.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel

from lodging_watch.models import ApplicationState, HotelProfile, Role, Session

logger = logging.getLogger(__name__)

GateStatus = Literal["unauthenticated", "incomplete_profile", "ready"]

PROFILE_FIELDS: tuple[str, ...] = ("name", "address", "receptionist_name", "phone")


class Credentials(BaseModel):
    """The two fixed accounts, one per role."""

    reception_username: str = "reception"
    reception_password: str = "1234"
    police_username: str = "police"
    police_password: str = "police@1234"


def authenticate(identity: str, secret: str, credentials: Credentials) -> Role | None:
    if identity == credentials.reception_username and secret == credentials.reception_password:
        return "reception"
    if identity == credentials.police_username and secret == credentials.police_password:
        return "police"
    return None


def missing_profile_fields(fields: dict[str, str]) -> list[str]:
    return [name for name in PROFILE_FIELDS if not (fields.get(name) or "").strip()]


def gate_status(session: Session | None) -> GateStatus:
    if session is None:
        return "unauthenticated"
    if session.role == "reception" and session.hotel_profile is None:
        return "incomplete_profile"
    return "ready"


class SessionGate:
    """Drives ``state.session`` through the login/profile/logout transitions."""

    def __init__(self, state: ApplicationState, credentials: Credentials | None = None) -> None:
        self._state = state
        self._credentials = credentials or Credentials()

    @property
    def status(self) -> GateStatus:
        return gate_status(self._state.session)

    def login(self, identity: str, secret: str) -> GateStatus:
        role = authenticate(identity, secret, self._credentials)
        if role is None:
            logger.warning("login failed identity=%r", identity)
            raise AuthenticationError("Invalid username or password")

        profile = self._state.profiles.get(identity) if role == "reception" else None
        self._state.session = Session(username=identity, role=role, hotel_profile=profile)
        logger.info("login username=%s role=%s status=%s", identity, role, self.status)
        return self.status

    def submit_profile(self, fields: dict[str, str]) -> GateStatus:
        """Complete the hotel profile of a reception session."""
        session = self._require_reception()
        missing = missing_profile_fields(fields)
        if missing:
            raise IncompleteProfileError(missing)
        profile = HotelProfile(**{name: fields[name] for name in PROFILE_FIELDS})
        session.hotel_profile = profile
        self._state.profiles[session.username] = profile
        logger.info("profile saved username=%s node=%s", session.username, profile.name)
        return self.status

    def update_profile(self, fields: dict[str, str]) -> GateStatus:
        """Edit the profile from the settings screen; same rules as setup."""
        if self.status != "ready":
            raise PermissionError("Profile can only be edited from a ready session")
        return self.submit_profile(fields)

    def logout(self) -> None:
        if self._state.session is not None:
            logger.info("logout username=%s", self._state.session.username)
        self._state.session = None

    def _require_reception(self) -> Session:
        session = self._state.session
        if session is None or session.role != "reception":
            raise PermissionError("A reception session is required")
        return session


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class AuthenticationError(RuntimeError):
    """Raised when an identity/secret pair matches neither account."""


class IncompleteProfileError(ValueError):
    """Raised when a profile submission leaves a required field blank."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing profile fields: {', '.join(missing)}")
