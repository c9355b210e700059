"""Communication log shared by reception and police.

An append-only, newest-first list of messages. Automated watchlist alerts
from the registration pipeline and operator chat go through the same
``append`` so they share one ordering rule.
"""

from __future__ import annotations

from lodging_watch.models import (
    SYSTEM_BOT_SENDER,
    ApplicationState,
    LogMessage,
    Session,
)

DEFAULT_AGENCY_NAME = "Regional Police Commission"
FALLBACK_NODE_SENDER = "Authorized Node"


def is_alert(message: LogMessage) -> bool:
    return message.sender == SYSTEM_BOT_SENDER


class CommunicationLog:
    """View over ``state.messages`` with the log's append contract."""

    def __init__(self, state: ApplicationState, agency_name: str = DEFAULT_AGENCY_NAME) -> None:
        self._state = state
        self._agency_name = agency_name

    def append(self, message: LogMessage) -> None:
        self._state.messages.insert(0, message)

    def list(self) -> list[LogMessage]:
        return list(self._state.messages)

    def alerts(self) -> list[LogMessage]:
        return [m for m in self._state.messages if is_alert(m)]

    def sender_for(self, session: Session) -> str:
        """Display name for an operator: their hotel, or the agency."""
        if session.role == "reception":
            profile = session.hotel_profile
            return profile.name if profile and profile.name else FALLBACK_NODE_SENDER
        return self._agency_name

    def post(self, text: str, session: Session) -> LogMessage:
        """Append an operator-authored message. Blank text is rejected."""
        if not text.strip():
            raise ValueError("Message text must not be empty")
        message = LogMessage(
            sender=self.sender_for(session),
            sender_role=session.role,
            text=text,
        )
        self.append(message)
        return message
