"""Create demo guests, watchlist entries and messages for development."""

from datetime import timedelta

from lodging_watch.models import (
    GuestDraft,
    HotelProfile,
    LogMessage,
    Session,
    WatchlistEntry,
    default_state,
    utcnow,
)
from lodging_watch.pipeline import register
from lodging_watch.storage import Storage

DEMO_PROFILE = HotelProfile(
    name="Asosa Green Hotel",
    address="Asosa, Benishangul-Gumuz",
    receptionist_name="Front Desk",
    phone="+251 57 775 0000",
)

DEMO_WATCHLIST = [
    {"full_name": "Abebe Kebede", "description": "Wanted for questioning"},
    {"full_name": "John Roe", "description": "Outstanding warrant"},
]

# (days ago, draft fields)
DEMO_GUESTS = [
    (200, {"full_name": "Sara Tesfaye", "nationality": "Ethiopian",
           "origin_location": "Addis Ababa", "purpose": "business", "bed_number": "4"}),
    (40, {"full_name": "Daniel Haile", "nationality": "Ethiopian",
          "origin_location": "Bahir Dar", "purpose": "visit", "bed_number": "7"}),
    (5, {"full_name": "Grace Ochieng", "nationality": "Kenyan",
         "origin_location": "Nairobi", "purpose": "governmentWork", "bed_number": "2"}),
    (0, {"full_name": "abebe kebede", "nationality": "Ethiopian",
         "origin_location": "Gambela", "purpose": "personal", "bed_number": "12"}),
]


def create_demo_data(storage: Storage) -> None:
    """Wipe the stored state and write a fresh demo state."""
    storage.clear()
    state = default_state()

    for item in DEMO_WATCHLIST:
        state.watchlist.insert(0, WatchlistEntry(added_by="HQ", **item))

    state.profiles["reception"] = DEMO_PROFILE
    state.session = Session(username="reception", role="reception", hotel_profile=DEMO_PROFILE)
    for days_ago, fields in DEMO_GUESTS:
        result = register(state, GuestDraft(**fields))
        # Backdate so the report windows have something to show
        result.guest.timestamp = utcnow() - timedelta(days=days_ago)
    state.session = None

    state.messages.insert(0, LogMessage(
        sender=DEMO_PROFILE.name,
        sender_role="reception",
        text="Front desk online.",
    ))
    storage.save(state)
