"""Tests for the registration pipeline."""

from lodging_watch.models import (
    SYSTEM_BOT_SENDER,
    GuestDraft,
    HotelProfile,
    Session,
    WatchlistEntry,
    default_state,
)
from lodging_watch.pipeline import (
    FALLBACK_ORIGIN_ADDRESS,
    FALLBACK_ORIGIN_NAME,
    register,
    resolve_origin,
)

NODE_A = HotelProfile(
    name="Node A", address="Region X", receptionist_name="Hanna", phone="0911",
)


def _state(profile: HotelProfile | None = NODE_A):
    state = default_state()
    state.session = Session(username="reception", role="reception", hotel_profile=profile)
    return state


# ── Origin resolution ───────────────────────────────────────


def test_origin_from_profile():
    assert resolve_origin(_state().session) == ("Node A", "Region X")


def test_origin_placeholders_without_profile():
    assert resolve_origin(_state(profile=None).session) == (
        FALLBACK_ORIGIN_NAME, FALLBACK_ORIGIN_ADDRESS,
    )


def test_origin_placeholders_without_session():
    assert resolve_origin(None) == (FALLBACK_ORIGIN_NAME, FALLBACK_ORIGIN_ADDRESS)


# ── No match ────────────────────────────────────────────────


def test_no_match_records_guest_only():
    state = _state()
    result = register(state, GuestDraft(full_name="Jane Doe", bed_number="3"))
    assert result.outcome == "success"
    assert result.alert is None
    assert state.guests == [result.guest]
    assert state.messages == []


def test_guest_fields_are_assigned():
    state = _state()
    draft = GuestDraft(
        full_name="Jane Doe", nationality="Kenyan", origin_location="Nairobi",
        purpose="health", bed_number="3", id_photo="data:image/png;base64,AA",
    )
    guest = register(state, draft).guest
    assert guest.origin_id == "Node A"
    assert guest.origin_name == "Node A"
    assert guest.status == "sent"
    assert guest.purpose == "health"
    assert guest.id_photo == "data:image/png;base64,AA"
    assert guest.permit_photo is None
    assert guest.id


def test_empty_draft_is_accepted():
    state = _state()
    result = register(state, GuestDraft())
    assert result.guest.full_name == ""
    assert len(state.guests) == 1


# ── Match ───────────────────────────────────────────────────


def test_match_records_guest_and_one_alert():
    state = _state()
    result = register(state, GuestDraft(full_name="sample wanted name", bed_number="12"))
    assert result.outcome == "alert"
    assert state.guests == [result.guest]
    assert state.messages == [result.alert]
    assert result.alert.sender == SYSTEM_BOT_SENDER
    assert result.alert.sender_role == "police"


def test_alert_text_embeds_guest_and_node():
    state = _state()
    alert = register(state, GuestDraft(full_name="sample wanted name", bed_number="12")).alert
    assert "sample wanted name" in alert.text
    assert "Node A" in alert.text
    assert "12" in alert.text
    assert "Region X" in alert.text


def test_alert_uses_placeholders_without_profile():
    state = _state(profile=None)
    alert = register(state, GuestDraft(full_name="Sample Wanted Name")).alert
    assert FALLBACK_ORIGIN_NAME in alert.text
    assert FALLBACK_ORIGIN_ADDRESS in alert.text


def test_duplicate_watchlist_names_still_one_alert():
    state = _state()
    state.watchlist.insert(0, WatchlistEntry(full_name="Sample Wanted Name"))
    register(state, GuestDraft(full_name="Sample Wanted Name"))
    assert len(state.messages) == 1


def test_alert_ids_are_distinct_per_registration():
    state = _state()
    a = register(state, GuestDraft(full_name="Sample Wanted Name")).alert
    b = register(state, GuestDraft(full_name="Sample Wanted Name")).alert
    assert a.id != b.id
    assert state.messages == [b, a]


# ── Ordering and persistence ────────────────────────────────


def test_newest_guest_first():
    state = _state()
    first = register(state, GuestDraft(full_name="First")).guest
    second = register(state, GuestDraft(full_name="Second")).guest
    assert state.guests == [second, first]


def test_persists_before_returning(storage):
    state = _state()
    result = register(state, GuestDraft(full_name="Sample Wanted Name"), storage)
    stored = storage.load()
    assert stored.guests[0].id == result.guest.id
    assert stored.messages[0].id == result.alert.id


def test_without_storage_nothing_is_written(storage):
    register(_state(), GuestDraft(full_name="Jane"))
    assert not storage.exists()
