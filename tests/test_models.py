"""Tests for lodging_watch.models."""

import pytest
from pydantic import ValidationError

from lodging_watch.models import (
    ApplicationState,
    GuestDraft,
    GuestRecord,
    LogMessage,
    WatchlistEntry,
    default_state,
)


class TestGuestRecord:
    def test_defaults(self) -> None:
        g = GuestRecord(origin_id="Node A", origin_name="Node A", full_name="Jane")
        assert g.status == "sent"
        assert g.purpose == "visit"
        assert g.permit_photo is None
        assert g.timestamp.tzinfo is not None

    def test_ids_are_unique(self) -> None:
        ids = {
            GuestRecord(origin_id="n", origin_name="n", full_name="x").id
            for _ in range(2000)
        }
        assert len(ids) == 2000

    def test_invalid_purpose_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GuestRecord(origin_id="n", origin_name="n", full_name="x", purpose="tourism")

    def test_received_status_accepted(self) -> None:
        g = GuestRecord(origin_id="n", origin_name="n", full_name="x", status="received")
        assert g.status == "received"


class TestGuestDraft:
    def test_everything_optional(self) -> None:
        d = GuestDraft()
        assert d.full_name == ""
        assert d.purpose == "visit"

    def test_all_purposes_accepted(self) -> None:
        for p in ["visit", "business", "health", "personal", "governmentWork", "others"]:
            assert GuestDraft(purpose=p).purpose == p


class TestLogMessage:
    def test_invalid_role_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LogMessage(sender="x", sender_role="admin", text="hi")


class TestDefaultState:
    def test_seeded_watchlist(self) -> None:
        state = default_state()
        assert state.language == "am"
        assert state.session is None
        assert state.guests == []
        assert state.messages == []
        assert [w.full_name for w in state.watchlist] == ["Sample Wanted Name"]
        assert state.watchlist[0].added_by == "Police Admin"

    def test_json_roundtrip(self) -> None:
        state = default_state()
        state.guests.append(GuestRecord(origin_id="n", origin_name="n", full_name="x"))
        restored = ApplicationState.model_validate_json(state.model_dump_json())
        assert restored == state

    def test_watchlist_photo_optional(self) -> None:
        assert WatchlistEntry(full_name="x").photo is None
