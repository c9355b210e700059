"""Tests for demo data creation."""

from backend.demo import DEMO_GUESTS, create_demo_data
from lodging_watch.reports import alert_count, filter_by_recency


def test_demo_data(storage):
    create_demo_data(storage)
    state = storage.load()
    assert state.session is None
    assert len(state.guests) == len(DEMO_GUESTS)
    assert state.guests[0].full_name == "abebe kebede"
    assert alert_count(state.messages) == 1
    assert len(filter_by_recency(state.guests, "weekly")) == 2


def test_demo_replaces_existing_state(storage):
    create_demo_data(storage)
    create_demo_data(storage)
    assert len(storage.load().guests) == len(DEMO_GUESTS)
