"""Read-only report views over the guest list and communication log.

Nothing here mutates state. The exporter and the police dashboard build
their tables from these helpers.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from datetime import datetime, timezone

from lodging_watch.chatlog import is_alert
from lodging_watch.models import PURPOSES, GuestRecord, LogMessage

# Window name -> maximum age in days (inclusive).
RECENCY_WINDOWS: dict[str, int] = {
    "daily": 1,
    "weekly": 7,
    "monthly": 30,
    "quarterly": 90,
    "semiannual": 180,
    "nineMonth": 270,
    "yearly": 365,
}
ALL_WINDOW = "all"

CSV_HEADER = ["Full Name", "Hotel", "Bed Number", "Nationality", "Purpose", "Timestamp"]

_SECONDS_PER_DAY = 24 * 60 * 60


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with aware ones."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def age_in_days(guest: GuestRecord, now: datetime) -> float:
    return (as_utc(now) - as_utc(guest.timestamp)).total_seconds() / _SECONDS_PER_DAY


def filter_by_recency(
    guests: Iterable[GuestRecord],
    window: str,
    now: datetime | None = None,
) -> list[GuestRecord]:
    """Guests registered within ``window``, keeping their order.

    ``now`` defaults to the current wall-clock time; it is never stored.
    """
    if window == ALL_WINDOW:
        return list(guests)
    if window not in RECENCY_WINDOWS:
        raise ValueError(f"Unknown report window {window!r}")
    bound = RECENCY_WINDOWS[window]
    now = now or datetime.now(timezone.utc)
    return [g for g in guests if age_in_days(g, now) <= bound]


def search_guests(guests: Iterable[GuestRecord], query: str) -> list[GuestRecord]:
    q = query.lower()
    return [g for g in guests if q in g.full_name.lower()]


def group_by_origin(guests: Iterable[GuestRecord]) -> dict[str, list[GuestRecord]]:
    groups: dict[str, list[GuestRecord]] = {}
    for g in guests:
        groups.setdefault(g.origin_name, []).append(g)
    return groups


def group_by_date(guests: Iterable[GuestRecord]) -> dict[str, list[GuestRecord]]:
    """Group by calendar day (ISO date of the timestamp)."""
    groups: dict[str, list[GuestRecord]] = {}
    for g in guests:
        groups.setdefault(g.timestamp.date().isoformat(), []).append(g)
    return groups


def purpose_counts(guests: Iterable[GuestRecord]) -> dict[str, int]:
    counts = {p: 0 for p in PURPOSES}
    for g in guests:
        counts[g.purpose] += 1
    return counts


def alert_count(messages: Iterable[LogMessage]) -> int:
    return sum(1 for m in messages if is_alert(m))


def export_csv(guests: Iterable[GuestRecord]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for g in guests:
        writer.writerow([
            g.full_name,
            g.origin_name,
            g.bed_number,
            g.nationality,
            g.purpose,
            g.timestamp.isoformat(),
        ])
    return buf.getvalue()
