"""Exact-match watchlist lookup.

A guest matches a watchlist entry when both full names are equal after
trimming surrounding whitespace and folding case. No partial, token or
transliteration matching is done.
"""

from __future__ import annotations

from collections.abc import Iterable

from lodging_watch.models import WatchlistEntry


def normalize_name(name: str) -> str:
    return name.strip().casefold()


def matches(name: str, watchlist: Iterable[WatchlistEntry]) -> WatchlistEntry | None:
    """Return the first entry whose name equals ``name``, or None.

    The watchlist is newest-first, so with duplicate names the most
    recently added entry wins.
    """
    wanted = normalize_name(name)
    for entry in watchlist:
        if normalize_name(entry.full_name) == wanted:
            return entry
    return None
