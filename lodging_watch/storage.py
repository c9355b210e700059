"""JSON file storage for the console state.

The whole ``ApplicationState`` is one JSON document stored under a fixed
key. The store is a plain directory acting as a local key-value store:

    {base}/
      {key}.json    <- the serialised ApplicationState

There is no schema version and no migration: ``load()`` validates the
stored document against the current models and fails loudly if it does
not fit. ``save()`` rewrites the whole document on every call.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import ValidationError

from lodging_watch.models import ApplicationState, default_state

logger = logging.getLogger(__name__)

STORAGE_KEY = "begu_engeda_final_reports_v1"


class Storage:
    def __init__(self, base_path: Path, key: str = STORAGE_KEY) -> None:
        self._base = base_path
        self._key = key
        self._base.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._base / f"{self._key}.json"

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> ApplicationState:
        """Return the stored state, or the seeded default if nothing is stored."""
        if not self.exists():
            logger.debug("no stored state at %s, using defaults", self.path)
            return default_state()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise StateCorruptError(f"Stored state at {self.path} is not UTF-8") from e
        except OSError as e:
            raise StorageUnavailableError(f"Cannot read {self.path}: {e}") from e
        try:
            state = ApplicationState.model_validate_json(raw)
        except ValidationError as e:
            raise StateCorruptError(f"Stored state at {self.path} is invalid") from e
        logger.debug(
            "loaded state guests=%d watchlist=%d messages=%d",
            len(state.guests), len(state.watchlist), len(state.messages),
        )
        return state

    def save(self, state: ApplicationState) -> None:
        """Write the full state synchronously."""
        try:
            self.path.write_text(state.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageUnavailableError(f"Cannot write {self.path}: {e}") from e
        logger.debug("saved state to %s", self.path)

    def clear(self) -> None:
        """Remove the stored document so the next load starts from defaults."""
        self.path.unlink(missing_ok=True)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class StorageError(RuntimeError):
    """Base class for state store failures."""

    kind: Literal["corrupt", "unavailable"]


class StateCorruptError(StorageError):
    """The stored document cannot be parsed into an ApplicationState."""

    kind = "corrupt"


class StorageUnavailableError(StorageError):
    """The backing directory cannot be read or written."""

    kind = "unavailable"
