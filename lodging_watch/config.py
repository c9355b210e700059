"""Settings read from the environment (and ``.env`` at the repo root)."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from lodging_watch.chatlog import DEFAULT_AGENCY_NAME
from lodging_watch.session import Credentials

ROOT = Path(__file__).parent.parent
DEFAULT_DATA_DIR = ROOT / "data"

load_dotenv(ROOT / ".env")


def data_dir() -> Path:
    return Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))


def agency_name() -> str:
    return os.getenv("AGENCY_NAME", DEFAULT_AGENCY_NAME)


def credentials() -> Credentials:
    defaults = Credentials()
    return Credentials(
        reception_username=os.getenv("RECEPTION_USERNAME", defaults.reception_username),
        reception_password=os.getenv("RECEPTION_PASSWORD", defaults.reception_password),
        police_username=os.getenv("POLICE_USERNAME", defaults.police_username),
        police_password=os.getenv("POLICE_PASSWORD", defaults.police_password),
    )


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
