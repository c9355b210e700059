import shutil
from pathlib import Path

import pytest

from lodging_watch.console import Console
from lodging_watch.storage import Storage

TEST_DATA_DIR = Path("data-tests")


@pytest.fixture(autouse=True)
def clean_test_data():
    """Wipe data-tests/ before every test."""
    if TEST_DATA_DIR.exists():
        shutil.rmtree(TEST_DATA_DIR)
    TEST_DATA_DIR.mkdir(parents=True)
    yield
    # data-tests/ is kept after the run for inspection


@pytest.fixture
def storage() -> Storage:
    return Storage(TEST_DATA_DIR)


@pytest.fixture
def console(storage: Storage) -> Console:
    return Console(storage)


PROFILE = {
    "name": "Node A",
    "address": "Region X",
    "receptionist_name": "Hanna",
    "phone": "0911000000",
}


@pytest.fixture
def profile() -> dict[str, str]:
    """A complete hotel profile submission."""
    return dict(PROFILE)


@pytest.fixture
def reception(console: Console) -> Console:
    """Console logged in as reception with a complete hotel profile."""
    console.login("reception", "1234")
    console.submit_profile(PROFILE)
    return console


@pytest.fixture
def police(console: Console) -> Console:
    console.login("police", "police@1234")
    return console
