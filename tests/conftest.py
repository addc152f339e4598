# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - app_config         → AppConfig pointing at a tmp_path data file
# - key_value_store    → KeyValueStore on that file
# - recording_persistence → in-memory save() double that counts calls
# - tracker            → AttendanceTracker on the temporary store
# - populated_tracker  → tracker with Maths, Physics, Chemistry
# ==============================================

import pytest

from bunkit.attendance_tracker import AttendanceTracker
from bunkit.config import AppConfig, StorageConfig, reset_config
from bunkit.persistence.key_value_store import KeyValueStore


class RecordingPersistence:
    """Stands in for SubjectPersistence; remembers every saved list."""

    def __init__(self, succeed=True):
        self.succeed = succeed
        self.saves = []

    def save(self, subjects):
        self.saves.append([subject.to_dict() for subject in subjects])
        return self.succeed

    def load(self):
        return []


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Keep the real environment and .env out of the tests."""
    for name in ("BUNKIT_DATA_FILE", "BUNKIT_SUBJECTS_KEY", "BUNKIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "bunkit.json"


@pytest.fixture
def app_config(data_file):
    return AppConfig(storage=StorageConfig(data_file=str(data_file)))


@pytest.fixture
def key_value_store(data_file):
    return KeyValueStore(str(data_file))


@pytest.fixture
def recording_persistence():
    return RecordingPersistence()


@pytest.fixture
def tracker(app_config):
    return AttendanceTracker(app_config)


@pytest.fixture
def populated_tracker(tracker):
    tracker.add_subject("Maths", "9", "1")
    tracker.add_subject("Physics", "6", "2")
    tracker.add_subject("Chemistry", "3", "3")
    return tracker
