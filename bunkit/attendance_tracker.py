# ==============================================
# AttendanceTracker — Orchestrator
# ==============================================
#
# PURPOSE:
#   The class front ends talk to. It wires the pieces together,
#   loads persisted subjects once at startup and exposes the
#   user actions of the app.
#
#   ┌──────────────────────────────────────────────┐
#   │              AttendanceTracker               │
#   │                                              │
#   │   front end action                           │
#   │        │                                     │
#   │        ▼                                     │
#   │   SubjectStore  (mutate in memory)           │
#   │        │                                     │
#   │        ▼                                     │
#   │   SubjectPersistence.save(subjects)          │
#   │        │                                     │
#   │        ▼                                     │
#   │   KeyValueStore["subjects"]  (JSON file)     │
#   └──────────────────────────────────────────────┘
#
# CLASS: AttendanceTracker
# ------------------------
#   Constructor:
#   ------------
#   - __init__(config=None, key_value_store=None)
#       1. Load config (from .env or passed in)
#       2. Open the key-value store
#       3. Build SubjectPersistence and SubjectStore
#       4. Load previously saved subjects
#
#   Public Methods:
#   ---------------
#   - add_subject(name, attended, missed) -> MutationResult
#   - update_subject(index, name, attended, missed) -> MutationResult
#   - delete_subject(index) -> MutationResult
#   - mark_attended(index) -> MutationResult
#   - mark_missed(index) -> MutationResult
#   - edit_fields(index) -> EditFields | None
#   - rows() -> list[SubjectRow]
#   - get_status() -> dict
#   - reload() -> int
#
# ==============================================

import logging
from dataclasses import dataclass
from typing import List, Optional

from bunkit.config import AppConfig, get_config
from bunkit.persistence.key_value_store import KeyValueStore
from bunkit.persistence.subject_persistence import SubjectPersistence
from bunkit.subjects.derivation import AttendanceColor, format_percentage
from bunkit.subjects.store import MutationResult, SubjectStore
from bunkit.subjects.subject import Subject

logger = logging.getLogger(__name__)


@dataclass
class EditFields:
    """Form values pre-filled when editing a subject."""
    name: str
    attended: str
    missed: str


@dataclass
class SubjectRow:
    """Everything a front end needs to render one subject."""
    index: int
    id: str
    name: str
    attended: int
    total: int
    percentage: float
    percentage_text: str
    status: str
    color: AttendanceColor

    @classmethod
    def from_subject(cls, index: int, subject: Subject) -> "SubjectRow":
        percentage = subject.attendance_percentage
        return cls(
            index=index,
            id=subject.id,
            name=subject.name,
            attended=subject.attended,
            total=subject.total,
            percentage=percentage,
            percentage_text=format_percentage(percentage),
            status=subject.attendance_status,
            color=subject.attendance_color,
        )


class AttendanceTracker:
    """
    Owns the subject store and its persistence.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        key_value_store: Optional[KeyValueStore] = None,
    ):
        """
        Initialize the tracker and load saved subjects.

        Args:
            config: Application configuration. If None, loads from environment.
            key_value_store: Storage to use instead of the configured file.
        """
        self._config = config or get_config()

        self._key_value_store = key_value_store or KeyValueStore(
            self._config.storage.data_file
        )
        self._persistence = SubjectPersistence(
            self._key_value_store,
            key=self._config.storage.subjects_key,
        )
        self._store = SubjectStore(self._persistence)

        self.reload()

    @property
    def store(self) -> SubjectStore:
        return self._store

    def reload(self) -> int:
        """Replace in-memory subjects with the persisted ones. Returns the count."""
        subjects = self._persistence.load()
        self._store.replace_all(subjects)
        logger.info("Loaded %d subjects", len(subjects))
        return len(subjects)

    # ------------------------------------------
    # User actions
    # ------------------------------------------

    def add_subject(self, name, attended, missed) -> MutationResult:
        return self._log_outcome("add", self._store.add(name, attended, missed))

    def update_subject(self, index: int, name, attended, missed) -> MutationResult:
        return self._log_outcome(
            "update", self._store.update(index, name, attended, missed)
        )

    def delete_subject(self, index: int) -> MutationResult:
        return self._log_outcome("delete", self._store.remove(index))

    def mark_attended(self, index: int) -> MutationResult:
        return self._log_outcome(
            "attend", self._store.increment_attended_and_total(index)
        )

    def mark_missed(self, index: int) -> MutationResult:
        return self._log_outcome("miss", self._store.increment_total_only(index))

    # ------------------------------------------
    # Views
    # ------------------------------------------

    def edit_fields(self, index: int) -> Optional[EditFields]:
        """
        Values to pre-fill an edit form with.

        Missed classes are shown as total - attended.
        """
        subject = self._store.get(index)
        if subject is None:
            return None
        return EditFields(
            name=subject.name,
            attended=str(subject.attended),
            missed=str(subject.missed),
        )

    def rows(self) -> List[SubjectRow]:
        return [
            SubjectRow.from_subject(index, subject)
            for index, subject in enumerate(self._store)
        ]

    def get_status(self) -> dict:
        return {
            "subjects": len(self._store),
            "data_file": str(self._key_value_store.path),
            "subjects_key": self._persistence.key,
        }

    def _log_outcome(self, action: str, result: MutationResult) -> MutationResult:
        if not result.ok:
            logger.debug("Rejected %s: %s", action, result.reason)
        elif not result.saved:
            logger.warning("%s applied in memory but not saved", action)
        return result
