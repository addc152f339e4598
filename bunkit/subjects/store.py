# ==============================================
# SubjectStore
# ==============================================
#
# PURPOSE:
#   In-memory ordered list of Subjects. Single source of truth
#   for the front end. Every successful mutation is followed by
#   a full save through the persistence adapter.
#
# CLASS: SubjectStore
# -------------------
#   Constructor:
#   ------------
#   - __init__(persistence)
#       persistence: any object with save(subjects) -> bool
#
#   Mutations (each returns a MutationResult):
#   ------------------------------------------
#   - add(name, attended, missed)
#   - update(index, name, attended, missed)
#   - remove(index)
#   - increment_attended_and_total(index)   → "attended this class"
#   - increment_total_only(index)           → "missed this class"
#
#   A rejected mutation leaves the list untouched and does not save.
#   Indices are 0-based; negative indices are out of range.
#
#   Reads:
#   ------
#   - get(index), find(subject_id), index_of(subject_id)
#   - subjects (snapshot), len(), iteration, is_empty
#
# ==============================================

from dataclasses import dataclass
from typing import Iterator, List, Optional

from bunkit.subjects.subject import Subject
from bunkit.subjects.validation import clean_name, parse_count


INVALID_NAME = "invalid_name"
INVALID_COUNT = "invalid_count"
INDEX_OUT_OF_RANGE = "index_out_of_range"


@dataclass
class MutationResult:
    """Outcome of a store mutation."""
    ok: bool
    reason: Optional[str] = None
    subject: Optional[Subject] = None
    saved: bool = False

    @classmethod
    def rejected(cls, reason: str) -> "MutationResult":
        return cls(ok=False, reason=reason)


class SubjectStore:
    """Ordered, owned collection of Subjects."""

    def __init__(self, persistence):
        self._persistence = persistence
        self._subjects: List[Subject] = []

    # ------------------------------------------
    # Reads
    # ------------------------------------------

    @property
    def subjects(self) -> List[Subject]:
        return list(self._subjects)

    @property
    def is_empty(self) -> bool:
        return not self._subjects

    def __len__(self) -> int:
        return len(self._subjects)

    def __iter__(self) -> Iterator[Subject]:
        return iter(list(self._subjects))

    def get(self, index: int) -> Optional[Subject]:
        if not self._in_range(index):
            return None
        return self._subjects[index]

    def find(self, subject_id: str) -> Optional[Subject]:
        index = self.index_of(subject_id)
        return None if index is None else self._subjects[index]

    def index_of(self, subject_id: str) -> Optional[int]:
        for index, subject in enumerate(self._subjects):
            if subject.id == subject_id:
                return index
        return None

    def replace_all(self, subjects: List[Subject]) -> None:
        """Install a loaded list without saving it back."""
        self._subjects = list(subjects)

    # ------------------------------------------
    # Mutations
    # ------------------------------------------

    def add(self, name, attended, missed) -> MutationResult:
        """
        Append a new subject with total = attended + missed.

        Args:
            name: Subject name, trimmed before use
            attended: Classes attended (free text or int)
            missed: Classes missed (free text or int)

        Returns:
            MutationResult with the created subject on success
        """
        parsed = self._parse_form(name, attended, missed)
        if isinstance(parsed, MutationResult):
            return parsed
        clean, attended_count, missed_count = parsed

        subject = Subject(
            name=clean,
            attended=attended_count,
            total=attended_count + missed_count,
        )
        self._subjects.append(subject)
        return self._commit(subject)

    def update(self, index: int, name, attended, missed) -> MutationResult:
        """Overwrite name and counts of the subject at index. The id is kept."""
        if not self._in_range(index):
            return MutationResult.rejected(INDEX_OUT_OF_RANGE)

        parsed = self._parse_form(name, attended, missed)
        if isinstance(parsed, MutationResult):
            return parsed
        clean, attended_count, missed_count = parsed

        subject = self._subjects[index]
        subject.name = clean
        subject.attended = attended_count
        subject.total = attended_count + missed_count
        return self._commit(subject)

    def remove(self, index: int) -> MutationResult:
        if not self._in_range(index):
            return MutationResult.rejected(INDEX_OUT_OF_RANGE)
        subject = self._subjects.pop(index)
        return self._commit(subject)

    def increment_attended_and_total(self, index: int) -> MutationResult:
        if not self._in_range(index):
            return MutationResult.rejected(INDEX_OUT_OF_RANGE)
        subject = self._subjects[index]
        subject.attended += 1
        subject.total += 1
        return self._commit(subject)

    def increment_total_only(self, index: int) -> MutationResult:
        if not self._in_range(index):
            return MutationResult.rejected(INDEX_OUT_OF_RANGE)
        subject = self._subjects[index]
        subject.total += 1
        return self._commit(subject)

    # ------------------------------------------
    # Internals
    # ------------------------------------------

    def _in_range(self, index) -> bool:
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(self._subjects)

    def _parse_form(self, name, attended, missed):
        # Returns (name, attended, missed) or a rejected MutationResult
        attended_count = parse_count(attended)
        missed_count = parse_count(missed)
        if attended_count is None or missed_count is None:
            return MutationResult.rejected(INVALID_COUNT)
        clean = clean_name(name)
        if clean is None:
            return MutationResult.rejected(INVALID_NAME)
        return clean, attended_count, missed_count

    def _commit(self, subject: Subject) -> MutationResult:
        saved = self._persistence.save(self._subjects)
        return MutationResult(ok=True, subject=subject, saved=saved)
