# ==============================================
# Subject (Data Class)
# ==============================================
#
# PURPOSE:
#   The only entity of the tracker: a course with its
#   attendance counters. Derived display values are computed
#   on read through the derivation module and never stored.
#
# ATTRIBUTES:
# -----------
# - id: str         → UUID string, generated at creation, immutable
# - name: str       → Display name
# - attended: int   → Classes attended
# - total: int      → Classes held (attended + missed)
#
# METHODS:
# --------
# - to_dict() -> dict                     → Serialize for persistence
# - from_dict(data: dict) -> Subject      (classmethod) → Deserialize
#
# ==============================================

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict

from bunkit.exceptions import SubjectDecodeError
from bunkit.subjects import derivation
from bunkit.subjects.derivation import AttendanceColor


def new_subject_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Subject:
    """A tracked subject with attendance counters."""

    name: str
    attended: int
    total: int
    id: str = field(default_factory=new_subject_id)

    @property
    def missed(self) -> int:
        return self.total - self.attended

    @property
    def attendance_percentage(self) -> float:
        return derivation.percentage(self.attended, self.total)

    @property
    def attendance_status(self) -> str:
        return derivation.status(self.attended, self.total)

    @property
    def attendance_color(self) -> AttendanceColor:
        return derivation.color_class(self.attended, self.total)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the subject to a dictionary for persistence.

        Returns:
            A JSON-serializable dictionary representation
        """
        return {
            "id": self.id,
            "name": self.name,
            "attended": self.attended,
            "total": self.total,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Subject":
        """
        Reconstruct a Subject from stored data.

        Args:
            data: Dictionary with id, name, attended and total

        Returns:
            Subject instance

        Raises:
            SubjectDecodeError: If a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise SubjectDecodeError(f"Expected an object, got {type(data).__name__}")

        subject_id = data.get("id")
        name = data.get("name")
        attended = data.get("attended")
        total = data.get("total")

        if not isinstance(subject_id, str):
            raise SubjectDecodeError("Field 'id' must be a string")
        try:
            uuid.UUID(subject_id)
        except ValueError as e:
            raise SubjectDecodeError(f"Field 'id' is not a UUID: {subject_id!r}") from e
        if not isinstance(name, str):
            raise SubjectDecodeError("Field 'name' must be a string")
        for key, value in (("attended", attended), ("total", total)):
            # bool is a subclass of int and must not pass as a count
            if not isinstance(value, int) or isinstance(value, bool):
                raise SubjectDecodeError(f"Field '{key}' must be an integer")

        return cls(name=name, attended=attended, total=total, id=subject_id)
