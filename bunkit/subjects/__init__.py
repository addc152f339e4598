# ==============================================
# SUBJECTS: records, derived values, in-memory store
# ==============================================
#
# Modules:
# --------
# - subject.py     → Subject data class (to_dict / from_dict)
# - derivation.py  → Percentage, status message, color class
# - validation.py  → Parse free-text names and counts
# - store.py       → SubjectStore and MutationResult
#
# ==============================================

from .derivation import ATTENDANCE_THRESHOLD, AttendanceColor
from .subject import Subject
from .store import SubjectStore, MutationResult

__all__ = [
    "ATTENDANCE_THRESHOLD",
    "AttendanceColor",
    "Subject",
    "SubjectStore",
    "MutationResult",
]
