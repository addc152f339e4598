# ==============================================
# Derivation Logic
# ==============================================
#
# PURPOSE:
#   Pure functions that turn a subject's raw counts
#   (attended, total) into the values the front end shows:
#   percentage, recommendation message and color class.
#
# RULES:
# ------
#   percentage = attended / total * 100   (0 when total == 0)
#
#   percentage >= 75:
#       bunkable = floor(attended / 3 - (total - attended))
#       "You can bunk N class(es)"
#   otherwise:
#       needed = (total - attended) * 3 - attended
#       "Attend N more class(es) to reach 75%"
#
#   N is rendered as computed. Zero and negative values are
#   not clamped.
#
# ==============================================

import math
from enum import Enum


ATTENDANCE_THRESHOLD = 75.0


class AttendanceColor(Enum):
    """
    Color classification of a subject.

    - OK: at or above the attendance threshold
    - LOW: below the attendance threshold
    """
    OK = "ok"
    LOW = "low"


def percentage(attended: int, total: int) -> float:
    """Attendance percentage, 0.0 when no class has been held."""
    if total == 0:
        return 0.0
    return attended / total * 100


def _pluralize(count: int) -> str:
    return "class" if count == 1 else "classes"


def bunkable_classes(attended: int, total: int) -> int:
    """Classes that can still be skipped, floor(attended/3 - missed)."""
    return math.floor(attended / 3 - (total - attended))


def needed_classes(attended: int, total: int) -> int:
    """Classes to attend to reach the threshold, missed*3 - attended."""
    return math.floor((total - attended) * 3 - attended)


def status(attended: int, total: int) -> str:
    """
    Recommendation message for a subject.

    Args:
        attended: Classes attended
        total: Classes held

    Returns:
        "You can bunk N class(es)" at or above the threshold,
        "Attend N more class(es) to reach 75%" below it.
    """
    if percentage(attended, total) >= ATTENDANCE_THRESHOLD:
        bunkable = bunkable_classes(attended, total)
        return f"You can bunk {bunkable} {_pluralize(bunkable)}"

    needed = needed_classes(attended, total)
    return f"Attend {needed} more {_pluralize(needed)} to reach 75%"


def color_class(attended: int, total: int) -> AttendanceColor:
    if percentage(attended, total) >= ATTENDANCE_THRESHOLD:
        return AttendanceColor.OK
    return AttendanceColor.LOW


def format_percentage(value: float) -> str:
    """One-decimal rendering, e.g. "90.0% attendance"."""
    return f"{value:.1f}% attendance"
