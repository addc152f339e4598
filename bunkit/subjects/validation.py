# ==============================================
# Input Validation
# ==============================================
#
# PURPOSE:
#   Parse the free-text form input (subject name and class
#   counts). Every function returns None for input that must be
#   rejected and never raises.
#
# FUNCTIONS:
# ----------
# - parse_count(text) -> int | None
#     Optionally signed ASCII digits within the 64-bit range.
#
# - clean_name(text) -> str | None
#     Trimmed name, None when blank.
#
# ==============================================

import re
from typing import Optional

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

COUNT_MIN = -(2 ** 63)
COUNT_MAX = 2 ** 63 - 1


def parse_count(text) -> Optional[int]:
    """
    Parse a class count typed by the user.

    Accepts an optionally signed run of ASCII digits and nothing else:
    surrounding whitespace, underscores and decimals are rejected, as
    are values outside the 64-bit integer range. Integers pass through
    unchanged.

    Returns:
        The parsed integer, or None if the text is not an integer
    """
    if isinstance(text, bool):
        return None
    if isinstance(text, int):
        return text
    if not isinstance(text, str) or not _INTEGER_RE.fullmatch(text):
        return None
    try:
        value = int(text)
    except ValueError:
        # int() refuses very long digit strings
        return None
    if not COUNT_MIN <= value <= COUNT_MAX:
        return None
    return value


def clean_name(text) -> Optional[str]:
    """Trimmed subject name, or None when blank."""
    if not isinstance(text, str):
        return None
    name = text.strip()
    return name or None
