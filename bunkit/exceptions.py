# ==============================================
# Exceptions
# ==============================================
#
# BunkItError
# ├── KeyValueStoreError   → key-value file unreadable / unwritable
# └── SubjectDecodeError   → persisted subject list malformed
#
# Raised below the persistence adapter only; the adapter turns
# them into a False save or an empty load.
#
# ==============================================


class BunkItError(Exception):
    """Base class for all BunkIt errors."""


class KeyValueStoreError(BunkItError):
    """The key-value file could not be read or written."""


class SubjectDecodeError(BunkItError):
    """A persisted subject list did not have the expected shape."""
