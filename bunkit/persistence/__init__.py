# ==============================================
# PERSISTENCE (subjects across restarts)
# ==============================================
#
# This package saves and loads the subject list so that
# attendance counts survive process restarts.
#
# Modules:
# --------
# - key_value_store.py      → JSON-file key-value storage
# - subject_persistence.py  → Save/load the subject list under one key
#
# ==============================================

from .key_value_store import KeyValueStore
from .subject_persistence import SubjectPersistence, decode_subjects

__all__ = ["KeyValueStore", "SubjectPersistence", "decode_subjects"]
