import json
import logging
from typing import List

from bunkit.exceptions import KeyValueStoreError, SubjectDecodeError
from bunkit.persistence.key_value_store import KeyValueStore
from bunkit.subjects.subject import Subject

logger = logging.getLogger(__name__)


# ==============================================
# SubjectPersistence
# ==============================================
#
# PURPOSE:
#   Save and load the ordered subject list under one fixed key
#   of the key-value store. The list is overwritten wholesale on
#   every save; there is no versioning and no migration.
#
#   Failures never propagate:
#     - save() logs a warning and returns False
#     - load() returns [] on a missing key or any malformed data
#
class SubjectPersistence:
    """Persistence adapter between SubjectStore and a KeyValueStore."""

    def __init__(self, key_value_store: KeyValueStore, key: str = "subjects"):
        self.key_value_store = key_value_store
        self.key = key

    def save(self, subjects: List[Subject]) -> bool:
        """
        Serialize the full list and write it under the fixed key.

        Args:
            subjects: Ordered subjects to persist

        Returns:
            True if written, False if the write failed
        """
        payload = [subject.to_dict() for subject in subjects]
        try:
            self.key_value_store.set(self.key, payload)
        except KeyValueStoreError as e:
            logger.warning("Could not save %d subjects: %s", len(subjects), e)
            return False

        logger.debug("Saved %d subjects under %r", len(subjects), self.key)
        return True

    def load(self) -> List[Subject]:
        """
        Read the fixed key and rebuild the subject list.

        Returns:
            The persisted subjects in order, or [] if nothing usable
            is stored
        """
        try:
            raw = self.key_value_store.get(self.key)
        except KeyValueStoreError as e:
            logger.warning("Could not read subjects: %s", e)
            return []

        if raw is None:
            logger.debug("No subjects stored under %r", self.key)
            return []

        try:
            subjects = decode_subjects(raw)
        except SubjectDecodeError as e:
            logger.warning("Discarding stored subjects: %s", e)
            return []

        logger.debug("Loaded %d subjects from %r", len(subjects), self.key)
        return subjects


def decode_subjects(raw) -> List[Subject]:
    """
    Decode a stored subject list.

    Accepts the decoded JSON array or its JSON text. One malformed
    element rejects the whole list.

    Raises:
        SubjectDecodeError: If the data is not a list of subjects
    """
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except ValueError as e:
            raise SubjectDecodeError(f"Invalid JSON: {e}") from e

    if not isinstance(raw, list):
        raise SubjectDecodeError(f"Expected a list, got {type(raw).__name__}")

    return [Subject.from_dict(item) for item in raw]
