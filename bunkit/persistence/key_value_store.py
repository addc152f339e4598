import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict

from bunkit.exceptions import KeyValueStoreError

logger = logging.getLogger(__name__)


# ==============================================
# KeyValueStore
# ==============================================
#
# PURPOSE:
#   Local persistent key-value storage. The whole store is one
#   JSON object in a single file: {key: value, ...}.
#
#   Every write rewrites the full file through a temporary file
#   in the same directory followed by os.replace(), so a crash
#   mid-write leaves the previous file intact.
#
# FILE STRUCTURE:
# ---------------
#   data/bunkit.json
#   └── {"subjects": [{id, name, attended, total}, ...]}
#
class KeyValueStore:
    """
    JSON-file backed key-value store.

    A missing file reads as an empty mapping. A file that is not a
    JSON object raises KeyValueStoreError on read.
    """

    def __init__(self, path: str = "data/bunkit.json"):
        """
        Initialize the key-value store.

        Args:
            path: File holding the JSON object
        """
        self.path = Path(path)

        # Create directory if it doesn't exist
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Store a JSON-serializable value under key.

        Raises:
            KeyValueStoreError: If the value cannot be serialized or
                the file cannot be written
        """
        try:
            data = self._read()
        except KeyValueStoreError:
            logger.warning("Discarding unreadable store at %s", self.path)
            data = {}
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def contains(self, key: str) -> bool:
        return key in self._read()

    def clear(self) -> None:
        """Delete the backing file."""
        if self.path.exists():
            self.path.unlink()
            logger.info("Deleted %s", self.path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise KeyValueStoreError(f"Could not read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise KeyValueStoreError(f"{self.path} does not hold a JSON object")
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        try:
            payload = json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8")
        except (TypeError, ValueError) as e:
            # UnicodeEncodeError (lone surrogates) is a ValueError
            raise KeyValueStoreError(f"Could not serialize store: {e}") from e

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise KeyValueStoreError(f"Could not write {self.path}: {e}") from e
