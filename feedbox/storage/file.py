import json
import logging
import os
import tempfile
from typing import Dict

from feedbox.errors import StorageError
from feedbox.storage.base import StorageBackend

logger = logging.getLogger(__name__)


class FileStorage(StorageBackend):
    """
    Keeps every key in one JSON document on disk.
    The document is rewritten whole on each save, through a temp file so a
    failed write leaves the previous document in place.
    """

    def __init__(self, path: str):
        self.path = path
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)

    def _read(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                doc = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning(f"Storage file {self.path} is not valid JSON, treating it as empty")
            return {}
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(doc, dict):
            logger.warning(f"Storage file {self.path} does not hold an object, treating it as empty")
            return {}
        return doc

    def _write(self, doc: Dict[str, str], key: str) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(doc, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Cannot write {self.path}: {e}", key=key) from e

    def load(self, key):
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def save(self, key, value):
        doc = self._read()
        doc[key] = value
        self._write(doc, key)

    def remove(self, key):
        doc = self._read()
        if key in doc:
            del doc[key]
            self._write(doc, key)
