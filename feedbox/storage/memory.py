from typing import Dict, Optional

from feedbox.storage.base import StorageBackend


class MemoryStorage(StorageBackend):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def load(self, key):
        return self._data.get(key)

    def save(self, key, value):
        self._data[key] = value

    def remove(self, key):
        self._data.pop(key, None)
