import json
import logging
from typing import Optional

from feedbox.storage.base import StorageBackend
from feedbox.storage.keys import StorageKeys

logger = logging.getLogger(__name__)

DEFAULT_COUNTER = 122


class IdentityAllocator:
    """
    Maps a student email to a stable pseudonym such as ``Anonymous123``.

    Pseudonyms are issued from one persisted counter shared by every email.
    A mapping is created the first time an email is seen and reused afterwards;
    it is never rewritten. Not safe against two allocators sharing a backend.
    """

    def __init__(self, storage: StorageBackend, keys: StorageKeys = None, start: int = DEFAULT_COUNTER):
        self.storage = storage
        self.keys = keys or StorageKeys()
        self.start = start

    def counter(self) -> int:
        raw = self.storage.load(self.keys.anon_counter)
        if raw is None:
            return self.start
        try:
            return int(json.loads(raw))
        except (ValueError, TypeError):
            logger.warning(f"Ignoring unreadable anon counter {raw!r}, using {self.start}")
            return self.start

    def lookup(self, email: str) -> Optional[str]:
        raw = self.storage.load(self.keys.student_name(email))
        if raw is None:
            return None
        try:
            name = json.loads(raw)
        except ValueError:
            name = raw
        return name if isinstance(name, str) and name else None

    def assign(self, email: str) -> str:
        existing = self.lookup(email)
        if existing:
            return existing

        next_value = self.counter() + 1
        self.storage.save(self.keys.anon_counter, json.dumps(next_value))
        name = f"Anonymous{next_value}"
        self.storage.save(self.keys.student_name(email), json.dumps(name))
        logger.info(f"Issued pseudonym {name}")
        return name
