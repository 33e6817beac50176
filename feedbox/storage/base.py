from abc import ABC, abstractmethod
from typing import Optional


class StorageBackend(ABC):
    """Key-value persistence for the board.

    Values are opaque strings (JSON text produced by the services). A backend
    raises ``StorageError`` when it cannot read or write.
    """

    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    def save(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        ...
