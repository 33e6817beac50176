from feedbox.storage.base import StorageBackend
from feedbox.storage.memory import MemoryStorage
from feedbox.storage.file import FileStorage
from feedbox.storage.database import DatabaseStorage


def build_storage(config) -> StorageBackend:
    backend = (config.get("STORAGE_BACKEND") or "file").lower()
    if backend == "memory":
        return MemoryStorage()
    if backend == "file":
        return FileStorage(config["STORAGE_PATH"])
    if backend == "database":
        return DatabaseStorage()
    raise ValueError(f"Unknown STORAGE_BACKEND '{backend}'")


__all__ = ["StorageBackend", "MemoryStorage", "FileStorage", "DatabaseStorage", "build_storage"]
