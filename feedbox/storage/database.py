from sqlalchemy.exc import SQLAlchemyError

from feedbox.errors import StorageError
from feedbox.extensions import db
from feedbox.models.storage_entry import StorageEntry
from feedbox.storage.base import StorageBackend


class DatabaseStorage(StorageBackend):
    """Stores keys in the ``storage_entries`` table. Needs an app context."""

    def load(self, key):
        try:
            entry = db.session.get(StorageEntry, key)
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(f"Cannot read key {key}: {e}", key=key) from e
        return entry.value if entry else None

    def save(self, key, value):
        try:
            entry = db.session.get(StorageEntry, key)
            if entry:
                entry.value = value
            else:
                db.session.add(StorageEntry(key=key, value=value))
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(f"Cannot write key {key}: {e}", key=key) from e

    def remove(self, key):
        try:
            entry = db.session.get(StorageEntry, key)
            if entry:
                db.session.delete(entry)
                db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(f"Cannot remove key {key}: {e}", key=key) from e
