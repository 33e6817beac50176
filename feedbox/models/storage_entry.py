from feedbox.extensions import db
from datetime import datetime


class StorageEntry(db.Model):
    """One key of the persisted key-value layout (used by the database backend)."""
    __tablename__ = "storage_entries"

    key = db.Column(db.String(320), primary_key=True)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<StorageEntry {self.key}>"
