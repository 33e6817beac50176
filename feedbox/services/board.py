from flask import current_app

from feedbox.services.credential_service import build_verifier
from feedbox.services.feedback_service import FeedbackStore
from feedbox.services.identity_service import IdentityAllocator
from feedbox.services.session_service import SessionService
from feedbox.storage import build_storage
from feedbox.storage.keys import StorageKeys


class Board:
    """The services of one application instance, sharing a storage backend."""

    def __init__(self, storage, keys: StorageKeys, counter_start: int, verifier):
        self.storage = storage
        self.keys = keys
        self.allocator = IdentityAllocator(storage, keys, start=counter_start)
        self.feedbacks = FeedbackStore(storage, keys)
        self.sessions = SessionService(storage, self.allocator, verifier, keys)

    @classmethod
    def from_config(cls, config, storage=None):
        return cls(
            storage=storage or build_storage(config),
            keys=StorageKeys(config.get("STORAGE_KEY_PREFIX", "afb_")),
            counter_start=config.get("ANON_COUNTER_START", 122),
            verifier=build_verifier(config),
        )


def get_board() -> Board:
    return current_app.extensions["feedbox"]
