class FeedboxError(Exception):
    """Base class for errors raised by the feedback box services."""


class StorageError(FeedboxError):
    """A storage backend failed to read or write a key."""

    def __init__(self, message, key=None):
        super().__init__(message)
        self.key = key


class InvalidCredentials(FeedboxError):
    pass


class InvalidLogin(FeedboxError):
    """Login input is incomplete or not acceptable."""
