import hmac
from abc import ABC, abstractmethod

from werkzeug.security import check_password_hash, generate_password_hash


def _same(a, b) -> bool:
    return hmac.compare_digest((a or "").encode("utf-8"), (b or "").encode("utf-8"))


class CredentialVerifier(ABC):
    @abstractmethod
    def verify(self, username: str, password: str) -> bool:
        ...


class StaticCredentialVerifier(CredentialVerifier):
    """Accepts exactly one configured username/password pair."""

    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password

    def verify(self, username, password):
        return _same(username, self.username) and _same(password, self.password)


class HashedCredentialVerifier(CredentialVerifier):
    """Like the static pair, but only a Werkzeug password hash is configured."""

    def __init__(self, username: str, password_hash: str):
        self.username = username
        self.password_hash = password_hash

    def verify(self, username, password):
        if not _same(username, self.username):
            return False
        try:
            return check_password_hash(self.password_hash, password or "")
        except ValueError:
            return False


def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


def build_verifier(config) -> CredentialVerifier:
    if config.get("ADMIN_PASSWORD_HASH"):
        return HashedCredentialVerifier(config["ADMIN_USERNAME"], config["ADMIN_PASSWORD_HASH"])
    return StaticCredentialVerifier(config["ADMIN_USERNAME"], config["ADMIN_PASSWORD"])
