import json
import logging
from typing import Optional

from feedbox.errors import InvalidCredentials, InvalidLogin
from feedbox.models.user import ADMIN_ID, User, student_id_for
from feedbox.services.credential_service import CredentialVerifier
from feedbox.services.identity_service import IdentityAllocator
from feedbox.storage.base import StorageBackend
from feedbox.storage.keys import StorageKeys
from feedbox.utils.enums import AVATARS, UserRole

logger = logging.getLogger(__name__)

ADMIN_NAME = "Administrator"


class SessionService:
    """Login, logout and the persisted current-user pointer."""

    def __init__(self, storage: StorageBackend, allocator: IdentityAllocator,
                 verifier: CredentialVerifier, keys: StorageKeys = None):
        self.storage = storage
        self.allocator = allocator
        self.verifier = verifier
        self.keys = keys or StorageKeys()

    def _remember(self, user: User) -> User:
        self.storage.save(self.keys.current_user, json.dumps(user.to_dict(), ensure_ascii=False))
        return user

    def login_student(self, email: str, password: str, avatar: Optional[str] = None) -> User:
        # The password only gates the flow, it is not checked against anything.
        if not email or not password:
            raise InvalidLogin("Please enter email and password")
        avatar = avatar or AVATARS[0]
        if avatar not in AVATARS:
            raise InvalidLogin("Unknown avatar")

        user = User(
            id=student_id_for(email),
            role=UserRole.STUDENT.value,
            email=email,
            name=self.allocator.assign(email),
            avatar=avatar,
        )
        return self._remember(user)

    def login_admin(self, username: str, password: str) -> User:
        if not self.verifier.verify(username, password):
            logger.warning("Rejected admin login")
            raise InvalidCredentials("Invalid admin credentials")
        user = User(id=ADMIN_ID, role=UserRole.ADMIN.value, username=username, name=ADMIN_NAME)
        return self._remember(user)

    def current_user(self) -> Optional[User]:
        raw = self.storage.load(self.keys.current_user)
        if not raw:
            return None
        try:
            return User.from_dict(json.loads(raw))
        except (ValueError, TypeError, KeyError):
            logger.warning("Current user record is unreadable, treating as logged out")
            return None

    def update_avatar(self, user: User, avatar: str) -> User:
        if avatar not in AVATARS:
            raise InvalidLogin("Unknown avatar")
        user.avatar = avatar
        return self._remember(user)

    def logout(self) -> None:
        self.storage.remove(self.keys.current_user)
