from dataclasses import dataclass
from typing import Any, Dict, Optional

from feedbox.utils.enums import UserRole

ADMIN_ID = "admin"


def student_id_for(email: str) -> str:
    return f"stu_{email.lower()}"


@dataclass
class User:
    id: str
    role: str
    name: str
    email: Optional[str] = None
    username: Optional[str] = None
    avatar: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    def to_dict(self) -> Dict[str, Any]:
        data = {"id": self.id, "role": self.role, "name": self.name}
        for field in ("email", "username", "avatar"):
            value = getattr(self, field)
            if value is not None:
                data[field] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=data["id"],
            role=data["role"],
            name=data["name"],
            email=data.get("email"),
            username=data.get("username"),
            avatar=data.get("avatar"),
        )

    def __repr__(self):
        return f"<User {self.id}: {self.name}>"
