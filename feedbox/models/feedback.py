from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from feedbox.utils.enums import FeedbackStatus


@dataclass
class Comment:
    id: str
    author_id: str
    author_name: str
    text: str
    created_at: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "authorId": self.author_id,
            "authorName": self.author_name,
            "text": self.text,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Comment":
        return cls(
            id=data["id"],
            author_id=data["authorId"],
            author_name=data["authorName"],
            text=data["text"],
            created_at=int(data["createdAt"]),
        )


@dataclass
class Feedback:
    id: str
    author_id: str
    author_name: str
    category: str
    content: str
    created_at: int
    status: str = FeedbackStatus.PENDING.value
    author_avatar: Optional[str] = None
    custom_category: Optional[str] = None
    votes: List[str] = field(default_factory=list)  # user ids, each at most once
    comments: List[Comment] = field(default_factory=list)

    @property
    def effective_category(self) -> str:
        return self.custom_category or self.category

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase layout used both on disk and over the API."""
        data = {
            "id": self.id,
            "authorId": self.author_id,
            "authorName": self.author_name,
            "category": self.category,
            "content": self.content,
            "status": self.status,
            "votes": list(self.votes),
            "comments": [c.to_dict() for c in self.comments],
            "createdAt": self.created_at,
        }
        if self.author_avatar is not None:
            data["authorAvatar"] = self.author_avatar
        if self.custom_category is not None:
            data["customCategory"] = self.custom_category
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Feedback":
        return cls(
            id=data["id"],
            author_id=data["authorId"],
            author_name=data["authorName"],
            category=data["category"],
            content=data["content"],
            created_at=int(data["createdAt"]),
            status=FeedbackStatus(data.get("status", FeedbackStatus.PENDING.value)).value,
            author_avatar=data.get("authorAvatar"),
            custom_category=data.get("customCategory"),
            votes=list(dict.fromkeys(data.get("votes") or [])),
            comments=[Comment.from_dict(c) for c in data.get("comments") or []],
        )

    def __repr__(self):
        return f"<Feedback {self.id}: {self.status}>"
