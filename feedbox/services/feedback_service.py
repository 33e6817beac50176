import json
import logging
from typing import Dict, List, Optional

from feedbox.models.feedback import Comment, Feedback
from feedbox.models.user import User
from feedbox.storage.base import StorageBackend
from feedbox.storage.keys import StorageKeys
from feedbox.utils.enums import CATEGORIES, OTHERS, FeedbackStatus
from feedbox.utils.ids import gen_id, now_ms

logger = logging.getLogger(__name__)

ALL = "all"
STATUSES = [s.value for s in FeedbackStatus]
NOTIFICATION_TEXT_LENGTH = 80


class FeedbackStore:
    """
    Ordered feedback collection (newest first) with its comments.

    The in-memory list is the working copy. Every mutation rewrites the whole
    list under one key; when that write fails the in-memory copy keeps the
    change and the next successful write catches the backend up. Calls that
    change nothing (unknown id, blank text) do not write.
    """

    def __init__(self, storage: StorageBackend, keys: StorageKeys = None):
        self.storage = storage
        self.keys = keys or StorageKeys()
        self._items: Optional[List[Feedback]] = None

    # -- persistence -------------------------------------------------------

    def _load(self) -> List[Feedback]:
        raw = self.storage.load(self.keys.feedbacks)
        if not raw:
            return []
        try:
            return [Feedback.from_dict(item) for item in json.loads(raw)]
        except (ValueError, TypeError, KeyError) as e:
            logger.warning(f"Persisted feedback list is unreadable ({e}), starting empty")
            return []

    def _persist(self) -> None:
        payload = json.dumps([f.to_dict() for f in self.items], ensure_ascii=False)
        self.storage.save(self.keys.feedbacks, payload)

    @property
    def items(self) -> List[Feedback]:
        if self._items is None:
            self._items = self._load()
        return self._items

    def reload(self) -> None:
        self._items = self._load()

    # -- queries -----------------------------------------------------------

    def get(self, feedback_id: str) -> Optional[Feedback]:
        return next((f for f in self.items if f.id == feedback_id), None)

    def list_all(self) -> List[Feedback]:
        return list(self.items)

    def list_by_author(self, author_id: str) -> List[Feedback]:
        return [f for f in self.items if f.author_id == author_id]

    def filter_by_category(self, category: str) -> List[Feedback]:
        """Records whose effective category is ``category``; ``"all"`` returns everything.

        A record filed under ``others`` with a custom topic only matches the topic.
        """
        if category == ALL:
            return list(self.items)
        return [f for f in self.items if f.effective_category == category]

    def categories(self) -> List[str]:
        seen = dict.fromkeys(CATEGORIES)
        for f in self.items:
            if f.custom_category:
                seen.setdefault(f.custom_category)
        return [ALL] + list(seen)

    def aggregate_by_category(self) -> Dict[str, Dict[str, int]]:
        buckets: Dict[str, Dict[str, int]] = {}
        for f in self.items:
            bucket = buckets.setdefault(
                f.effective_category, {"pending": 0, "accepted": 0, "denied": 0, "total": 0}
            )
            bucket[f.status] += 1
            bucket["total"] += 1
        ordered = sorted(buckets.items(), key=lambda kv: kv[1]["total"], reverse=True)
        return dict(ordered)

    def status_counts(self) -> Dict[str, int]:
        counts = {status: 0 for status in STATUSES}
        for f in self.items:
            counts[f.status] += 1
        counts["total"] = len(self.items)
        return counts

    def notifications_for(self, author_id: str) -> List[Dict[str, str]]:
        return [
            {"id": f.id, "text": f.content[:NOTIFICATION_TEXT_LENGTH], "status": f.status}
            for f in self.list_by_author(author_id)
        ]

    # -- mutations ---------------------------------------------------------

    def submit(self, author: User, category: str, content: str,
               custom_category: Optional[str] = None) -> Optional[Feedback]:
        content = (content or "").strip()
        if not content:
            return None

        custom = (custom_category or "").strip()
        feedback = Feedback(
            id=gen_id("fb", taken={f.id for f in self.items}),
            author_id=author.id,
            author_name=author.name,
            author_avatar=author.avatar,
            category=category,
            custom_category=custom if category == OTHERS and custom else None,
            content=content,
            created_at=now_ms(),
        )
        self.items.insert(0, feedback)
        self._persist()
        return feedback

    def toggle_vote(self, feedback_id: str, user_id: str) -> Optional[Feedback]:
        feedback = self.get(feedback_id)
        if feedback is None:
            return None
        if user_id in feedback.votes:
            feedback.votes.remove(user_id)
        else:
            feedback.votes.append(user_id)
        self._persist()
        return feedback

    def add_comment(self, feedback_id: str, author: User, text: str) -> Optional[Comment]:
        text = (text or "").strip()
        feedback = self.get(feedback_id)
        if feedback is None or not text:
            return None
        taken = {c.id for c in feedback.comments}
        comment = Comment(
            id=gen_id("c", taken=taken),
            author_id=author.id,
            author_name=author.name,
            text=text,
            created_at=now_ms(),
        )
        feedback.comments.append(comment)
        self._persist()
        return comment

    def set_status(self, feedback_id: str, status: str) -> Optional[Feedback]:
        # Any transition is allowed, last write wins.
        if status not in STATUSES:
            raise ValueError(f"Unknown status '{status}'")
        feedback = self.get(feedback_id)
        if feedback is None:
            return None
        previous = feedback.status
        feedback.status = status
        self._persist()
        logger.info(f"Feedback {feedback_id} status {previous} -> {status}")
        return feedback
