from enum import Enum


class UserRole(str, Enum):
    STUDENT = "student"
    ADMIN = "admin"


class FeedbackStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DENIED = "denied"


OTHERS = "others"

CATEGORIES = [
    "faculty",
    "food and mess",
    "sports",
    "academics",
    "facilities",
    OTHERS,
]

AVATARS = [
    "🧑🏻",
    "🧑🏼",
    "🧑🏽",
    "🧑🏾",
    "🧑🏿",
    "👩🏻",
    "👩🏼",
    "👩🏽",
    "👩🏾",
    "👨🏻",
    "👨🏼",
    "👨🏽",
]
