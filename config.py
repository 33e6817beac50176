from dotenv import load_dotenv
import os

load_dotenv()


def _csv(value):
    return [v.strip() for v in (value or "").split(",") if v.strip()]


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Storage backend: memory | file | database
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
    STORAGE_PATH = os.getenv("STORAGE_PATH", os.path.join("instance", "feedbox.json"))
    STORAGE_KEY_PREFIX = os.getenv("STORAGE_KEY_PREFIX", "afb_")

    # Only used by the database backend
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///feedbox.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,  # Test connection sebelum digunakan
        'pool_recycle': 300,
    }

    # Admin login. ADMIN_PASSWORD_HASH wins over the plain pair when set.
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin@123")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "adm123")
    ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH")

    ANON_COUNTER_START = int(os.getenv("ANON_COUNTER_START", "122"))
    TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "12"))

    CORS_ORIGINS = _csv(os.getenv("CORS_ORIGINS")) or ["http://localhost:5173"]
