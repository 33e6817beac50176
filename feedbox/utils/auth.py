import datetime as dt
from functools import wraps
from flask import request, jsonify, current_app
import jwt

from feedbox.models.user import User
from feedbox.utils.enums import UserRole


def create_token(user: User) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    ttl = current_app.config.get("TOKEN_TTL_HOURS", 12)
    payload = {
        "sub": user.id,
        "role": user.role,
        "name": user.name,
        "avatar": user.avatar,
        "email": user.email,
        "username": user.username,
        "iat": int(now.timestamp()),
        "exp": int((now + dt.timedelta(hours=ttl)).timestamp()),
    }
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")


def decode_token(token: str):
    return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])


def _unauthorized(message):
    return jsonify({"error": {"code": "UNAUTHORIZED", "message": message}}), 401


def _forbidden(message):
    return jsonify({"error": {"code": "FORBIDDEN", "message": message}}), 403


def require_auth(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return _unauthorized("Missing Bearer token")
        token = auth_header.split(" ", 1)[1]
        try:
            payload = decode_token(token)
            request.user = User(  # type: ignore
                id=payload["sub"],
                role=payload["role"],
                name=payload["name"],
                email=payload.get("email"),
                username=payload.get("username"),
                avatar=payload.get("avatar"),
            )
        except (jwt.PyJWTError, KeyError):
            return _unauthorized("Invalid token")
        return f(*args, **kwargs)
    return wrapper


def _require_role(role: UserRole):
    def decorator(f):
        @require_auth
        @wraps(f)
        def wrapper(*args, **kwargs):
            if request.user.role != role.value:  # type: ignore
                return _forbidden(f"{role.value.capitalize()} access required")
            return f(*args, **kwargs)
        return wrapper
    return decorator


require_admin = _require_role(UserRole.ADMIN)
require_student = _require_role(UserRole.STUDENT)

__all__ = ["create_token", "decode_token", "require_auth", "require_admin", "require_student"]
