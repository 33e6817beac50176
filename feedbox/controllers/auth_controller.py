from flask import request, current_app
from feedbox.errors import InvalidCredentials, InvalidLogin, StorageError
from feedbox.schemas.user_schema import StudentLoginSchema, AdminLoginSchema, AvatarUpdateSchema
from feedbox.services.board import get_board
from feedbox.utils.auth import create_token
from feedbox.utils.http import ok, error, json_body, validate_schema


def _session_payload(user):
    return {"token": create_token(user), "user": user.to_dict()}


def student_login_handler():
    data = json_body()
    if not (data.get("email") or "").strip() or not data.get("password"):
        return error("VALIDATION_ERROR", "Please enter email and password", 400)

    data, errors = validate_schema(StudentLoginSchema, data)
    if errors:
        return error("VALIDATION_ERROR", "Invalid login data", 400, details=errors)

    try:
        user = get_board().sessions.login_student(data["email"], data["password"], data["avatar"])
    except InvalidLogin as e:
        return error("VALIDATION_ERROR", str(e), 400)
    except StorageError:
        current_app.logger.exception("Student login failed to persist")
        return error("STORAGE_ERROR", "Could not save session", 503)
    return ok(_session_payload(user))


def admin_login_handler():
    data, errors = validate_schema(AdminLoginSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Please enter username and password", 400, details=errors)

    try:
        user = get_board().sessions.login_admin(data["username"], data["password"])
    except InvalidCredentials as e:
        return error("INVALID_CREDENTIALS", str(e), 401)
    except StorageError:
        current_app.logger.exception("Admin login failed to persist")
        return error("STORAGE_ERROR", "Could not save session", 503)
    return ok(_session_payload(user))


def me_handler():
    user = get_board().sessions.current_user()
    if user is None or user.id != request.user.id:
        # The stored pointer belongs to whoever logged in last; fall back to the token.
        user = request.user
    return ok({"user": user.to_dict()})


def update_avatar_handler():
    data, errors = validate_schema(AvatarUpdateSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid avatar", 400, details=errors)

    try:
        user = get_board().sessions.update_avatar(request.user, data["avatar"])
    except InvalidLogin as e:
        return error("VALIDATION_ERROR", str(e), 400)
    except StorageError:
        current_app.logger.exception("Avatar update failed to persist")
        return error("STORAGE_ERROR", "Could not save avatar", 503)
    return ok(_session_payload(user))


def logout_handler():
    """
    Clears the stored current-user pointer. The token itself stays valid
    until it expires; the client is expected to drop it.
    """
    try:
        get_board().sessions.logout()
    except StorageError:
        current_app.logger.exception("Logout failed to persist")
        return error("STORAGE_ERROR", "Could not clear session", 503)
    return ok({"message": "Logged out successfully"})
