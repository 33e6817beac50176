from flask import Blueprint
from feedbox.controllers.auth_controller import (
    student_login_handler,
    admin_login_handler,
    me_handler,
    update_avatar_handler,
    logout_handler,
)
from feedbox.utils.auth import require_auth, require_student

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")

@auth_bp.post("/student")
def student_login():
    return student_login_handler()


@auth_bp.post("/admin")
def admin_login():
    return admin_login_handler()


@auth_bp.get("/me")
@require_auth
def me():
    return me_handler()


@auth_bp.put("/avatar")
@require_student
def update_avatar():
    return update_avatar_handler()


@auth_bp.post("/logout")
@require_auth
def logout():
    return logout_handler()
