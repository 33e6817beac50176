from flask import Blueprint
from feedbox.utils.auth import require_auth, require_student
from feedbox.controllers.feedback_controller import (
    list_feedbacks_handler,
    get_feedback_handler,
    create_feedback_handler,
    toggle_vote_handler,
    add_comment_handler,
    get_my_feedbacks_handler,
    get_notifications_handler,
)

feedback_bp = Blueprint("feedback", __name__, url_prefix="/api/feedback")

@feedback_bp.route("", methods=["GET"])
@require_auth
def list_feedbacks():
    return list_feedbacks_handler()

@feedback_bp.route("", methods=["POST"])
@require_student
def create_feedback():
    return create_feedback_handler()

@feedback_bp.route("/me", methods=["GET"])
@require_student
def get_my_feedbacks():
    return get_my_feedbacks_handler()

@feedback_bp.route("/notifications", methods=["GET"])
@require_student
def get_notifications():
    return get_notifications_handler()

@feedback_bp.route("/<feedback_id>", methods=["GET"])
@require_auth
def get_feedback(feedback_id):
    return get_feedback_handler(feedback_id)

@feedback_bp.route("/<feedback_id>/vote", methods=["POST"])
@require_student
def toggle_vote(feedback_id):
    return toggle_vote_handler(feedback_id)

@feedback_bp.route("/<feedback_id>/comments", methods=["POST"])
@require_auth
def add_comment(feedback_id):
    return add_comment_handler(feedback_id)
