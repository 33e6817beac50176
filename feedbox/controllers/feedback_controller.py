from flask import request, current_app
from feedbox.errors import StorageError
from feedbox.schemas.feedback_schema import FeedbackSchema, CommentSchema
from feedbox.services.board import get_board
from feedbox.services.feedback_service import ALL
from feedbox.utils.http import ok, error, json_body, validate_schema, arg_str


def list_feedbacks_handler():
    category = (arg_str("category") or ALL).strip() or ALL
    feedbacks = get_board().feedbacks.filter_by_category(category)
    return ok([f.to_dict() for f in feedbacks])


def get_feedback_handler(feedback_id):
    feedback = get_board().feedbacks.get(feedback_id)
    if feedback is None:
        return error("NOT_FOUND", "Feedback not found", 404)
    return ok(feedback.to_dict())


def create_feedback_handler():
    data, errors = validate_schema(FeedbackSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid feedback data", 400, details=errors)

    try:
        feedback = get_board().feedbacks.submit(
            request.user, data["category"], data["content"], data.get("custom_category")
        )
    except StorageError:
        current_app.logger.exception("Could not persist new feedback")
        return error("STORAGE_ERROR", "Feedback could not be saved", 503)

    if feedback is None:
        return error("EMPTY_CONTENT", "Feedback content is empty", 400)
    return ok(feedback.to_dict(), 201)


def toggle_vote_handler(feedback_id):
    try:
        feedback = get_board().feedbacks.toggle_vote(feedback_id, request.user.id)
    except StorageError:
        current_app.logger.exception(f"Could not persist vote on {feedback_id}")
        return error("STORAGE_ERROR", "Vote could not be saved", 503)

    if feedback is None:
        return error("NOT_FOUND", "Feedback not found", 404)
    return ok({
        "id": feedback.id,
        "votes": len(feedback.votes),
        "voted": request.user.id in feedback.votes,
    })


def add_comment_handler(feedback_id):
    data, errors = validate_schema(CommentSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid comment", 400, details=errors)

    board = get_board()
    if board.feedbacks.get(feedback_id) is None:
        return error("NOT_FOUND", "Feedback not found", 404)

    try:
        comment = board.feedbacks.add_comment(feedback_id, request.user, data["text"])
    except StorageError:
        current_app.logger.exception(f"Could not persist comment on {feedback_id}")
        return error("STORAGE_ERROR", "Comment could not be saved", 503)

    if comment is None:
        return error("EMPTY_CONTENT", "Comment is empty", 400)
    return ok(comment.to_dict(), 201)


def get_my_feedbacks_handler():
    feedbacks = get_board().feedbacks.list_by_author(request.user.id)
    return ok([f.to_dict() for f in feedbacks])


def get_notifications_handler():
    notifications = get_board().feedbacks.notifications_for(request.user.id)
    return ok({
        "items": notifications,
        "has_alert": any(n["status"] != "pending" for n in notifications),
    })
