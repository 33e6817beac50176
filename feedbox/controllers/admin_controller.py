import math
from flask import current_app
from feedbox.errors import StorageError
from feedbox.schemas.feedback_schema import StatusSchema
from feedbox.services.board import get_board
from feedbox.services.feedback_service import ALL
from feedbox.utils.http import ok, error, json_body, validate_schema, arg_int, arg_str


def admin_list_feedbacks_handler():
    page = arg_int("page", 1, min_value=1)
    limit = arg_int("limit", 10, min_value=1, max_value=100)
    category = (arg_str("category") or ALL).strip() or ALL

    feedbacks = get_board().feedbacks.filter_by_category(category)
    total = len(feedbacks)
    start = (page - 1) * limit

    return ok({
        "items": [f.to_dict() for f in feedbacks[start:start + limit]],
        "total": total,
        "page": page,
        "limit": limit,
        "pages": math.ceil(total / limit) if total else 0,
    })


def set_status_handler(feedback_id):
    data, errors = validate_schema(StatusSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid status", 400, details=errors)

    try:
        feedback = get_board().feedbacks.set_status(feedback_id, data["status"])
    except StorageError:
        current_app.logger.exception(f"Could not persist status of {feedback_id}")
        return error("STORAGE_ERROR", "Status could not be saved", 503)

    if feedback is None:
        return error("NOT_FOUND", "Feedback not found", 404)
    return ok(feedback.to_dict())


def list_categories_handler():
    return ok(get_board().feedbacks.categories())


def get_stats_handler():
    return ok(get_board().feedbacks.status_counts())


def get_category_stats_handler():
    aggregate = get_board().feedbacks.aggregate_by_category()
    # list keeps the largest-first ordering through JSON
    return ok([{"category": name, **counts} for name, counts in aggregate.items()])
