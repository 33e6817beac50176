from flask import Blueprint
from feedbox.utils.auth import require_admin
from feedbox.controllers.admin_controller import (
    admin_list_feedbacks_handler,
    set_status_handler,
    list_categories_handler,
    get_stats_handler,
    get_category_stats_handler,
)

admin_bp = Blueprint("admin", __name__, url_prefix="/api/admin")

@admin_bp.route("/feedbacks", methods=["GET"])
@require_admin
def list_feedbacks():
    return admin_list_feedbacks_handler()

@admin_bp.route("/feedbacks/<feedback_id>/status", methods=["PUT"])
@require_admin
def set_status(feedback_id):
    return set_status_handler(feedback_id)

@admin_bp.route("/categories", methods=["GET"])
@require_admin
def list_categories():
    return list_categories_handler()

@admin_bp.route("/dashboard/stats", methods=["GET"])
@require_admin
def dashboard_stats():
    return get_stats_handler()

@admin_bp.route("/dashboard/categories", methods=["GET"])
@require_admin
def dashboard_categories():
    return get_category_stats_handler()
