from flask import jsonify, current_app
from feedbox.errors import StorageError
from feedbox.services.board import get_board


def home_index():
    return jsonify({
        "message": "Anonymous Feedback Box API",
    })


def health_check():
    storage_status = "healthy"
    try:
        get_board().storage.load(get_board().keys.anon_counter)
    except StorageError as e:
        storage_status = f"unhealthy: {str(e)}"

    return jsonify({
        "status": "online",
        "storage_backend": current_app.config.get("STORAGE_BACKEND"),
        "storage": storage_status,
    })
