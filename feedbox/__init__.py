import logging

from flask import Flask
from flask_migrate import Migrate
from feedbox.extensions import db, cors
from feedbox.routes import register_routes
from feedbox.services.board import Board


def create_app(overrides=None, storage=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))

    # Initialize database (only used by the database storage backend)
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate = Migrate(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config["CORS_ORIGINS"],
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    app.extensions["feedbox"] = Board.from_config(app.config, storage=storage)

    register_routes(app)

    return app
