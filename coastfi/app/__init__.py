"""Application factory and app-wide configuration."""

from __future__ import annotations

from typing import Optional

from flask import Flask
from flask_cors import CORS
from loguru import logger

from coastfi.app.api.routes import api_bp
from coastfi.config import Settings, load_settings
from coastfi.logging_config import configure_logging


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["COASTFI_SETTINGS"] = settings
    app.config["DEBUG"] = settings.debug

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info(f"Coast FI API ready, CORS origins: {', '.join(settings.cors_origins)}")
    return app
