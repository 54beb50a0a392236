"""Flask application setup for the FinOps service API."""

import logging
import os
from typing import Any

from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import MethodNotAllowed, NotFound

from finops.api.middleware import (
    body_parser,
    error_handler,
    path_normalizer,
    request_logging,
    security_headers,
)
from finops.config import SERVICE_NAME, Settings

logger = logging.getLogger("finops.api")

# Request bodies above this size are rejected before parsing
MAX_BODY_BYTES = 100 * 1024


def create_app(
    config: dict[str, Any] | None = None, settings: Settings | None = None
) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config: Optional configuration dictionary
        settings: Process settings; when omitted only NODE_ENV is read from the environment

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    node_env = settings.node_env if settings else os.environ.get("NODE_ENV", "")

    # Default configuration
    app.config.update(
        {
            "SERVICE_NAME": SERVICE_NAME,
            "NODE_ENV": node_env,
            "MAX_CONTENT_LENGTH": MAX_BODY_BYTES,
        }
    )

    # Apply custom configuration if provided
    if config:
        app.config.update(config)

    # Keep payload keys in the order handlers build them
    app.json.sort_keys = False

    _register_middleware(app)
    _register_blueprints(app)
    _register_error_handlers(app)

    logger.info("Flask application created successfully")
    return app


def _register_middleware(app: Flask) -> None:
    """Register middleware functions. Order matters."""
    app.wsgi_app = path_normalizer.PathNormalizerMiddleware(app.wsgi_app)
    app.after_request(security_headers.apply_security_headers)
    CORS(app, send_wildcard=True)
    app.after_request(request_logging.log_request)
    app.before_request(body_parser.parse_body)


def _register_blueprints(app: Flask) -> None:
    from finops.api.routes import costs, health

    app.register_blueprint(health.bp)
    app.register_blueprint(costs.bp)


def _register_error_handlers(app: Flask) -> None:
    """Register error handlers for consistent error responses."""

    # Any exception, including HTTP errors other than an unmatched route
    app.register_error_handler(Exception, error_handler.handle_generic_error)

    # Only GET routes exist, so a wrong method is an unmatched route too
    app.register_error_handler(NotFound, error_handler.handle_not_found)
    app.register_error_handler(MethodNotAllowed, error_handler.handle_not_found)
