"""Health check and service descriptor routes."""

import logging

from flask import Blueprint

from finops.config import (
    SERVICE_DESCRIPTION,
    SERVICE_DISPLAY_NAME,
    SERVICE_NAME,
    SERVICE_VERSION,
)
from finops.timestamps import utc_timestamp

logger = logging.getLogger("finops.api.routes.health")

bp = Blueprint("health", __name__)

ENDPOINTS = {
    "health": "/health",
    "costs": "/api/costs",
    "recommendations": "/api/recommendations",
    "reports": "/api/reports",
}


@bp.route("/health", methods=["GET"])
def health():
    """
    Liveness probe.

    Returns:
        200: {"status": "healthy", "service": str, "version": str, "timestamp": str}
    """
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "timestamp": utc_timestamp(),
    }, 200


@bp.route("/", methods=["GET"])
def index():
    """Describe the service and list its endpoints."""
    return {
        "message": SERVICE_DISPLAY_NAME,
        "version": SERVICE_VERSION,
        "description": SERVICE_DESCRIPTION,
        "endpoints": dict(ENDPOINTS),
    }

