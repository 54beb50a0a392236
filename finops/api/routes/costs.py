"""Cost management routes.

These endpoints reserve the public API surface for cost analysis,
optimization recommendations and reporting. Each currently answers with a
fixed "coming soon" marker.
"""

import logging

from flask import Blueprint

logger = logging.getLogger("finops.api.routes.costs")

bp = Blueprint("costs", __name__, url_prefix="/api")

COMING_SOON = "coming soon"


@bp.route("/costs", methods=["GET"])
def costs():
    return _placeholder("Cost analysis endpoint")


@bp.route("/recommendations", methods=["GET"])
def recommendations():
    return _placeholder("Cost optimization recommendations")


@bp.route("/reports", methods=["GET"])
def reports():
    return _placeholder("Cost reports and analytics")


def _placeholder(message: str) -> dict[str, str]:
    return {"message": message, "status": COMING_SOON}
