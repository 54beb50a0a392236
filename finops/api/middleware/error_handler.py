"""Error handling middleware for consistent API error responses."""

import logging
from typing import Any

from flask import current_app, request

from finops.api import GENERIC_ERROR_MESSAGE, ErrorResponse
from finops.api.middleware.path_normalizer import original_url

logger = logging.getLogger("finops.api.middleware.error_handler")


def handle_generic_error(error: Exception) -> tuple[dict[str, Any], int]:
    """
    Convert any unhandled exception into a 500 response.

    The exception text is only returned to the caller when the service runs
    with NODE_ENV=development.

    Args:
        error: Exception raised while processing the request

    Returns:
        Tuple of (error response dict, status code)
    """
    logger.error(
        f"Unhandled error: {type(error).__name__} - {error}",
        extra={"path": request.path, "method": request.method},
        exc_info=error,
    )

    if current_app.config.get("NODE_ENV") == "development":
        message = str(error)
    else:
        message = GENERIC_ERROR_MESSAGE

    error_response = ErrorResponse(error="Internal server error", message=message)
    return error_response.to_dict(), 500


def handle_not_found(error: Exception) -> tuple[dict[str, Any], int]:
    """
    Build the 404 response for any request no route accepts.

    Args:
        error: NotFound or MethodNotAllowed raised by routing

    Returns:
        Tuple of (error response dict, status code)
    """
    url = original_url()
    logger.debug(f"No route for {request.method} {url}")

    error_response = ErrorResponse(error="Not found", message=f"Route {url} not found")
    return error_response.to_dict(), 404

