"""Access logging middleware in Apache combined log format."""

import logging
from datetime import datetime, timezone

from flask import Response, request

from finops.api.middleware.path_normalizer import original_url

logger = logging.getLogger("finops.access")

CLF_DATE_FORMAT = "%d/%b/%Y:%H:%M:%S +0000"


def log_request(response: Response) -> Response:
    """
    Emit one access log line for the response being returned.

    Args:
        response: Outgoing response

    Returns:
        The response, unchanged
    """
    logger.info(format_combined(response), extra={"status_code": response.status_code})
    return response


def format_combined(response: Response) -> str:
    """Render the current request/response pair as a combined log line."""
    remote_user = request.authorization.username if request.authorization else None
    url = original_url()
    http_version = request.environ.get("SERVER_PROTOCOL", "HTTP/1.1").removeprefix("HTTP/")
    content_length = response.headers.get("Content-Length")
    timestamp = datetime.now(timezone.utc).strftime(CLF_DATE_FORMAT)

    return (
        f"{request.remote_addr or '-'} - {remote_user or '-'} [{timestamp}] "
        f'"{request.method} {url} HTTP/{http_version}" '
        f"{response.status_code} {content_length or '-'} "
        f'"{request.referrer or "-"}" "{request.user_agent.string or "-"}"'
    )
