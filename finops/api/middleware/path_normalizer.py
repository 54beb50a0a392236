"""Path normalization middleware for lenient route matching.

Routes match case-insensitively and with an optional trailing slash, so
``/API/Costs/`` reaches the ``/api/costs`` handler. The path as sent by the
client is kept in the WSGI environ for messages and access logs.
"""

import logging

from flask import request

logger = logging.getLogger("finops.api.middleware.path_normalizer")

ORIGINAL_PATH_KEY = "finops.original_path"


class PathNormalizerMiddleware:
    """WSGI middleware that rewrites PATH_INFO before Flask routes the request."""

    def __init__(self, wsgi_app):
        self.wsgi_app = wsgi_app

    def __call__(self, environ, start_response):
        path = environ.get("PATH_INFO", "")
        environ[ORIGINAL_PATH_KEY] = path
        environ["PATH_INFO"] = normalize_path(path)
        return self.wsgi_app(environ, start_response)


def normalize_path(path: str) -> str:
    """Lower-case a path and drop one trailing slash (the root path is kept)."""
    normalized = path.lower()
    if len(normalized) > 1 and normalized.endswith("/"):
        normalized = normalized[:-1]
    return normalized


def original_url() -> str:
    """Return the path as the client sent it, including its query string, if any."""
    path = request.environ.get(ORIGINAL_PATH_KEY, request.path)
    query = request.query_string.decode("latin-1")
    return f"{path}?{query}" if query else path
