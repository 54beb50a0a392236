"""Request body parsing middleware."""

import logging

from flask import g, request

logger = logging.getLogger("finops.api.middleware.body_parser")


def parse_body() -> None:
    """
    Parse JSON and URL-encoded request bodies before routing.

    The parsed body is stored in ``g.body`` (None when the request carries
    neither). A form key sent more than once maps to the list of its values.
    Malformed JSON raises BadRequest and a body above MAX_CONTENT_LENGTH
    raises RequestEntityTooLarge; both reach the generic error handler.
    """
    g.body = None

    if request.is_json:
        if not request.get_data(cache=True):
            return
        g.body = request.get_json()
        logger.debug(f"Parsed JSON body for {request.method} {request.path}")
    elif request.mimetype == "application/x-www-form-urlencoded":
        g.body = {
            key: values[0] if len(values) == 1 else values
            for key, values in request.form.lists()
        }
        logger.debug(f"Parsed form body for {request.method} {request.path}")
