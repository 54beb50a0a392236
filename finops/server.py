"""Process entry point: configure logging, bind the HTTP server, handle signals."""

import logging
import signal
import sys

from flask import Flask
from werkzeug.serving import BaseWSGIServer, make_server

from finops.api.app import create_app
from finops.config import Settings, load_settings
from finops.logging_config import setup_logging

logger = logging.getLogger("finops.server")

SHUTDOWN_SIGNALS = (signal.SIGTERM, signal.SIGINT)


def handle_shutdown_signal(signum: int, frame) -> None:
    """Log the signal and exit immediately without draining requests."""
    name = signal.Signals(signum).name
    logger.info(f"{name} received, shutting down gracefully", extra={"signal": name})
    sys.exit(0)


def install_signal_handlers() -> None:
    for signum in SHUTDOWN_SIGNALS:
        signal.signal(signum, handle_shutdown_signal)


def build_server(app: Flask, settings: Settings) -> BaseWSGIServer:
    """Bind a WSGI server for the app on the configured host and port."""
    server = make_server(settings.host, settings.port, app, threaded=True)
    logger.info(f"DevOpsCanvas FinOps service started on port {server.port}")
    logger.info(f"Health check available at http://localhost:{server.port}/health")
    return server


def main() -> None:
    settings = load_settings()
    setup_logging(settings)

    app = create_app(settings=settings)
    install_signal_handlers()

    server = build_server(app, settings)
    server.serve_forever()


if __name__ == "__main__":
    main()
