"""Logging setup for the FinOps service.

Structured JSON lines go to ``error.log`` (errors only) and ``combined.log``
(all levels); a colorized human-readable rendition goes to stdout.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

from finops.config import SERVICE_NAME, Settings
from finops.timestamps import utc_timestamp

ERROR_LOG_FILENAME = "error.log"
COMBINED_LOG_FILENAME = "combined.log"

# Extra record attributes copied into JSON entries when present
EXTRA_FIELDS = ("path", "method", "status_code", "signal")


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": utc_timestamp(datetime.fromtimestamp(record.created, timezone.utc)),
            "level": record.levelname.lower(),
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            value = record.__dict__.get(key)
            if value is not None:
                entry[key] = value
        if record.exc_info:
            entry["stack"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(settings: Settings) -> logging.Logger:
    """
    Configure the ``finops`` logger hierarchy.

    Safe to call more than once; existing handlers are replaced.

    Args:
        settings: Resolved process settings (log level and directory)

    Returns:
        The configured ``finops`` logger
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logger = logging.getLogger("finops")
    logger.setLevel(level)
    logger.propagate = False

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    os.makedirs(settings.log_dir, exist_ok=True)
    formatter = JSONFormatter()

    error_handler = logging.FileHandler(
        os.path.join(settings.log_dir, ERROR_LOG_FILENAME), mode="a", encoding="utf-8"
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)
    logger.addHandler(error_handler)

    combined_handler = logging.FileHandler(
        os.path.join(settings.log_dir, COMBINED_LOG_FILENAME), mode="a", encoding="utf-8"
    )
    combined_handler.setFormatter(formatter)
    logger.addHandler(combined_handler)

    console_handler = RichHandler(
        console=Console(file=sys.stdout),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    return logger
