"""Environment-driven configuration for the FinOps service."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

SERVICE_NAME = "devopscanvas-finops"
SERVICE_DISPLAY_NAME = "DevOpsCanvas FinOps Services"
SERVICE_VERSION = "2.2.0"
SERVICE_DESCRIPTION = "Cost Management and Optimization Platform"

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"


@dataclass(frozen=True)
class Settings:
    """Process settings resolved once at startup."""

    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    node_env: str = ""
    log_level: str = "info"
    log_dir: str = "."


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Settings instance

    Raises:
        ValueError: If PORT is not a valid TCP port number
    """
    if environ is None:
        environ = os.environ

    return Settings(
        port=_parse_port(environ.get("PORT")),
        host=environ.get("HOST") or DEFAULT_HOST,
        node_env=environ.get("NODE_ENV", ""),
        log_level=environ.get("LOG_LEVEL") or "info",
        log_dir=environ.get("LOG_DIR") or ".",
    )


def _parse_port(raw: str | None) -> int:
    if raw is None or raw.strip() == "":
        return DEFAULT_PORT

    try:
        port = int(raw)
    except ValueError as e:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from e

    if not 0 <= port <= 65535:
        raise ValueError(f"PORT must be between 0 and 65535, got {port}")
    return port
