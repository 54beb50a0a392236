"""API package for the FinOps service REST endpoints."""

from dataclasses import dataclass
from typing import Any

__all__ = ["ErrorResponse", "GENERIC_ERROR_MESSAGE"]

GENERIC_ERROR_MESSAGE = "Something went wrong"


@dataclass
class ErrorResponse:
    """Consistent error response format for all API endpoints."""

    error: str  # Short error title, e.g. "Not found"
    message: str  # Human-readable detail

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error, "message": self.message}
