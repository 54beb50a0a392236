"""API routes package for REST endpoints.

- health.py: Liveness probe and service descriptor
- costs.py: Cost analysis, recommendation and report placeholders
"""

__all__ = ["costs", "health"]
