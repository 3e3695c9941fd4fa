"""
API routers module.

Provides:
- Health check
- Operation and conversion catalog
- Session control for the presentation layer
- Metrics endpoints
"""

from . import catalog, health, metrics, session

__all__ = [
    "catalog",
    "health",
    "metrics",
    "session"
]
