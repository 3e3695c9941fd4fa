"""
Middleware module - HTTP middleware components.

Provides:
- Request ID correlation
"""

from .request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
