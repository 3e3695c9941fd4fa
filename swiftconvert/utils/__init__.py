"""
Utility functions and helpers.

Provides:
- Server-sent events framing
"""

from .sse import format_sse_event, format_sse_heartbeat

__all__ = [
    "format_sse_event",
    "format_sse_heartbeat"
]
