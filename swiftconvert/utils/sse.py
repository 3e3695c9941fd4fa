from __future__ import annotations
import json
from typing import Any, Dict, Optional

def format_sse_event(data: Dict[str, Any], event_type: str = "session", event_id: Optional[int] = None) -> str:
    """Render one Server-Sent Event frame."""
    lines = []
    if event_id is not None:
        lines.append(f"id: {event_id}")
    lines.append(f"event: {event_type}")
    lines.append(f"data: {json.dumps(data, ensure_ascii=False, default=str)}")
    return "\n".join(lines) + "\n\n"

def format_sse_heartbeat() -> str:
    return ": heartbeat\n\n"
