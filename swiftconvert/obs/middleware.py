from __future__ import annotations
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from swiftconvert.obs.metrics import inc_counter, record_duration

class MetricsMiddleware(BaseHTTPMiddleware):
    """Counts requests and records their duration per route."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        labels = {"method": request.method, "path": request.url.path}

        try:
            response: Response = await call_next(request)
        except Exception:
            inc_counter("http_requests_errors_total", {**labels, "status": "500"})
            raise

        labels["status"] = str(response.status_code)
        inc_counter("http_requests_total", labels)
        if response.status_code >= 400:
            inc_counter("http_requests_errors_total", labels)
        record_duration("http_request_duration_ms", (time.perf_counter() - start_time) * 1000)
        return response
