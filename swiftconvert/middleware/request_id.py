from __future__ import annotations
import uuid
from typing import Callable
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from swiftconvert.obs.logging_setup import get_logger

logger = get_logger(__name__)

class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags every request with an ID, echoed back in the response headers."""

    def __init__(self, app, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.header_name.lower()) or f"req_{uuid.uuid4().hex[:12]}"
        request.state.request_id = request_id

        logger.debug("Request started",
                     request_id=request_id,
                     method=request.method,
                     path=request.url.path)

        response = await call_next(request)
        response.headers[self.header_name] = request_id

        logger.debug("Request completed",
                     request_id=request_id,
                     status_code=response.status_code)
        return response
