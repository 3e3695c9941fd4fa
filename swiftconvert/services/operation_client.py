from __future__ import annotations
import time
from typing import Optional
import httpx
from swiftconvert.config import API_BASE_URL, REQUEST_TIMEOUT_SECONDS
from swiftconvert.exceptions import DecodeError, NetworkError, RemoteError
from swiftconvert.models.domain import RequestPayload, ResultArtifact
from swiftconvert.obs.decorators import traced, timed
from swiftconvert.obs.logging_setup import get_logger

logger = get_logger(__name__)

class OperationClient:
    """
    Sends one operation request to the processing service.

    A single attempt per call: no retries, the whole body is buffered
    before a result is produced.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: Optional[float] = REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def __aenter__(self) -> "OperationClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @traced("operation_client_execute")
    @timed("operation_request_duration_ms")
    async def execute(self, payload: RequestPayload) -> ResultArtifact:
        """POST the payload and return the artifact, or raise an OperationError."""
        files = [
            (field_name, (f.name, f.content, f.content_type or "application/octet-stream"))
            for field_name, f in payload.files
        ]
        start = time.perf_counter()

        try:
            response = await self._client.post(payload.endpoint, data=payload.fields, files=files)
        except httpx.DecodingError as e:
            logger.error("Undecodable response body", endpoint=payload.endpoint, error=str(e))
            raise DecodeError(f"Malformed response from {payload.endpoint}: {e}") from e
        except httpx.RequestError as e:
            logger.error("Request to processing service failed",
                         endpoint=payload.endpoint,
                         error_type=type(e).__name__,
                         error=str(e))
            raise NetworkError(f"Could not reach {payload.endpoint}: {e}") from e

        elapsed_ms = round((time.perf_counter() - start) * 1000, 1)

        if not response.is_success:
            logger.warning("Processing service rejected request",
                           endpoint=payload.endpoint,
                           status_code=response.status_code,
                           elapsed_ms=elapsed_ms)
            raise RemoteError(response.status_code, payload.endpoint)

        if not response.content:
            raise DecodeError(f"Empty response body from {payload.endpoint}")

        logger.info("Artifact received",
                    endpoint=payload.endpoint,
                    size_bytes=len(response.content),
                    elapsed_ms=elapsed_ms)

        return ResultArtifact(
            content=response.content,
            content_type=response.headers.get("content-type")
        )
