from __future__ import annotations
import asyncio
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple, Union
from swiftconvert.exceptions import (
    ArtifactSaveError,
    InvalidParameters,
    OperationError,
    ValidationError,
)
from swiftconvert.models.catalog import (
    ROTATION_ANGLES,
    Format,
    Operation,
    OperationId,
    get_operation,
)
from swiftconvert.models.domain import CandidateFile, OperationParameters
from swiftconvert.obs.decorators import traced
from swiftconvert.obs.logging_setup import get_logger
from swiftconvert.obs.metrics import set_gauge
from swiftconvert.obs.prometheus_metrics import prometheus_metrics
from swiftconvert.services.artifact_downloader import ArtifactDownloader
from swiftconvert.services.compatibility import FormatCompatibilityMatrix, compatibility_matrix
from swiftconvert.services.file_validator import FileSetValidator
from swiftconvert.services.operation_client import OperationClient
from swiftconvert.services.request_builder import RequestBuilder

logger = get_logger(__name__)

PROCESSING_MESSAGE = "Processing your request..."
SUCCESS_MESSAGE = "Operation successful! Your download should start shortly."
FAILURE_MESSAGE = "Operation failed. Please try again."

class SessionStatus(str, Enum):
    IDLE = "idle"
    STAGED = "staged"
    IN_FLIGHT = "in-flight"
    SUCCESS = "success"
    ERROR = "error"

@dataclass(frozen=True)
class Idle:
    message: Optional[str] = None
    status: ClassVar[SessionStatus] = SessionStatus.IDLE

@dataclass(frozen=True)
class Staged:
    message: ClassVar[Optional[str]] = None
    status: ClassVar[SessionStatus] = SessionStatus.STAGED

@dataclass(frozen=True)
class InFlight:
    attempt: int
    message: ClassVar[str] = PROCESSING_MESSAGE
    status: ClassVar[SessionStatus] = SessionStatus.IN_FLIGHT

@dataclass(frozen=True)
class Success:
    filename: str
    message: str = SUCCESS_MESSAGE
    status: ClassVar[SessionStatus] = SessionStatus.SUCCESS

@dataclass(frozen=True)
class Error:
    reason: str
    message: str = FAILURE_MESSAGE
    status: ClassVar[SessionStatus] = SessionStatus.ERROR

SessionState = Union[Idle, Staged, InFlight, Success, Error]

class OperationSession:
    """
    Owns the selected tool, staged files, parameters and lifecycle state.

    At most one remote exchange is outstanding. Each attempt is tagged with
    a sequence number; switching tools or reselecting files bumps the
    sequence so a late result from the superseded attempt is discarded.
    """

    def __init__(
        self,
        client: OperationClient,
        downloader: Optional[ArtifactDownloader] = None,
        validator: Optional[FileSetValidator] = None,
        matrix: FormatCompatibilityMatrix = compatibility_matrix,
    ):
        self._client = client
        self._downloader = downloader or ArtifactDownloader()
        self._validator = validator or FileSetValidator()
        self._matrix = matrix
        self._builder = RequestBuilder(matrix)

        self._operation: Operation = get_operation(OperationId.CONVERT)
        self._files: Tuple[CandidateFile, ...] = ()
        self._parameters = OperationParameters()
        self._state: SessionState = Idle()
        self._sequence = 0
        self._pending = 0
        self._task: Optional[asyncio.Task] = None
        self._subscribers: List[asyncio.Queue] = []

    @property
    def operation(self) -> Operation:
        return self._operation

    @property
    def files(self) -> Tuple[CandidateFile, ...]:
        return self._files

    @property
    def parameters(self) -> OperationParameters:
        return self._parameters

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def pending_requests(self) -> int:
        return self._pending

    @property
    def can_trigger(self) -> bool:
        """Whether the action affordance should be enabled."""
        return bool(self._files) and not isinstance(self._state, InFlight)

    # --- transitions -----------------------------------------------------

    def select_tool(self, operation_id: Union[str, OperationId]) -> SessionState:
        """Switch tools; staged files, parameters and message are cleared."""
        operation = get_operation(operation_id)
        self._supersede()
        self._operation = operation
        self._files = ()
        self._parameters = OperationParameters()
        logger.info("Tool selected", operation=operation.id.value)
        return self._transition(Idle())

    def select_files(self, candidates: Sequence[CandidateFile]) -> SessionState:
        self._supersede()
        try:
            file_set = self._validator.validate(self._operation, candidates)
        except ValidationError as e:
            self._files = ()
            prometheus_metrics.record_validation_failure(self._operation.id.value, e.kind)
            logger.warning("File selection rejected",
                           operation=self._operation.id.value,
                           reason=e.kind,
                           error=str(e))
            return self._transition(Idle(message=str(e)))

        self._files = file_set.files

        if self._operation.id is OperationId.CONVERT and len(candidates) == 1:
            inferred = self._matrix.infer_format_from_filename(candidates[0].name)
            if inferred is not None:
                self._parameters = replace(
                    self._parameters,
                    source=inferred,
                    target=self._matrix.default_target(inferred),
                )

        logger.info("Files staged",
                    operation=self._operation.id.value,
                    file_count=len(self._files),
                    total_bytes=file_set.total_bytes)
        return self._transition(Staged())

    def set_conversion(
        self,
        source: Union[str, Format],
        target: Optional[Union[str, Format]] = None,
    ) -> OperationParameters:
        """
        Choose the conversion pair.

        Without an explicit target the current one is kept when still valid
        for the new source, otherwise the source's default target is used.
        """
        source, target = self._resolve_conversion(source, target)
        self._parameters = replace(self._parameters, source=source, target=target)
        return self._parameters

    def set_angle(self, angle: Union[int, str]) -> OperationParameters:
        self._parameters = replace(self._parameters, angle=_as_angle(angle))
        return self._parameters

    def set_order(self, order: str) -> OperationParameters:
        self._parameters = replace(self._parameters, order=str(order))
        return self._parameters

    def update_parameters(
        self,
        source: Optional[Union[str, Format]] = None,
        target: Optional[Union[str, Format]] = None,
        angle: Optional[Union[int, str]] = None,
        order: Optional[str] = None,
    ) -> OperationParameters:
        """
        Apply several parameter changes together.

        Every value is checked before any is applied, so a rejected update
        leaves the parameters as they were.
        """
        parameters = self._parameters
        if source is not None or target is not None:
            new_source, new_target = self._resolve_conversion(
                parameters.source if source is None else source, target
            )
            parameters = replace(parameters, source=new_source, target=new_target)
        if angle is not None:
            parameters = replace(parameters, angle=_as_angle(angle))
        if order is not None:
            parameters = replace(parameters, order=str(order))

        self._parameters = parameters
        return parameters

    @traced("session_trigger")
    async def trigger(self) -> SessionState:
        """
        Run the selected operation once.

        A no-op while a request is in flight or when nothing is staged.
        """
        if not self.can_trigger:
            logger.debug("Action ignored", status=self._state.status.value, file_count=len(self._files))
            return self._state

        self._sequence += 1
        attempt = self._sequence
        operation, parameters, files = self._operation, self._parameters, self._files

        try:
            payload = self._builder.build(operation, files, parameters)
        except InvalidParameters as e:
            logger.error("Cannot build request", operation=operation.id.value, error=str(e))
            return self._transition(Error(reason="invalid_parameters"))

        self._transition(InFlight(attempt))
        self._pending += 1
        self._publish_pending()
        start = time.perf_counter()
        failure: Optional[Exception] = None
        try:
            artifact = await self._client.execute(payload)
        except OperationError as e:
            failure = e
        except Exception as e:
            logger.exception("Unexpected failure during operation", operation=operation.id.value)
            failure = e
        finally:
            self._pending -= 1
            self._publish_pending()
        duration = time.perf_counter() - start

        if attempt != self._sequence:
            logger.info("Discarding result of superseded attempt",
                        operation=operation.id.value,
                        attempt=attempt,
                        current=self._sequence)
            prometheus_metrics.record_operation(operation.id.value, "superseded", duration)
            return self._state

        if failure is not None:
            reason = getattr(failure, "kind", "unexpected")
            logger.error("Operation failed",
                         operation=operation.id.value,
                         reason=reason,
                         error=str(failure))
            prometheus_metrics.record_operation(operation.id.value, reason, duration)
            return self._transition(Error(reason=reason))

        prometheus_metrics.record_artifact(operation.id.value, artifact.size)
        target = parameters.target if operation.id is OperationId.CONVERT else None
        try:
            path = self._downloader.save(artifact, operation, target)
        except ArtifactSaveError as e:
            prometheus_metrics.record_operation(operation.id.value, e.kind, duration)
            return self._transition(Error(reason=e.kind))

        prometheus_metrics.record_operation(operation.id.value, "success", duration)
        return self._transition(Success(filename=path.name))

    def dispatch(self) -> Optional[asyncio.Task]:
        """
        Schedule ``trigger`` as a task the session can cancel when superseded.

        While a dispatched attempt is still pending the same task is returned.
        """
        if self._task is not None and not self._task.done():
            return self._task
        if not self.can_trigger:
            return None
        self._task = asyncio.create_task(self.trigger())
        return self._task

    # --- observers -------------------------------------------------------

    def subscribe(self) -> asyncio.Queue:
        """Queue receiving one event per state transition."""
        queue: asyncio.Queue = asyncio.Queue()
        self._subscribers.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        if queue in self._subscribers:
            self._subscribers.remove(queue)

    def snapshot(self) -> Dict[str, Any]:
        return {
            "operation": self._operation.id.value,
            "status": self._state.status.value,
            "message": self._state.message,
            "filename": getattr(self._state, "filename", None),
            "reason": getattr(self._state, "reason", None),
            "files": [{"name": f.name, "size": f.size} for f in self._files],
            "parameters": {
                "source": self._parameters.source.value,
                "target": self._parameters.target.value,
                "angle": self._parameters.angle,
                "order": self._parameters.order,
            },
            "can_trigger": self.can_trigger,
        }

    async def aclose(self) -> None:
        self._supersede()
        await self._client.aclose()

    # --- internals -------------------------------------------------------

    def _resolve_conversion(
        self,
        source: Union[str, Format],
        target: Optional[Union[str, Format]],
    ) -> Tuple[Format, Format]:
        source = _as_format(source)
        if not self._matrix.target_formats(source):
            raise InvalidParameters(f"No conversion declared from {source.value}")

        if target is None:
            current = self._parameters.target
            target = current if self._matrix.is_valid_pair(source, current) else self._matrix.default_target(source)
        else:
            target = _as_format(target)
            if not self._matrix.is_valid_pair(source, target):
                raise InvalidParameters(f"Cannot convert {source.value} to {target.value}")
        return source, target

    def _publish_pending(self) -> None:
        prometheus_metrics.update_in_flight(self._pending)
        set_gauge("operation_requests_in_flight", self._pending)

    def _supersede(self) -> None:
        if isinstance(self._state, InFlight):
            logger.info("Superseding in-flight attempt", attempt=self._state.attempt)
        self._sequence += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def _transition(self, state: SessionState) -> SessionState:
        previous = self._state
        self._state = state
        logger.debug("Session transition",
                     from_status=previous.status.value,
                     to_status=state.status.value)

        event = {
            "type": "session_updated",
            "operation": self._operation.id.value,
            "status": state.status.value,
            "message": state.message,
            "timestamp": time.time(),
        }
        for queue in self._subscribers:
            queue.put_nowait(event)
        return state

def _as_format(value: Union[str, Format]) -> Format:
    try:
        return Format(str(getattr(value, "value", value)).upper())
    except ValueError:
        raise InvalidParameters(f"Unknown format: {value}") from None

def _as_angle(value: Union[int, str]) -> int:
    try:
        angle = int(value)
    except (TypeError, ValueError):
        raise InvalidParameters(f"Unsupported rotation angle: {value}") from None
    if angle not in ROTATION_ANGLES:
        raise InvalidParameters(f"Unsupported rotation angle: {angle}")
    return angle

# Process-wide session for the HTTP surface
_session: Optional[OperationSession] = None

def get_session() -> OperationSession:
    global _session
    if _session is None:
        _session = OperationSession(OperationClient())
    return _session

async def close_session() -> None:
    global _session
    if _session is not None:
        await _session.aclose()
        _session = None
