from __future__ import annotations
import asyncio
from typing import List
from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from fastapi.responses import StreamingResponse
from swiftconvert.exceptions import InvalidParameters
from swiftconvert.models.domain import CandidateFile
from swiftconvert.models.schemas import ParametersRequest, SessionResponse, ToolSelectRequest
from swiftconvert.obs.logging_setup import get_logger
from swiftconvert.services.session import OperationSession, get_session
from swiftconvert.utils.sse import format_sse_event, format_sse_heartbeat

logger = get_logger(__name__)
router = APIRouter(prefix="/session", tags=["session"])

HEARTBEAT_SECONDS = 15.0

@router.get("", response_model=SessionResponse)
async def read_session(session: OperationSession = Depends(get_session)) -> SessionResponse:
    return SessionResponse(**session.snapshot())

@router.post("/tool", response_model=SessionResponse)
async def select_tool(
    request: ToolSelectRequest,
    session: OperationSession = Depends(get_session)
) -> SessionResponse:
    session.select_tool(request.operation)
    return SessionResponse(**session.snapshot())

@router.post("/files", response_model=SessionResponse)
async def select_files(
    files: List[UploadFile] = File(default=[]),
    session: OperationSession = Depends(get_session)
) -> SessionResponse:
    """Stage uploaded files. Rejected selections come back as an idle state with a message."""
    candidates = []
    for upload in files:
        content = await upload.read()
        candidates.append(CandidateFile(
            name=upload.filename or "upload",
            content=content,
            content_type=upload.content_type,
        ))
    session.select_files(candidates)
    return SessionResponse(**session.snapshot())

@router.put("/parameters", response_model=SessionResponse)
async def update_parameters(
    request: ParametersRequest,
    session: OperationSession = Depends(get_session)
) -> SessionResponse:
    """Update parameters; nothing changes when any field is rejected."""
    try:
        session.update_parameters(
            source=request.source,
            target=request.target,
            angle=request.angle,
            order=request.order,
        )
    except InvalidParameters as e:
        logger.warning("Rejected parameters", error=str(e))
        raise HTTPException(status_code=422, detail=str(e))
    return SessionResponse(**session.snapshot())

@router.post("/action", response_model=SessionResponse)
async def trigger_action(session: OperationSession = Depends(get_session)) -> SessionResponse:
    """Run the selected operation; ignored while one is already running."""
    await session.trigger()
    return SessionResponse(**session.snapshot())

@router.get("/events")
async def stream_session_events(
    request: Request,
    session: OperationSession = Depends(get_session)
) -> StreamingResponse:
    """Server-Sent Events, one per session state transition."""
    queue = session.subscribe()

    async def event_generator():
        event_id = 0
        try:
            yield format_sse_event(session.snapshot(), event_type="snapshot", event_id=event_id)
            while not await request.is_disconnected():
                try:
                    event = await asyncio.wait_for(queue.get(), timeout=HEARTBEAT_SECONDS)
                except asyncio.TimeoutError:
                    yield format_sse_heartbeat()
                    continue
                event_id += 1
                yield format_sse_event(event, event_id=event_id)
        finally:
            session.unsubscribe(queue)

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "Connection": "keep-alive"}
    )
