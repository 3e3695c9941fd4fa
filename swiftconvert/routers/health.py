from __future__ import annotations
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from swiftconvert import __version__

router = APIRouter(tags=["health"])

@router.get("/health")
async def health() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse({"status": "ok", "version": __version__})
