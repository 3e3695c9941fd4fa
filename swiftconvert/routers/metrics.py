from __future__ import annotations
from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response
from swiftconvert.obs.metrics import metrics_registry
from swiftconvert.obs.prometheus_metrics import prometheus_metrics

router = APIRouter(tags=["metrics"])

@router.get("/metrics")
async def get_metrics() -> JSONResponse:
    """Application metrics in JSON format."""
    return JSONResponse(metrics_registry.get_metrics())

@router.get("/metrics/prometheus")
async def get_prometheus_metrics() -> Response:
    return Response(
        content=prometheus_metrics.get_prometheus_metrics(),
        media_type=prometheus_metrics.get_content_type()
    )
