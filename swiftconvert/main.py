from __future__ import annotations
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import CORS_ORIGINS, LOG_LEVEL, LOG_STRUCTURED

# Import observability setup
from .obs.otel import setup_tracing
from .obs.logging_setup import setup_logging, get_logger
from .obs.middleware import MetricsMiddleware

# Import middleware
from .middleware.request_id import RequestIDMiddleware

# Import services
from .services.session import close_session

# Import routers
from .routers import catalog, health, metrics, session

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan with startup and shutdown logic."""
    setup_logging(level=LOG_LEVEL, structured=LOG_STRUCTURED)
    setup_tracing()
    logger.info("SwiftConvert client starting", version=__version__)

    yield

    await close_session()
    try:
        from opentelemetry import trace
        tracer_provider = trace.get_tracer_provider()
        if hasattr(tracer_provider, 'shutdown'):
            tracer_provider.shutdown()
    except Exception as e:
        logger.warning("Error during telemetry shutdown", error=str(e))
    logger.info("SwiftConvert client stopped")

app = FastAPI(
    title="SwiftConvert Client",
    version=__version__,
    description="Operation dispatch and file compatibility layer for SwiftConvert document tools",
    lifespan=lifespan
)

app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(MetricsMiddleware)

app.include_router(health.router)
app.include_router(catalog.router)
app.include_router(session.router)
app.include_router(metrics.router)
