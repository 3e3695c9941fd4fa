from __future__ import annotations
import os
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased, ALWAYS_ON
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from swiftconvert import __version__
from swiftconvert.config import OTEL_EXPORTER_OTLP_ENDPOINT, OTEL_SERVICE_NAME
from swiftconvert.obs.logging_setup import get_logger

logger = get_logger(__name__)

def setup_tracing() -> None:
    """Initialize OpenTelemetry tracing."""

    resource = Resource.create({
        "service.name": OTEL_SERVICE_NAME,
        "service.version": __version__,
        "deployment.environment": os.getenv("ENVIRONMENT", "development")
    })

    sample_rate = float(os.getenv("OTEL_SAMPLE_RATE", "1.0"))
    sampler = ALWAYS_ON if sample_rate >= 1.0 else TraceIdRatioBased(sample_rate)

    tracer_provider = TracerProvider(resource=resource, sampler=sampler)

    if OTEL_EXPORTER_OTLP_ENDPOINT:
        exporter = OTLPSpanExporter(
            endpoint=f"{OTEL_EXPORTER_OTLP_ENDPOINT}/v1/traces",
            timeout=10
        )
        logger.info("OTLP exporter configured", endpoint=OTEL_EXPORTER_OTLP_ENDPOINT)
    else:
        exporter = ConsoleSpanExporter()
        logger.info("No OTLP endpoint configured, using console exporter")

    tracer_provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(tracer_provider)

    try:
        HTTPXClientInstrumentor().instrument()
        LoggingInstrumentor().instrument(set_logging_format=False)
    except Exception as e:
        logger.warning("Auto-instrumentation unavailable", error=str(e))

    logger.info("OpenTelemetry configured", service=OTEL_SERVICE_NAME)
