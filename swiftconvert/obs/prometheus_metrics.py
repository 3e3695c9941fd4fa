from __future__ import annotations
from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from swiftconvert.obs.logging_setup import get_logger

logger = get_logger(__name__)

OPERATIONS_TOTAL = Counter(
    'swiftconvert_operations_total',
    'Operation attempts by outcome',
    ['operation', 'outcome']
)

OPERATION_DURATION = Histogram(
    'swiftconvert_operation_duration_seconds',
    'Remote exchange duration in seconds',
    ['operation']
)

ARTIFACT_BYTES = Histogram(
    'swiftconvert_artifact_bytes',
    'Size of artifacts returned by the service',
    ['operation'],
    buckets=(1024, 64 * 1024, 1024 * 1024, 5 * 1024 * 1024, 20 * 1024 * 1024, 100 * 1024 * 1024)
)

VALIDATION_FAILURES = Counter(
    'swiftconvert_validation_failures_total',
    'Rejected file selections by kind',
    ['operation', 'kind']
)

IN_FLIGHT = Gauge(
    'swiftconvert_requests_in_flight',
    'Outstanding remote exchanges'
)

class PrometheusMetrics:
    """Prometheus metrics collector with convenience methods."""

    def record_operation(self, operation: str, outcome: str, duration_seconds: float | None = None):
        OPERATIONS_TOTAL.labels(operation=operation, outcome=outcome).inc()
        if duration_seconds is not None:
            OPERATION_DURATION.labels(operation=operation).observe(duration_seconds)

    def record_artifact(self, operation: str, size_bytes: int):
        ARTIFACT_BYTES.labels(operation=operation).observe(size_bytes)

    def record_validation_failure(self, operation: str, kind: str):
        VALIDATION_FAILURES.labels(operation=operation, kind=kind).inc()

    def update_in_flight(self, count: int):
        IN_FLIGHT.set(count)

    def get_prometheus_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        return generate_latest()

    def get_content_type(self) -> str:
        return CONTENT_TYPE_LATEST

# Global Prometheus metrics instance
prometheus_metrics = PrometheusMetrics()
