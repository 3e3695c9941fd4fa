from __future__ import annotations
import time
import functools
import inspect
from typing import Callable, Optional
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from swiftconvert.obs.metrics import record_duration, inc_counter


def traced(operation_name: Optional[str] = None):
    """Decorator to add OpenTelemetry tracing to functions."""

    def decorator(func: Callable) -> Callable:
        tracer = trace.get_tracer(__name__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"

        def _start(span):
            span.set_attribute("function.name", func.__name__)
            span.set_attribute("function.module", func.__module__)

        def _fail(span, e: Exception):
            span.record_exception(e)
            span.set_status(Status(StatusCode.ERROR, str(e)))
            inc_counter("function_errors_total", {
                "function": func.__name__,
                "error_type": type(e).__name__
            })

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            with tracer.start_as_current_span(span_name) as span:
                _start(span)
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    _fail(span, e)
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            with tracer.start_as_current_span(span_name) as span:
                _start(span)
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    _fail(span, e)
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        return async_wrapper if inspect.iscoroutinefunction(func) else sync_wrapper

    return decorator

def timed(metric_name: Optional[str] = None):
    """Decorator to time function execution and record metrics."""

    def decorator(func: Callable) -> Callable:
        name = metric_name or f"{func.__name__}_duration_ms"

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                return await func(*args, **kwargs)
            finally:
                record_duration(name, (time.perf_counter() - start_time) * 1000)

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                record_duration(name, (time.perf_counter() - start_time) * 1000)

        return async_wrapper if inspect.iscoroutinefunction(func) else sync_wrapper

    return decorator
