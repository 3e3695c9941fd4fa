from __future__ import annotations
import logging
import json
import sys
from typing import Dict, Any, Optional
from opentelemetry import trace
from opentelemetry.trace import format_trace_id, format_span_id

_RESERVED_ATTRS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName', 'taskName',
    'processName', 'process', 'exc_info', 'exc_text', 'stack_info',
    'otelSpanID', 'otelTraceID', 'otelTraceSampled', 'otelServiceName',
}

class StructuredFormatter(logging.Formatter):
    """JSON structured logging formatter with OpenTelemetry correlation."""

    def format(self, record: logging.LogRecord) -> str:
        span_context = trace.get_current_span().get_span_context()

        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if span_context.is_valid:
            log_entry.update({
                "trace_id": format_trace_id(span_context.trace_id),
                "span_id": format_span_id(span_context.span_id),
            })

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extra_fields = {
            key: value for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        }
        if extra_fields:
            log_entry["extra"] = extra_fields

        return json.dumps(log_entry, ensure_ascii=False, default=str)

def setup_logging(level: int | str = logging.INFO, structured: bool = True) -> None:
    """Configure application logging."""

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)

    if structured:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (structured=%s, level=%s)",
        structured, logging.getLevelName(root_logger.level)
    )

class ContextLogger:
    """Logger that takes context as keyword arguments."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        # LogRecord refuses extras that shadow its own attributes
        context = {
            (f"ctx_{key}" if key in _RESERVED_ATTRS or key in ("message", "asctime") else key): value
            for key, value in (extra or {}).items()
        }
        span = trace.get_current_span()
        if span.is_recording():
            context["span_name"] = getattr(span, "name", None)
        return context

    def _log(self, level: int, message: str, kwargs: Dict[str, Any]) -> None:
        exc_info = kwargs.pop("exc_info", None)
        self.logger.log(level, message, exc_info=exc_info, extra=self._add_context(kwargs), stacklevel=3)

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, kwargs)

    def exception(self, message: str, **kwargs):
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, message, kwargs)

def get_logger(name: str) -> ContextLogger:
    """Get context-aware logger."""
    return ContextLogger(name)
