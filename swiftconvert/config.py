from __future__ import annotations
import os

# Remote processing service
API_BASE_URL: str = os.getenv("SWIFTCONVERT_API_URL", "http://localhost:8080")
_timeout = os.getenv("REQUEST_TIMEOUT_SECONDS")
REQUEST_TIMEOUT_SECONDS: float | None = float(_timeout) if _timeout else None

# File selection limits
MAX_FILE_SIZE_BYTES: int = int(os.getenv("MAX_FILE_SIZE_BYTES", str(20 * 1024 * 1024)))

# Downloads
DOWNLOAD_DIR: str = os.getenv("DOWNLOAD_DIR", "downloads")

# Logging Configuration
LOG_STRUCTURED: bool = os.getenv("LOG_STRUCTURED", "true").lower() == "true"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# OpenTelemetry Configuration
OTEL_EXPORTER_OTLP_ENDPOINT: str | None = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
OTEL_SERVICE_NAME: str = os.getenv("OTEL_SERVICE_NAME", "swiftconvert-client")

# HTTP surface
CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
