"""Error taxonomy for the SwiftConvert client."""
from __future__ import annotations
from typing import Optional, Sequence


class SwiftConvertError(Exception):
    """Base exception for the client."""


class ValidationError(SwiftConvertError):
    """A file selection was rejected before any request was made."""

    kind = "validation"


class FileTooLarge(ValidationError):
    """One or more selected files exceed the size limit."""

    kind = "file_too_large"

    def __init__(self, filenames: Sequence[str], limit_bytes: int):
        self.filenames = list(filenames)
        self.limit_bytes = limit_bytes
        limit_mb = limit_bytes / (1024 * 1024)
        super().__init__(
            f"Files exceed the {limit_mb:g}MB limit: {', '.join(self.filenames)}"
        )


class EmptySelection(ValidationError):
    """No files were selected."""

    kind = "empty_selection"

    def __init__(self, message: str = "No files selected."):
        super().__init__(message)


class OperationError(SwiftConvertError):
    """The remote exchange for an operation failed."""

    kind = "operation"


class NetworkError(OperationError):
    """Connection could not be established or was interrupted."""

    kind = "network"


class RemoteError(OperationError):
    """The service answered with a non-success status."""

    kind = "remote"

    def __init__(self, status_code: int, endpoint: Optional[str] = None):
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(f"Remote service returned HTTP {status_code} for {endpoint}")


class DecodeError(OperationError):
    """The response body could not be read as an artifact."""

    kind = "decode"


class NoSuchSource(SwiftConvertError, LookupError):
    """A format was used as a conversion source but has no declared pairs."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"No conversion declared from {source}")


class UnknownOperation(SwiftConvertError, LookupError):
    """An operation identifier outside the fixed operation set."""

    def __init__(self, operation_id: str):
        self.operation_id = operation_id
        super().__init__(f"Unknown operation: {operation_id}")


class InvalidParameters(SwiftConvertError, ValueError):
    """Operation parameters outside their allowed values."""


class ArtifactSaveError(SwiftConvertError):
    """The artifact could not be written locally."""

    kind = "save"

    def __init__(self, filename: str, cause: Exception | None = None):
        self.filename = filename
        self.cause = cause
        super().__init__(f"Failed to save {filename}: {cause}")
