"""
Operation dispatch services.

Provides:
- Format compatibility lookups
- File selection validation
- Request payload construction
- Remote operation client
- Artifact download handling
- The operation session state machine
"""

from .compatibility import FormatCompatibilityMatrix, compatibility_matrix
from .file_validator import FileSetValidator, file_set_validator
from .request_builder import RequestBuilder, request_builder
from .operation_client import OperationClient
from .artifact_downloader import ArtifactDownloader, DirectorySink, derive_filename
from .session import (
    OperationSession,
    SessionState,
    SessionStatus,
    close_session,
    get_session,
)

__all__ = [
    "FormatCompatibilityMatrix",
    "compatibility_matrix",
    "FileSetValidator",
    "file_set_validator",
    "RequestBuilder",
    "request_builder",
    "OperationClient",
    "ArtifactDownloader",
    "DirectorySink",
    "derive_filename",
    "OperationSession",
    "SessionState",
    "SessionStatus",
    "close_session",
    "get_session"
]
