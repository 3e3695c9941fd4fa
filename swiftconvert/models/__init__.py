"""
Data models and schemas.

Provides:
- Fixed operation and conversion tables
- In-memory domain types (files, parameters, payloads, artifacts)
- Pydantic models for the session API
"""

from .catalog import (
    CONVERSION_PAIRS,
    OPERATIONS,
    ROTATION_ANGLES,
    ConversionPair,
    Format,
    Operation,
    OperationId,
    get_operation,
)
from .domain import (
    CandidateFile,
    OperationParameters,
    RequestPayload,
    ResultArtifact,
    ValidatedFileSet,
)
from .schemas import (
    CatalogResponse,
    OperationInfo,
    ParametersRequest,
    SessionResponse,
    ToolSelectRequest,
)

__all__ = [
    "CONVERSION_PAIRS",
    "OPERATIONS",
    "ROTATION_ANGLES",
    "ConversionPair",
    "Format",
    "Operation",
    "OperationId",
    "get_operation",
    "CandidateFile",
    "OperationParameters",
    "RequestPayload",
    "ResultArtifact",
    "ValidatedFileSet",
    "CatalogResponse",
    "OperationInfo",
    "ParametersRequest",
    "SessionResponse",
    "ToolSelectRequest",
]
