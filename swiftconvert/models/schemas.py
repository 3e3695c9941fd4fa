from __future__ import annotations
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field
from swiftconvert.models.catalog import Format, OperationId

class OperationInfo(BaseModel):
    id: OperationId
    label: str
    endpoint: str
    multi_file: bool

class CatalogResponse(BaseModel):
    operations: List[OperationInfo]
    rotation_angles: List[int]
    source_formats: List[Format]
    targets: Dict[str, List[Format]]

class ToolSelectRequest(BaseModel):
    operation: OperationId

class ParametersRequest(BaseModel):
    source: Optional[Format] = None
    target: Optional[Format] = None
    angle: Optional[int] = Field(default=None, description="Rotation angle: 90, 180 or 270")
    order: Optional[str] = Field(default=None, description="Page order, e.g. 1,3,2,4-last")

class ParametersView(BaseModel):
    source: Format
    target: Format
    angle: int
    order: str

class StagedFile(BaseModel):
    name: str
    size: int

class SessionResponse(BaseModel):
    operation: OperationId
    status: Literal["idle", "staged", "in-flight", "success", "error"]
    message: Optional[str] = None
    filename: Optional[str] = None
    reason: Optional[str] = None
    files: List[StagedFile]
    parameters: ParametersView
    can_trigger: bool
