from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from swiftconvert.models.catalog import Format, Operation


@dataclass(frozen=True)
class CandidateFile:
    """A user-selected file, held in memory for one operation attempt."""
    name: str
    content: bytes = field(repr=False)
    size: int = -1
    content_type: Optional[str] = None

    def __post_init__(self):
        if self.size < 0:
            object.__setattr__(self, "size", len(self.content))


@dataclass(frozen=True)
class OperationParameters:
    source: Format = Format.DOCX
    target: Format = Format.PDF
    angle: int = 90
    order: str = "1,2,3"


@dataclass(frozen=True)
class RequestPayload:
    """Multipart body for one operation request."""
    endpoint: str
    files: List[Tuple[str, CandidateFile]]
    fields: Dict[str, str]

    def field_names(self) -> List[str]:
        return [name for name, _ in self.files] + list(self.fields)


@dataclass(frozen=True)
class ResultArtifact:
    """Raw bytes returned by the service for a completed operation."""
    content: bytes = field(repr=False)
    content_type: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ValidatedFileSet:
    operation: Operation
    files: Tuple[CandidateFile, ...]

    @property
    def total_bytes(self) -> int:
        return sum(f.size for f in self.files)

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self):
        return iter(self.files)
