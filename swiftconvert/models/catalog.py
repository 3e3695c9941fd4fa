"""
Fixed operation and conversion tables.

Built once at import time and never mutated; presentation code reads
them, it does not derive them.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union
from swiftconvert.exceptions import UnknownOperation


class Format(str, Enum):
    PDF = "PDF"
    DOCX = "DOCX"
    TXT = "TXT"
    HTML = "HTML"
    MD = "MD"
    PPT = "PPT"
    XLSX = "XLSX"
    CSV = "CSV"
    EPUB = "EPUB"
    JPG = "JPG"
    PNG = "PNG"


class OperationId(str, Enum):
    CONVERT = "convert"
    MERGE = "merge"
    SPLIT = "split"
    COMPRESS = "compress"
    EXTRACT_TEXT = "extract-text"
    EXTRACT_IMAGES = "extract-images"
    ROTATE = "rotate"
    REORDER = "reorder"


@dataclass(frozen=True)
class Operation:
    id: OperationId
    label: str
    endpoint: str

    @property
    def multi_file(self) -> bool:
        """Only merge accepts more than one file."""
        return self.id is OperationId.MERGE

    @property
    def archive_result(self) -> bool:
        """Split and image extraction answer with a zip archive."""
        return self.id in (OperationId.SPLIT, OperationId.EXTRACT_IMAGES)


@dataclass(frozen=True)
class ConversionPair:
    source: Format
    target: Format


OPERATIONS: Tuple[Operation, ...] = (
    Operation(OperationId.CONVERT, "Convert", "/api/convert"),
    Operation(OperationId.MERGE, "Merge", "/api/merge"),
    Operation(OperationId.SPLIT, "Split", "/api/split"),
    Operation(OperationId.COMPRESS, "Compress", "/api/compress"),
    Operation(OperationId.EXTRACT_TEXT, "Extract Text", "/api/extract/text"),
    Operation(OperationId.EXTRACT_IMAGES, "Extract Images", "/api/extract/images"),
    Operation(OperationId.ROTATE, "Rotate", "/api/rotate"),
    Operation(OperationId.REORDER, "Reorder", "/api/reorder"),
)

_OPERATIONS_BY_ID: Dict[OperationId, Operation] = {op.id: op for op in OPERATIONS}

# Declaration order matters: the first pair for a source is its default target.
CONVERSION_PAIRS: Tuple[ConversionPair, ...] = tuple(
    ConversionPair(Format(source), Format(target))
    for source, target in (
        ("DOCX", "PDF"),
        ("PDF", "DOCX"),
        ("TXT", "PDF"),
        ("PDF", "TXT"),
        ("HTML", "PDF"),
        ("MD", "PDF"),
        ("PPT", "PDF"),
        ("XLSX", "PDF"),
        ("CSV", "PDF"),
        ("EPUB", "PDF"),
        ("JPG", "PDF"),
        ("PNG", "PDF"),
        ("PDF", "JPG"),
        ("PDF", "PNG"),
    )
)

ROTATION_ANGLES: Tuple[int, ...] = (90, 180, 270)


def get_operation(operation_id: Union[str, OperationId]) -> Operation:
    """Resolve an operation identifier to its table entry."""
    try:
        return _OPERATIONS_BY_ID[OperationId(operation_id)]
    except ValueError:
        raise UnknownOperation(str(operation_id)) from None
