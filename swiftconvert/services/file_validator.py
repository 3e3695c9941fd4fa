from __future__ import annotations
from typing import Optional, Sequence
from swiftconvert.config import MAX_FILE_SIZE_BYTES
from swiftconvert.exceptions import EmptySelection, FileTooLarge
from swiftconvert.models.catalog import Operation
from swiftconvert.models.domain import CandidateFile, ValidatedFileSet
from swiftconvert.obs.logging_setup import get_logger

logger = get_logger(__name__)

class FileSetValidator:
    """Gates a file selection before it is staged for an operation."""

    def __init__(self, max_file_size: Optional[int] = None):
        self.max_file_size = MAX_FILE_SIZE_BYTES if max_file_size is None else max_file_size

    def validate(self, operation: Operation, candidates: Sequence[CandidateFile]) -> ValidatedFileSet:
        """
        Accept or reject the whole selection.

        Raises FileTooLarge naming every oversized file, or EmptySelection.
        Single-file operations keep only the first file.
        """
        if not candidates:
            raise EmptySelection()

        oversized = [f.name for f in candidates if f.size > self.max_file_size]
        if oversized:
            raise FileTooLarge(oversized, self.max_file_size)

        if operation.multi_file:
            files = tuple(candidates)
        else:
            files = (candidates[0],)
            if len(candidates) > 1:
                logger.info(
                    "Extra files ignored for single-file operation",
                    operation=operation.id.value,
                    ignored=len(candidates) - 1
                )

        return ValidatedFileSet(operation=operation, files=files)

file_set_validator = FileSetValidator()
