from __future__ import annotations
import time
from pathlib import Path
from typing import Callable, Optional
from swiftconvert.config import DOWNLOAD_DIR
from swiftconvert.exceptions import ArtifactSaveError
from swiftconvert.models.catalog import Format, Operation, OperationId
from swiftconvert.models.domain import ResultArtifact
from swiftconvert.obs.logging_setup import get_logger

logger = get_logger(__name__)

SaveSink = Callable[[bytes, str], Path]


def derive_filename(
    operation: Operation,
    conversion_target: Optional[Format] = None,
    timestamp_ms: Optional[int] = None,
) -> str:
    """``{operation}_{millis}.{ext}``; the timestamp keeps successive downloads apart."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)

    if operation.archive_result:
        extension = "zip"
    elif operation.id is OperationId.CONVERT and conversion_target is not None:
        extension = Format(conversion_target).value.lower()
    else:
        extension = "pdf"

    return f"{operation.id.value}_{timestamp_ms}.{extension}"


class DirectorySink:
    """Writes downloads into a local directory."""

    def __init__(self, directory: str | Path = DOWNLOAD_DIR):
        self.directory = Path(directory)

    def __call__(self, content: bytes, filename: str) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / filename
        path.write_bytes(content)
        return path


class ArtifactDownloader:
    def __init__(self, sink: Optional[SaveSink] = None):
        self.sink = sink or DirectorySink()

    def save(
        self,
        artifact: ResultArtifact,
        operation: Operation,
        conversion_target: Optional[Format] = None,
    ) -> Path:
        filename = derive_filename(operation, conversion_target)
        try:
            path = self.sink(artifact.content, filename)
        except OSError as e:
            logger.error("Failed to save artifact", artifact_name=filename, error=str(e))
            raise ArtifactSaveError(filename, e) from e

        logger.info("Artifact saved",
                    operation=operation.id.value,
                    path=str(path),
                    size_bytes=artifact.size)
        return path
