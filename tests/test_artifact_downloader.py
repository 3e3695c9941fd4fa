from __future__ import annotations
import re
from pathlib import Path
import pytest
from swiftconvert.exceptions import ArtifactSaveError
from swiftconvert.models.catalog import OPERATIONS, Format, OperationId, get_operation
from swiftconvert.models.domain import ResultArtifact
from swiftconvert.services.artifact_downloader import ArtifactDownloader, derive_filename

@pytest.mark.parametrize("operation_id", [OperationId.SPLIT, OperationId.EXTRACT_IMAGES])
def test_archive_operations_download_zip(operation_id):
    assert derive_filename(get_operation(operation_id)).endswith(".zip")

def test_convert_uses_target_extension():
    assert derive_filename(get_operation(OperationId.CONVERT), "PNG").endswith(".png")
    assert derive_filename(get_operation(OperationId.CONVERT), Format.DOCX).endswith(".docx")

@pytest.mark.parametrize("operation_id", [
    OperationId.MERGE, OperationId.COMPRESS, OperationId.EXTRACT_TEXT,
    OperationId.ROTATE, OperationId.REORDER,
])
def test_other_operations_download_pdf(operation_id):
    assert derive_filename(get_operation(operation_id)).endswith(".pdf")

def test_filename_shape():
    name = derive_filename(get_operation(OperationId.ROTATE), timestamp_ms=1700000000123)
    assert name == "rotate_1700000000123.pdf"
    assert re.fullmatch(r"extract-images_\d+\.zip", derive_filename(get_operation("extract-images")))

def test_save_writes_artifact(downloader, tmp_path):
    artifact = ResultArtifact(content=b"PK\x03\x04zipdata")
    path = downloader.save(artifact, get_operation(OperationId.SPLIT))
    assert path.parent == tmp_path
    assert path.suffix == ".zip"
    assert path.read_bytes() == b"PK\x03\x04zipdata"

def test_sink_failure_surfaces_as_save_error():
    def failing_sink(content: bytes, filename: str) -> Path:
        raise PermissionError("read-only")

    downloader = ArtifactDownloader(sink=failing_sink)
    with pytest.raises(ArtifactSaveError) as exc_info:
        downloader.save(ResultArtifact(content=b"x"), get_operation(OperationId.COMPRESS))
    assert exc_info.value.filename.endswith(".pdf")

def test_every_operation_gets_a_filename():
    for operation in OPERATIONS:
        assert derive_filename(operation, Format.TXT).startswith(f"{operation.id.value}_")
