from __future__ import annotations
from typing import Callable, List
import httpx
import pytest
from swiftconvert.models.domain import CandidateFile
from swiftconvert.services.artifact_downloader import ArtifactDownloader, DirectorySink
from swiftconvert.services.operation_client import OperationClient

MIB = 1024 * 1024

@pytest.fixture
def make_file() -> Callable[..., CandidateFile]:
    def _make(name: str = "report.docx", size: int | None = None, content: bytes = b"%PDF-1.7 test") -> CandidateFile:
        if size is None:
            return CandidateFile(name=name, content=content)
        # Size is what validation looks at; keep the body small.
        return CandidateFile(name=name, content=content, size=size)
    return _make

@pytest.fixture
def downloader(tmp_path) -> ArtifactDownloader:
    return ArtifactDownloader(sink=DirectorySink(tmp_path))

@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    return []

@pytest.fixture
def mock_client(recorded_requests) -> Callable[..., OperationClient]:
    """Build an OperationClient whose transport answers with *handler*."""
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> OperationClient:
        def _record(request: httpx.Request) -> httpx.Response:
            request.read()
            recorded_requests.append(request)
            return handler(request)
        return OperationClient(base_url="http://service.test", transport=httpx.MockTransport(_record))
    return _make
