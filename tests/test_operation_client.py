from __future__ import annotations
import httpx
import pytest
from swiftconvert.exceptions import DecodeError, NetworkError, RemoteError
from swiftconvert.models.catalog import Format, OperationId, get_operation
from swiftconvert.models.domain import OperationParameters
from swiftconvert.services.request_builder import RequestBuilder

builder = RequestBuilder()

async def test_successful_exchange_returns_body(mock_client, recorded_requests, make_file):
    client = mock_client(lambda request: httpx.Response(
        200, content=b"%PDF-result", headers={"content-type": "application/pdf"}
    ))
    payload = builder.build(
        get_operation(OperationId.CONVERT),
        [make_file("report.docx", content=b"docx-bytes")],
        OperationParameters(source=Format.DOCX, target=Format.PDF),
    )
    async with client:
        artifact = await client.execute(payload)

    assert artifact.content == b"%PDF-result"
    assert artifact.content_type == "application/pdf"

    assert len(recorded_requests) == 1
    request = recorded_requests[0]
    assert request.method == "POST"
    assert request.url.path == "/api/convert"
    assert request.headers["content-type"].startswith("multipart/form-data")
    body = request.content
    assert b'name="file"; filename="report.docx"' in body
    assert b"docx-bytes" in body
    assert b'name="from"' in body and b'name="to"' in body

async def test_merge_sends_every_file(mock_client, recorded_requests, make_file):
    client = mock_client(lambda request: httpx.Response(200, content=b"%PDF-merged"))
    files = [make_file("a.pdf"), make_file("b.pdf"), make_file("c.pdf")]
    async with client:
        await client.execute(builder.build(get_operation(OperationId.MERGE), files))

    body = recorded_requests[0].content
    assert body.count(b'name="files"') == 3
    assert b'name="file";' not in body

@pytest.mark.parametrize("status_code", [400, 404, 413, 500, 503])
async def test_non_success_status_is_remote_error(mock_client, make_file, status_code):
    client = mock_client(lambda request: httpx.Response(status_code, json={"detail": "nope"}))
    async with client:
        with pytest.raises(RemoteError) as exc_info:
            await client.execute(builder.build(get_operation(OperationId.COMPRESS), [make_file()]))
    assert exc_info.value.status_code == status_code
    assert exc_info.value.endpoint == "/api/compress"

async def test_connection_failure_is_network_error(mock_client, make_file):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = mock_client(refuse)
    async with client:
        with pytest.raises(NetworkError):
            await client.execute(builder.build(get_operation(OperationId.SPLIT), [make_file()]))

async def test_timeout_is_network_error(mock_client, make_file):
    def stall(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client = mock_client(stall)
    async with client:
        with pytest.raises(NetworkError):
            await client.execute(builder.build(get_operation(OperationId.SPLIT), [make_file()]))

async def test_undecodable_body_is_decode_error(mock_client, make_file):
    def garbled(request):
        raise httpx.DecodingError("invalid gzip stream", request=request)

    client = mock_client(garbled)
    async with client:
        with pytest.raises(DecodeError):
            await client.execute(builder.build(get_operation(OperationId.ROTATE), [make_file()]))

async def test_empty_success_body_is_decode_error(mock_client, make_file):
    client = mock_client(lambda request: httpx.Response(200, content=b""))
    async with client:
        with pytest.raises(DecodeError):
            await client.execute(builder.build(get_operation(OperationId.COMPRESS), [make_file()]))

async def test_no_retry_on_failure(mock_client, recorded_requests, make_file):
    client = mock_client(lambda request: httpx.Response(502))
    async with client:
        with pytest.raises(RemoteError):
            await client.execute(builder.build(get_operation(OperationId.COMPRESS), [make_file()]))
    assert len(recorded_requests) == 1
