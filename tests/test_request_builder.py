from __future__ import annotations
import pytest
from swiftconvert.exceptions import EmptySelection, InvalidParameters
from swiftconvert.models.catalog import Format, OperationId, get_operation
from swiftconvert.models.domain import OperationParameters
from swiftconvert.services.request_builder import RequestBuilder

@pytest.fixture
def builder():
    return RequestBuilder()

def test_convert_payload(builder, make_file):
    f = make_file("report.docx")
    payload = builder.build(
        get_operation(OperationId.CONVERT),
        [f],
        OperationParameters(source=Format.DOCX, target=Format.PDF),
    )
    assert payload.endpoint == "/api/convert"
    assert payload.files == [("file", f)]
    assert payload.fields == {"from": "docx", "to": "pdf"}
    assert "angle" not in payload.fields
    assert "order" not in payload.fields

def test_convert_rejects_undeclared_pair(builder, make_file):
    with pytest.raises(InvalidParameters):
        builder.build(
            get_operation(OperationId.CONVERT),
            [make_file()],
            OperationParameters(source=Format.PNG, target=Format.JPG),
        )

def test_merge_payload_repeats_files_field(builder, make_file):
    files = [make_file("a.pdf"), make_file("b.pdf"), make_file("c.pdf")]
    payload = builder.build(get_operation(OperationId.MERGE), files)
    assert [name for name, _ in payload.files] == ["files", "files", "files"]
    assert [f.name for _, f in payload.files] == ["a.pdf", "b.pdf", "c.pdf"]
    assert "file" not in payload.field_names()
    assert payload.fields == {}

def test_rotate_payload(builder, make_file):
    payload = builder.build(
        get_operation(OperationId.ROTATE), [make_file("scan.pdf")], OperationParameters(angle=270)
    )
    assert payload.endpoint == "/api/rotate"
    assert payload.fields == {"angle": "270"}

def test_rotate_rejects_other_angles(builder, make_file):
    with pytest.raises(InvalidParameters):
        builder.build(get_operation(OperationId.ROTATE), [make_file()], OperationParameters(angle=45))

def test_reorder_passes_order_through(builder, make_file):
    payload = builder.build(
        get_operation(OperationId.REORDER), [make_file()], OperationParameters(order=" 3, 1,2-last ")
    )
    assert payload.fields == {"order": " 3, 1,2-last "}

@pytest.mark.parametrize("operation_id,endpoint", [
    (OperationId.SPLIT, "/api/split"),
    (OperationId.COMPRESS, "/api/compress"),
    (OperationId.EXTRACT_TEXT, "/api/extract/text"),
    (OperationId.EXTRACT_IMAGES, "/api/extract/images"),
])
def test_plain_operations_have_no_extra_fields(builder, make_file, operation_id, endpoint):
    first, second = make_file("one.pdf"), make_file("two.pdf")
    payload = builder.build(get_operation(operation_id), [first, second])
    assert payload.endpoint == endpoint
    assert payload.files == [("file", first)]
    assert payload.fields == {}

def test_empty_file_set_rejected(builder):
    with pytest.raises(EmptySelection):
        builder.build(get_operation(OperationId.COMPRESS), [])
