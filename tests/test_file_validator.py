from __future__ import annotations
import pytest
from swiftconvert.exceptions import EmptySelection, FileTooLarge
from swiftconvert.models.catalog import OPERATIONS, OperationId, get_operation
from swiftconvert.services.file_validator import FileSetValidator

MIB = 1024 * 1024

@pytest.fixture
def validator():
    return FileSetValidator(max_file_size=20 * MIB)

@pytest.mark.parametrize("operation", OPERATIONS, ids=lambda op: op.id.value)
def test_oversized_file_rejected_for_every_operation(validator, make_file, operation):
    with pytest.raises(FileTooLarge) as exc_info:
        validator.validate(operation, [make_file("big.pdf", size=20 * MIB + 1)])
    assert exc_info.value.filenames == ["big.pdf"]

def test_file_at_limit_accepted(validator, make_file):
    result = validator.validate(get_operation("compress"), [make_file("edge.pdf", size=20 * MIB)])
    assert len(result) == 1

def test_oversized_rejects_whole_merge_selection(validator, make_file):
    files = [make_file("a.pdf"), make_file("b.pdf", size=25 * MIB), make_file("c.pdf", size=30 * MIB)]
    with pytest.raises(FileTooLarge) as exc_info:
        validator.validate(get_operation(OperationId.MERGE), files)
    assert exc_info.value.filenames == ["b.pdf", "c.pdf"]
    assert "b.pdf" in str(exc_info.value)

def test_merge_requires_at_least_one_file(validator):
    with pytest.raises(EmptySelection):
        validator.validate(get_operation(OperationId.MERGE), [])

def test_merge_accepts_single_file(validator, make_file):
    result = validator.validate(get_operation(OperationId.MERGE), [make_file("only.pdf")])
    assert [f.name for f in result] == ["only.pdf"]

def test_merge_keeps_all_files_in_order(validator, make_file):
    files = [make_file(f"{i}.pdf") for i in range(4)]
    result = validator.validate(get_operation(OperationId.MERGE), files)
    assert [f.name for f in result] == ["0.pdf", "1.pdf", "2.pdf", "3.pdf"]

@pytest.mark.parametrize("operation_id", [op.id for op in OPERATIONS if op.id is not OperationId.MERGE])
def test_single_file_operations_keep_first_file(validator, make_file, operation_id):
    files = [make_file("first.pdf"), make_file("second.pdf"), make_file("third.pdf")]
    result = validator.validate(get_operation(operation_id), files)
    assert [f.name for f in result] == ["first.pdf"]

def test_empty_selection_for_single_file_operation(validator):
    with pytest.raises(EmptySelection):
        validator.validate(get_operation(OperationId.ROTATE), [])

def test_default_limit_is_twenty_mib():
    assert FileSetValidator().max_file_size == 20 * MIB
