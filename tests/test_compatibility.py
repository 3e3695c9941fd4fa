from __future__ import annotations
import pytest
from swiftconvert.exceptions import NoSuchSource
from swiftconvert.models.catalog import CONVERSION_PAIRS, ConversionPair, Format
from swiftconvert.services.compatibility import FormatCompatibilityMatrix, compatibility_matrix

def test_source_formats_sorted_and_deduplicated():
    sources = compatibility_matrix.source_formats()
    names = [fmt.value for fmt in sources]
    assert names == sorted(set(names))
    assert Format.PDF in sources
    assert len(sources) == len({pair.source for pair in CONVERSION_PAIRS})

def test_target_formats_in_declaration_order():
    assert compatibility_matrix.target_formats(Format.PDF) == [
        Format.DOCX, Format.TXT, Format.JPG, Format.PNG
    ]
    assert compatibility_matrix.target_formats(Format.DOCX) == [Format.PDF]

@pytest.mark.parametrize("source", sorted({p.source for p in CONVERSION_PAIRS}, key=lambda f: f.value))
def test_default_target_is_first_declared_and_valid(source):
    first = next(p.target for p in CONVERSION_PAIRS if p.source is source)
    assert compatibility_matrix.default_target(source) is first
    assert compatibility_matrix.is_valid_pair(source, first)

def test_default_target_for_unknown_source_raises():
    matrix = FormatCompatibilityMatrix([ConversionPair(Format.DOCX, Format.PDF)])
    with pytest.raises(NoSuchSource):
        matrix.default_target(Format.PNG)

def test_is_valid_pair():
    assert compatibility_matrix.is_valid_pair(Format.PDF, Format.PNG)
    assert not compatibility_matrix.is_valid_pair(Format.PNG, Format.JPG)
    assert not compatibility_matrix.is_valid_pair(Format.DOCX, Format.DOCX)

def test_every_source_has_a_target():
    for source in compatibility_matrix.source_formats():
        assert compatibility_matrix.target_formats(source)

@pytest.mark.parametrize("name,expected", [
    ("report.docx", Format.DOCX),
    ("Slides.PPT", Format.PPT),
    ("scan.final.png", Format.PNG),
    ("archive.zip", None),
    ("README", None),
    ("notes.", None),
])
def test_infer_format_from_filename(name, expected):
    assert compatibility_matrix.infer_format_from_filename(name) == expected
