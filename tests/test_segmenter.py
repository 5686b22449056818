# tests/test_segmenter.py

from __future__ import annotations

import pytest

from gedcom_records.diagnostics import DiagnosticCollector, DiagnosticKind
from gedcom_records.loader import (
    GEDCOMStructureError,
    read_lines,
    segment_lines,
    segment_records,
)
from gedcom_records.utils import mock_file_path


def _assert_levels(node, level=0) -> None:
    assert node.level == level
    for child in node.children:
        _assert_levels(child, level + 1)


def test_mock_file_exists() -> None:
    """
    Ensure the mock GEDCOM file is accessible and our path resolver works.
    """
    path = mock_file_path("sample.ged")
    assert path.is_file(), f"Expected GEDCOM file at: {path}"


def test_segment_records_builds_top_level_records() -> None:
    """
    segment_records must return one level-0 GEDCOMNode per record, HEAD first.
    """
    tokens = read_lines(mock_file_path("sample.ged").read_bytes())
    records = segment_records(tokens)

    assert records[0].tag == "HEAD"
    assert records[-1].tag == "TRLR"
    assert all(r.level == 0 for r in records)
    for record in records:
        _assert_levels(record)


def test_children_attach_to_nearest_open_parent() -> None:
    tokens = read_lines(
        "0 @I1@ INDI\n1 BIRT\n2 DATE 1900\n2 PLAC Boston\n1 DEAT\n2 DATE 1970\n"
    )
    (indi,) = segment_lines(tokens)

    assert [c.tag for c in indi.children] == ["BIRT", "DEAT"]
    assert [c.tag for c in indi.children[0].children] == ["DATE", "PLAC"]
    assert indi.children[1].first_value("DATE") == "1970"


def test_level_zero_closes_open_records() -> None:
    tokens = read_lines("0 @I1@ INDI\n1 BIRT\n2 DATE 1900\n0 @I2@ INDI\n1 SEX F\n")
    first, second = segment_lines(tokens)
    assert second.xref == "@I2@"
    assert [c.tag for c in second.children] == ["SEX"]


def test_skipped_level_is_attached_with_diagnostic() -> None:
    diagnostics = DiagnosticCollector()
    tokens = read_lines("0 HEAD\n2 SOUR GEDCOM\n")
    (head,) = segment_lines(tokens, diagnostics)

    assert head.children[0].tag == "SOUR"
    assert head.children[0].value == "GEDCOM"
    _assert_levels(head)

    skew = diagnostics.by_kind(DiagnosticKind.STRUCTURAL_SKEW)
    assert len(skew) == 1
    assert skew[0].lineno == 2
    assert skew[0].raw == "2 SOUR GEDCOM"


def test_deep_jump_attaches_to_deepest_open_node() -> None:
    diagnostics = DiagnosticCollector()
    tokens = read_lines("0 @I1@ INDI\n1 BIRT\n4 DATE 1900\n2 PLAC Boston\n")
    (indi,) = segment_lines(tokens, diagnostics)

    birt = indi.children[0]
    assert [c.tag for c in birt.children] == ["DATE", "PLAC"]
    _assert_levels(indi)
    assert diagnostics.count(DiagnosticKind.STRUCTURAL_SKEW) == 1


def test_line_without_open_record_becomes_root() -> None:
    diagnostics = DiagnosticCollector()
    tokens = read_lines("1 NOTE stray\n0 TRLR\n")
    roots = segment_lines(tokens, diagnostics)

    assert [r.tag for r in roots] == ["NOTE", "TRLR"]
    assert roots[0].level == 0
    assert diagnostics.count(DiagnosticKind.STRUCTURAL_SKEW) == 1


def test_strict_mode_raises() -> None:
    tokens = read_lines("0 HEAD\n2 SOUR GEDCOM\n")
    with pytest.raises(GEDCOMStructureError):
        segment_lines(tokens, strict=True)


def test_node_helpers_are_case_insensitive() -> None:
    tokens = read_lines("0 @I1@ INDI\n1 name John /Doe/\n1 NAME Johnny /Doe/\n")
    (indi,) = segment_lines(tokens)
    assert indi.find_first("NAME").value == "John /Doe/"
    assert len(indi.find_children("name")) == 2
    assert [n.tag for n in indi.iter_subtree()] == ["INDI", "name", "NAME"]
