from gedcom_records.diagnostics import DiagnosticKind
from gedcom_records.loader import read_lines, segment_lines
from gedcom_records.registry.build_header import build_header

import pytest


def parse_node(text):
    (node,) = segment_lines(read_lines(text))
    return node


HEADER = (
    "0 HEAD\n"
    "1 SOUR FamilyApp\n"
    "2 VERS 5.1\n"
    "2 NAME Family App\n"
    "2 CORP Example Corp\n"
    "1 DEST ANSTFILE\n"
    "1 DATE 1 JAN 2020\n"
    "2 TIME 12:30:00\n"
    "1 SUBM @U1@\n"
    "1 FILE family.ged\n"
    "1 COPR Public domain\n"
    "1 GEDC\n"
    "2 VERS 5.5.1\n"
    "2 FORM LINEAGE-LINKED\n"
    "1 CHAR UTF-8\n"
    "1 LANG English\n"
)


def test_build_header_fields(ctx):
    header = build_header(parse_node(HEADER), ctx)

    assert header.source.value == "FamilyApp"
    assert header.source.version == "5.1"
    assert header.source.name == "Family App"
    assert [e.tag for e in header.source.extensions] == ["CORP"]
    assert header.destination == "ANSTFILE"
    assert header.date == "1 JAN 2020"
    assert header.time == "12:30:00"
    assert header.submitter == "@U1@"
    assert header.file == "family.ged"
    assert header.copyright == "Public domain"
    assert header.gedcom.version == "5.5.1"
    assert header.gedcom.form == "LINEAGE-LINKED"
    assert header.encoding.value == "UTF-8"
    assert header.language == "English"
    assert header.extensions == []
    assert header.xref is None

    assert [r.xref for r in ctx.references] == ["@U1@"]
    assert len(ctx.diagnostics) == 0


def test_header_date_with_extra_lines_is_kept_as_extension(ctx):
    header = build_header(parse_node("0 HEAD\n1 DATE 1 JAN 2020\n2 TIME 10:00\n2 _TZ UTC\n"), ctx)
    assert header.date is None
    assert header.time is None
    assert header.extensions[0].tag == "DATE"
    assert [c.tag for c in header.extensions[0].children] == ["TIME", "_TZ"]


def test_header_date_without_value_is_kept_as_extension(ctx):
    header = build_header(parse_node("0 HEAD\n1 DATE\n2 TIME 10:00\n"), ctx)
    assert header.date is None
    assert header.time is None
    assert [(e.tag, e.value) for e in header.extensions] == [("DATE", None)]


def test_header_gedc_with_value_is_kept_as_extension(ctx):
    header = build_header(parse_node("0 HEAD\n1 GEDC 5.5\n"), ctx)
    assert header.gedcom is None
    assert header.extensions[0].value == "5.5"


def test_header_submitter_text_is_malformed(ctx):
    header = build_header(parse_node("0 HEAD\n1 SUBM John\n"), ctx)
    assert header.submitter == "John"
    assert ctx.diagnostics.count(DiagnosticKind.MALFORMED_LINE) == 1


def test_build_header_rejects_other_tags(ctx):
    with pytest.raises(ValueError):
        build_header(parse_node("0 TRLR\n"), ctx)
