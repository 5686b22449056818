from pathlib import Path

import pytest

from gedcom_records import parse
from gedcom_records.exporter import GedcomWriter, record_to_node, split_value, write, write_file
from gedcom_records.registry import (
    CustomRecord,
    GenericAttribute,
    Header,
    Individual,
    Note,
    RecordGraph,
    Trailer,
)
from gedcom_records.utils import mock_file_path


def test_split_value_respects_width():
    assert split_value("abcdefgh", 3) == ["abc", "def", "gh"]
    assert split_value("short", 10) == ["short"]


def test_split_value_never_ends_chunk_in_whitespace():
    chunks = split_value("aaa bbb ccc", 4)
    assert "".join(chunks) == "aaa bbb ccc"
    assert all(not c[-1].isspace() for c in chunks[:-1])


def test_split_value_stretches_over_whitespace_runs():
    chunks = split_value("a      b", 1)
    assert "".join(chunks) == "a      b"
    assert all(not c[-1].isspace() for c in chunks[:-1])


def test_minimal_graph_serializes_exactly():
    graph = RecordGraph([Header(), Individual(xref="@I1@"), Trailer()])
    assert write(graph) == "0 HEAD\n0 @I1@ INDI\n0 TRLR\n"


def test_empty_graph_is_empty_text():
    assert write(RecordGraph()) == ""


def test_newlines_become_cont_lines():
    graph = RecordGraph([Note(xref="@N1@", text="first\nsecond\n\nfourth")])
    assert write(graph).splitlines() == [
        "0 @N1@ NOTE first",
        "1 CONT second",
        "1 CONT",
        "1 CONT fourth",
    ]


def test_long_values_are_wrapped_with_conc():
    text = "word " * 30 + "end"
    graph = RecordGraph([Note(xref="@N1@", text=text)])
    lines = write(graph, max_line_length=40).splitlines()

    assert len(lines) > 1
    assert all(len(line) <= 40 for line in lines)
    assert all(line.startswith("1 CONC ") for line in lines[1:])

    (note,) = parse("".join(l + "\n" for l in lines)).graph.notes
    assert note.text == text


def test_wrapping_can_be_disabled():
    text = "x" * 600
    graph = RecordGraph([Note(xref="@N1@", text=text)])
    assert write(graph, max_line_length=None) == f"0 @N1@ NOTE {text}\n"


def test_line_terminator_option():
    graph = RecordGraph([Header(), Trailer()])
    assert write(graph, line_terminator="\r\n") == "0 HEAD\r\n0 TRLR\r\n"


def test_extensions_are_written_after_typed_fields():
    person = Individual(
        xref="@I1@",
        sex="F",
        extensions=[GenericAttribute("_FAV", "tea", children=[GenericAttribute("_SRC", "diary")])],
    )
    assert write(RecordGraph([person])).splitlines() == [
        "0 @I1@ INDI",
        "1 SEX F",
        "1 _FAV tea",
        "2 _SRC diary",
    ]


def test_custom_record_is_written_verbatim():
    record = CustomRecord("_plac", "@P1@", "Boston", [GenericAttribute("MAP")])
    assert write(RecordGraph([record])) == "0 @P1@ _plac Boston\n1 MAP\n"


def test_record_to_node_rejects_non_records():
    with pytest.raises(TypeError):
        record_to_node("INDI")


def test_round_trip_sample_file():
    text = Path(mock_file_path("sample.ged")).read_text(encoding="utf-8")
    first = parse(text)
    second = parse(write(first.graph))

    assert second.graph == first.graph
    assert [d.kind for d in second.diagnostics] == [d.kind for d in first.diagnostics]


def test_round_trip_keeps_leading_spaces_and_duplicates():
    text = (
        "0 @I1@ INDI\n"
        "1 NAME  Ann /Lee/\n"
        "1 NAME Ann /Lee/\n"
        "1 SEX F\n"
        "1 SEX M\n"
        "0 @F1@ FAM\n"
        "1 CHIL @I1@\n"
        "2 _FREL Natural\n"
        "1 CHIL @I1@\n"
    )
    first = parse(text).graph
    assert parse(write(first)).graph == first


def test_writer_instance_and_write_file(tmp_path):
    graph = RecordGraph([Header(), Trailer()])
    target = write_file(graph, tmp_path / "out" / "tree.ged")
    assert target.read_text(encoding="utf-8") == "0 HEAD\n0 TRLR\n"

    writer = GedcomWriter(max_line_length=20, line_terminator="\r\n")
    path = writer.write_file(graph, tmp_path / "crlf.ged")
    assert path.read_bytes() == b"0 HEAD\r\n0 TRLR\r\n"


def test_round_trip_keeps_empty_citation_data_line():
    text = "0 @I1@ INDI\n1 SOUR @S1@\n2 DATA\n2 DATA\n3 DATE 1900\n"
    first = parse(text).graph

    (citation,) = first.individuals[0].citations
    assert citation.data_date == "1900"
    assert [(e.tag, e.value, e.children) for e in citation.extensions] == [("DATA", None, [])]
    assert parse(write(first)).graph == first


def test_rewrite_keeps_value_less_leaves():
    graph, _ = parse("0 @I1@ INDI\n1 SEX\n1 BIRT\n2 DATE\n2 _X y\n")
    person = graph.individuals[0]

    assert person.sex is None
    assert person.events[0].date is None
    lines = write(graph).splitlines()
    assert "1 SEX" in lines
    assert "2 DATE" in lines
    assert "2 _X y" in lines
