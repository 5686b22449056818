from gedcom_records.loader import read_lines, segment_lines
from gedcom_records.registry.build_repository import build_repository
from gedcom_records.registry.build_source import build_source

import pytest


def parse_node(text):
    (node,) = segment_lines(read_lines(text))
    return node


def test_build_source_basic(ctx):
    node = parse_node(
        "0 @S1@ SOUR\n"
        "1 TITL Boston Birth Register\n"
        "1 AUTH City of Boston\n"
        "1 PUBL Boston, 1901\n"
        "1 ABBR BBR\n"
        "1 TEXT Line one\n"
        "2 CONT Line two\n"
        "1 REPO @R1@\n"
        "2 CALN BR-1900\n"
        "2 CALN BR-1900-B\n"
        "1 NOTE See also the index\n"
        "1 OBJE @O1@\n"
        "1 _APID 1,7602::0\n"
    )

    source = build_source(node, ctx)

    assert source.xref == "@S1@"
    assert source.title == "Boston Birth Register"
    assert source.author == "City of Boston"
    assert source.publication == "Boston, 1901"
    assert source.abbreviation == "BBR"
    assert source.text == "Line one\nLine two"
    assert source.repositories[0].xref == "@R1@"
    assert source.repositories[0].call_numbers == ["BR-1900", "BR-1900-B"]
    assert source.notes[0].value == "See also the index"
    assert source.media == ["@O1@"]
    assert [e.tag for e in source.extensions] == ["_APID"]


def test_source_data_block_is_preserved(ctx):
    node = parse_node("0 @S1@ SOUR\n1 DATA\n2 EVEN BIRT\n3 DATE FROM 1900 TO 1910\n")
    source = build_source(node, ctx)
    data = source.extensions[0]
    assert data.tag == "DATA"
    assert data.children[0].tag == "EVEN"
    assert data.children[0].children[0].value == "FROM 1900 TO 1910"


def test_build_repository(ctx):
    node = parse_node(
        "0 @R1@ REPO\n"
        "1 NAME Boston City Archives\n"
        "1 ADDR 1 City Hall Square\n"
        "2 CONT Boston\n"
        "2 CITY Boston\n"
        "2 STAE MA\n"
        "2 POST 02201\n"
        "2 CTRY USA\n"
        "1 PHON 555-0100\n"
        "1 PHON 555-0101\n"
        "1 EMAIL archives@example.org\n"
        "1 WWW https://example.org\n"
    )
    repo = build_repository(node, ctx)

    assert repo.name == "Boston City Archives"
    assert repo.address.value == "1 City Hall Square\nBoston"
    assert repo.address.city == "Boston"
    assert repo.address.state == "MA"
    assert repo.address.postal_code == "02201"
    assert repo.address.country == "USA"
    assert repo.phones == ["555-0100", "555-0101"]
    assert repo.emails == ["archives@example.org"]
    assert repo.websites == ["https://example.org"]


def test_builders_reject_other_tags(ctx):
    with pytest.raises(ValueError):
        build_source(parse_node("0 @R1@ REPO\n"), ctx)
    with pytest.raises(ValueError):
        build_repository(parse_node("0 @S1@ SOUR\n"), ctx)
