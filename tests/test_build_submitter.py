from gedcom_records.loader import read_lines, segment_lines
from gedcom_records.registry.build_submitter import build_submission, build_submitter

import pytest


def parse_node(text):
    (node,) = segment_lines(read_lines(text))
    return node


def test_build_submitter(ctx):
    node = parse_node(
        "0 @U1@ SUBM\n"
        "1 NAME Jane Researcher\n"
        "1 ADDR 12 Elm Street\n"
        "2 CITY Springfield\n"
        "1 PHON 555-0199\n"
        "1 EMAIL jane@example.org\n"
        "1 LANG English\n"
        "1 OBJE @O1@\n"
        "1 RFN 42\n"
    )
    submitter = build_submitter(node, ctx)

    assert submitter.xref == "@U1@"
    assert submitter.name == "Jane Researcher"
    assert submitter.address.value == "12 Elm Street"
    assert submitter.address.city == "Springfield"
    assert submitter.phones == ["555-0199"]
    assert submitter.emails == ["jane@example.org"]
    assert submitter.language == "English"
    assert submitter.media == ["@O1@"]
    assert [e.tag for e in submitter.extensions] == ["RFN"]


def test_build_submission(ctx):
    node = parse_node(
        "0 @SB1@ SUBN\n"
        "1 SUBM @U1@\n"
        "1 FAMF family.ged\n"
        "1 TEMP SLAKE\n"
        "1 ANCE 3\n"
        "1 DESC 2\n"
        "1 ORDI yes\n"
    )
    submission = build_submission(node, ctx)

    assert submission.xref == "@SB1@"
    assert submission.submitter == "@U1@"
    assert submission.family_file == "family.ged"
    assert submission.temple == "SLAKE"
    assert submission.ancestors == "3"
    assert submission.descendants == "2"
    assert submission.ordinance == "yes"
    assert submission.extensions == []
    assert ctx.references[0].expected_tag == "SUBM"


def test_submitter_builders_reject_other_tags(ctx):
    with pytest.raises(ValueError):
        build_submitter(parse_node("0 @SB1@ SUBN\n"), ctx)
    with pytest.raises(ValueError):
        build_submission(parse_node("0 @U1@ SUBM\n"), ctx)
