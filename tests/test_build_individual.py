from gedcom_records.diagnostics import DiagnosticKind
from gedcom_records.loader import read_lines, segment_lines
from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.registry.build_individual import build_individual
from gedcom_records.registry.entities import Gender

import pytest


def make_node(tag, value=None, xref=None, children=None, level=0, lineno=1):
    return GEDCOMNode(
        tag=tag,
        value=value,
        xref=xref,
        children=children or [],
        lineno=lineno,
        level=level,
    )


def parse_node(text):
    (node,) = segment_lines(read_lines(text))
    return node


def test_build_individual_basic(ctx):
    indi = make_node(
        "INDI",
        xref="@I1@",
        children=[
            make_node(
                "NAME",
                value="John /Smith/",
                level=1,
                children=[
                    make_node("GIVN", value="John", level=2),
                    make_node("SURN", value="Smith", level=2),
                ],
            ),
            make_node("SEX", value="M", level=1),
            make_node(
                "BIRT",
                level=1,
                children=[
                    make_node("DATE", value="1 JAN 1900", level=2),
                    make_node("PLAC", value="Boston", level=2),
                ],
            ),
            make_node("OCCU", value="Carpenter", level=1),
            make_node("FAMS", value="@F1@", level=1),
            make_node("FAMC", value="@F0@", level=1),
        ],
    )

    person = build_individual(indi, ctx)

    assert person.xref == "@I1@"
    assert person.name == "John /Smith/"
    assert person.names[0].given == "John"
    assert person.names[0].surname == "Smith"
    assert person.sex == "M"
    assert person.gender is Gender.MALE

    birth = person.events[0]
    assert birth.tag == "BIRT"
    assert birth.label == "Birth"
    assert birth.date == "1 JAN 1900"
    assert birth.place == "Boston"

    assert person.attributes[0].tag == "OCCU"
    assert person.attributes[0].value == "Carpenter"
    assert [f.xref for f in person.families_as_spouse] == ["@F1@"]
    assert [f.xref for f in person.families_as_child] == ["@F0@"]

    # Pointers are recorded for checking, not resolved here
    assert {(r.xref, r.expected_tag) for r in ctx.references} == {
        ("@F1@", "FAM"),
        ("@F0@", "FAM"),
    }


def test_multiple_names_accumulate_in_order(ctx):
    node = parse_node(
        "0 @I1@ INDI\n1 NAME John /Smith/\n1 NAME Johnny /Smith/\n2 TYPE aka\n"
    )
    person = build_individual(node, ctx)
    assert [n.value for n in person.names] == ["John /Smith/", "Johnny /Smith/"]
    assert person.names[1].name_type == "aka"


def test_name_pieces_derived_from_slashes(ctx):
    person = build_individual(parse_node("0 @I1@ INDI\n1 NAME Anna Maria /Berg/ Jr\n"), ctx)
    name = person.names[0]
    assert name.given_name == "Anna Maria"
    assert name.family_name == "Berg"


@pytest.mark.parametrize(
    "code,gender",
    [("M", Gender.MALE), ("F", Gender.FEMALE), ("X", Gender.NONBINARY), ("U", Gender.UNKNOWN), ("?", Gender.UNKNOWN)],
)
def test_gender_codes(ctx, code, gender):
    person = build_individual(parse_node(f"0 @I1@ INDI\n1 SEX {code}\n"), ctx)
    assert person.gender is gender


def test_family_link_details(ctx):
    node = parse_node("0 @I3@ INDI\n1 FAMC @F1@\n2 PEDI adopted\n2 STAT proven\n")
    link = build_individual(node, ctx).families_as_child[0]
    assert link.xref == "@F1@"
    assert link.pedigree == "adopted"
    assert link.status == "proven"


def test_citations_notes_and_media(ctx):
    node = parse_node(
        "0 @I1@ INDI\n"
        "1 SOUR @S1@\n"
        "2 PAGE p. 4\n"
        "1 NOTE @N1@\n"
        "1 NOTE Inline text\n"
        "1 OBJE @O1@\n"
        "1 SUBM @U1@\n"
    )
    person = build_individual(node, ctx)

    assert person.citations[0].xref == "@S1@"
    assert person.citations[0].page == "p. 4"
    assert person.notes[0].is_pointer
    assert not person.notes[1].is_pointer
    assert person.notes[1].value == "Inline text"
    assert person.media == ["@O1@"]
    assert person.submitters == ["@U1@"]


def test_unknown_and_unmodelled_tags_are_preserved(ctx):
    node = parse_node(
        "0 @I1@ INDI\n"
        "1 _FAVCOLOR Blue\n"
        "1 RIN 42\n"
        "1 OBJE\n"
        "2 FILE photo.jpg\n"
    )
    person = build_individual(node, ctx)

    assert [(e.tag, e.value) for e in person.extensions] == [
        ("_FAVCOLOR", "Blue"),
        ("RIN", "42"),
        ("OBJE", None),
    ]
    assert person.extensions[2].children[0].value == "photo.jpg"

    # Only the nonstandard tag is reported
    unknown = ctx.diagnostics.by_kind(DiagnosticKind.UNKNOWN_TAG)
    assert len(unknown) == 1
    assert unknown[0].lineno == 2


def test_repeated_scalar_goes_to_extensions(ctx):
    person = build_individual(parse_node("0 @I1@ INDI\n1 SEX M\n1 SEX F\n"), ctx)
    assert person.sex == "M"
    assert [(e.tag, e.value) for e in person.extensions] == [("SEX", "F")]


def test_build_individual_rejects_other_tags(ctx):
    with pytest.raises(ValueError):
        build_individual(make_node("FAM", xref="@F1@"), ctx)
