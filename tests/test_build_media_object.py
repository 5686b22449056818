from gedcom_records.loader import read_lines, segment_lines
from gedcom_records.registry.build_media_object import build_media_object

import pytest


def parse_node(text):
    (node,) = segment_lines(read_lines(text))
    return node


def test_build_media_object_551_shape(ctx):
    node = parse_node(
        "0 @O1@ OBJE\n"
        "1 FILE photos/john.jpg\n"
        "2 FORM jpg\n"
        "3 TYPE photo\n"
        "2 TITL John Smith, 1930\n"
        "1 FILE photos/john_back.jpg\n"
        "2 FORM jpg\n"
        "1 NOTE Scanned 2020\n"
    )
    media = build_media_object(node, ctx)

    assert media.xref == "@O1@"
    assert len(media.files) == 2
    first = media.files[0]
    assert first.path == "photos/john.jpg"
    assert first.form == "jpg"
    assert first.media_type == "photo"
    assert first.title == "John Smith, 1930"
    assert media.files[1].media_type is None
    assert media.notes[0].value == "Scanned 2020"


def test_build_media_object_55_shape(ctx):
    node = parse_node("0 @O2@ OBJE\n1 FORM bmp\n1 TITL Portrait\n1 BLOB\n2 CONT abc\n")
    media = build_media_object(node, ctx)
    assert media.form == "bmp"
    assert media.title == "Portrait"
    assert media.files == []
    assert [e.tag for e in media.extensions] == ["BLOB"]


def test_form_with_extra_lines_stays_an_extension(ctx):
    node = parse_node("0 @O3@ OBJE\n1 FILE a.png\n2 FORM png\n3 TYPE photo\n3 _X y\n")
    media_file = build_media_object(node, ctx).files[0]
    assert media_file.form is None
    assert media_file.extensions[0].tag == "FORM"


def test_form_without_value_stays_an_extension(ctx):
    node = parse_node("0 @O3@ OBJE\n1 FILE a.png\n2 FORM\n3 TYPE photo\n")
    media_file = build_media_object(node, ctx).files[0]
    assert media_file.form is None
    assert media_file.media_type is None
    assert [(e.tag, e.value) for e in media_file.extensions] == [("FORM", None)]


def test_build_media_object_rejects_other_tags(ctx):
    with pytest.raises(ValueError):
        build_media_object(parse_node("0 @N1@ NOTE x\n"), ctx)
