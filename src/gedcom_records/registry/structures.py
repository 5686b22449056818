"""
Builders for substructures shared by several record kinds.

Each builder takes the GEDCOMNode that opens the structure and consumes its
children; anything not modelled ends up in ``extensions`` untouched.
"""

from __future__ import annotations

from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.loader.tokenizer import is_xref
from gedcom_records.registry.entities import (
    Address,
    EventDetail,
    FamilyLink,
    MediaFile,
    NoteStructure,
    PersonalName,
    RepositoryCitation,
    SourceCitation,
)
from gedcom_records.registry.utils import (
    MaterializeContext,
    append_scalar,
    is_leaf,
    set_scalar,
)

_ADDRESS_FIELDS = {
    "ADR1": "line1",
    "ADR2": "line2",
    "ADR3": "line3",
    "CITY": "city",
    "STAE": "state",
    "POST": "postal_code",
    "CTRY": "country",
}

_EVENT_FIELDS = {
    "TYPE": "type",
    "DATE": "date",
    "PLAC": "place",
    "AGE": "age",
    "CAUS": "cause",
    "AGNC": "agency",
}

_NAME_FIELDS = {
    "GIVN": "given",
    "SURN": "surname",
    "NPFX": "prefix",
    "SPFX": "surname_prefix",
    "NSFX": "suffix",
    "NICK": "nickname",
    "TYPE": "name_type",
}


def build_address(node: GEDCOMNode, ctx: MaterializeContext) -> Address:
    address = Address(value=node.value)
    for child in node.children:
        attr = _ADDRESS_FIELDS.get(child.norm_tag)
        if attr and set_scalar(address, attr, child):
            continue
        address.extensions.append(ctx.extension(child))
    return address


def build_note_structure(node: GEDCOMNode, ctx: MaterializeContext) -> NoteStructure:
    if is_xref(node.value):
        ctx.pointer(node, "NOTE")
    note = NoteStructure(value=node.value)
    for child in node.children:
        if child.norm_tag == "SOUR":
            note.citations.append(build_citation(child, ctx))
        else:
            note.extensions.append(ctx.extension(child))
    return note


def build_citation(node: GEDCOMNode, ctx: MaterializeContext) -> SourceCitation:
    """
    SOUR citation, either ``n SOUR @S1@`` or ``n SOUR description``.
    """
    if is_xref(node.value):
        citation = SourceCitation(xref=ctx.pointer(node, "SOUR"))
    else:
        citation = SourceCitation(text=node.value)

    data_seen = False
    for child in node.children:
        tag = child.norm_tag

        if tag == "PAGE" and set_scalar(citation, "page", child):
            continue

        elif tag == "QUAY" and set_scalar(citation, "quality", child):
            continue

        elif tag == "DATA" and not data_seen and child.value is None and child.children:
            data_seen = True
            _fill_citation_data(citation, child, ctx)

        elif tag == "NOTE":
            citation.notes.append(build_note_structure(child, ctx))

        else:
            citation.extensions.append(ctx.extension(child))

    return citation


def _fill_citation_data(citation: SourceCitation, node: GEDCOMNode, ctx: MaterializeContext) -> None:
    for child in node.children:
        tag = child.norm_tag
        if tag == "DATE" and set_scalar(citation, "data_date", child):
            continue
        if tag == "TEXT" and set_scalar(citation, "data_text", child):
            continue
        citation.data_extensions.append(ctx.extension(child))


def build_event(node: GEDCOMNode, ctx: MaterializeContext) -> EventDetail:
    """
    Event or attribute structure (BIRT, MARR, OCCU, EVEN, ...).

    DATE and PLAC are kept as the original text; no calendar parsing.
    """
    event = EventDetail(tag=node.tag, value=node.value)

    for child in node.children:
        tag = child.norm_tag
        attr = _EVENT_FIELDS.get(tag)

        if attr and set_scalar(event, attr, child):
            continue

        if tag == "ADDR" and event.address is None:
            event.address = build_address(child, ctx)
        elif tag == "SOUR":
            event.citations.append(build_citation(child, ctx))
        elif tag == "NOTE":
            event.notes.append(build_note_structure(child, ctx))
        else:
            event.extensions.append(ctx.extension(child))

    return event


def build_personal_name(node: GEDCOMNode, ctx: MaterializeContext) -> PersonalName:
    name = PersonalName(value=node.value)

    for child in node.children:
        tag = child.norm_tag
        attr = _NAME_FIELDS.get(tag)

        if attr and set_scalar(name, attr, child):
            continue

        if tag == "SOUR":
            name.citations.append(build_citation(child, ctx))
        elif tag == "NOTE":
            name.notes.append(build_note_structure(child, ctx))
        else:
            name.extensions.append(ctx.extension(child))

    return name


def build_family_link(node: GEDCOMNode, ctx: MaterializeContext) -> FamilyLink:
    """FAMC / FAMS. PEDI only occurs under FAMC but is accepted under both."""
    link = FamilyLink(xref=ctx.pointer(node, "FAM"))

    for child in node.children:
        tag = child.norm_tag

        if tag == "PEDI" and set_scalar(link, "pedigree", child):
            continue
        if tag == "STAT" and set_scalar(link, "status", child):
            continue

        if tag == "NOTE":
            link.notes.append(build_note_structure(child, ctx))
        else:
            link.extensions.append(ctx.extension(child))

    return link


def build_repository_citation(node: GEDCOMNode, ctx: MaterializeContext) -> RepositoryCitation:
    repo = RepositoryCitation(xref=ctx.pointer(node, "REPO"))

    for child in node.children:
        tag = child.norm_tag

        if tag == "CALN" and append_scalar(repo.call_numbers, child):
            continue

        if tag == "NOTE":
            repo.notes.append(build_note_structure(child, ctx))
        else:
            repo.extensions.append(ctx.extension(child))

    return repo


def build_media_file(node: GEDCOMNode, ctx: MaterializeContext) -> MediaFile:
    """FILE line of a multimedia record; FORM may carry a nested TYPE."""
    media_file = MediaFile(path=node.value)

    for child in node.children:
        tag = child.norm_tag

        unset = media_file.form is None and media_file.media_type is None
        if tag == "FORM" and unset and _is_simple_form(child):
            media_file.form = child.value
            type_node = child.find_first("TYPE")
            media_file.media_type = type_node.value if type_node is not None else None
            continue

        if tag == "TITL" and set_scalar(media_file, "title", child):
            continue

        media_file.extensions.append(ctx.extension(child))

    return media_file


def _is_simple_form(node: GEDCOMNode) -> bool:
    """FORM with at most one leaf TYPE line below it (``2 FORM jpg / 3 TYPE photo``)."""
    if node.value is None:
        return False
    if is_leaf(node):
        return True
    if len(node.children) != 1:
        return False
    only = node.children[0]
    return only.norm_tag == "TYPE" and is_leaf(only) and only.value is not None
