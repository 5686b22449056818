"""
node_builder.py
Typed records -> generic GEDCOMNode trees.

The inverse of the registry builders: fields are emitted in a fixed,
canonical order and every record's ``extensions`` come last, so parsing the
result reproduces the same typed records.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.registry.entities import (
    Address,
    CustomRecord,
    Encoding,
    EventDetail,
    Family,
    FamilyLink,
    GedcomMeta,
    GenericAttribute,
    Header,
    HeaderSource,
    Individual,
    MediaFile,
    Multimedia,
    Note,
    NoteStructure,
    PersonalName,
    Record,
    Repository,
    RepositoryCitation,
    Source,
    SourceCitation,
    Submission,
    Submitter,
    Trailer,
)


# ----------------------------------------------------------------------
# Node helpers
# ----------------------------------------------------------------------

def _node(
    tag: str,
    value: Optional[str] = None,
    xref: Optional[str] = None,
    children: Optional[List[GEDCOMNode]] = None,
) -> GEDCOMNode:
    return GEDCOMNode(level=0, tag=tag, value=value, xref=xref, children=children or [])


def _scalar(out: List[GEDCOMNode], tag: str, value: Optional[str]) -> None:
    if value is not None:
        out.append(_node(tag, value))


def _scalars(out: List[GEDCOMNode], tag: str, values: Iterable[str]) -> None:
    for value in values:
        out.append(_node(tag, value))


def extension_to_node(attr: GenericAttribute) -> GEDCOMNode:
    return _node(
        attr.tag,
        attr.value,
        attr.xref,
        [extension_to_node(c) for c in attr.children],
    )


def _extensions(out: List[GEDCOMNode], extensions: Iterable[GenericAttribute]) -> None:
    out.extend(extension_to_node(e) for e in extensions)


def _set_levels(node: GEDCOMNode, level: int) -> GEDCOMNode:
    node.level = level
    for child in node.children:
        _set_levels(child, level + 1)
    return node


# ----------------------------------------------------------------------
# Sub-structures
# ----------------------------------------------------------------------

def address_to_node(address: Address) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "ADR1", address.line1)
    _scalar(children, "ADR2", address.line2)
    _scalar(children, "ADR3", address.line3)
    _scalar(children, "CITY", address.city)
    _scalar(children, "STAE", address.state)
    _scalar(children, "POST", address.postal_code)
    _scalar(children, "CTRY", address.country)
    _extensions(children, address.extensions)
    return _node("ADDR", address.value, children=children)


def note_structure_to_node(note: NoteStructure) -> GEDCOMNode:
    children = [citation_to_node(c) for c in note.citations]
    _extensions(children, note.extensions)
    return _node("NOTE", note.value, children=children)


def citation_to_node(citation: SourceCitation) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "PAGE", citation.page)

    if (
        citation.data_date is not None
        or citation.data_text is not None
        or citation.data_extensions
    ):
        data: List[GEDCOMNode] = []
        _scalar(data, "DATE", citation.data_date)
        _scalar(data, "TEXT", citation.data_text)
        _extensions(data, citation.data_extensions)
        children.append(_node("DATA", children=data))

    _scalar(children, "QUAY", citation.quality)
    children.extend(note_structure_to_node(n) for n in citation.notes)
    _extensions(children, citation.extensions)

    value = citation.xref if citation.xref is not None else citation.text
    return _node("SOUR", value, children=children)


def event_to_node(event: EventDetail) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "TYPE", event.type)
    _scalar(children, "DATE", event.date)
    _scalar(children, "PLAC", event.place)
    _scalar(children, "AGE", event.age)
    _scalar(children, "CAUS", event.cause)
    _scalar(children, "AGNC", event.agency)
    if event.address is not None:
        children.append(address_to_node(event.address))
    children.extend(citation_to_node(c) for c in event.citations)
    children.extend(note_structure_to_node(n) for n in event.notes)
    _extensions(children, event.extensions)
    return _node(event.tag, event.value, children=children)


def name_to_node(name: PersonalName) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "TYPE", name.name_type)
    _scalar(children, "NPFX", name.prefix)
    _scalar(children, "GIVN", name.given)
    _scalar(children, "NICK", name.nickname)
    _scalar(children, "SPFX", name.surname_prefix)
    _scalar(children, "SURN", name.surname)
    _scalar(children, "NSFX", name.suffix)
    children.extend(citation_to_node(c) for c in name.citations)
    children.extend(note_structure_to_node(n) for n in name.notes)
    _extensions(children, name.extensions)
    return _node("NAME", name.value, children=children)


def family_link_to_node(tag: str, link: FamilyLink) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "PEDI", link.pedigree)
    _scalar(children, "STAT", link.status)
    children.extend(note_structure_to_node(n) for n in link.notes)
    _extensions(children, link.extensions)
    return _node(tag, link.xref, children=children)


def repository_citation_to_node(repo: RepositoryCitation) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalars(children, "CALN", repo.call_numbers)
    children.extend(note_structure_to_node(n) for n in repo.notes)
    _extensions(children, repo.extensions)
    return _node("REPO", repo.xref, children=children)


def media_file_to_node(media_file: MediaFile) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    if media_file.form is not None or media_file.media_type is not None:
        form_children: List[GEDCOMNode] = []
        _scalar(form_children, "TYPE", media_file.media_type)
        children.append(_node("FORM", media_file.form, children=form_children))
    _scalar(children, "TITL", media_file.title)
    _extensions(children, media_file.extensions)
    return _node("FILE", media_file.path, children=children)


# ----------------------------------------------------------------------
# Records
# ----------------------------------------------------------------------

def _header_source_to_node(source: HeaderSource) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "VERS", source.version)
    _scalar(children, "NAME", source.name)
    _extensions(children, source.extensions)
    return _node("SOUR", source.value, children=children)


def _gedcom_meta_to_node(meta: GedcomMeta) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "VERS", meta.version)
    _scalar(children, "FORM", meta.form)
    _extensions(children, meta.extensions)
    return _node("GEDC", children=children)


def _encoding_to_node(encoding: Encoding) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "VERS", encoding.version)
    _extensions(children, encoding.extensions)
    return _node("CHAR", encoding.value, children=children)


def header_to_node(header: Header) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    if header.source is not None:
        children.append(_header_source_to_node(header.source))
    _scalar(children, "DEST", header.destination)
    if header.date is not None or header.time is not None:
        time: List[GEDCOMNode] = []
        _scalar(time, "TIME", header.time)
        children.append(_node("DATE", header.date, children=time))
    _scalar(children, "SUBM", header.submitter)
    _scalar(children, "SUBN", header.submission)
    _scalar(children, "FILE", header.file)
    _scalar(children, "COPR", header.copyright)
    if header.gedcom is not None:
        children.append(_gedcom_meta_to_node(header.gedcom))
    if header.encoding is not None:
        children.append(_encoding_to_node(header.encoding))
    _scalar(children, "LANG", header.language)
    _scalar(children, "NOTE", header.note)
    _extensions(children, header.extensions)
    return _node("HEAD", children=children)


def individual_to_node(individual: Individual) -> GEDCOMNode:
    children: List[GEDCOMNode] = [name_to_node(n) for n in individual.names]
    _scalar(children, "SEX", individual.sex)
    children.extend(event_to_node(e) for e in individual.events)
    children.extend(event_to_node(a) for a in individual.attributes)
    children.extend(family_link_to_node("FAMC", f) for f in individual.families_as_child)
    children.extend(family_link_to_node("FAMS", f) for f in individual.families_as_spouse)
    children.extend(citation_to_node(c) for c in individual.citations)
    children.extend(note_structure_to_node(n) for n in individual.notes)
    _scalars(children, "OBJE", individual.media)
    _scalars(children, "SUBM", individual.submitters)
    _extensions(children, individual.extensions)
    return _node("INDI", xref=individual.xref, children=children)


def family_to_node(family: Family) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "HUSB", family.husband)
    _scalar(children, "WIFE", family.wife)

    written = set()
    for pointer in family.children:
        details: List[GEDCOMNode] = []
        if pointer not in written:
            _extensions(details, family.child_details.get(pointer, []))
            written.add(pointer)
        children.append(_node("CHIL", pointer, children=details))

    _scalar(children, "NCHI", family.num_children)
    children.extend(event_to_node(e) for e in family.events)
    children.extend(citation_to_node(c) for c in family.citations)
    children.extend(note_structure_to_node(n) for n in family.notes)
    _scalars(children, "OBJE", family.media)
    _scalars(children, "SUBM", family.submitters)
    _extensions(children, family.extensions)
    return _node("FAM", xref=family.xref, children=children)


def source_to_node(source: Source) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "TITL", source.title)
    _scalar(children, "AUTH", source.author)
    _scalar(children, "PUBL", source.publication)
    _scalar(children, "ABBR", source.abbreviation)
    _scalar(children, "TEXT", source.text)
    children.extend(repository_citation_to_node(r) for r in source.repositories)
    children.extend(note_structure_to_node(n) for n in source.notes)
    _scalars(children, "OBJE", source.media)
    _extensions(children, source.extensions)
    return _node("SOUR", xref=source.xref, children=children)


def repository_to_node(repo: Repository) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "NAME", repo.name)
    if repo.address is not None:
        children.append(address_to_node(repo.address))
    _scalars(children, "PHON", repo.phones)
    _scalars(children, "EMAIL", repo.emails)
    _scalars(children, "WWW", repo.websites)
    children.extend(note_structure_to_node(n) for n in repo.notes)
    _extensions(children, repo.extensions)
    return _node("REPO", xref=repo.xref, children=children)


def note_to_node(note: Note) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "MIME", note.mime)
    _scalar(children, "LANG", note.language)
    children.extend(citation_to_node(c) for c in note.citations)
    _extensions(children, note.extensions)
    return _node("NOTE", note.text, xref=note.xref, children=children)


def multimedia_to_node(media: Multimedia) -> GEDCOMNode:
    children: List[GEDCOMNode] = [media_file_to_node(f) for f in media.files]
    _scalar(children, "FORM", media.form)
    _scalar(children, "TITL", media.title)
    children.extend(note_structure_to_node(n) for n in media.notes)
    children.extend(citation_to_node(c) for c in media.citations)
    _extensions(children, media.extensions)
    return _node("OBJE", xref=media.xref, children=children)


def submitter_to_node(submitter: Submitter) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "NAME", submitter.name)
    if submitter.address is not None:
        children.append(address_to_node(submitter.address))
    _scalars(children, "PHON", submitter.phones)
    _scalars(children, "EMAIL", submitter.emails)
    _scalar(children, "LANG", submitter.language)
    children.extend(note_structure_to_node(n) for n in submitter.notes)
    _scalars(children, "OBJE", submitter.media)
    _extensions(children, submitter.extensions)
    return _node("SUBM", xref=submitter.xref, children=children)


def submission_to_node(submission: Submission) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _scalar(children, "SUBM", submission.submitter)
    _scalar(children, "FAMF", submission.family_file)
    _scalar(children, "TEMP", submission.temple)
    _scalar(children, "ANCE", submission.ancestors)
    _scalar(children, "DESC", submission.descendants)
    _scalar(children, "ORDI", submission.ordinance)
    _extensions(children, submission.extensions)
    return _node("SUBN", xref=submission.xref, children=children)


def trailer_to_node(trailer: Trailer) -> GEDCOMNode:
    children: List[GEDCOMNode] = []
    _extensions(children, trailer.extensions)
    return _node("TRLR", children=children)


def custom_record_to_node(record: CustomRecord) -> GEDCOMNode:
    return _node(
        record.tag,
        record.value,
        record.xref,
        [extension_to_node(c) for c in record.children],
    )


_CONVERTERS = {
    Header: header_to_node,
    Individual: individual_to_node,
    Family: family_to_node,
    Source: source_to_node,
    Repository: repository_to_node,
    Note: note_to_node,
    Multimedia: multimedia_to_node,
    Submitter: submitter_to_node,
    Submission: submission_to_node,
    Trailer: trailer_to_node,
    CustomRecord: custom_record_to_node,
}


def record_to_node(record: Record) -> GEDCOMNode:
    """Convert one typed record into a level-0 GEDCOMNode tree."""
    converter = _CONVERTERS.get(type(record))
    if converter is None:
        raise TypeError(f"Not a GEDCOM record: {type(record).__name__}")
    return _set_levels(converter(record), 0)
