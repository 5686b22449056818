from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from gedcom_records.events.event import event_label
from gedcom_records.loader.tokenizer import is_xref


# -----------------------------
# Base records (small atoms)
# -----------------------------

@dataclass(slots=True)
class GenericAttribute:
    """
    Lossless capture of a GEDCOM subtree the typed model does not cover.

    Supports:
      - nested substructures (children)
      - source line tracking (lineno, ignored by equality)
      - vendor / future GEDCOM extensions (``_XYZ`` tags)
    """
    tag: str
    value: Optional[str] = None
    xref: Optional[str] = None
    children: List["GenericAttribute"] = field(default_factory=list)
    lineno: Optional[int] = field(default=None, compare=False)


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    NONBINARY = "Nonbinary"
    UNKNOWN = "Unknown"


_GENDER_CODES = {"M": Gender.MALE, "F": Gender.FEMALE, "X": Gender.NONBINARY, "U": Gender.UNKNOWN}


class CertaintyAssessment(Enum):
    """QUAY: 0 unreliable, 1 questionable, 2 secondary, 3 direct evidence."""
    UNRELIABLE = 0
    QUESTIONABLE = 1
    SECONDARY = 2
    DIRECT = 3


@dataclass(slots=True)
class Address:
    value: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    line3: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    extensions: List[GenericAttribute] = field(default_factory=list)


@dataclass(slots=True)
class NoteStructure:
    """
    A NOTE line inside another structure.

    ``value`` is either a pointer to a NOTE record (``@N1@``) or the inline
    note text.
    """
    value: Optional[str] = None
    citations: List["SourceCitation"] = field(default_factory=list)
    extensions: List[GenericAttribute] = field(default_factory=list)

    @property
    def is_pointer(self) -> bool:
        return is_xref(self.value)


@dataclass(slots=True)
class SourceCitation:
    """
    SOUR citation. ``xref`` is set for the pointer form; ``text`` holds the
    description for the inline (unpointed) form.
    """
    xref: Optional[str] = None
    text: Optional[str] = None
    page: Optional[str] = None
    quality: Optional[str] = None
    data_date: Optional[str] = None
    data_text: Optional[str] = None
    notes: List[NoteStructure] = field(default_factory=list)
    extensions: List[GenericAttribute] = field(default_factory=list)
    data_extensions: List[GenericAttribute] = field(default_factory=list)

    @property
    def certainty(self) -> Optional[CertaintyAssessment]:
        code = (self.quality or "").strip()
        if code not in ("0", "1", "2", "3"):
            return None
        return CertaintyAssessment(int(code))


@dataclass(slots=True)
class EventDetail:
    """
    An event (BIRT, MARR, ...) or attribute (OCCU, RESI, ...) structure.

    Dates and places are kept as the original text.
    """
    tag: str
    value: Optional[str] = None
    type: Optional[str] = None
    date: Optional[str] = None
    place: Optional[str] = None
    age: Optional[str] = None
    cause: Optional[str] = None
    agency: Optional[str] = None
    address: Optional[Address] = None
    citations: List[SourceCitation] = field(default_factory=list)
    notes: List[NoteStructure] = field(default_factory=list)
    extensions: List[GenericAttribute] = field(default_factory=list)

    @property
    def label(self) -> str:
        return event_label(self.tag)

    @property
    def sources(self) -> List[str]:
        return [c.xref for c in self.citations if c.xref]


@dataclass(slots=True)
class PersonalName:
    """
    GEDCOM NAME substructure, e.g. PersonalName(value="John /Doe/").
    """
    value: Optional[str] = None
    given: Optional[str] = None
    surname: Optional[str] = None
    prefix: Optional[str] = None
    surname_prefix: Optional[str] = None
    suffix: Optional[str] = None
    nickname: Optional[str] = None
    name_type: Optional[str] = None
    citations: List[SourceCitation] = field(default_factory=list)
    notes: List[NoteStructure] = field(default_factory=list)
    extensions: List[GenericAttribute] = field(default_factory=list)

    @property
    def given_name(self) -> Optional[str]:
        """GIVN, else the text before the slash-delimited surname."""
        if self.given:
            return self.given
        if not self.value:
            return None
        text = self.value.split("/", 1)[0].strip()
        return text or None

    @property
    def family_name(self) -> Optional[str]:
        """SURN, else the slash-delimited part of the name value."""
        if self.surname:
            return self.surname
        if not self.value or self.value.count("/") < 2:
            return None
        text = self.value.split("/")[1].strip()
        return text or None


@dataclass(slots=True)
class FamilyLink:
    """FAMC / FAMS link from an individual to a family."""
    xref: Optional[str] = None
    pedigree: Optional[str] = None
    status: Optional[str] = None
    notes: List[NoteStructure] = field(default_factory=list)
    extensions: List[GenericAttribute] = field(default_factory=list)


@dataclass(slots=True)
class RepositoryCitation:
    xref: Optional[str] = None
    call_numbers: List[str] = field(default_factory=list)
    notes: List[NoteStructure] = field(default_factory=list)
    extensions: List[GenericAttribute] = field(default_factory=list)


@dataclass(slots=True)
class MediaFile:
    path: Optional[str] = None
    form: Optional[str] = None
    media_type: Optional[str] = None
    title: Optional[str] = None
    extensions: List[GenericAttribute] = field(default_factory=list)


@dataclass(slots=True)
class HeaderSource:
    value: Optional[str] = None
    version: Optional[str] = None
    name: Optional[str] = None
    extensions: List[GenericAttribute] = field(default_factory=list)


@dataclass(slots=True)
class GedcomMeta:
    version: Optional[str] = None
    form: Optional[str] = None
    extensions: List[GenericAttribute] = field(default_factory=list)


@dataclass(slots=True)
class Encoding:
    value: Optional[str] = None
    version: Optional[str] = None
    extensions: List[GenericAttribute] = field(default_factory=list)


# -----------------------------
# Records
# -----------------------------

@dataclass(slots=True)
class Header:
    source: Optional[HeaderSource] = None
    destination: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    submitter: Optional[str] = None
    submission: Optional[str] = None
    file: Optional[str] = None
    copyright: Optional[str] = None
    gedcom: Optional[GedcomMeta] = None
    encoding: Optional[Encoding] = None
    language: Optional[str] = None
    note: Optional[str] = None
    extensions: List[GenericAttribute] = field(default_factory=list)

    TAG = "HEAD"

    @property
    def xref(self) -> Optional[str]:
        return None


@dataclass(slots=True)
class Individual:
    xref: Optional[str] = None
    names: List[PersonalName] = field(default_factory=list)
    sex: Optional[str] = None
    events: List[EventDetail] = field(default_factory=list)
    attributes: List[EventDetail] = field(default_factory=list)
    families_as_child: List[FamilyLink] = field(default_factory=list)
    families_as_spouse: List[FamilyLink] = field(default_factory=list)
    citations: List[SourceCitation] = field(default_factory=list)
    notes: List[NoteStructure] = field(default_factory=list)
    media: List[str] = field(default_factory=list)
    submitters: List[str] = field(default_factory=list)
    extensions: List[GenericAttribute] = field(default_factory=list)

    TAG = "INDI"

    @property
    def gender(self) -> Gender:
        return _GENDER_CODES.get((self.sex or "").strip().upper(), Gender.UNKNOWN)

    @property
    def name(self) -> Optional[str]:
        return self.names[0].value if self.names else None


@dataclass(slots=True)
class Family:
    xref: Optional[str] = None
    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)
    child_details: Dict[str, List[GenericAttribute]] = field(default_factory=dict)
    events: List[EventDetail] = field(default_factory=list)
    num_children: Optional[str] = None
    citations: List[SourceCitation] = field(default_factory=list)
    notes: List[NoteStructure] = field(default_factory=list)
    media: List[str] = field(default_factory=list)
    submitters: List[str] = field(default_factory=list)
    extensions: List[GenericAttribute] = field(default_factory=list)

    TAG = "FAM"


@dataclass(slots=True)
class Source:
    xref: Optional[str] = None
    title: Optional[str] = None
    author: Optional[str] = None
    publication: Optional[str] = None
    abbreviation: Optional[str] = None
    text: Optional[str] = None
    repositories: List[RepositoryCitation] = field(default_factory=list)
    notes: List[NoteStructure] = field(default_factory=list)
    media: List[str] = field(default_factory=list)
    extensions: List[GenericAttribute] = field(default_factory=list)

    TAG = "SOUR"


@dataclass(slots=True)
class Repository:
    xref: Optional[str] = None
    name: Optional[str] = None
    address: Optional[Address] = None
    phones: List[str] = field(default_factory=list)
    emails: List[str] = field(default_factory=list)
    websites: List[str] = field(default_factory=list)
    notes: List[NoteStructure] = field(default_factory=list)
    extensions: List[GenericAttribute] = field(default_factory=list)

    TAG = "REPO"


@dataclass(slots=True)
class Note:
    xref: Optional[str] = None
    text: Optional[str] = None
    mime: Optional[str] = None
    language: Optional[str] = None
    citations: List[SourceCitation] = field(default_factory=list)
    extensions: List[GenericAttribute] = field(default_factory=list)

    TAG = "NOTE"


@dataclass(slots=True)
class Multimedia:
    xref: Optional[str] = None
    files: List[MediaFile] = field(default_factory=list)
    title: Optional[str] = None
    form: Optional[str] = None
    notes: List[NoteStructure] = field(default_factory=list)
    citations: List[SourceCitation] = field(default_factory=list)
    extensions: List[GenericAttribute] = field(default_factory=list)

    TAG = "OBJE"


@dataclass(slots=True)
class Submitter:
    xref: Optional[str] = None
    name: Optional[str] = None
    address: Optional[Address] = None
    phones: List[str] = field(default_factory=list)
    emails: List[str] = field(default_factory=list)
    language: Optional[str] = None
    notes: List[NoteStructure] = field(default_factory=list)
    media: List[str] = field(default_factory=list)
    extensions: List[GenericAttribute] = field(default_factory=list)

    TAG = "SUBM"


@dataclass(slots=True)
class Submission:
    xref: Optional[str] = None
    submitter: Optional[str] = None
    family_file: Optional[str] = None
    temple: Optional[str] = None
    ancestors: Optional[str] = None
    descendants: Optional[str] = None
    ordinance: Optional[str] = None
    extensions: List[GenericAttribute] = field(default_factory=list)

    TAG = "SUBN"


@dataclass(slots=True)
class Trailer:
    extensions: List[GenericAttribute] = field(default_factory=list)

    TAG = "TRLR"

    @property
    def xref(self) -> Optional[str]:
        return None


@dataclass(slots=True)
class CustomRecord:
    """
    Unrecognized top-level record, preserved verbatim (tag case included).
    """
    tag: str
    xref: Optional[str] = None
    value: Optional[str] = None
    children: List[GenericAttribute] = field(default_factory=list)


Record = Union[
    Header,
    Individual,
    Family,
    Source,
    Repository,
    Note,
    Multimedia,
    Submitter,
    Submission,
    Trailer,
    CustomRecord,
]

RECORD_TYPES: Dict[str, type] = {
    cls.TAG: cls
    for cls in (
        Header,
        Individual,
        Family,
        Source,
        Repository,
        Note,
        Multimedia,
        Submitter,
        Submission,
        Trailer,
    )
}


def record_tag(record: Record) -> str:
    """The GEDCOM tag (discriminant) of a typed record."""
    if isinstance(record, CustomRecord):
        return record.tag
    return record.TAG
