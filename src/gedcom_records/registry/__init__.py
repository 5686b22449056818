from __future__ import annotations

from .entities import (
    Address,
    CertaintyAssessment,
    CustomRecord,
    Encoding,
    EventDetail,
    Family,
    FamilyLink,
    GedcomMeta,
    Gender,
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
    RECORD_TYPES,
    Repository,
    RepositoryCitation,
    Source,
    SourceCitation,
    Submission,
    Submitter,
    Trailer,
    record_tag,
)
from .graph import RecordGraph

__all__ = [
    "Address",
    "CertaintyAssessment",
    "CustomRecord",
    "Encoding",
    "EventDetail",
    "Family",
    "FamilyLink",
    "GedcomMeta",
    "Gender",
    "GenericAttribute",
    "Header",
    "HeaderSource",
    "Individual",
    "MediaFile",
    "Multimedia",
    "Note",
    "NoteStructure",
    "PersonalName",
    "Record",
    "RECORD_TYPES",
    "RecordGraph",
    "Repository",
    "RepositoryCitation",
    "Source",
    "SourceCitation",
    "Submission",
    "Submitter",
    "Trailer",
    "record_tag",
]
