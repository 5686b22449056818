"""
gedcom_records: GEDCOM 5.5.1 reader and writer.

    from gedcom_records import parse, write

    graph, diagnostics = parse(text)
    text = write(graph)
"""

from __future__ import annotations

from gedcom_records.core.exceptions import ConfigError, FatalInputError, GedcomError
from gedcom_records.diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind
from gedcom_records.exporter.gedcom_writer import GedcomWriter, write, write_file
from gedcom_records.exporter.json_exporter import graph_to_dict, to_json
from gedcom_records.parser_core import GEDCOMParser, ParseResult, parse, parse_file
from gedcom_records.registry import (
    CertaintyAssessment,
    CustomRecord,
    Family,
    Gender,
    GenericAttribute,
    Header,
    Individual,
    Multimedia,
    Note,
    RecordGraph,
    Repository,
    Source,
    Submission,
    Submitter,
    Trailer,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticKind",
    "FatalInputError",
    "GEDCOMParser",
    "GedcomError",
    "GedcomWriter",
    "ParseResult",
    "graph_to_dict",
    "parse",
    "parse_file",
    "to_json",
    "write",
    "write_file",
    "CertaintyAssessment",
    "CustomRecord",
    "Family",
    "Gender",
    "GenericAttribute",
    "Header",
    "Individual",
    "Multimedia",
    "Note",
    "RecordGraph",
    "Repository",
    "Source",
    "Submission",
    "Submitter",
    "Trailer",
]
