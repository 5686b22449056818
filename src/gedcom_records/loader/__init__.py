# src/gedcom_records/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    raw text/bytes -> LineReader -> Token stream -> build_tree -> GEDCOMTree
"""

from __future__ import annotations

from .encoding import check_declared_encoding, decode_input
from .file_loader import load_file
from .line_reader import LineReader, read_lines, split_physical_lines
from .segmenter import GEDCOMNode, GEDCOMStructureError, segment_lines, segment_records
from .tokenizer import GedcomSyntaxError, Token, is_xref, tokenize_line
from .tree_builder import GEDCOMTree, build_tree

__all__ = [
    "Token",
    "GedcomSyntaxError",
    "GEDCOMNode",
    "GEDCOMStructureError",
    "GEDCOMTree",
    "LineReader",
    "build_tree",
    "check_declared_encoding",
    "decode_input",
    "is_xref",
    "load_file",
    "read_lines",
    "segment_lines",
    "segment_records",
    "split_physical_lines",
    "tokenize_line",
]
