"""
parser_core.py
Central parsing engine with full logging integration.

    bytes/text -> LineReader -> GEDCOMTree -> RecordGraph (+ diagnostics)
"""

from __future__ import annotations

from pathlib import Path
from typing import List, NamedTuple, Optional, Union

from gedcom_records.config import GPConfig, get_config
from gedcom_records.core.exceptions import FatalInputError
from gedcom_records.diagnostics import Diagnostic, DiagnosticCollector
from gedcom_records.loader.encoding import check_declared_encoding
from gedcom_records.loader.file_loader import load_file
from gedcom_records.loader.line_reader import LineReader
from gedcom_records.loader.tree_builder import GEDCOMTree, build_tree
from gedcom_records.logging import get_logger
from gedcom_records.registry.build_registry import build_registry
from gedcom_records.registry.graph import RecordGraph
from gedcom_records.registry.utils import MaterializeContext


class ParseResult(NamedTuple):
    graph: RecordGraph
    diagnostics: List[Diagnostic]


class GEDCOMParser:
    """
    High-level parser:
      - decodes input and reads logical lines
      - builds the generic node tree
      - checks the declared character set
      - materializes typed records and checks pointers

    A parser instance holds no per-parse state, so one instance can be
    shared across threads.
    """

    def __init__(self, config: Optional[GPConfig] = None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")

    # ---------------------------------------------------------
    # Full parse sequence
    # ---------------------------------------------------------
    def parse(self, source: Union[str, bytes]) -> ParseResult:
        """
        Parse GEDCOM text or bytes.

        Raises:
            FatalInputError: empty, undecodable, or no GEDCOM line at all.
        """
        collector = DiagnosticCollector(logger=self.log)

        reader = LineReader(source)
        tokens = list(reader.read(collector))
        if not tokens:
            raise FatalInputError("Input contains no valid GEDCOM lines")

        if self.cfg.debug:
            self.log.debug("Logical line count = %d", len(tokens))

        tree = build_tree(tokens, collector)
        self._check_encoding(tree, reader, collector)

        ctx = MaterializeContext(
            diagnostics=collector,
            report_unknown_tags=self.cfg.report_unknown_tags,
        )
        graph = build_registry(tree, ctx)

        self.log.info(
            "Parsed %d records with %d diagnostic(s)", len(graph), len(collector)
        )
        return ParseResult(graph, collector.diagnostics)

    def parse_file(self, path: Union[str, Path]) -> ParseResult:
        self.log.info("Reading GEDCOM input: %s", path)
        return self.parse(load_file(path))

    # ---------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------
    @staticmethod
    def _check_encoding(
        tree: GEDCOMTree, reader: LineReader, collector: DiagnosticCollector
    ) -> None:
        char = tree.header.find_first("CHAR") if tree.header is not None else None
        if char is None:
            return
        check_declared_encoding(
            char.value,
            reader.text,
            reader.detected_encoding,
            collector,
            char.lineno,
            char.raw,
        )


def parse(source: Union[str, bytes], *, config: Optional[GPConfig] = None) -> ParseResult:
    """Parse GEDCOM text or bytes into ``(graph, diagnostics)``."""
    return GEDCOMParser(config).parse(source)


def parse_file(path: Union[str, Path], *, config: Optional[GPConfig] = None) -> ParseResult:
    return GEDCOMParser(config).parse_file(path)
