"""
gedcom_writer.py
Render a RecordGraph back to GEDCOM text.

    RecordGraph -> GEDCOMNode trees -> physical lines

Levels are recomputed from tree depth. Embedded newlines become CONT lines;
segments longer than the line-length policy are split with CONC. A split
never leaves a chunk ending in whitespace, because readers trim it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from gedcom_records.config import GPConfig, get_config
from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.logging import get_logger
from gedcom_records.registry.graph import RecordGraph

from .node_builder import record_to_node

log = get_logger("exporter.gedcom_writer")

DEFAULT_MAX_LINE_LENGTH = 255

_UNSET = object()


def split_value(text: str, width: int) -> List[str]:
    """
    Split one newline-free segment into chunks of at most ``width`` chars.

    Chunks never end in whitespace; when a window holds nothing but
    whitespace the chunk is stretched past it instead.
    """
    width = max(width, 1)
    chunks: List[str] = []

    while len(text) > width:
        cut = width
        while cut > 0 and text[cut - 1].isspace():
            cut -= 1
        if cut == 0:
            cut = width
            while cut < len(text) and text[cut - 1].isspace():
                cut += 1
        chunks.append(text[:cut])
        text = text[cut:]

    if text or not chunks:
        chunks.append(text)
    return chunks


class GedcomWriter:
    def __init__(
        self,
        max_line_length: Optional[int] = DEFAULT_MAX_LINE_LENGTH,
        line_terminator: str = "\n",
    ):
        self.max_line_length = max_line_length
        self.line_terminator = line_terminator

    # ---------------------------------------------------------
    # Lines
    # ---------------------------------------------------------
    def _width(self, prefix: str) -> Optional[int]:
        if self.max_line_length is None:
            return None
        return self.max_line_length - len(prefix) - 1

    def _chunks(self, text: str, prefix: str) -> List[str]:
        width = self._width(prefix)
        if width is None or len(text) <= width:
            return [text]
        return split_value(text, width)

    def node_lines(self, node: GEDCOMNode, level: int = 0) -> Iterator[str]:
        """Physical lines for ``node`` and its subtree, at depth ``level``."""
        head = f"{level} {node.xref} {node.tag}" if node.xref else f"{level} {node.tag}"

        if node.value is None:
            yield head
        else:
            cont_prefix = f"{level + 1} CONT"
            conc_prefix = f"{level + 1} CONC"

            for i, segment in enumerate(node.value.split("\n")):
                first_prefix = head if i == 0 else cont_prefix
                chunks = self._chunks(segment, first_prefix)
                if len(chunks) > 1:
                    # CONC lines are narrower than a long record head
                    chunks = chunks[:1] + self._chunks("".join(chunks[1:]), conc_prefix)

                yield f"{first_prefix} {chunks[0]}" if chunks[0] else first_prefix
                for chunk in chunks[1:]:
                    yield f"{conc_prefix} {chunk}"

        for child in node.children:
            yield from self.node_lines(child, level + 1)

    def lines(self, graph: Union[RecordGraph, Iterable]) -> Iterator[str]:
        records = graph.records if isinstance(graph, RecordGraph) else graph
        for record in records:
            yield from self.node_lines(record_to_node(record))

    # ---------------------------------------------------------
    # Output
    # ---------------------------------------------------------
    def write(self, graph: RecordGraph) -> str:
        lines = list(self.lines(graph))
        log.debug("Rendered %d lines for %d records", len(lines), len(graph))
        if not lines:
            return ""
        return self.line_terminator.join(lines) + self.line_terminator

    def write_file(self, graph: RecordGraph, path: Union[str, Path]) -> Path:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        text = self.write(graph)
        # newline="" keeps the configured terminator as-is
        with output_path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
        log.info("GEDCOM written to %s (%d records)", output_path, len(graph))
        return output_path


def _writer(max_line_length, line_terminator, config: Optional[GPConfig]) -> GedcomWriter:
    cfg = config if config is not None else get_config()
    return GedcomWriter(
        max_line_length=cfg.max_line_length if max_line_length is _UNSET else max_line_length,
        line_terminator=line_terminator if line_terminator is not None else cfg.line_terminator,
    )


def write(
    graph: RecordGraph,
    *,
    max_line_length=_UNSET,
    line_terminator: Optional[str] = None,
    config: Optional[GPConfig] = None,
) -> str:
    """
    Serialize ``graph`` to GEDCOM text.

    ``max_line_length`` and ``line_terminator`` default to the ``writer``
    config section; pass ``max_line_length=None`` to disable wrapping.
    """
    return _writer(max_line_length, line_terminator, config).write(graph)


def write_file(
    graph: RecordGraph,
    path: Union[str, Path],
    *,
    max_line_length=_UNSET,
    line_terminator: Optional[str] = None,
    config: Optional[GPConfig] = None,
) -> Path:
    return _writer(max_line_length, line_terminator, config).write_file(graph, path)
