# src/gedcom_records/loader/tree_builder.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from gedcom_records.diagnostics import DiagnosticCollector

from .segmenter import GEDCOMNode, segment_records
from .tokenizer import Token


@dataclass
class GEDCOMTree:
    """
    Generic node forest for one file: the level-0 records in file order.

    Nothing here knows about record kinds; the registry turns these nodes
    into typed records. Lookups by xref or tag go through indexes that are
    built on first use and cover top-level records only.
    """

    records: List[GEDCOMNode]

    _by_xref: Optional[Dict[str, GEDCOMNode]] = field(default=None, init=False, repr=False)
    _by_tag: Optional[Dict[str, List[GEDCOMNode]]] = field(default=None, init=False, repr=False)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[GEDCOMNode]:
        return iter(self.records)

    def iter_nodes(self) -> Iterator[GEDCOMNode]:
        """Every node of every record, depth-first, records included."""
        for root in self.records:
            yield from root.iter_subtree()

    def _index(self) -> None:
        by_xref: Dict[str, GEDCOMNode] = {}
        by_tag: Dict[str, List[GEDCOMNode]] = {}
        for node in self.records:
            # first declaration wins, as in the record graph
            if node.xref:
                by_xref.setdefault(node.xref, node)
            by_tag.setdefault(node.norm_tag, []).append(node)
        self._by_xref, self._by_tag = by_xref, by_tag

    def find_by_xref(self, xref: str) -> Optional[GEDCOMNode]:
        if not xref:
            return None
        if self._by_xref is None:
            self._index()
        return self._by_xref.get(xref)

    def find_records_by_tag(self, tag: str) -> List[GEDCOMNode]:
        """Level-0 records with ``tag``, compared case-insensitively."""
        if not tag:
            return []
        if self._by_tag is None:
            self._index()
        return list(self._by_tag.get(tag.upper(), []))

    @property
    def header(self) -> Optional[GEDCOMNode]:
        heads = self.find_records_by_tag("HEAD")
        return heads[0] if heads else None

    def all_tags(self) -> List[str]:
        return sorted({rec.tag for rec in self.records if rec.tag})

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<GEDCOMTree records={len(self.records)}>"


def build_tree(
    tokens: Iterable[Token], diagnostics: Optional[DiagnosticCollector] = None
) -> GEDCOMTree:
    """
    tokens -> GEDCOMTree(records=[GEDCOMNode, ...])

    Level problems are reported to ``diagnostics`` and recovered; see
    ``segment_lines``.
    """
    return GEDCOMTree(records=segment_records(tokens, diagnostics))
