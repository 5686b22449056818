"""
Cross-Reference Resolver

- XrefIndex maps every declared @XREF@ to a (position, tag) handle into the
  record list; the first declaration wins.
- check_references walks the pointers collected during materialization and
  reports each one whose target is missing or of the wrong record kind.

Pointers are never rewritten: a dangling pointer stays in its field as the
literal @XREF@ string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from gedcom_records.diagnostics import DiagnosticCollector
from gedcom_records.logging import get_logger
from gedcom_records.registry.entities import Record, record_tag
from gedcom_records.registry.utils import PointerReference

log = get_logger("postprocess.xref_resolver")


@dataclass(frozen=True)
class RecordHandle:
    """Position of a record in ``RecordGraph.records`` plus its tag."""
    position: int
    tag: str


class XrefIndex:
    def __init__(self) -> None:
        self._handles: Dict[str, RecordHandle] = {}

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> "XrefIndex":
        index = cls()
        for position, record in enumerate(records):
            xref = getattr(record, "xref", None)
            if xref:
                index.add(xref, RecordHandle(position, record_tag(record)))
        return index

    def add(
        self,
        xref: str,
        handle: RecordHandle,
        diagnostics: Optional[DiagnosticCollector] = None,
        lineno: Optional[int] = None,
        raw: Optional[str] = None,
    ) -> bool:
        """
        Register ``xref``. Returns False (and reports DUPLICATE_XREF when a
        collector is given) if it was already declared.
        """
        existing = self._handles.get(xref)
        if existing is not None:
            if diagnostics is not None:
                diagnostics.duplicate_xref(
                    f"{xref} already declared by a {existing.tag} record; first declaration kept",
                    lineno,
                    raw,
                )
            return False
        self._handles[xref] = handle
        return True

    def get(self, xref: Optional[str]) -> Optional[RecordHandle]:
        if not xref:
            return None
        return self._handles.get(xref)

    def __contains__(self, xref: object) -> bool:
        return xref in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[str]:
        return iter(self._handles)


def check_references(
    references: Iterable[PointerReference],
    index: XrefIndex,
    diagnostics: DiagnosticCollector,
) -> int:
    """
    Emit one Dangling-Reference per pointer that does not resolve to a record
    of the expected kind. Returns the number reported.
    """
    dangling = 0
    for ref in references:
        handle = index.get(ref.xref)
        if handle is None:
            diagnostics.dangling_reference(
                f"Pointer {ref.xref} has no matching {ref.expected_tag} record",
                ref.lineno,
                ref.raw,
            )
            dangling += 1
        elif handle.tag.upper() != ref.expected_tag:
            diagnostics.dangling_reference(
                f"Pointer {ref.xref} refers to a {handle.tag} record, expected {ref.expected_tag}",
                ref.lineno,
                ref.raw,
            )
            dangling += 1

    if dangling:
        log.debug("%d dangling reference(s)", dangling)
    return dangling
