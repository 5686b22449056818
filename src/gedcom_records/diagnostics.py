"""
Error collector for the parsing pipeline.

Per-line problems never abort a parse. Each stage reports them here as
``Diagnostic`` values, and the parser returns the collected list alongside
the best-effort record graph.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from logging import Logger
from typing import Iterator, List, Optional

from gedcom_records.logging import get_logger


class DiagnosticKind(str, Enum):
    MALFORMED_LINE = "malformed_line"
    STRUCTURAL_SKEW = "structural_skew"
    UNKNOWN_TAG = "unknown_tag"
    DANGLING_REFERENCE = "dangling_reference"
    ENCODING_MISMATCH = "encoding_mismatch"
    DUPLICATE_XREF = "duplicate_xref"


INFO = "info"
WARNING = "warning"

_INFORMATIONAL = {DiagnosticKind.UNKNOWN_TAG}


@dataclass(frozen=True)
class Diagnostic:
    """
    A single recovered anomaly.

    Attributes:
        kind: Diagnostic category.
        message: Human readable description.
        lineno: 1-based physical line number, when known.
        raw: The original line text, when known.
    """

    kind: DiagnosticKind
    message: str
    lineno: Optional[int] = None
    raw: Optional[str] = None

    @property
    def severity(self) -> str:
        return INFO if self.kind in _INFORMATIONAL else WARNING

    def __str__(self) -> str:
        where = f"line {self.lineno}: " if self.lineno is not None else ""
        return f"[{self.kind.value}] {where}{self.message}"


class DiagnosticCollector:
    """Accumulates diagnostics in the order they are reported."""

    def __init__(self, logger: Optional[Logger] = None):
        self.log = logger or get_logger("diagnostics")
        self._items: List[Diagnostic] = []

    def report(
        self,
        kind: DiagnosticKind,
        message: str,
        lineno: Optional[int] = None,
        raw: Optional[str] = None,
    ) -> Diagnostic:
        diag = Diagnostic(kind=kind, message=message, lineno=lineno, raw=raw)
        self._items.append(diag)

        if diag.severity == INFO:
            self.log.debug("%s", diag)
        else:
            self.log.warning("%s", diag)
        return diag

    # Convenience wrappers, one per kind.

    def malformed_line(self, message: str, lineno: Optional[int] = None, raw: Optional[str] = None) -> Diagnostic:
        return self.report(DiagnosticKind.MALFORMED_LINE, message, lineno, raw)

    def structural_skew(self, message: str, lineno: Optional[int] = None, raw: Optional[str] = None) -> Diagnostic:
        return self.report(DiagnosticKind.STRUCTURAL_SKEW, message, lineno, raw)

    def unknown_tag(self, message: str, lineno: Optional[int] = None, raw: Optional[str] = None) -> Diagnostic:
        return self.report(DiagnosticKind.UNKNOWN_TAG, message, lineno, raw)

    def dangling_reference(self, message: str, lineno: Optional[int] = None, raw: Optional[str] = None) -> Diagnostic:
        return self.report(DiagnosticKind.DANGLING_REFERENCE, message, lineno, raw)

    def encoding_mismatch(self, message: str, lineno: Optional[int] = None, raw: Optional[str] = None) -> Diagnostic:
        return self.report(DiagnosticKind.ENCODING_MISMATCH, message, lineno, raw)

    def duplicate_xref(self, message: str, lineno: Optional[int] = None, raw: Optional[str] = None) -> Diagnostic:
        return self.report(DiagnosticKind.DUPLICATE_XREF, message, lineno, raw)

    # Queries

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._items)

    def by_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self._items if d.kind == kind]

    def count(self, kind: Optional[DiagnosticKind] = None) -> int:
        if kind is None:
            return len(self._items)
        return len(self.by_kind(kind))

    @property
    def has_warnings(self) -> bool:
        return any(d.severity == WARNING for d in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)
