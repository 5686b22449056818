from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Type, TypeVar

from gedcom_records.registry.entities import (
    CustomRecord,
    Family,
    Header,
    Individual,
    Multimedia,
    Note,
    Record,
    Repository,
    Source,
    Submission,
    Submitter,
    Trailer,
    record_tag,
)

if TYPE_CHECKING:  # pragma: no cover
    from gedcom_records.postprocess.xref_resolver import XrefIndex

R = TypeVar("R")


@dataclass
class RecordGraph:
    """
    Every typed record of one GEDCOM file, in file order.

    Cross-references stay as @XREF@ strings; ``get`` / ``resolve`` look
    them up through an index built on first use.
    """

    records: List[Record] = field(default_factory=list)

    _index: Optional["XrefIndex"] = field(default=None, repr=False, compare=False)

    # ------------------------------------------------------------------ #
    # Core helpers
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def of_type(self, kind: Type[R]) -> List[R]:
        return [r for r in self.records if isinstance(r, kind)]

    @property
    def header(self) -> Optional[Header]:
        headers = self.of_type(Header)
        return headers[0] if headers else None

    @property
    def trailer(self) -> Optional[Trailer]:
        trailers = self.of_type(Trailer)
        return trailers[0] if trailers else None

    @property
    def individuals(self) -> List[Individual]:
        return self.of_type(Individual)

    @property
    def families(self) -> List[Family]:
        return self.of_type(Family)

    @property
    def sources(self) -> List[Source]:
        return self.of_type(Source)

    @property
    def repositories(self) -> List[Repository]:
        return self.of_type(Repository)

    @property
    def notes(self) -> List[Note]:
        return self.of_type(Note)

    @property
    def multimedia(self) -> List[Multimedia]:
        return self.of_type(Multimedia)

    @property
    def submitters(self) -> List[Submitter]:
        return self.of_type(Submitter)

    @property
    def submissions(self) -> List[Submission]:
        return self.of_type(Submission)

    @property
    def custom_records(self) -> List[CustomRecord]:
        return self.of_type(CustomRecord)

    # ------------------------------------------------------------------ #
    # Cross-reference lookup
    # ------------------------------------------------------------------ #

    @property
    def index(self) -> "XrefIndex":
        if self._index is None:
            from gedcom_records.postprocess.xref_resolver import XrefIndex

            self._index = XrefIndex.from_records(self.records)
        return self._index

    def get(self, xref: str) -> Optional[Record]:
        """Return the record declaring ``xref``, or None."""
        handle = self.index.get(xref)
        return self.records[handle.position] if handle is not None else None

    def resolve(self, xref: str, expected: Optional[Type[R]] = None) -> Optional[R]:
        """
        Like ``get`` but also returns None when the target is of another
        record kind than ``expected``.
        """
        record = self.get(xref)
        if record is None or (expected is not None and not isinstance(record, expected)):
            return None
        return record

    def add(self, record: Record) -> None:
        self.records.append(record)
        self._index = None

    def stats(self) -> Dict[str, int]:
        """Number of records per tag, in first-seen order."""
        out: Dict[str, int] = {}
        for record in self.records:
            tag = record_tag(record)
            out[tag] = out.get(tag, 0) + 1
        return out

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<RecordGraph records={len(self.records)}>"
