from gedcom_records.diagnostics import DiagnosticCollector, DiagnosticKind
from gedcom_records.postprocess.xref_resolver import RecordHandle, XrefIndex, check_references
from gedcom_records.registry import Family, Header, Individual, RecordGraph
from gedcom_records.registry.utils import PointerReference


def test_from_records_first_declaration_wins():
    records = [Header(), Individual(xref="@I1@"), Family(xref="@F1@"), Individual(xref="@I1@")]
    index = XrefIndex.from_records(records)

    assert len(index) == 2
    assert index.get("@I1@") == RecordHandle(1, "INDI")
    assert index.get("@F1@") == RecordHandle(2, "FAM")
    assert "@I1@" in index
    assert index.get(None) is None
    assert sorted(index) == ["@F1@", "@I1@"]


def test_add_reports_duplicates():
    diagnostics = DiagnosticCollector()
    index = XrefIndex()

    assert index.add("@I1@", RecordHandle(0, "INDI"), diagnostics, 1, "0 @I1@ INDI")
    assert not index.add("@I1@", RecordHandle(3, "FAM"), diagnostics, 7, "0 @I1@ FAM")

    assert index.get("@I1@").tag == "INDI"
    (dup,) = diagnostics.by_kind(DiagnosticKind.DUPLICATE_XREF)
    assert dup.lineno == 7
    assert dup.raw == "0 @I1@ FAM"


def test_check_references():
    index = XrefIndex.from_records([Individual(xref="@I1@"), Family(xref="@F1@")])
    diagnostics = DiagnosticCollector()
    refs = [
        PointerReference("@I1@", "INDI", 2),
        PointerReference("@F1@", "FAM", 3),
        PointerReference("@F2@", "FAM", 4),
        PointerReference("@I1@", "FAM", 5),
    ]

    assert check_references(refs, index, diagnostics) == 2
    assert [d.lineno for d in diagnostics] == [4, 5]
    assert all(d.kind is DiagnosticKind.DANGLING_REFERENCE for d in diagnostics)


def test_record_graph_lookup():
    person = Individual(xref="@I1@")
    family = Family(xref="@F1@")
    graph = RecordGraph([Header(), person, family])

    assert graph.get("@I1@") is person
    assert graph.resolve("@I1@", Individual) is person
    assert graph.resolve("@I1@", Family) is None
    assert graph.get("@X9@") is None

    other = Individual(xref="@I2@")
    graph.add(other)
    assert graph.get("@I2@") is other
    assert graph.stats() == {"HEAD": 1, "INDI": 2, "FAM": 1}
