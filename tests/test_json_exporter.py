import json

from gedcom_records import parse
from gedcom_records.exporter import export_graph_json, graph_to_dict, to_json
from gedcom_records.utils import mock_file_path


def _sample():
    return parse(mock_file_path("sample.ged").read_bytes())


def test_graph_to_dict_shape():
    graph, _ = _sample()
    data = graph_to_dict(graph)

    assert data["stats"]["INDI"] == 3
    assert "diagnostics" not in data
    kinds = [r["kind"] for r in data["records"]]
    assert kinds[0] == "HEAD"
    assert kinds[-1] == "TRLR"

    john = next(r for r in data["records"] if r.get("xref") == "@I1@")
    assert john["kind"] == "INDI"
    assert john["names"][0]["value"] == "John /Smith/"
    assert john["families_as_spouse"][0]["xref"] == "@F1@"
    assert john["extensions"] == [
        {"tag": "_UID", "value": "1A2B3C4D", "xref": None, "children": []}
    ]


def test_diagnostics_are_optional():
    graph, diagnostics = _sample()
    data = graph_to_dict(graph, diagnostics)
    assert [d["kind"] for d in data["diagnostics"]] == ["unknown_tag"] * 3
    assert all(d["severity"] == "info" for d in data["diagnostics"])


def test_to_json_is_valid_json():
    graph, _ = parse("0 @N1@ NOTE Zoë\n")
    text = to_json(graph, indent=None)
    assert "Zoë" in text
    assert json.loads(text)["records"][0]["text"] == "Zoë"


def test_export_graph_json_writes_file(tmp_path):
    graph, _ = _sample()
    out = export_graph_json(graph, tmp_path / "nested" / "graph.json")
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["stats"] == graph.stats()
