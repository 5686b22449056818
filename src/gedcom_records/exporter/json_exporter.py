"""
json_exporter.py
Structured JSON projection of a RecordGraph.

This exporter:
- Converts dataclasses to dictionaries (NOT strings)
- Tags every record with its GEDCOM ``kind``
- Keeps pointers as their literal @XREF@ strings
- Drops source line numbers so the output only reflects content
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from gedcom_records.diagnostics import Diagnostic
from gedcom_records.logging import get_logger
from gedcom_records.registry.entities import record_tag
from gedcom_records.registry.graph import RecordGraph

log = get_logger("exporter.json_exporter")

_SKIPPED_FIELDS = {"lineno"}


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - Enums -> their value
    - dataclasses -> dict (recursively, private and lineno fields skipped)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    - Anything else -> str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if isinstance(obj, Enum):
        return obj.value

    if is_dataclass(obj):
        return {
            f.name: _to_json_compatible(getattr(obj, f.name))
            for f in fields(obj)
            if not f.name.startswith("_") and f.name not in _SKIPPED_FIELDS
        }

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def record_to_dict(record: Any) -> Dict[str, Any]:
    return {"kind": record_tag(record), **_to_json_compatible(record)}


def graph_to_dict(
    graph: RecordGraph, diagnostics: Optional[Iterable[Diagnostic]] = None
) -> Dict[str, Any]:
    """
    Convert the graph into a JSON-safe dict::

        {"stats": {...}, "records": [{"kind": "INDI", "xref": "@I1@", ...}]}
    """
    out: Dict[str, Any] = {
        "stats": graph.stats(),
        "records": [record_to_dict(r) for r in graph.records],
    }
    if diagnostics is not None:
        out["diagnostics"] = [
            {
                "kind": d.kind.value,
                "severity": d.severity,
                "message": d.message,
                "lineno": d.lineno,
                "raw": d.raw,
            }
            for d in diagnostics
        ]
    return out


def to_json(
    graph: RecordGraph,
    diagnostics: Optional[Iterable[Diagnostic]] = None,
    indent: Optional[int] = 2,
) -> str:
    return json.dumps(graph_to_dict(graph, diagnostics), indent=indent, ensure_ascii=False)


def export_graph_json(
    graph: RecordGraph,
    output_path: Union[str, Path],
    diagnostics: Optional[Iterable[Diagnostic]] = None,
    indent: Optional[int] = 2,
) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    stats = graph.stats()
    log.info(
        "Exporting graph JSON to: %s (INDI=%d, FAM=%d, SOUR=%d, REPO=%d, OBJE=%d)",
        output_path,
        stats.get("INDI", 0),
        stats.get("FAM", 0),
        stats.get("SOUR", 0),
        stats.get("REPO", 0),
        stats.get("OBJE", 0),
    )

    json_str = to_json(graph, diagnostics, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
    return output_path
