"""
Exporter package.

Re-exports the GEDCOM writer and the JSON projection.
"""

from __future__ import annotations

from .gedcom_writer import GedcomWriter, split_value, write, write_file
from .json_exporter import export_graph_json, graph_to_dict, to_json
from .node_builder import record_to_node

__all__ = [
    "GedcomWriter",
    "export_graph_json",
    "graph_to_dict",
    "record_to_node",
    "split_value",
    "to_json",
    "write",
    "write_file",
]
