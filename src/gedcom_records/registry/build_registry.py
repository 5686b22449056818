from __future__ import annotations

import dataclasses
from typing import Callable, Dict, Optional

from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.loader.tokenizer import is_xref
from gedcom_records.loader.tree_builder import GEDCOMTree
from gedcom_records.logging import get_logger
from gedcom_records.postprocess.xref_resolver import RecordHandle, XrefIndex, check_references
from gedcom_records.registry.build_family import build_family
from gedcom_records.registry.build_header import build_header
from gedcom_records.registry.build_individual import build_individual
from gedcom_records.registry.build_media_object import build_media_object
from gedcom_records.registry.build_note import build_note
from gedcom_records.registry.build_repository import build_repository
from gedcom_records.registry.build_source import build_source
from gedcom_records.registry.build_submitter import build_submission, build_submitter
from gedcom_records.registry.entities import CustomRecord, Record, Trailer, record_tag
from gedcom_records.registry.graph import RecordGraph
from gedcom_records.registry.utils import MaterializeContext

log = get_logger("registry.build_registry")

Builder = Callable[[GEDCOMNode, MaterializeContext], Record]

BUILDERS: Dict[str, Builder] = {
    "HEAD": build_header,
    "INDI": build_individual,
    "FAM": build_family,
    "SOUR": build_source,
    "REPO": build_repository,
    "NOTE": build_note,
    "OBJE": build_media_object,
    "SUBM": build_submitter,
    "SUBN": build_submission,
}

# Records that are addressed by pointers and carry no line value of their own.
_IDENTIFIED_RECORDS = {"INDI", "FAM", "SOUR", "REPO", "OBJE", "SUBM", "SUBN"}


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------

def _record_xref(node: GEDCOMNode, ctx: MaterializeContext) -> GEDCOMNode:
    """
    Settle the identifier of an identified record.

    ``0 INDI @I1@`` (identifier written after the tag) is accepted as the
    record's identifier.
    """
    if node.xref is None and is_xref(node.value):
        node = dataclasses.replace(node, xref=node.value, value=None)

    if node.xref is None:
        ctx.diagnostics.malformed_line(
            f"{node.tag} record has no cross-reference identifier", node.lineno, node.raw
        )
    elif node.value is not None:
        ctx.diagnostics.malformed_line(
            f"{node.tag} record line carries an unexpected value {node.value!r}",
            node.lineno,
            node.raw,
        )
    return node


def build_trailer(node: GEDCOMNode, ctx: MaterializeContext) -> Trailer:
    trailer = Trailer()
    for child in node.children:
        trailer.extensions.append(ctx.extension(child))
    return trailer


def build_custom_record(node: GEDCOMNode, ctx: MaterializeContext) -> CustomRecord:
    """Unrecognized top-level record, kept as-is for forward compatibility."""
    ctx.check_tag(node)
    return CustomRecord(
        tag=node.tag,
        xref=node.xref,
        value=node.value,
        children=[ctx.extension(c) for c in node.children],
    )


# ----------------------------------------------------------------------
# Registry builder
# ----------------------------------------------------------------------

def build_registry(tree: GEDCOMTree, ctx: Optional[MaterializeContext] = None) -> RecordGraph:
    """
    Materialize every top-level node of ``tree`` into a typed record.

    Dispatch is on the (case-insensitive) record tag; unrecognized tags, and
    standard tags that are not record kinds, become CustomRecord. Pointers
    are checked once every record exists, so forward references are fine.
    """
    ctx = ctx or MaterializeContext()
    graph = RecordGraph()
    index = XrefIndex()

    for node in tree.records:
        tag = node.norm_tag

        if tag in _IDENTIFIED_RECORDS:
            node = _record_xref(node, ctx)

        builder = BUILDERS.get(tag)
        if builder is not None:
            record = builder(node, ctx)
        elif tag == "TRLR":
            record = build_trailer(node, ctx)
        else:
            record = build_custom_record(node, ctx)

        if tag in ("HEAD", "TRLR") and (node.xref or node.value):
            ctx.diagnostics.malformed_line(
                f"{node.tag} line carries an identifier or value that is not kept",
                node.lineno,
                node.raw,
            )

        xref = getattr(record, "xref", None)
        if xref:
            index.add(
                xref,
                RecordHandle(len(graph.records), record_tag(record)),
                ctx.diagnostics,
                node.lineno,
                node.raw,
            )
        graph.records.append(record)

    # -------------------------------
    # Pointer checks
    # -------------------------------
    check_references(ctx.references, index, ctx.diagnostics)
    graph._index = index

    log.debug("Materialized %d records", len(graph.records))
    return graph
