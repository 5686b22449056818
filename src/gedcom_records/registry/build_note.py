from __future__ import annotations

from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.registry.entities import Note
from gedcom_records.registry.structures import build_citation
from gedcom_records.registry.utils import MaterializeContext, set_scalar


def build_note(node: GEDCOMNode, ctx: MaterializeContext) -> Note:
    """
    Build a Note record from a GEDCOMNode with tag 'NOTE'.

    The note text is the record line's own value, with CONT / CONC already
    folded in by the line reader.
    """
    if node.norm_tag != "NOTE":
        raise ValueError(f"Expected NOTE node, got {node.tag}")

    note = Note(xref=node.xref, text=node.value)

    for child in node.children:
        tag = child.norm_tag

        if tag == "MIME" and set_scalar(note, "mime", child):
            continue
        if tag == "LANG" and set_scalar(note, "language", child):
            continue

        if tag == "SOUR":
            note.citations.append(build_citation(child, ctx))
        else:
            note.extensions.append(ctx.extension(child))

    return note
