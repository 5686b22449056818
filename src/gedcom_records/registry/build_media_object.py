from __future__ import annotations

from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.registry.entities import Multimedia
from gedcom_records.registry.structures import build_citation, build_media_file, build_note_structure
from gedcom_records.registry.utils import MaterializeContext, set_scalar


def build_media_object(node: GEDCOMNode, ctx: MaterializeContext) -> Multimedia:
    """
    Build a Multimedia record from a GEDCOMNode with tag 'OBJE'.

    Accepts both the 5.5.1 shape (FILE with nested FORM) and the 5.5 shape
    (FORM and TITL directly on the record).
    """
    if node.norm_tag != "OBJE":
        raise ValueError(f"Expected OBJE node, got {node.tag}")

    media = Multimedia(xref=node.xref)

    for child in node.children:
        tag = child.norm_tag

        if tag == "FILE":
            media.files.append(build_media_file(child, ctx))

        elif tag == "TITL" and set_scalar(media, "title", child):
            continue

        elif tag == "FORM" and set_scalar(media, "form", child):
            continue

        elif tag == "NOTE":
            media.notes.append(build_note_structure(child, ctx))

        elif tag == "SOUR":
            media.citations.append(build_citation(child, ctx))

        else:
            media.extensions.append(ctx.extension(child))

    return media
