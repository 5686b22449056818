from __future__ import annotations

from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.registry.entities import Source
from gedcom_records.registry.structures import build_note_structure, build_repository_citation
from gedcom_records.registry.utils import MaterializeContext, append_pointer, set_scalar

_SOURCE_FIELDS = {
    "TITL": "title",
    "AUTH": "author",
    "PUBL": "publication",
    "ABBR": "abbreviation",
    "TEXT": "text",
}


def build_source(node: GEDCOMNode, ctx: MaterializeContext) -> Source:
    """
    Build a Source from a GEDCOMNode with tag 'SOUR'.

    Handles:
      - TITL / AUTH / PUBL / ABBR / TEXT (multi-line values already merged)
      - REPO citations with CALN
      - custom tags (_APID, etc.) and DATA blocks losslessly
    """
    if node.norm_tag != "SOUR":
        raise ValueError(f"Expected SOUR node, got {node.tag}")

    source = Source(xref=node.xref)

    for child in node.children:
        tag = child.norm_tag
        attr = _SOURCE_FIELDS.get(tag)

        if attr and set_scalar(source, attr, child):
            continue

        if tag == "REPO":
            source.repositories.append(build_repository_citation(child, ctx))

        elif tag == "NOTE":
            source.notes.append(build_note_structure(child, ctx))

        elif tag == "OBJE" and append_pointer(source.media, child, "OBJE", ctx):
            continue

        else:
            source.extensions.append(ctx.extension(child))

    return source
