from __future__ import annotations

from typing import Optional

from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.registry.entities import Encoding, GedcomMeta, Header, HeaderSource
from gedcom_records.registry.utils import MaterializeContext, is_leaf, set_pointer, set_scalar

_HEADER_FIELDS = {
    "DEST": "destination",
    "FILE": "file",
    "COPR": "copyright",
    "LANG": "language",
    "NOTE": "note",
}


def build_header(node: GEDCOMNode, ctx: MaterializeContext) -> Header:
    """
    Build the Header from the 'HEAD' record.

    Only the shape of the header is modelled here; checking the declared
    CHAR against the input bytes happens in the parser.
    """
    if node.norm_tag != "HEAD":
        raise ValueError(f"Expected HEAD node, got {node.tag}")

    header = Header()

    for child in node.children:
        tag = child.norm_tag
        attr = _HEADER_FIELDS.get(tag)

        if attr and set_scalar(header, attr, child):
            continue

        if tag == "SOUR" and header.source is None:
            header.source = _build_header_source(child, ctx)

        elif tag == "GEDC" and header.gedcom is None and child.value is None:
            header.gedcom = _build_gedcom_meta(child, ctx)

        elif tag == "CHAR" and header.encoding is None:
            header.encoding = _build_encoding(child, ctx)

        elif tag == "DATE" and header.date is None and _is_date_time(child):
            header.date = child.value
            header.time = child.first_value("TIME")

        elif tag == "SUBM" and set_pointer(header, "submitter", child, "SUBM", ctx):
            continue

        elif tag == "SUBN" and set_pointer(header, "submission", child, "SUBN", ctx):
            continue

        else:
            header.extensions.append(ctx.extension(child))

    return header


def _build_header_source(node: GEDCOMNode, ctx: MaterializeContext) -> HeaderSource:
    source = HeaderSource(value=node.value)
    for child in node.children:
        tag = child.norm_tag
        if tag == "VERS" and set_scalar(source, "version", child):
            continue
        if tag == "NAME" and set_scalar(source, "name", child):
            continue
        # CORP, DATA
        source.extensions.append(ctx.extension(child))
    return source


def _build_gedcom_meta(node: GEDCOMNode, ctx: MaterializeContext) -> GedcomMeta:
    meta = GedcomMeta()
    for child in node.children:
        tag = child.norm_tag
        if tag == "VERS" and set_scalar(meta, "version", child):
            continue
        if tag == "FORM" and set_scalar(meta, "form", child):
            continue
        meta.extensions.append(ctx.extension(child))
    return meta


def _build_encoding(node: GEDCOMNode, ctx: MaterializeContext) -> Encoding:
    encoding = Encoding(value=node.value)
    for child in node.children:
        if child.norm_tag == "VERS" and set_scalar(encoding, "version", child):
            continue
        encoding.extensions.append(ctx.extension(child))
    return encoding


def _is_date_time(node: GEDCOMNode) -> bool:
    """DATE with nothing below it but an optional leaf TIME."""
    if node.value is None:
        return False
    if is_leaf(node):
        return True
    only: Optional[GEDCOMNode] = node.children[0] if len(node.children) == 1 else None
    return only is not None and only.norm_tag == "TIME" and is_leaf(only) and only.value is not None
