from __future__ import annotations

from gedcom_records.events.event import is_family_event_tag
from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.loader.tokenizer import is_xref
from gedcom_records.registry.entities import Family
from gedcom_records.registry.structures import build_citation, build_event, build_note_structure
from gedcom_records.registry.utils import (
    MaterializeContext,
    append_pointer,
    set_pointer,
    set_scalar,
)


def build_family(node: GEDCOMNode, ctx: MaterializeContext) -> Family:
    """
    Build a Family from a GEDCOMNode with tag 'FAM'.

    PURE FUNCTION:
      - no cross-record lookups; HUSB / WIFE / CHIL pointers are only
        recorded on ``ctx``

    Notes:
      - subordinate lines under a CHIL pointer (vendor ``_FREL`` / ``_MREL``)
        are kept in ``child_details`` keyed by the child pointer
      - a CHIL line without an @XREF@ is reported and kept as an extension
    """
    if node.norm_tag != "FAM":
        raise ValueError(f"Expected FAM node, got {node.tag}")

    family = Family(xref=node.xref)

    for child in node.children:
        tag = child.norm_tag

        if tag == "HUSB" and set_pointer(family, "husband", child, "INDI", ctx):
            continue

        elif tag == "WIFE" and set_pointer(family, "wife", child, "INDI", ctx):
            continue

        elif tag == "CHIL" and child.value is not None:
            pointer = ctx.pointer(child, "INDI")
            if not is_xref(pointer):
                family.extensions.append(ctx.extension(child))
                continue
            family.children.append(pointer)
            if child.children:
                family.child_details.setdefault(pointer, []).extend(
                    ctx.extension(c) for c in child.children
                )

        elif tag == "NCHI" and set_scalar(family, "num_children", child):
            continue

        elif is_family_event_tag(tag):
            family.events.append(build_event(child, ctx))

        elif tag == "SOUR":
            family.citations.append(build_citation(child, ctx))

        elif tag == "NOTE":
            family.notes.append(build_note_structure(child, ctx))

        elif tag == "OBJE" and append_pointer(family.media, child, "OBJE", ctx):
            continue

        elif tag == "SUBM" and append_pointer(family.submitters, child, "SUBM", ctx):
            continue

        else:
            family.extensions.append(ctx.extension(child))

    return family
