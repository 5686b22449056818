from __future__ import annotations

from gedcom_records.events.event import is_individual_attribute_tag, is_individual_event_tag
from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.registry.entities import Individual
from gedcom_records.registry.structures import (
    build_citation,
    build_event,
    build_family_link,
    build_note_structure,
    build_personal_name,
)
from gedcom_records.registry.utils import MaterializeContext, append_pointer, set_scalar


def build_individual(node: GEDCOMNode, ctx: MaterializeContext) -> Individual:
    """
    Build an Individual from a GEDCOMNode with tag 'INDI'.

    PURE FUNCTION:
      - reads only this record's subtree
      - pointers are recorded on ``ctx`` and checked later

    Handles:
      - NAME (repeatable, with pieces), SEX
      - events (BIRT, DEAT, ...) and attributes (OCCU, RESI, ...)
      - FAMC / FAMS links, SOUR citations, NOTE, OBJE and SUBM pointers
      - everything else losslessly as extensions
    """
    if node.norm_tag != "INDI":
        raise ValueError(f"Expected INDI node, got {node.tag}")

    individual = Individual(xref=node.xref)

    for child in node.children:
        tag = child.norm_tag

        if tag == "NAME":
            individual.names.append(build_personal_name(child, ctx))

        elif tag == "SEX" and set_scalar(individual, "sex", child):
            continue

        elif is_individual_event_tag(tag):
            individual.events.append(build_event(child, ctx))

        elif is_individual_attribute_tag(tag):
            individual.attributes.append(build_event(child, ctx))

        elif tag == "FAMC":
            individual.families_as_child.append(build_family_link(child, ctx))

        elif tag == "FAMS":
            individual.families_as_spouse.append(build_family_link(child, ctx))

        elif tag == "SOUR":
            individual.citations.append(build_citation(child, ctx))

        elif tag == "NOTE":
            individual.notes.append(build_note_structure(child, ctx))

        elif tag == "OBJE" and append_pointer(individual.media, child, "OBJE", ctx):
            continue

        elif tag == "SUBM" and append_pointer(individual.submitters, child, "SUBM", ctx):
            continue

        else:
            # Inline OBJE, ASSO, CHAN, RIN, _CUSTOM ...
            individual.extensions.append(ctx.extension(child))

    return individual
