from __future__ import annotations

from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.registry.entities import Repository
from gedcom_records.registry.structures import build_address, build_note_structure
from gedcom_records.registry.utils import MaterializeContext, append_scalar, set_scalar


def build_repository(node: GEDCOMNode, ctx: MaterializeContext) -> Repository:
    if node.norm_tag != "REPO":
        raise ValueError(f"Expected REPO node, got {node.tag}")

    repo = Repository(xref=node.xref)

    for child in node.children:
        tag = child.norm_tag

        if tag == "NAME" and set_scalar(repo, "name", child):
            continue

        elif tag == "ADDR" and repo.address is None:
            repo.address = build_address(child, ctx)

        elif tag == "PHON" and append_scalar(repo.phones, child):
            continue

        elif tag == "EMAIL" and append_scalar(repo.emails, child):
            continue

        elif tag == "WWW" and append_scalar(repo.websites, child):
            continue

        elif tag == "NOTE":
            repo.notes.append(build_note_structure(child, ctx))

        else:
            repo.extensions.append(ctx.extension(child))

    return repo
