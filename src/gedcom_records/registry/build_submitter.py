from __future__ import annotations

from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.registry.entities import Submission, Submitter
from gedcom_records.registry.structures import build_address, build_note_structure
from gedcom_records.registry.utils import (
    MaterializeContext,
    append_pointer,
    append_scalar,
    set_pointer,
    set_scalar,
)

_SUBMISSION_FIELDS = {
    "FAMF": "family_file",
    "TEMP": "temple",
    "ANCE": "ancestors",
    "DESC": "descendants",
    "ORDI": "ordinance",
}


def build_submitter(node: GEDCOMNode, ctx: MaterializeContext) -> Submitter:
    """Build a Submitter from a 'SUBM' record."""
    if node.norm_tag != "SUBM":
        raise ValueError(f"Expected SUBM node, got {node.tag}")

    submitter = Submitter(xref=node.xref)

    for child in node.children:
        tag = child.norm_tag

        if tag == "NAME" and set_scalar(submitter, "name", child):
            continue

        elif tag == "ADDR" and submitter.address is None:
            submitter.address = build_address(child, ctx)

        elif tag == "PHON" and append_scalar(submitter.phones, child):
            continue

        elif tag == "EMAIL" and append_scalar(submitter.emails, child):
            continue

        elif tag == "LANG" and set_scalar(submitter, "language", child):
            continue

        elif tag == "NOTE":
            submitter.notes.append(build_note_structure(child, ctx))

        elif tag == "OBJE" and append_pointer(submitter.media, child, "OBJE", ctx):
            continue

        else:
            submitter.extensions.append(ctx.extension(child))

    return submitter


def build_submission(node: GEDCOMNode, ctx: MaterializeContext) -> Submission:
    """Build a Submission from a 'SUBN' record."""
    if node.norm_tag != "SUBN":
        raise ValueError(f"Expected SUBN node, got {node.tag}")

    submission = Submission(xref=node.xref)

    for child in node.children:
        tag = child.norm_tag
        attr = _SUBMISSION_FIELDS.get(tag)

        if attr and set_scalar(submission, attr, child):
            continue

        if tag == "SUBM" and set_pointer(submission, "submitter", child, "SUBM", ctx):
            continue

        submission.extensions.append(ctx.extension(child))

    return submission
