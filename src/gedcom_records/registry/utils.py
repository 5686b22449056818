from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from gedcom_records.diagnostics import DiagnosticCollector
from gedcom_records.loader.segmenter import GEDCOMNode
from gedcom_records.loader.tokenizer import is_xref
from gedcom_records.registry.entities import GenericAttribute
from gedcom_records.registry.tags import is_standard_tag


@dataclass(frozen=True)
class PointerReference:
    """A pointer value seen while materializing, checked once all records exist."""
    xref: str
    expected_tag: str
    lineno: Optional[int] = None
    raw: Optional[str] = None


@dataclass
class MaterializeContext:
    """
    Shared state for one materialization pass.

    Builders stay pure with respect to other records: they only read their
    own subtree and record what they point at here.
    """
    diagnostics: DiagnosticCollector = field(default_factory=DiagnosticCollector)
    report_unknown_tags: bool = True
    references: List[PointerReference] = field(default_factory=list)

    def extension(self, node: GEDCOMNode) -> GenericAttribute:
        """Capture ``node`` and its whole subtree losslessly."""
        self.check_tag(node)
        return GenericAttribute(
            tag=node.tag,
            value=node.value,
            xref=node.xref,
            children=[self.extension(c) for c in node.children],
            lineno=node.lineno,
        )

    def check_tag(self, node: GEDCOMNode) -> None:
        if self.report_unknown_tags and not is_standard_tag(node.tag):
            self.diagnostics.unknown_tag(
                f"Unknown tag {node.tag!r} preserved as extension", node.lineno, node.raw
            )

    def pointer(self, node: GEDCOMNode, expected_tag: str) -> Optional[str]:
        """
        Return ``node.value`` and remember it for reference checking.

        A non-empty value that is not an @XREF@ is kept as-is and reported
        as a malformed line.
        """
        value = node.value
        if value is None:
            return None
        if is_xref(value):
            self.references.append(
                PointerReference(value, expected_tag, node.lineno, node.raw)
            )
        else:
            self.diagnostics.malformed_line(
                f"{node.tag} expects a pointer to a {expected_tag} record, got {value!r}",
                node.lineno,
                node.raw,
            )
        return value


# ----------------------------------------------------------------------
# Field assignment helpers
# ----------------------------------------------------------------------

def is_leaf(node: GEDCOMNode) -> bool:
    return not node.children


def set_scalar(target: Any, attr: str, node: GEDCOMNode) -> bool:
    """
    Assign ``node.value`` to ``target.attr`` if the field is still unset and
    the line is a leaf carrying a value. Returns False when the caller
    must keep the node as an extension instead.
    """
    if getattr(target, attr) is not None or not is_leaf(node) or node.value is None:
        return False
    setattr(target, attr, node.value)
    return True


def set_pointer(
    target: Any, attr: str, node: GEDCOMNode, expected_tag: str, ctx: MaterializeContext
) -> bool:
    if getattr(target, attr) is not None or not is_leaf(node) or node.value is None:
        return False
    setattr(target, attr, ctx.pointer(node, expected_tag))
    return True


def append_scalar(values: List[str], node: GEDCOMNode) -> bool:
    if not is_leaf(node) or node.value is None:
        return False
    values.append(node.value)
    return True


def append_pointer(
    values: List[str], node: GEDCOMNode, expected_tag: str, ctx: MaterializeContext
) -> bool:
    """Pointer lists only take the pointer form; inline structures stay extensions."""
    if not is_leaf(node) or not is_xref(node.value):
        return False
    values.append(ctx.pointer(node, expected_tag))
    return True
