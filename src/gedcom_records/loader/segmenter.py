# src/gedcom_records/loader/segmenter.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from gedcom_records.diagnostics import DiagnosticCollector

from .tokenizer import Token


@dataclass
class GEDCOMNode:
    """
    A hierarchical GEDCOM tree node produced from a flat token stream.

    Attributes:
        level: Depth of the node (0 for records). Always parent.level + 1.
        tag: The GEDCOM tag as written (HEAD, INDI, BIRT, _CUSTOM, ...).
        value: The line value after continuation merging, or None.
        xref: Optional @XREF@ identifier declared on the line.
        lineno: Line number in the original input (for diagnostics).
        raw: The original physical line text.
        children: Nested GEDCOMNode list ordered as they appeared.
    """

    level: int
    tag: str
    value: Optional[str] = None
    xref: Optional[str] = None
    lineno: int = 0
    children: List["GEDCOMNode"] = field(default_factory=list)
    raw: str = field(default="", repr=False, compare=False)

    # ---------- Helper / Mixin Methods ----------

    @property
    def norm_tag(self) -> str:
        return (self.tag or "").upper()

    def add_child(self, child: "GEDCOMNode") -> None:
        self.children.append(child)

    def find_children(self, tag: str) -> List["GEDCOMNode"]:
        """Return all direct children with a given tag (case-insensitive)."""
        t = tag.upper()
        return [c for c in self.children if c.norm_tag == t]

    def find_first(self, tag: str) -> Optional["GEDCOMNode"]:
        """Return the first direct child with this tag, or None."""
        t = tag.upper()
        for c in self.children:
            if c.norm_tag == t:
                return c
        return None

    def first_value(self, tag: str) -> Optional[str]:
        child = self.find_first(tag)
        return child.value if child is not None else None

    def iter_subtree(self) -> Iterator["GEDCOMNode"]:
        """Yield this node and all descendants in depth-first order."""
        yield self
        for child in self.children:
            yield from child.iter_subtree()

    def __repr__(self) -> str:
        ptr = f" {self.xref}" if self.xref else ""
        return f"<GEDCOMNode {self.level}{ptr} {self.tag}: {self.value!r}>"


# ---------- SEGMENTER IMPLEMENTATION ----------

class GEDCOMStructureError(Exception):
    """Raised by ``segment_lines(strict=True)`` when level rules are violated."""


def _node_from_token(tok: Token, level: int) -> GEDCOMNode:
    return GEDCOMNode(
        level=level,
        tag=tok.tag,
        value=tok.value,
        xref=tok.xref,
        lineno=tok.lineno,
        raw=tok.raw,
    )


def segment_lines(
    tokens: Iterable[Token],
    diagnostics: Optional[DiagnosticCollector] = None,
    strict: bool = False,
) -> List[GEDCOMNode]:
    """
    Convert a flat stream of Tokens into a list of top-level trees.

    Rules:
        - Level 0 tokens are roots and close every open node.
        - Level N nodes are children of the open node at level N-1.
        - Levels may not jump more than +1 when descending. A skipped level
          is recovered by attaching the node to the deepest open node
          (Structural-Skew diagnostic), unless ``strict`` is set.
        - A level > 0 line with no open record becomes a root of its own.

    Node levels are normalised to tree depth.
    """
    roots: List[GEDCOMNode] = []
    stack: List[GEDCOMNode] = []  # stack[depth] = open node at that depth

    for tok in tokens:
        # Level-0: always a new root
        if tok.level == 0:
            node = _node_from_token(tok, 0)
            roots.append(node)
            stack = [node]
            continue

        if not stack:
            message = f"Level {tok.level} line with no open record; attached at root"
            if strict:
                raise GEDCOMStructureError(f"Line {tok.lineno}: {message}")
            if diagnostics is not None:
                diagnostics.structural_skew(message, tok.lineno, tok.raw)
            node = _node_from_token(tok, 0)
            roots.append(node)
            stack = [node]
            continue

        depth = tok.level
        if depth > len(stack):
            message = (
                f"Level jumped from {len(stack) - 1} to {tok.level}; "
                f"attached at level {len(stack)}"
            )
            if strict:
                raise GEDCOMStructureError(f"Line {tok.lineno}: {message}")
            if diagnostics is not None:
                diagnostics.structural_skew(message, tok.lineno, tok.raw)
            depth = len(stack)

        parent = stack[depth - 1]
        node = _node_from_token(tok, depth)
        parent.add_child(node)

        # Pop the stack down to the parent, then push the new node
        del stack[depth:]
        stack.append(node)

    return roots


def segment_records(
    tokens: Iterable[Token], diagnostics: Optional[DiagnosticCollector] = None
) -> List[GEDCOMNode]:
    """
    Convenience wrapper: build the tree and return the level-0 nodes.
    """
    return segment_lines(tokens, diagnostics)
