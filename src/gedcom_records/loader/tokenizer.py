# src/gedcom_records/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Token:
    """
    A single logical GEDCOM line.

    Attributes:
        lineno: 1-based line number in the original input.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        xref: Optional cross-reference identifier, e.g. "@I1@" or None.
        tag: GEDCOM tag as written, e.g. "INDI", "FAM", "_FAVCOLOR".
        value: The line value (payload), or None when the line has none.
            After continuation merging this includes CONT/CONC text.
        raw: The original physical line without its line terminator.
    """
    lineno: int
    level: int
    xref: Optional[str]
    tag: str
    value: Optional[str]
    raw: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line cannot be parsed according to basic syntax."""

    def __init__(self, message: str, lineno: int = 0, raw: str = ""):
        super().__init__(message)
        self.lineno = lineno
        self.raw = raw


def is_xref(text: Optional[str]) -> bool:
    """True for a well-formed pointer token such as ``@I1@`` (not ``@@``)."""
    if not text or len(text) < 3:
        return False
    return text[0] == "@" and text[-1] == "@" and " " not in text


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    Grammar:
        <level> [<xref>] <tag> [<value>]

    The value is everything after the single space following the tag,
    preserved verbatim (leading and internal whitespace included).

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "2 CONC  and more"   -> value " and more"
    """
    raw = line.rstrip("\r\n")

    # Handle optional UTF-8 BOM on the very first line.
    text = raw.lstrip("\ufeff")
    # Leading whitespace before the level is tolerated (GEDCOM 5.5.1).
    text = text.lstrip(" \t")

    if not text:
        raise GedcomSyntaxError(f"Line {lineno}: empty line", lineno, raw)

    # --- 1. Extract level -------------------------------------------------
    parts = text.split(" ", 1)
    level_str = parts[0]
    if not (level_str.isascii() and level_str.isdigit()):
        raise GedcomSyntaxError(
            f"Line {lineno}: level is not numeric -> {level_str!r}", lineno, raw
        )
    if len(parts) == 1:
        raise GedcomSyntaxError(
            f"Line {lineno}: missing tag (only level found)", lineno, raw
        )

    level = int(level_str)
    rest = parts[1].lstrip(" ")

    if not rest:
        raise GedcomSyntaxError(f"Line {lineno}: missing tag after level", lineno, raw)

    # --- 2. Extract optional xref -----------------------------------------
    xref: Optional[str] = None

    if rest.startswith("@"):
        head, _, tail = rest.partition(" ")
        if not is_xref(head):
            raise GedcomSyntaxError(
                f"Line {lineno}: malformed cross-reference {head!r}", lineno, raw
            )
        xref = head
        rest = tail.lstrip(" ")

        if not rest:
            raise GedcomSyntaxError(
                f"Line {lineno}: cross-reference present but missing tag", lineno, raw
            )

    # --- 3. Extract tag and optional value --------------------------------
    tag, sep, value = rest.partition(" ")

    if tag.startswith("@"):
        raise GedcomSyntaxError(
            f"Line {lineno}: expected a tag, found {tag!r}", lineno, raw
        )

    return Token(
        lineno=lineno,
        level=level,
        xref=xref,
        tag=tag,
        value=value if sep and value else None,
        raw=raw,
    )
