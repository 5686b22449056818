# src/gedcom_records/loader/line_reader.py

"""
Line Reader: turns raw GEDCOM input into a stream of logical lines.

Rules (GEDCOM 5.5.1):
    - Lines end with CR, LF, CR LF or LF CR; trailing whitespace is trimmed.
    - CONC: append the text directly to the preceding line's value.
    - CONT: append a newline + the text.
    - Either one must sit exactly one level below the line it continues;
      anything else is reported and dropped.

Example:
    1 NOTE Line one
    2 CONC  and more
    2 CONT Second line

becomes one logical line:
    1 NOTE "Line one and more\nSecond line"

Continuation lines never surface as tokens of their own.
"""

from __future__ import annotations

import dataclasses
import re
from typing import Iterator, List, Optional, Union

from gedcom_records.diagnostics import DiagnosticCollector
from gedcom_records.logging import get_logger

from .encoding import decode_input
from .tokenizer import GedcomSyntaxError, Token, tokenize_line

log = get_logger("loader.line_reader")

CONTINUATION_TAGS = ("CONC", "CONT")

_EOL_RE = re.compile(r"\r\n|\n\r|\r|\n")


def split_physical_lines(text: str) -> List[str]:
    """Split on any GEDCOM line terminator; a missing final newline is fine."""
    lines = _EOL_RE.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def merge_continuation(base: Token, cont: Token) -> Token:
    """Return ``base`` with the CONC/CONT token's text folded into its value."""
    existing = base.value or ""
    addition = cont.value or ""

    if cont.tag.upper() == "CONC":
        merged = existing + addition
    else:
        merged = existing + "\n" + addition

    return dataclasses.replace(base, value=merged or None)


class LineReader:
    """
    Lazy, restartable sequence of logical lines.

    Every iteration re-reads the decoded text from the start, so the same
    reader can be walked more than once. Use ``read(diagnostics)`` to have
    recovered anomalies reported; plain iteration discards them.
    """

    def __init__(self, source: Union[str, bytes]):
        self.text, self.detected_encoding = decode_input(source)

    def __iter__(self) -> Iterator[Token]:
        return self.read()

    def read(self, diagnostics: Optional[DiagnosticCollector] = None) -> Iterator[Token]:
        pending: Optional[Token] = None
        blank_lineno: Optional[int] = None

        for lineno, physical in enumerate(split_physical_lines(self.text), start=1):
            line = physical.rstrip()

            if not line.strip().lstrip("\ufeff"):
                if blank_lineno is None:
                    blank_lineno = lineno
                continue

            try:
                token = tokenize_line(line, lineno=lineno)
            except GedcomSyntaxError as exc:
                if diagnostics is not None:
                    diagnostics.malformed_line(str(exc), lineno, physical)
                continue

            if blank_lineno is not None:
                if token.level > 0 and diagnostics is not None:
                    diagnostics.malformed_line(
                        f"Blank line interrupts record before level {token.level} line",
                        blank_lineno,
                        "",
                    )
                blank_lineno = None

            if token.tag.upper() in CONTINUATION_TAGS:
                if pending is None:
                    if diagnostics is not None:
                        diagnostics.malformed_line(
                            f"{token.tag} line has no preceding line to continue",
                            lineno,
                            token.raw,
                        )
                    continue
                if token.level != pending.level + 1:
                    # only lines one level below may continue a value
                    if diagnostics is not None:
                        diagnostics.malformed_line(
                            f"{token.tag} at level {token.level} cannot continue the "
                            f"level {pending.level} {pending.tag} line",
                            lineno,
                            token.raw,
                        )
                    continue
                pending = merge_continuation(pending, token)
                continue

            if pending is not None:
                yield pending
            pending = token

        if pending is not None:
            yield pending


def read_lines(
    source: Union[str, bytes], diagnostics: Optional[DiagnosticCollector] = None
) -> List[Token]:
    """Materialize every logical line of ``source``."""
    reader = LineReader(source)
    tokens = list(reader.read(diagnostics))
    log.debug("Read %d logical lines", len(tokens))
    return tokens
