# src/gedcom_records/loader/encoding.py

"""
Byte decoding and declared-encoding checks.

Only the declared ``HEAD.CHAR`` identifier is surfaced; no transcoding is
performed. Single-byte inputs (ANSEL, ANSI, ...) are passed through as
Latin-1 so every byte survives for an external transcoder.
"""

from __future__ import annotations

import codecs
import re
from typing import Optional, Tuple, Union

from gedcom_records.core.exceptions import FatalInputError
from gedcom_records.diagnostics import DiagnosticCollector

RECOGNIZED_ENCODINGS = {"ANSEL", "ASCII", "UTF-8", "UNICODE"}

# Declared identifiers for which an 8-bit passthrough decode is acceptable.
SINGLE_BYTE_ENCODINGS = {"ANSEL", "ASCII", "ANSI", "IBMPC", "IBM WINDOWS", "MACINTOSH", "LATIN1"}

_CHAR_RE = re.compile(r"^\s*1\s+CHAR\s+([^\r\n]+?)\s*$", re.MULTILINE)

# Byte-level encodings detected from the input itself.
DETECTED_UTF8_BOM = "utf-8-sig"
DETECTED_UTF16 = "utf-16"
DETECTED_UTF8 = "utf-8"
DETECTED_PASSTHROUGH = "latin-1"


def sniff_declared_encoding(data: bytes) -> Optional[str]:
    """Return the ``1 CHAR`` value from the first few KB of raw bytes."""
    head = data[:8192].decode("latin-1")
    match = _CHAR_RE.search(head)
    return match.group(1).upper() if match else None


def decode_input(source: Union[str, bytes]) -> Tuple[str, Optional[str]]:
    """
    Turn raw input into text.

    Returns:
        (text, detected) where ``detected`` names the byte-level encoding
        used, or None when the caller already supplied text.

    Raises:
        FatalInputError: empty input, or bytes that cannot be decoded.
    """
    if isinstance(source, str):
        text, detected = source, None
    else:
        data = bytes(source)
        if data.startswith(codecs.BOM_UTF8) or data.startswith(
            (codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)
        ):
            codec = "utf-8-sig" if data.startswith(codecs.BOM_UTF8) else "utf-16"
            try:
                text = data.decode(codec)
            except UnicodeDecodeError as exc:
                raise FatalInputError(f"Undecodable {codec} input: {exc}") from exc
            detected = DETECTED_UTF8_BOM if codec == "utf-8-sig" else DETECTED_UTF16
        else:
            try:
                text, detected = data.decode("utf-8"), DETECTED_UTF8
            except UnicodeDecodeError as exc:
                declared = sniff_declared_encoding(data)
                if declared not in SINGLE_BYTE_ENCODINGS:
                    raise FatalInputError(
                        f"Input is not valid UTF-8 (declared CHAR: {declared or 'none'}): {exc}"
                    ) from exc
                text, detected = data.decode("latin-1"), DETECTED_PASSTHROUGH

    if not text.strip().lstrip("\ufeff"):
        raise FatalInputError("Empty GEDCOM input")

    return text, detected


def check_declared_encoding(
    declared: Optional[str],
    text: str,
    detected: Optional[str],
    diagnostics: DiagnosticCollector,
    lineno: Optional[int] = None,
    raw: Optional[str] = None,
) -> None:
    """Report Encoding-Mismatch diagnostics for the header's CHAR value."""
    if not declared:
        return

    name = declared.strip().upper()

    if name not in RECOGNIZED_ENCODINGS:
        diagnostics.encoding_mismatch(
            f"Unsupported declared character set {declared!r}", lineno, raw
        )
    elif name == "ASCII" and not text.isascii():
        diagnostics.encoding_mismatch(
            "Declared ASCII but the content contains non-ASCII characters", lineno, raw
        )

    if detected == DETECTED_UTF16 and name != "UNICODE":
        diagnostics.encoding_mismatch(
            f"UTF-16 byte-order mark found but CHAR declares {declared!r}", lineno, raw
        )
    elif detected in (DETECTED_UTF8_BOM, DETECTED_UTF8) and name == "UNICODE":
        diagnostics.encoding_mismatch(
            "CHAR declares UNICODE (UTF-16) but the bytes are UTF-8", lineno, raw
        )
    elif detected == DETECTED_UTF8_BOM and name in ("ASCII", "ANSEL"):
        diagnostics.encoding_mismatch(
            f"UTF-8 byte-order mark found but CHAR declares {declared!r}", lineno, raw
        )
