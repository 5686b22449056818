"""
File loader.

Reads a GEDCOM file as raw bytes; decoding is left to the line reader so
byte-order marks and the declared CHAR value can be checked.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from gedcom_records.logging import get_logger

log = get_logger("loader.file_loader")


def resolve_input_path(path: Union[str, Path]) -> Path:
    """
    Convert a user-provided path into an absolute validated file path.
    """
    abs_path = Path(path).expanduser().resolve()
    log.debug("Resolving input file: %s", abs_path)

    if not abs_path.exists():
        raise FileNotFoundError(f"GEDCOM file not found: {abs_path}")

    if not abs_path.is_file():
        raise ValueError(f"Input path is not a file: {abs_path}")

    return abs_path


def load_file(path: Union[str, Path]) -> bytes:
    file_path = resolve_input_path(path)
    data = file_path.read_bytes()
    log.info("Loaded %s (%d bytes)", file_path, len(data))
    return data
