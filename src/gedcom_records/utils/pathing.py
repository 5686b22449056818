# src/gedcom_records/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# This file lives at:
#   <project_root>/src/gedcom_records/utils/pathing.py
#
#   parents[0] .../src/gedcom_records/utils
#   parents[1] .../src/gedcom_records
#   parents[2] .../src
#   parents[3] .../ (project root)
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the directory holding src/, tests/, config/ and mock_files/.

    Only meaningful for a source checkout (editable install).
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Examples:
        resolve_project_path("mock_files/sample.ged")
        resolve_project_path(Path("config") / "gedcom_records.yml")
    """
    return project_root() / Path(relative)


def mock_file_path(filename: Union[str, Path]) -> Path:
    """
    Return the absolute path to a file under the top-level mock_files/ directory.
    """
    return resolve_project_path(Path("mock_files") / filename)
