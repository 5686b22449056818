from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_records.cli.utils import load_gedcom, write_json
from gedcom_records.exporter.json_exporter import graph_to_dict

console = Console(stderr=True)


def export_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    diagnostics: bool = typer.Option(
        False,
        "--diagnostics",
        help="Include parse diagnostics in the output",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print load timing and progress",
    ),
):
    """
    Export GEDCOM records to JSON (stdout by default).
    """
    graph, found = load_gedcom(gedcom, verbose=verbose)

    data = graph_to_dict(graph, found if diagnostics else None)

    if verbose:
        console.log("Exporting JSON")

    write_json(data, out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")
