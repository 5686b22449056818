from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_records.cli.utils import load_gedcom

console = Console()

_LABELS = {
    "HEAD": "Header",
    "INDI": "Individuals",
    "FAM": "Families",
    "SOUR": "Sources",
    "REPO": "Repositories",
    "NOTE": "Notes",
    "OBJE": "Media Objects",
    "SUBM": "Submitters",
    "SUBN": "Submissions",
    "TRLR": "Trailer",
}


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print load timing and progress",
    ),
):
    """
    Show record counts for a GEDCOM file.
    """
    graph, diagnostics = load_gedcom(gedcom, verbose=verbose)

    table = Table(title="GEDCOM Statistics")
    table.add_column("Record", style="bold")
    table.add_column("Count", justify="right")

    for tag, count in graph.stats().items():
        table.add_row(_LABELS.get(tag, f"Custom ({tag})"), str(count))

    table.add_row("Diagnostics", str(len(diagnostics)), style="dim")

    console.print(table)
