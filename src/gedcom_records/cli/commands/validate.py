from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_records.cli.utils import load_gedcom
from gedcom_records.diagnostics import WARNING

console = Console()


def validate_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with code 1 when any warning is reported",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print load timing and progress",
    ),
):
    """
    List parse diagnostics for a GEDCOM file.
    """
    _, diagnostics = load_gedcom(gedcom, verbose=verbose)

    if not diagnostics:
        console.print("[green]No problems found.[/]")
        return

    table = Table(title=f"Diagnostics for {gedcom.name}")
    table.add_column("Line", justify="right")
    table.add_column("Kind", style="bold")
    table.add_column("Message")

    for d in diagnostics:
        style = "yellow" if d.severity == WARNING else "dim"
        line = str(d.lineno) if d.lineno is not None else "-"
        table.add_row(line, d.kind.value, d.message, style=style)

    console.print(table)

    warnings = sum(1 for d in diagnostics if d.severity == WARNING)
    console.print(f"{len(diagnostics)} diagnostic(s), {warnings} warning(s)")

    if strict and warnings:
        raise typer.Exit(code=1)
