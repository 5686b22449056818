from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_records.cli.utils import load_gedcom
from gedcom_records.config import get_config
from gedcom_records.exporter.gedcom_writer import GedcomWriter

console = Console(stderr=True)


def rewrite_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    max_line_length: Optional[int] = typer.Option(
        None,
        "--max-line-length",
        help="Physical line limit (defaults to the writer config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print load timing and progress",
    ),
):
    """
    Parse a GEDCOM file and write it back out in canonical form.
    """
    graph, _ = load_gedcom(gedcom, verbose=verbose)

    cfg = get_config()
    writer = GedcomWriter(
        max_line_length=max_line_length if max_line_length is not None else cfg.max_line_length,
        line_terminator=cfg.line_terminator,
    )

    if out:
        writer.write_file(graph, out)
        if verbose:
            console.log(f"Wrote {out}")
    else:
        typer.echo(writer.write(graph), nl=False)
