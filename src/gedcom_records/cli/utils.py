from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict

import typer
from rich.console import Console

from gedcom_records.core.exceptions import FatalInputError
from gedcom_records.parser_core import ParseResult, parse_file

console = Console()
err_console = Console(stderr=True)

EXIT_FATAL_INPUT = 2


def load_gedcom(path: Path, *, verbose: bool = False) -> ParseResult:
    """
    Full pipeline runner. A FatalInputError ends the command with exit
    code 2.
    """
    t0 = time.perf_counter()

    try:
        result = parse_file(path)
    except FatalInputError as exc:
        err_console.print(f"[bold red]Cannot parse {path}:[/] {exc}")
        raise typer.Exit(code=EXIT_FATAL_INPUT) from exc

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(
            f"Loaded GEDCOM in {elapsed:.2f}s "
            f"({len(result.graph)} records, {len(result.diagnostics)} diagnostics)"
        )

    return result


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        typer.echo(payload)
