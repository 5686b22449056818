from __future__ import annotations

import typer

from gedcom_records.cli.commands.export import export_command
from gedcom_records.cli.commands.rewrite import rewrite_command
from gedcom_records.cli.commands.stats import stats_command
from gedcom_records.cli.commands.validate import validate_command

app = typer.Typer(
    name="gedcom-records",
    help="GEDCOM reader, validator, and writer",
    add_completion=False,
)

app.command("stats")(stats_command)
app.command("validate")(validate_command)
app.command("export")(export_command)
app.command("rewrite")(rewrite_command)


def main():
    app()


if __name__ == "__main__":
    main()
