"""
CLI command modules for gedcom_records.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_records.cli.commands.export import export_command
from gedcom_records.cli.commands.rewrite import rewrite_command
from gedcom_records.cli.commands.stats import stats_command
from gedcom_records.cli.commands.validate import validate_command

__all__ = [
    "export_command",
    "rewrite_command",
    "stats_command",
    "validate_command",
]
