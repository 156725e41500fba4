"""
CLI command modules for gedcom_codec.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_codec.cli.commands.check import check_command
from gedcom_codec.cli.commands.export import export_command
from gedcom_codec.cli.commands.import_gedcom import import_command
from gedcom_codec.cli.commands.stats import stats_command

__all__ = [
    "check_command",
    "export_command",
    "import_command",
    "stats_command",
]
