from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_codec.cli.utils import load_gedcom

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    result = load_gedcom(gedcom, verbose=verbose)

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Individuals", str(len(result.individuals)))
    table.add_row("Families", str(result.family_count))
    table.add_row("Spouse relationships", str(len(result.spouse_relationships)))
    table.add_row("Parent-child relationships", str(len(result.parent_child_relationships)))
    table.add_row("Moves", str(sum(len(i.moves) for i in result.individuals)))

    console.print(table)
