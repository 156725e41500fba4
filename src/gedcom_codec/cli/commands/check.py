from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_codec.exporter.json_exporter import load_state
from gedcom_codec.graph import find_cycle_edges

console = Console()


def check_command(
    state: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
):
    """
    Report parent-child relationships that would make someone their own ancestor.
    """
    data = load_state(state)
    names = {i.id: f"{i.given_name} {i.family_name}".strip() or i.id for i in data.individuals}

    bad = find_cycle_edges(data.relationships)
    if not bad:
        console.print("[green]No cycles found.[/green]")
        return

    table = Table(title="Cyclic parent-child relationships")
    table.add_column("Relationship", style="bold")
    table.add_column("Parents")
    table.add_column("Child")
    for rel in bad:
        table.add_row(
            rel.id,
            ", ".join(names.get(p, p) for p in rel.parent_ids),
            names.get(rel.child_id, rel.child_id),
        )

    console.print(table)
    raise typer.Exit(code=1)
