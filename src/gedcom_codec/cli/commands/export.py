from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_codec.config import get_config
from gedcom_codec.exceptions import ModelError
from gedcom_codec.exporter.gedcom_writer import generate_gedcom
from gedcom_codec.exporter.json_exporter import load_state
from gedcom_codec.loader.file_loader import write_gedcom_file

console = Console(stderr=True)


def export_command(
    state: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Path = typer.Option(
        ...,
        "--out",
        "-o",
        help="GEDCOM file to write",
    ),
    source: Optional[str] = typer.Option(
        None,
        "--source",
        help="Value for the header SOUR line (default from config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export app-state JSON to a GEDCOM file.
    """
    try:
        data = load_state(state)
    except ModelError as exc:
        console.print(f"[red]Invalid state file {state}:[/red] {exc}")
        raise typer.Exit(code=2)

    text = generate_gedcom(
        data.individuals,
        data.relationships,
        source=source or get_config().source,
    )
    write_gedcom_file(out, text)

    if verbose:
        console.log(f"Wrote {out}")
