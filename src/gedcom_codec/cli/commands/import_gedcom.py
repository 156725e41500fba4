from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_codec.cli.utils import load_gedcom, write_json
from gedcom_codec.exceptions import GedcomDecodeError

console = Console(stderr=True)


def import_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Decode non-UTF-8 files as latin-1 instead of failing",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Import a GEDCOM file as app-state JSON (stdout by default).
    """
    try:
        result = load_gedcom(gedcom, strict=not lenient, verbose=verbose)
    except GedcomDecodeError as exc:
        console.print(f"[red]Cannot decode {gedcom}:[/red] {exc}")
        raise typer.Exit(code=2)

    write_json(result, out=out, pretty=pretty)

    if verbose:
        console.log(
            f"Imported {len(result.individuals)} individuals, "
            f"{len(result.relationships)} relationships"
        )
