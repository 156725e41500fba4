from __future__ import annotations

import typer

from gedcom_codec.cli.commands import (
    check_command,
    export_command,
    import_command,
    stats_command,
)

app = typer.Typer(
    name="gedcom-codec",
    help="GEDCOM import/export for the genealogy app",
    add_completion=False,
)

app.command("import")(import_command)
app.command("export")(export_command)
app.command("stats")(stats_command)
app.command("check")(check_command)


def main():
    app()


if __name__ == "__main__":
    main()
