from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from rich.console import Console

from gedcom_codec.exporter.json_exporter import dumps_state
from gedcom_codec.loader.file_loader import read_gedcom_file
from gedcom_codec.logging import get_logger
from gedcom_codec.models import ImportResult
from gedcom_codec.registry.build_registry import parse_gedcom

console = Console()
log = get_logger(__name__)


def load_gedcom(path: Path, *, strict: bool = True, verbose: bool = False) -> ImportResult:
    """
    Read and parse a GEDCOM file.
    """
    t0 = time.perf_counter()

    result = parse_gedcom(read_gedcom_file(path, strict=strict))

    elapsed = time.perf_counter() - t0
    log.info(
        "Parsed %s: %d individuals, %d families, %d relationships",
        path,
        len(result.individuals),
        result.family_count,
        len(result.relationships),
    )

    if verbose:
        console.log(f"Loaded GEDCOM in {elapsed:.2f}s")

    return result


def write_json(
    result: ImportResult,
    *,
    out: Optional[Path],
    pretty: bool,
):
    """
    Write app-state JSON to stdout or file.
    """
    payload = dumps_state(result.individuals, result.relationships, pretty=pretty)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
