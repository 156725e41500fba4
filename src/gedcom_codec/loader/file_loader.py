"""
File boundary for the codec: bytes on disk <-> GEDCOM text.

The parser and generator only ever see strings; everything that touches the
filesystem lives here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from gedcom_codec.exceptions import GedcomDecodeError
from gedcom_codec.logging import get_logger

log = get_logger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"


def decode_gedcom_bytes(data: bytes, *, strict: bool = True) -> str:
    """
    Decode raw GEDCOM bytes as UTF-8, dropping a leading BOM.

    With ``strict=False`` undecodable input falls back to latin-1 instead of
    raising, which some older exports need.
    """
    if data.startswith(UTF8_BOM):
        data = data[len(UTF8_BOM):]

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        if strict:
            raise GedcomDecodeError(f"GEDCOM data is not valid UTF-8: {exc}") from exc
        log.warning("GEDCOM data is not valid UTF-8, decoding as latin-1")
        return data.decode("latin-1")


def read_gedcom_file(path: Union[str, Path], *, strict: bool = True) -> str:
    """
    Read a GEDCOM file and return its text.

    Raises:
        FileNotFoundError: if `path` does not exist.
        GedcomDecodeError: if the content is not decodable.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    text = decode_gedcom_bytes(file_path.read_bytes(), strict=strict)
    log.info(f"Loaded file: {file_path}")
    return text


def write_gedcom_file(path: Union[str, Path], text: str) -> Path:
    """Write GEDCOM text as UTF-8 with a trailing newline."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    if not text.endswith("\n"):
        text += "\n"

    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)

    log.info(f"Wrote GEDCOM file: {file_path}")
    return file_path
