# src/gedcom_codec/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from gedcom_codec.exceptions import GedcomSyntaxError
from gedcom_codec.loader.file_loader import read_gedcom_file
from gedcom_codec.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the original text.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Optional cross-reference identifier, e.g. "@I1@" or None.
        tag: GEDCOM tag, e.g. "INDI", "FAM", "HEAD", "NOTE", "CONT".
        value: The line payload after the tag (may be empty).
        raw: The original line content without trailing newline characters.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    Required order:
        <level> [<pointer>] <tag> [<value>]

    Leading indentation and runs of spaces between the level, pointer and tag
    are tolerated. The value keeps its inner and trailing spacing; only the single
    delimiter space after the tag is consumed.

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "2 CONT second line"
    """
    raw = _strip_eol(line)

    if raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff")

    text = raw.lstrip()
    if not text:
        raise GedcomSyntaxError(f"Empty or whitespace-only line at {lineno}")

    # --- 1. Extract level -------------------------------------------------
    parts = text.split(" ", 1)
    if len(parts) == 1:
        raise GedcomSyntaxError(
            f"Line {lineno}: missing tag (only level found) -> {raw!r}"
        )

    level_str, rest = parts[0], parts[1]
    if not level_str.isdigit():
        raise GedcomSyntaxError(
            f"Line {lineno}: level is not numeric -> {level_str!r} in {raw!r}"
        )

    level = int(level_str)
    rest = rest.lstrip(" ")

    if not rest:
        raise GedcomSyntaxError(
            f"Line {lineno}: missing tag after level -> {raw!r}"
        )

    # --- 2. Extract optional pointer -------------------------------------
    pointer: Optional[str] = None

    if rest.startswith("@"):
        space_index = rest.find(" ")
        if space_index < 0:
            raise GedcomSyntaxError(
                f"Line {lineno}: pointer present but no tag -> {raw!r}"
            )

        pointer = rest[:space_index]
        rest = rest[space_index + 1 :].lstrip(" ")

        if not rest:
            raise GedcomSyntaxError(
                f"Line {lineno}: pointer present but missing tag -> {raw!r}"
            )

    # --- 3. Extract tag and optional value --------------------------------
    if " " in rest:
        tag, value = rest.split(" ", 1)
    else:
        tag, value = rest, ""

    return Token(
        lineno=lineno,
        level=level,
        pointer=pointer,
        tag=tag.upper(),
        value=value,
        raw=raw,
    )


def tokenize_text(text: str) -> Iterator[Token]:
    """
    Yield a Token for every usable line of GEDCOM text.

    LF and CRLF endings are both accepted. Blank lines are skipped; lines that
    fail to tokenize are logged and skipped so a damaged line never aborts an
    import.
    """
    for lineno, raw_line in enumerate(text.split("\n"), start=1):
        if not raw_line.strip():
            continue

        try:
            yield tokenize_line(raw_line, lineno=lineno)
        except GedcomSyntaxError as exc:
            log.debug("Skipping malformed line: %s", exc)


def tokenize_file(path: Union[str, Path]) -> Iterator[Token]:
    """
    Yield Token objects for every usable line in the given GEDCOM file.

    Raises:
        FileNotFoundError: if `path` does not exist.
        GedcomDecodeError: if the file is not valid UTF-8.
    """
    yield from tokenize_text(read_gedcom_file(path))
