# src/gedcom_codec/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    from gedcom_codec.loader import (
        Token,
        GEDCOMNode,
        tokenize_line,
        tokenize_text,
        tokenize_file,
        segment_records,
        read_gedcom_file,
        write_gedcom_file,
    )
"""

from __future__ import annotations

from gedcom_codec.exceptions import GedcomSyntaxError

from .file_loader import read_gedcom_file, write_gedcom_file
from .segmenter import GEDCOMNode, segment_records
from .tokenizer import Token, tokenize_file, tokenize_line, tokenize_text

__all__ = [
    "Token",
    "GedcomSyntaxError",
    "GEDCOMNode",
    "tokenize_line",
    "tokenize_text",
    "tokenize_file",
    "segment_records",
    "read_gedcom_file",
    "write_gedcom_file",
]
