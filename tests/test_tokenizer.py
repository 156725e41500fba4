# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom_codec.loader import GedcomSyntaxError, tokenize_file, tokenize_line, tokenize_text
from gedcom_codec.utils import mock_file_path


def test_tokenize_line_simple_head() -> None:
    token = tokenize_line("0 HEAD", lineno=1)
    assert token.lineno == 1
    assert token.level == 0
    assert token.pointer is None
    assert token.tag == "HEAD"
    assert token.value == ""


def test_tokenize_line_with_pointer_and_tag_only() -> None:
    token = tokenize_line("0 @I1@ INDI", lineno=1)
    assert token.level == 0
    assert token.pointer == "@I1@"
    assert token.tag == "INDI"
    assert token.value == ""


def test_tokenize_line_with_value() -> None:
    line = "1 NAME Anna Maria /Svensson/"
    token = tokenize_line(line, lineno=10)
    assert token.level == 1
    assert token.tag == "NAME"
    assert token.value == "Anna Maria /Svensson/"
    assert token.raw == line


def test_tokenize_line_keeps_trailing_space_in_value() -> None:
    token = tokenize_line("1 NOTE Anna var \r\n", lineno=3)
    assert token.value == "Anna var "


def test_tokenize_line_pointer_value_is_not_a_record_pointer() -> None:
    token = tokenize_line("1 HUSB @I7@")
    assert token.pointer is None
    assert token.tag == "HUSB"
    assert token.value == "@I7@"


def test_tokenize_line_with_bom_crlf_and_indentation() -> None:
    token = tokenize_line("\ufeff  0 HEAD\r\n", lineno=1)
    assert token.level == 0
    assert token.tag == "HEAD"


def test_tokenize_line_invalid_level_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("X HEAD", lineno=1)


def test_tokenize_line_missing_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 ", lineno=1)


def test_tokenize_text_skips_blank_and_malformed_lines() -> None:
    text = "0 HEAD\r\n\r\nGARBAGE\r\n1\r\n0 @I1@ INDI\r\n0 TRLR\r\n"
    tokens = list(tokenize_text(text))

    assert [t.tag for t in tokens] == ["HEAD", "INDI", "TRLR"]
    assert tokens[1].lineno == 5


def test_tokenize_file_reads_existing_mock_file() -> None:
    tokens = list(tokenize_file(mock_file_path("sample_family.ged")))

    assert tokens
    assert tokens[0].level == 0
    assert tokens[0].tag == "HEAD"
    assert tokens[-1].tag == "TRLR"
