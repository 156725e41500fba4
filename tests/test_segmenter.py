# tests/test_segmenter.py

from __future__ import annotations

from gedcom_codec.loader import segment_records, tokenize_file, tokenize_text
from gedcom_codec.utils import mock_file_path


def test_mock_file_exists() -> None:
    path = mock_file_path("sample_family.ged")
    assert path.is_file(), f"Expected GEDCOM file at: {path}"


def test_segment_records_builds_top_level_records() -> None:
    records = segment_records(tokenize_file(mock_file_path("sample_family.ged")))

    assert records[0].tag == "HEAD"
    assert records[-1].tag == "TRLR"
    assert all(r.level == 0 for r in records)
    assert [r.pointer for r in records if r.tag == "INDI"] == [
        "@I1@", "@I2@", "@I3@", "@I4@", "@I5@",
    ]


def test_event_block_ends_at_next_level_one_line() -> None:
    text = "\n".join([
        "0 @I1@ INDI",
        "1 BIRT",
        "2 DATE 1900",
        "2 PLAC Uppsala",
        "1 DEAT",
        "2 DATE 1950",
    ])
    (indi,) = segment_records(tokenize_text(text))

    birt, deat = indi.children
    assert [c.tag for c in birt.children] == ["DATE", "PLAC"]
    assert deat.tag == "DEAT"
    assert deat.children[0].value == "1950"


def test_level_jump_attaches_to_deepest_node() -> None:
    text = "0 @I1@ INDI\n1 BIRT\n3 DATE 1900\n1 SEX M"
    (indi,) = segment_records(tokenize_text(text))

    birt, sex = indi.children
    assert [(c.tag, c.value) for c in birt.children] == [("DATE", "1900")]
    assert (sex.tag, sex.value) == ("SEX", "M")


def test_lines_before_first_record_are_dropped() -> None:
    records = segment_records(tokenize_text("1 NAME Orphan\n0 HEAD"))
    assert len(records) == 1
    assert records[0].children == []
