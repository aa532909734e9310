# SPDX-License-Identifier: MIT
"""Tests for offset to line/column mapping."""

from aicodesafe.core.findings import Position
from aicodesafe.core.positions import line_column, line_starts


def test_second_line_first_column():
    assert line_column("abc\ndef", 4) == Position(line=2, column=1)


def test_start_of_text():
    assert line_column("abc\ndef", 0) == Position(line=1, column=1)


def test_column_within_line():
    assert line_column("abc\ndef", 6) == Position(line=2, column=3)


def test_crlf_line_endings():
    text = "a\r\nbc"
    assert line_column(text, 3) == Position(line=2, column=1)
    assert line_column(text, 4) == Position(line=2, column=2)
    # the \r stays on the first line
    assert line_column(text, 1) == Position(line=1, column=2)


def test_offset_past_end_resolves_to_last_line():
    pos = line_column("one\ntwo\nthree", 1000)
    assert pos.line == 3
    assert pos.column == len("three") + 1


def test_negative_offset_clamped():
    assert line_column("abc", -5) == Position(line=1, column=1)


def test_empty_text():
    assert line_column("", 0) == Position(line=1, column=1)


def test_line_starts():
    assert line_starts("abc\ndef\n") == [0, 4, 8]
    assert line_starts("") == [0]


def test_precomputed_starts_give_same_answer():
    text = "one\r\ntwo\nthree"
    starts = line_starts(text)
    for offset in range(len(text) + 3):
        assert line_column(text, offset, starts) == line_column(text, offset)
