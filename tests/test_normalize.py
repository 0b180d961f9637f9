from __future__ import annotations

import pytest

from leapquiz.input.normalize import (
    check_record_count,
    clean_cell,
    normalize_row,
    parse_word_table,
    records_from_rows,
)
from leapquiz.schema.base import WordRecord


def test_entities_decoded_then_whitespace_collapsed():
    assert clean_cell("A&amp;B&nbsp;&nbsp;C") == "A&B C"
    assert clean_cell("&lt;tag&gt; &quot;q&quot; it&#39;s") == '<tag> "q" it\'s'
    assert clean_cell("  line one\n\t line two  ") == "line one line two"


@pytest.mark.parametrize(
    "cells, reason",
    [
        (("0", "word", "meaning"), "id must be positive"),
        (("-4", "word", "meaning"), "id must be positive"),
        (("3", "", "meaning"), "empty word"),
        (("3", "word", "&nbsp; "), "empty meaning"),
        (("x", "word", "meaning"), "id is not a number"),
    ],
)
def test_invalid_rows_rejected(cells, reason):
    record, got = normalize_row(cells)

    assert record is None
    assert got == reason


def test_valid_row_keeps_gloss_structure():
    record, reason = normalize_row((" 12 ", " agree ", "[自] ①賛成する  ②一致する "))

    assert reason == ""
    assert record == WordRecord(id=12, headword="agree", gloss="[自] ①賛成する ②一致する")


def test_leading_integer_like_parse_int():
    record, _ = normalize_row(("15.", "w", "m"))

    assert record.id == 15


def test_parse_sorted_and_rejects_collected(word_table_html):
    html = word_table_html + "<table><tr><td>0</td><td>zero</td><td>bad</td></tr></table>"
    rejected = []

    records = parse_word_table(html, rejected=rejected)

    assert [r.id for r in records] == [1, 2, 3]
    assert records[0].headword == "agree"
    assert records[2].gloss == "[他] ～に忠告する"
    assert rejected == [(("0", "zero", "bad"), "id must be positive")]


def test_unsorted_rows_sorted_and_duplicates_dropped():
    rows = [("5", "e", "x"), ("1", "a", "x"), ("3", "c", "x"), ("1", "again", "x")]
    rejected = []

    records = records_from_rows(rows, rejected=rejected)

    assert [r.id for r in records] == [1, 3, 5]
    assert records[0].headword == "a"
    assert rejected[0][1] == "duplicate id 1"


def test_silent_drop_by_default():
    assert records_from_rows([("x", "a", "b")]) == []


def test_record_count_warning(capsys):
    assert check_record_count(1999) is False
    assert "expected at least 2000" in capsys.readouterr().err

    assert check_record_count(2000) is True
    assert capsys.readouterr().err == ""


def test_id_past_int_digit_limit_is_dropped():
    huge = "9" * 5000
    html = f"<tr><td>{huge}</td><td>w</td><td>m</td></tr><tr><td>2</td><td>ok</td><td>fine</td></tr>"
    rejected = []

    records = parse_word_table(html, rejected=rejected)

    assert [r.id for r in records] == [2]
    assert rejected[0][1] == "id is not a number"
