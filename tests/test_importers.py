from __future__ import annotations

import json

import pytest

from leapquiz.common.errors import MalformedInput
from leapquiz.input.importers import (
    dump_records,
    import_from_html,
    import_from_json_array,
    import_from_json_text,
)
from leapquiz.schema.base import WordRecord


def test_html_import(word_table_html):
    records = import_from_html(word_table_html)

    assert [r.headword for r in records] == ["agree", "oppose", "advise"]


def test_html_without_valid_rows_is_malformed():
    with pytest.raises(MalformedInput):
        import_from_html("<table><tr><td>x</td><td>a</td><td>b</td></tr></table>")


def test_json_array_validated_and_sorted():
    raw = [
        {"id": 3, "word": "advise", "meaning": "～に忠告する"},
        {"id": "1", "headword": "agree", "gloss": "賛成する"},
        {"id": 0, "word": "bad", "meaning": "x"},
        {"id": 4, "word": "  ", "meaning": "x"},
        {"id": True, "word": "bool", "meaning": "x"},
        "not an object",
    ]
    rejected = []

    records = import_from_json_array(raw, rejected=rejected)

    assert records == [
        WordRecord(1, "agree", "賛成する"),
        WordRecord(3, "advise", "～に忠告する"),
    ]
    assert [reason for _, reason in rejected] == [
        "id must be positive",
        "empty word",
        "id is not a number",
        "not an object",
    ]


@pytest.mark.parametrize("raw", [{"id": 1, "word": "a", "meaning": "b"}, "text", None, []])
def test_json_not_a_usable_array(raw):
    with pytest.raises(MalformedInput):
        import_from_json_array(raw)


def test_json_text_errors():
    with pytest.raises(MalformedInput):
        import_from_json_text("   ")
    with pytest.raises(MalformedInput):
        import_from_json_text("[{]")


def test_dump_uses_dataset_keys():
    text = dump_records([WordRecord(1, "agree", "①賛成する")])

    assert json.loads(text) == [{"id": 1, "word": "agree", "meaning": "①賛成する"}]
    assert "①" in text


def test_json_number_past_int_digit_limit_is_malformed():
    text = '[{"id": ' + "9" * 5000 + ', "word": "w", "meaning": "m"}]'

    with pytest.raises(MalformedInput):
        import_from_json_text(text)


def test_json_string_id_past_int_digit_limit_rejected():
    raw = [{"id": "9" * 5000, "word": "w", "meaning": "m"}, {"id": 1, "word": "a", "meaning": "b"}]
    rejected = []

    assert [r.id for r in import_from_json_array(raw, rejected=rejected)] == [1]
    assert rejected[0][1] == "id is not a number"
