"""User-supplied word list imports (HTML table or JSON array)."""

import json
from typing import List, Optional, Tuple

from leapquiz.common.errors import MalformedInput
from leapquiz.input.normalize import Rejection, collect_records, parse_word_table, validate_fields
from leapquiz.schema.base import WordRecord


HEADWORD_KEYS = ("word", "headword")
GLOSS_KEYS = ("meaning", "gloss")


def _first_text(item: dict, keys) -> str:
    for key in keys:
        value = item.get(key)
        if isinstance(value, str):
            return value.strip()
    return ""


def record_from_object(item: object) -> Tuple[Optional[WordRecord], str]:
    """Validate one {id, word, meaning} object against the record rules."""
    if not isinstance(item, dict):
        return None, "not an object"
    return validate_fields(item.get("id"), _first_text(item, HEADWORD_KEYS), _first_text(item, GLOSS_KEYS))


def import_from_html(
    html: str,
    rejected: Optional[List[Rejection]] = None,
    debug: bool = False,
) -> List[WordRecord]:
    """Parse pasted HTML. Raises MalformedInput when nothing valid is found."""
    records = parse_word_table(html, rejected=rejected, debug=debug)
    if not records:
        raise MalformedInput("No valid words found in the HTML. Check that it contains the word table.")
    return records


def import_from_json_array(
    raw: object,
    rejected: Optional[List[Rejection]] = None,
    debug: bool = False,
) -> List[WordRecord]:
    """Validate an already-decoded JSON value.

    Raises MalformedInput if ``raw`` is not a list or yields no valid records.
    """
    if not isinstance(raw, list):
        raise MalformedInput("JSON data must be an array of {id, word, meaning} objects.")
    records = collect_records(raw, record_from_object, rejected=rejected, debug=debug)
    if not records:
        raise MalformedInput("No valid words found in the JSON array.")
    return records


def import_from_json_text(
    text: str,
    rejected: Optional[List[Rejection]] = None,
    debug: bool = False,
) -> List[WordRecord]:
    """Decode and validate JSON text."""
    if not text.strip():
        raise MalformedInput("No data to import.")
    try:
        raw = json.loads(text)
    except ValueError as e:
        raise MalformedInput(f"Invalid JSON: {e}") from e
    return import_from_json_array(raw, rejected=rejected, debug=debug)


def dump_records(records: List[WordRecord], indent: Optional[int] = 2) -> str:
    """Serialise records in the dataset format."""
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False, indent=indent)
