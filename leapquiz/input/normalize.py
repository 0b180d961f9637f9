"""Cell normalisation and record validation.

Turns raw cell triples into WordRecord objects:
- Decodes the fixed entity set (&nbsp; &amp; &lt; &gt; &quot; &#39;)
- Collapses whitespace runs to one space and trims
- Rejects rows whose id is not a positive integer or whose word/meaning is empty
"""

import re
from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple

from leapquiz.common.logging import log_debug, log_warning
from leapquiz.common.utils import parse_leading_int
from leapquiz.input.table import HEADER_TOKENS, RawRow, iter_table_rows
from leapquiz.schema.base import WordRecord


MIN_EXPECTED_RECORDS = 2000

# Applied in order; &amp; before the others matches the source page's escaping
ENTITY_REPLACEMENTS: Tuple[Tuple[str, str], ...] = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)

WHITESPACE_RE = re.compile(r"\s+")

Rejection = Tuple[object, str]


def decode_entities(text: str) -> str:
    for entity, replacement in ENTITY_REPLACEMENTS:
        text = text.replace(entity, replacement)
    return text


def clean_cell(text: str) -> str:
    """Decode entities, collapse whitespace, trim."""
    return WHITESPACE_RE.sub(" ", decode_entities(text)).strip()


def validate_fields(raw_id: object, headword: str, gloss: str) -> Tuple[Optional[WordRecord], str]:
    """Build a record from already-cleaned fields.

    Returns (record, "") on success or (None, reason) on rejection.
    """
    record_id = parse_leading_int(raw_id)
    if record_id is None:
        return None, "id is not a number"
    if record_id <= 0:
        return None, "id must be positive"
    if not headword:
        return None, "empty word"
    if not gloss:
        return None, "empty meaning"
    return WordRecord(id=record_id, headword=headword, gloss=gloss), ""


def normalize_row(cells: Sequence[str]) -> Tuple[Optional[WordRecord], str]:
    """Clean a raw (id, headword, gloss) triple and validate it."""
    raw_id, headword, gloss = (clean_cell(c) for c in cells[:3])
    return validate_fields(raw_id, headword, gloss)


def collect_records(
    items: Iterable[object],
    build: Callable[[object], Tuple[Optional[WordRecord], str]],
    rejected: Optional[List[Rejection]] = None,
    debug: bool = False,
) -> List[WordRecord]:
    """Run ``build`` over raw items and return accepted records sorted by id.

    Rejected items are dropped; pass ``rejected`` to collect (item, reason)
    pairs. A repeated id keeps its first occurrence.
    """
    records: List[WordRecord] = []
    seen_ids: Set[int] = set()
    for item in items:
        record, reason = build(item)
        if record is not None and record.id in seen_ids:
            record, reason = None, f"duplicate id {record.id}"
        if record is None:
            log_debug(debug, f"Skipped {item!r}: {reason}")
            if rejected is not None:
                rejected.append((item, reason))
            continue
        seen_ids.add(record.id)
        records.append(record)
    records.sort(key=lambda r: r.id)
    return records


def records_from_rows(
    rows: Iterable[RawRow],
    rejected: Optional[List[Rejection]] = None,
    debug: bool = False,
) -> List[WordRecord]:
    """Validate raw cell triples, sorted by id."""
    return collect_records(rows, normalize_row, rejected=rejected, debug=debug)


def parse_word_table(
    html: str,
    rejected: Optional[List[Rejection]] = None,
    header_tokens: Sequence[str] = HEADER_TOKENS,
    debug: bool = False,
) -> List[WordRecord]:
    """Extract every valid record from the tables in ``html``, ordered by id."""
    return records_from_rows(iter_table_rows(html, header_tokens), rejected=rejected, debug=debug)


def check_record_count(count: int, minimum: int = MIN_EXPECTED_RECORDS, tag: str = "scrape") -> bool:
    """Warn when fewer records than expected were extracted. Returns True if enough."""
    if count < minimum:
        log_warning(
            tag,
            f"Only {count} words extracted (expected at least {minimum}); "
            "the page structure may have changed.",
        )
        return False
    return True
