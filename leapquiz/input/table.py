"""Raw row extraction from HTML table markup.

Rows are found with non-greedy, case-insensitive patterns rather than a full
HTML parser; the source page is a single known table layout.
"""

import re
from typing import Iterator, List, Sequence, Tuple


RawRow = Tuple[str, str, str]

TABLE_ROW_RE = re.compile(r"<tr[^>]*>[\s\S]*?</tr>", re.IGNORECASE)
TABLE_CELL_RE = re.compile(r"<td[^>]*>([\s\S]*?)</td>", re.IGNORECASE)
HEADER_CELL_RE = re.compile(r"<th\b", re.IGNORECASE)
TAG_RE = re.compile(r"<[^>]+>")

# Column labels of the source table: "No", "単語" (word), "意味" (meaning)
HEADER_TOKENS: Tuple[str, ...] = ("no", "単語", "意味")


def is_header_row(row: str, header_tokens: Sequence[str] = HEADER_TOKENS) -> bool:
    """True for rows with <th> cells, or <td> rows carrying every column label."""
    if HEADER_CELL_RE.search(row):
        return True
    lowered = row.lower()
    return all(token.lower() in lowered for token in header_tokens)


def extract_cells(row: str) -> List[str]:
    """Return the tag-stripped inner text of every <td> in the row."""
    return [TAG_RE.sub("", m.group(1)) for m in TABLE_CELL_RE.finditer(row)]


def iter_table_rows(html: str, header_tokens: Sequence[str] = HEADER_TOKENS) -> Iterator[RawRow]:
    """Yield (id, headword, gloss) cell triples in document order.

    Header rows are skipped; rows with fewer than three cells are dropped and
    extra cells beyond the third are ignored. Cell text is not yet normalised.
    """
    for match in TABLE_ROW_RE.finditer(html):
        row = match.group(0)
        if is_header_row(row, header_tokens):
            continue
        cells = extract_cells(row)
        if len(cells) >= 3:
            yield cells[0], cells[1], cells[2]
