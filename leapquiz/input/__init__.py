"""Word-list extraction: HTML table parsing, validation and imports."""

from leapquiz.input.table import (
    HEADER_TOKENS,
    iter_table_rows,
    extract_cells,
    is_header_row,
)
from leapquiz.input.normalize import (
    MIN_EXPECTED_RECORDS,
    clean_cell,
    decode_entities,
    normalize_row,
    parse_word_table,
    check_record_count,
)
from leapquiz.input.importers import (
    import_from_html,
    import_from_json_array,
    import_from_json_text,
    dump_records,
)

__all__ = [
    # table
    "HEADER_TOKENS",
    "iter_table_rows",
    "extract_cells",
    "is_header_row",
    # normalize
    "MIN_EXPECTED_RECORDS",
    "clean_cell",
    "decode_entities",
    "normalize_row",
    "parse_word_table",
    "check_record_count",
    # importers
    "import_from_html",
    "import_from_json_array",
    "import_from_json_text",
    "dump_records",
]
