#!/usr/bin/env python3
"""Scrape the LEAP word table into the bundled dataset.

Steps:
1. Fetch the source page (retried with backoff)
2. Extract and validate the table rows
3. Write words.json (a JSON array of {id, word, meaning})

Usage:
    python scrape.py --verbose
    python scrape.py --url https://example.com/list/ --output words.json
"""

import argparse
from pathlib import Path
from typing import List, Optional

from leapquiz.common.config import CONFIG_FILENAME, load_config
from leapquiz.common.errors import SourceUnavailable
from leapquiz.common.logging import log_error, log_info
from leapquiz.common.utils import ensure_dir
from leapquiz.input.fetch import fetch_html
from leapquiz.input.importers import dump_records
from leapquiz.input.normalize import check_record_count, parse_word_table


def write_words(path: Path, text: str) -> None:
    ensure_dir(path.parent)
    tmp_path = path.with_suffix(".tmp")
    tmp_path.write_text(text + "\n", encoding="utf-8")
    tmp_path.replace(path)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the scraper."""
    parser = argparse.ArgumentParser(
        description="Scrape the LEAP word list table into words.json"
    )
    parser.add_argument(
        "--config",
        type=str,
        help=f"Path to {CONFIG_FILENAME} file",
    )
    parser.add_argument(
        "--url",
        help="Source page URL (overrides config)",
    )
    parser.add_argument(
        "--output",
        help="Output JSON path (overrides config)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every skipped row",
    )
    args = parser.parse_args(argv)

    config_path = Path(args.config) if args.config else None
    if config_path is not None and not config_path.exists():
        log_error("scrape", f"Config file does not exist: {config_path}")
        return 2

    try:
        config = load_config(config_path)
    except ValueError as e:
        log_error("scrape", f"Invalid config: {e}")
        return 2

    url = args.url or config.source_url
    out_path = Path(args.output) if args.output else config.output_path

    print(f"[scrape] Fetching: {url}")
    try:
        html = fetch_html(url, timeout=config.request_timeout, max_retries=config.max_retries)
    except SourceUnavailable as e:
        log_error("scrape", str(e))
        return 1

    words = parse_word_table(html, debug=args.debug)
    print(f"[scrape] Extracted {len(words)} words")
    check_record_count(len(words), config.min_expected_records)

    try:
        write_words(out_path, dump_records(words))
    except OSError as e:
        log_error("scrape", f"Could not write {out_path}: {e}")
        return 1

    log_info(args.verbose, "file", f"First id: {words[0].id if words else '-'}, last id: {words[-1].id if words else '-'}")
    print(f"[scrape] Saved: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
