#!/usr/bin/env python3
"""Interactive LEAP vocabulary quiz in the terminal.

Usage:
    python quiz.py
    python quiz.py --parts part1 part3 --mode meaning_to_word
    python quiz.py --range 10 50
    python quiz.py --import-html saved_page.html
"""

import argparse
import random
from pathlib import Path
from typing import List, Optional

from leapquiz.common.cache import FileStore, MemoryStore
from leapquiz.common.config import CONFIG_FILENAME, DIRECTIONS, load_config
from leapquiz.common.errors import MalformedInput, QuizError
from leapquiz.common.logging import log_error, log_warning
from leapquiz.output.terminal import run_loop
from leapquiz.quiz.session import QuizSession, load_bundled_words
from leapquiz.schema.base import Direction
from leapquiz.schema.partitions import PARTITIONS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LEAP vocabulary quiz")
    parser.add_argument("--config", type=str, help=f"Path to {CONFIG_FILENAME} file")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--range", nargs=2, metavar=("START", "END"), help="Quiz on No. START..END")
    group.add_argument("--parts", nargs="+", choices=list(PARTITIONS), help="Quiz on one or more parts")
    parser.add_argument("--mode", choices=DIRECTIONS, help="Question direction")
    imports = parser.add_mutually_exclusive_group()
    imports.add_argument("--import-html", type=str, help="Import words from a saved HTML page")
    imports.add_argument("--import-json", type=str, help="Import words from a JSON array file")
    parser.add_argument("--no-cache", action="store_true", help="Do not read or write the local cache")
    parser.add_argument("--seed", type=int, help="Random seed (repeatable question order)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config_path = Path(args.config) if args.config else None
    if config_path is not None and not config_path.exists():
        log_error("quiz", f"Config file does not exist: {config_path}")
        return 2
    try:
        config = load_config(config_path)
    except ValueError as e:
        log_error("quiz", f"Invalid config: {e}")
        return 2

    storage = MemoryStore() if args.no_cache else FileStore(config.cache_dir, verbose=args.verbose, log_prefix="store")
    session = QuizSession(
        storage=storage,
        direction=Direction(args.mode or config.direction),
        rng=random.Random(args.seed) if args.seed is not None else None,
        verbose=args.verbose,
    )

    try:
        bundled = load_bundled_words(config.output_path)
    except (OSError, MalformedInput) as e:
        log_warning("quiz", f"Bundled word list unavailable ({e})")
        bundled = []
    session.start(bundled)

    try:
        if args.import_html:
            session.import_html(Path(args.import_html).read_text(encoding="utf-8"))
        elif args.import_json:
            session.import_json(Path(args.import_json).read_text(encoding="utf-8"))
    except OSError as e:
        log_error("quiz", f"Could not read import file: {e}")
        return 1
    except QuizError as e:
        log_error("import", str(e))
        return 1

    if len(session.store) == 0:
        log_error("quiz", "No words loaded. Run scrape.py or pass --import-html/--import-json.")
        return 1

    try:
        if args.range:
            session.apply_range(*args.range)
        elif args.parts:
            session.select_partitions(args.parts)
    except QuizError as e:
        log_error("quiz", str(e))
        return 1

    run_loop(session)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
