"""Logging helpers.

Messages are plain print lines tagged with bracketed prefixes, e.g.
``[scrape] Fetching ...`` or ``[store] [warn] cache unreadable``.
"""

import sys


def log_debug(enabled: bool, message: str) -> None:
    """Print a debug message if debugging is enabled."""
    if enabled:
        print(f"[debug] {message}")


def log_info(verbose: bool, tag: str, message: str) -> None:
    """Print a tagged progress message if verbose."""
    if verbose:
        print(f"[{tag}] {message}")


def log_warning(tag: str, message: str) -> None:
    """Print a tagged warning to stderr."""
    print(f"[{tag}] [warn] {message}", file=sys.stderr)


def log_error(tag: str, message: str) -> None:
    """Print a tagged error to stderr."""
    print(f"[{tag}] [error] {message}", file=sys.stderr)
