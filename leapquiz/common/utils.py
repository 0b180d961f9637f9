"""Common utility functions shared across the library."""

import os
import re
from pathlib import Path
from typing import Iterable, List, Optional, Set


_DEF_ENV_LOADED = False

_LEADING_INT_RE = re.compile(r"[+-]?[0-9]+")


def _load_env_file() -> None:
    """Load environment variables from .env file if present."""
    global _DEF_ENV_LOADED
    if _DEF_ENV_LOADED:
        return
    _DEF_ENV_LOADED = True
    try:
        # Look for .env in the project root, then the package root
        here = Path(__file__).parent
        candidates = [
            here.parent.parent / ".env",
            here.parent / ".env",
        ]
        for p in candidates:
            if not p.exists():
                continue
            for raw in p.read_text(encoding="utf-8", errors="ignore").splitlines():
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                if line.startswith("export "):
                    line = line[len("export "):].strip()
                if "=" not in line:
                    continue
                k, v = line.split("=", 1)
                key = k.strip()
                val = v.strip().strip('"').strip("'")
                if key and os.environ.get(key) is None:
                    os.environ[key] = val
    except OSError:
        pass


def parse_leading_int(text: object) -> Optional[int]:
    """Parse a base-10 integer from the start of ``text``.

    Leading whitespace is ignored and trailing garbage is tolerated
    ("12." -> 12, "7 words" -> 7). Returns None when no digits lead the text.
    Real ints pass through; bools and floats with a fraction are rejected.
    """
    if isinstance(text, bool):
        return None
    if isinstance(text, int):
        return text
    if isinstance(text, float):
        return int(text) if text.is_integer() else None
    if not isinstance(text, str):
        return None
    match = _LEADING_INT_RE.match(text.strip())
    if not match:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        # Past the interpreter's int string-conversion digit limit
        return None


def unique_preserve_order(items: Iterable[str]) -> List[str]:
    """Return unique items while preserving order."""
    seen: Set[str] = set()
    ordered: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def ensure_dir(path: Path) -> None:
    """Create directory if it doesn't exist."""
    path.mkdir(parents=True, exist_ok=True)
