"""Key-value persistence for imported word lists and quiz history.

Values are strings; each key maps to one file under the cache directory.
"""

import re
from pathlib import Path
from typing import Dict, Optional

from leapquiz.common.utils import ensure_dir


def sanitize_filename(name: str) -> str:
    """Sanitize a string for use as a filename.

    Replaces invalid characters with underscores.
    """
    return re.sub(r'[/\\:*?"<>|]', '_', name)


def get_cache_path(cache_dir: Path, key: str, sanitize: bool = True) -> Path:
    """Get the cache file path for a key."""
    safe_key = sanitize_filename(key) if sanitize else key
    return cache_dir / f"{safe_key}.txt"


class FileStore:
    """File-backed store with get/set/remove.

    Errors (permissions, full disk) propagate as OSError; callers decide
    whether they are fatal.
    """

    def __init__(self, cache_dir: Path, verbose: bool = False, log_prefix: str = "cache"):
        self.cache_dir = Path(cache_dir)
        self.verbose = verbose
        self.log_prefix = log_prefix

    def get(self, key: str) -> Optional[str]:
        cache_path = get_cache_path(self.cache_dir, key)
        if not cache_path.exists():
            return None
        value = cache_path.read_text(encoding="utf-8")
        if self.verbose:
            print(f"[{self.log_prefix}] [cache] Loaded: {key}")
        return value

    def set(self, key: str, value: str) -> None:
        ensure_dir(self.cache_dir)
        cache_path = get_cache_path(self.cache_dir, key)
        tmp_path = cache_path.with_suffix(".tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(cache_path)
        if self.verbose:
            print(f"[{self.log_prefix}] [cache] Saved: {key}")

    def remove(self, key: str) -> None:
        cache_path = get_cache_path(self.cache_dir, key)
        cache_path.unlink(missing_ok=True)
        if self.verbose:
            print(f"[{self.log_prefix}] [cache] Removed: {key}")


class MemoryStore:
    """In-memory store used with --no-cache."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


__all__ = [
    "sanitize_filename",
    "get_cache_path",
    "FileStore",
    "MemoryStore",
]
