"""Quiz session: one object owning the word store, selection and question state.

The host (terminal loop, tests) constructs a session at startup and calls its
methods; nothing is held at module level.
"""

import json
import random
import time
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Tuple

from leapquiz.common.errors import EmptySelection, MalformedInput, PersistenceFailure
from leapquiz.common.logging import log_info, log_warning
from leapquiz.input.importers import dump_records, import_from_html, import_from_json_array, import_from_json_text
from leapquiz.quiz.controller import QuizController
from leapquiz.quiz.selector import RangeSelector, SelectionState
from leapquiz.quiz.store import WordStore
from leapquiz.schema.base import Direction, WordRecord


WORD_DATA_KEY = "leapWordData"
WORD_DATA_TIMESTAMP_KEY = "leapWordDataTimestamp"
SERVED_IDS_KEY = "leapServedIds"
SERVED_HISTORY_LIMIT = 50

_PERSISTENCE_ERRORS = (OSError, ValueError, PersistenceFailure)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


def load_bundled_words(path: Path) -> List[WordRecord]:
    """Read the bundled dataset (a JSON array of {id, word, meaning})."""
    return import_from_json_text(path.read_text(encoding="utf-8"))


class QuizSession:
    """Single-user quiz session over a swappable word list."""

    def __init__(
        self,
        storage: Optional[KeyValueStore] = None,
        direction: Direction = Direction.WORD_TO_MEANING,
        rng: Optional[random.Random] = None,
        verbose: bool = False,
    ):
        self.storage = storage
        self.verbose = verbose
        self.store = WordStore()
        self.selector = RangeSelector(self.store)
        self.controller = QuizController(direction, rng=rng)
        self.served_ids: List[int] = []

    # ---- Read-only views ----
    @property
    def subset(self) -> Tuple[WordRecord, ...]:
        return self.selector.subset

    @property
    def selection(self) -> SelectionState:
        return self.selector.state

    @property
    def current_record(self) -> Optional[WordRecord]:
        return self.controller.current_record

    @property
    def answer_revealed(self) -> bool:
        return self.controller.answer_revealed

    @property
    def direction(self) -> Direction:
        return self.controller.direction

    # ---- Persistence (never fatal) ----
    def _kv_get(self, key: str) -> Optional[str]:
        if self.storage is None:
            return None
        try:
            return self.storage.get(key)
        except _PERSISTENCE_ERRORS as e:
            log_warning("store", f"Could not read {key}: {e}")
            return None

    def _kv_set(self, key: str, value: str) -> None:
        if self.storage is None:
            return
        try:
            self.storage.set(key, value)
        except _PERSISTENCE_ERRORS as e:
            log_warning("store", f"Could not save {key}: {e}")

    def _kv_remove(self, key: str) -> None:
        if self.storage is None:
            return
        try:
            self.storage.remove(key)
        except _PERSISTENCE_ERRORS as e:
            log_warning("store", f"Could not remove {key}: {e}")

    def cached_import(self) -> Optional[List[WordRecord]]:
        """Word list saved by the last import, or None if absent/corrupt."""
        text = self._kv_get(WORD_DATA_KEY)
        if not text:
            return None
        try:
            return import_from_json_text(text)
        except MalformedInput as e:
            log_warning("store", f"Ignoring cached word list: {e}")
            return None

    def _remember_import(self, records: Sequence[WordRecord]) -> None:
        self._kv_set(WORD_DATA_KEY, dump_records(list(records), indent=None))
        self._kv_set(WORD_DATA_TIMESTAMP_KEY, str(int(time.time() * 1000)))

    def _record_served(self, record: Optional[WordRecord]) -> None:
        if record is None:
            return
        self.served_ids.append(record.id)
        del self.served_ids[:-SERVED_HISTORY_LIMIT]
        self._kv_set(SERVED_IDS_KEY, json.dumps(self.served_ids))

    # ---- Lifecycle ----
    def start(self, bundled: Sequence[WordRecord]) -> None:
        """Populate the store, preferring a cached import over the bundled data."""
        cached = self.cached_import()
        if cached:
            log_info(self.verbose, "store", f"Using cached import ({len(cached)} words)")
            records: Sequence[WordRecord] = cached
        else:
            records = bundled
        self.served_ids = self._load_served_ids()
        self.store.load(records)
        self.selector.reset(self.store)
        self.controller.clear()
        self.next()

    def _load_served_ids(self) -> List[int]:
        text = self._kv_get(SERVED_IDS_KEY)
        if not text:
            return []
        try:
            data = json.loads(text)
        except ValueError as e:
            log_warning("store", f"Ignoring served history: {e}")
            return []
        if not isinstance(data, list):
            return []
        return [i for i in data if isinstance(i, int) and not isinstance(i, bool)][-SERVED_HISTORY_LIMIT:]

    def replace_words(self, records: Sequence[WordRecord]) -> None:
        """Swap in a new word list and re-apply the active filter against it.

        If the filter now matches nothing the session falls back to the full
        list and EmptySelection is raised for the host to report.
        """
        self.store.load(records)
        try:
            self.selector.reapply(self.store)
        except EmptySelection:
            self.selector.reset(self.store)
            self.controller.clear()
            self.next()
            raise
        self.controller.clear()
        self.next()

    def import_html(self, html: str) -> int:
        records = import_from_html(html)
        self._remember_import(records)
        log_info(self.verbose, "import", f"Imported {len(records)} words from HTML")
        self.replace_words(records)
        return len(records)

    def import_json(self, raw: object) -> int:
        """Import a JSON array, given as text or already decoded."""
        if isinstance(raw, str):
            records = import_from_json_text(raw)
        else:
            records = import_from_json_array(raw)
        self._remember_import(records)
        log_info(self.verbose, "import", f"Imported {len(records)} words from JSON")
        self.replace_words(records)
        return len(records)

    def clear_import(self, bundled: Sequence[WordRecord]) -> None:
        """Forget the cached import and go back to the bundled list."""
        self._kv_remove(WORD_DATA_KEY)
        self._kv_remove(WORD_DATA_TIMESTAMP_KEY)
        self.replace_words(bundled)

    # ---- Filtering ----
    def apply_range(self, start: object, end: object) -> int:
        subset = self.selector.apply_explicit_range(self.store, start, end)
        self.next()
        return len(subset)

    def select_partitions(self, keys: Sequence[str]) -> int:
        subset = self.selector.toggle_combined_partitions(keys, self.store)
        self.next()
        return len(subset)

    def toggle_partition(self, key: str) -> int:
        """Add or remove one part from the active selection."""
        keys = list(self.selection.active_partitions)
        if key in keys:
            keys.remove(key)
        else:
            keys.append(key)
        return self.select_partitions(keys)

    def reset(self) -> int:
        self.selector.reset(self.store)
        self.next()
        return len(self.subset)

    # ---- Questions ----
    def next(self) -> Optional[WordRecord]:
        record = self.controller.next(self.subset)
        self._record_served(record)
        return record

    def set_direction(self, direction: Direction) -> Optional[WordRecord]:
        record = self.controller.set_direction(direction, self.subset)
        self._record_served(record)
        return record

    def toggle_direction(self) -> Optional[WordRecord]:
        return self.set_direction(self.direction.flipped())

    def toggle_answer(self) -> bool:
        return self.controller.toggle_answer()
