from __future__ import annotations

from leapquiz.common.cache import FileStore, MemoryStore, get_cache_path, sanitize_filename


def test_file_store_round_trip(tmp_path):
    store = FileStore(tmp_path / "cache" / "nested")

    assert store.get("leapWordData") is None
    store.set("leapWordData", '[{"id": 1}]')
    assert store.get("leapWordData") == '[{"id": 1}]'

    store.remove("leapWordData")
    store.remove("leapWordData")
    assert store.get("leapWordData") is None


def test_keys_are_sanitized(tmp_path):
    assert sanitize_filename('a/b:c*"d') == "a_b_c__d"
    assert get_cache_path(tmp_path, "x/y") == tmp_path / "x_y.txt"


def test_memory_store():
    store = MemoryStore({"k": "v"})

    assert store.get("k") == "v"
    store.remove("k")
    store.remove("missing")
    assert store.get("k") is None
