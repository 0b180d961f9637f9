from __future__ import annotations

from typing import Iterable, List

from leapquiz.schema.base import WordRecord


def make_records(ids: Iterable[int]) -> List[WordRecord]:
    return [WordRecord(id=i, headword=f"word{i}", gloss=f"meaning{i}") for i in ids]
