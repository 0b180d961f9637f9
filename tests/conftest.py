from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

# Make package importable when running tests from repository root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from leapquiz.common.cache import MemoryStore  # noqa: E402
from leapquiz.quiz.session import QuizSession  # noqa: E402
from leapquiz.quiz.store import WordStore  # noqa: E402
from tests.helpers import make_records  # noqa: E402


WORD_TABLE_HTML = """
<html><body>
<table class="leap">
  <thead><tr><th>No</th><th>単語</th><th>意味</th></tr></thead>
  <tbody>
    <tr><td>No</td><td>単語</td><td>意味</td></tr>
    <tr class="odd"><td>1</td><td><strong>agree</strong></td><td>[自] ①賛成する ②意見が一致する</td></tr>
    <TR><TD>2</TD><TD>oppose</TD><TD>[他] ～に反対する</TD></TR>
    <tr>
      <td>3</td>
      <td><a href="/advise">advise</a></td>
      <td>[他]&nbsp;&nbsp;～に忠告する</td>
    </tr>
  </tbody>
</table>
</body></html>
"""


@pytest.fixture
def word_table_html() -> str:
    return WORD_TABLE_HTML


@pytest.fixture
def big_store() -> WordStore:
    """Store with ids 1..2200, the shape of the real list."""
    return WordStore(make_records(range(1, 2201)))


@pytest.fixture
def session() -> QuizSession:
    s = QuizSession(storage=MemoryStore(), rng=random.Random(1234))
    s.start(make_records(range(1, 2201)))
    return s
