"""Current-question state: selected record, answer reveal and direction."""

import random
from typing import Optional, Sequence

from leapquiz.schema.base import Direction, WordRecord


class QuizController:
    """Picks questions uniformly at random from the subset it is given."""

    def __init__(self, direction: Direction = Direction.WORD_TO_MEANING, rng: Optional[random.Random] = None):
        self.direction = Direction(direction)
        self.current_record: Optional[WordRecord] = None
        self.answer_revealed = False
        self._rng = rng or random.Random()

    def select_random(self, subset: Sequence[WordRecord]) -> Optional[WordRecord]:
        """Pick a new current record. An empty subset changes nothing and returns None."""
        if not subset:
            return None
        self.current_record = subset[self._rng.randrange(len(subset))]
        self.answer_revealed = False
        return self.current_record

    def clear(self) -> None:
        self.current_record = None
        self.answer_revealed = False

    def set_direction(self, direction: Direction, subset: Sequence[WordRecord]) -> Optional[WordRecord]:
        """Switch direction; always deals a fresh question."""
        self.direction = Direction(direction)
        self.answer_revealed = False
        return self.select_random(subset)

    def toggle_answer(self) -> bool:
        self.answer_revealed = not self.answer_revealed
        return self.answer_revealed

    def next(self, subset: Sequence[WordRecord]) -> Optional[WordRecord]:
        return self.select_random(subset)
