"""Word store, range/partition selection and quiz session state."""

from leapquiz.quiz.store import WordStore
from leapquiz.quiz.selector import (
    RangeSelector,
    SelectionState,
    combine_partitions,
    resolve_partition,
)
from leapquiz.quiz.controller import QuizController
from leapquiz.quiz.formatting import split_gloss
from leapquiz.quiz.session import QuizSession, load_bundled_words

__all__ = [
    "WordStore",
    "RangeSelector",
    "SelectionState",
    "combine_partitions",
    "resolve_partition",
    "QuizController",
    "split_gloss",
    "QuizSession",
    "load_bundled_words",
]
