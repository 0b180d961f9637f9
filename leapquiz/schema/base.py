"""Base record types and constants shared by the quiz core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


# Text card format constants
FRONT_BACK_DIVIDER: str = "---"

# Circled-digit sub-sense markers, ① through ⑩
SUB_SENSE_MARKERS: str = "①②③④⑤⑥⑦⑧⑨⑩"


class Direction(str, Enum):
    """Which side of a record is shown as the prompt."""
    WORD_TO_MEANING = "word_to_meaning"
    MEANING_TO_WORD = "meaning_to_word"

    def flipped(self) -> "Direction":
        if self is Direction.WORD_TO_MEANING:
            return Direction.MEANING_TO_WORD
        return Direction.WORD_TO_MEANING


@dataclass(frozen=True)
class WordRecord:
    """One entry of the word list.

    ``gloss`` is kept verbatim, including sub-sense markers.
    """
    id: int
    headword: str
    gloss: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialise in the dataset format (id/word/meaning)."""
        return {"id": self.id, "word": self.headword, "meaning": self.gloss}


__all__ = [
    "FRONT_BACK_DIVIDER",
    "SUB_SENSE_MARKERS",
    "Direction",
    "WordRecord",
]
