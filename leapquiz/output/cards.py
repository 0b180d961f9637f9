"""Card and status rendering for text hosts."""

from typing import List, Optional

from leapquiz.quiz.formatting import split_gloss
from leapquiz.quiz.selector import SelectionState
from leapquiz.schema.base import FRONT_BACK_DIVIDER, Direction, WordRecord
from leapquiz.schema.partitions import PARTITIONS


DIRECTION_LABELS = {
    Direction.WORD_TO_MEANING: "Word -> Meaning",
    Direction.MEANING_TO_WORD: "Meaning -> Word",
}


def render_card(record: Optional[WordRecord], direction: Direction, revealed: bool) -> str:
    """Render the current question; the answer follows the divider when revealed."""
    if record is None:
        return "(no words to show)"

    meaning_lines = split_gloss(record.gloss)
    parts: List[str] = [f"No. {record.id}"]
    if direction == Direction.WORD_TO_MEANING:
        prompt, answer = [record.headword], meaning_lines
    else:
        prompt, answer = meaning_lines, [record.headword]
    parts.extend(prompt)
    if revealed:
        parts.append(FRONT_BACK_DIVIDER)
        parts.extend(answer)
    return "\n".join(parts)


def describe_selection(state: SelectionState, subset_size: int, total: int) -> str:
    """One-line summary of the active filter."""
    if not state.is_active:
        return f"All {total} words, random order"
    if state.active_partitions:
        labels = " + ".join(PARTITIONS[key].label for key in state.active_partitions)
        return f"{labels} ({subset_size} words)"
    start, end = state.active_range
    return f"No. {start}-{end} ({subset_size} words)"
