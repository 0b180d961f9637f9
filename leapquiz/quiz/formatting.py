"""Gloss formatting for display."""

import re
from typing import List

from leapquiz.schema.base import SUB_SENSE_MARKERS


_MARKER_SPLIT_RE = re.compile(f"(?=[{SUB_SENSE_MARKERS}])")


def split_gloss(gloss: str) -> List[str]:
    """Split a gloss into display lines, one per circled-digit sub-sense.

    Text before the first marker becomes its own line; blank lines are dropped.
    A gloss without markers is a single trimmed line.

    >>> split_gloss("[自] ①賛成する ②一致する")
    ['[自]', '①賛成する', '②一致する']
    """
    if not gloss:
        return [""]
    lines = [part.strip() for part in _MARKER_SPLIT_RE.split(gloss)]
    lines = [line for line in lines if line]
    return lines or [gloss]
