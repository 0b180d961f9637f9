"""Text rendering of quiz cards and the terminal command loop."""

from leapquiz.output.cards import DIRECTION_LABELS, describe_selection, render_card
from leapquiz.output.terminal import HELP_TEXT, run_command, run_loop

__all__ = [
    "DIRECTION_LABELS",
    "describe_selection",
    "render_card",
    "HELP_TEXT",
    "run_command",
    "run_loop",
]
