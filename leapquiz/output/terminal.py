"""Command dispatcher for the interactive terminal quiz."""

from typing import Callable, Dict, List, Optional

from leapquiz.common.errors import QuizError
from leapquiz.output.cards import DIRECTION_LABELS, describe_selection, render_card
from leapquiz.quiz.session import QuizSession
from leapquiz.schema.partitions import PARTITIONS


HELP_TEXT = """Commands:
  <enter>, n         next word
  a                  show/hide the answer
  m                  switch direction (word/meaning)
  r START END        quiz on No. START..END
  p KEY              toggle a part ({parts})
  x                  clear range/parts
  s                  show the current selection
  h                  help
  q                  quit""".format(parts=", ".join(PARTITIONS))


def show_card(session: QuizSession) -> str:
    return render_card(session.current_record, session.direction, session.answer_revealed)


def show_status(session: QuizSession) -> str:
    summary = describe_selection(session.selection, len(session.subset), len(session.store))
    return f"{summary} | {DIRECTION_LABELS[session.direction]}"


def _next(session: QuizSession, args: List[str]) -> str:
    session.next()
    return show_card(session)


def _answer(session: QuizSession, args: List[str]) -> str:
    session.toggle_answer()
    return show_card(session)


def _mode(session: QuizSession, args: List[str]) -> str:
    session.toggle_direction()
    return show_status(session) + "\n" + show_card(session)


def _range(session: QuizSession, args: List[str]) -> str:
    start = args[0] if len(args) > 0 else None
    end = args[1] if len(args) > 1 else None
    session.apply_range(start, end)
    return show_status(session) + "\n" + show_card(session)


def _part(session: QuizSession, args: List[str]) -> str:
    if not args:
        return "Usage: p KEY (one of " + ", ".join(PARTITIONS) + ")"
    key = args[0] if args[0] in PARTITIONS else f"part{args[0]}"
    session.toggle_partition(key)
    return show_status(session) + "\n" + show_card(session)


def _reset(session: QuizSession, args: List[str]) -> str:
    session.reset()
    return show_status(session) + "\n" + show_card(session)


def _status(session: QuizSession, args: List[str]) -> str:
    return show_status(session)


def _help(session: QuizSession, args: List[str]) -> str:
    return HELP_TEXT


COMMANDS: Dict[str, Callable[[QuizSession, List[str]], str]] = {
    "": _next,
    "n": _next,
    "a": _answer,
    "m": _mode,
    "r": _range,
    "p": _part,
    "x": _reset,
    "s": _status,
    "h": _help,
}


def run_command(session: QuizSession, line: str) -> Optional[str]:
    """Execute one input line. Returns the text to print, or None to quit.

    Quiz errors are reported as text; the session state is left unchanged.
    """
    words = line.strip().split()
    name = words[0].lower() if words else ""
    if name in ("q", "quit", "exit"):
        return None
    handler = COMMANDS.get(name)
    if handler is None:
        return f"Unknown command: {name!r} (h for help)"
    try:
        return handler(session, words[1:])
    except QuizError as e:
        return f"[error] {e}"


def run_loop(session: QuizSession, read: Callable[[str], str] = input, write: Callable[[str], None] = print) -> None:
    write(show_status(session))
    write(show_card(session))
    while True:
        try:
            line = read("> ")
        except (EOFError, KeyboardInterrupt):
            write("")
            return
        output = run_command(session, line)
        if output is None:
            return
        write(output)
