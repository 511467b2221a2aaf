# previewer.py
import sys
from enum import Enum
from functools import partial

from loguru import logger

from errors import PreviewReadError

WIDTH = 27
PROMPT = "Do they look ok? (y/n): "
BORDER = "+" + "-" * (WIDTH + 2) + "+" + "-" * (WIDTH + 2) + "+"


class Decision(Enum):
    CONFIRMED = "confirmed"
    ABORTED = "aborted"


def render_table(cards):
    # cells are padded, never truncated; long text runs past the border
    lines = [BORDER, f"| {'Question':^{WIDTH}} | {'Answer':^{WIDTH}} |", BORDER]
    for card in cards:
        lines.append(f"| {card.question:<{WIDTH}} | {card.answer:<{WIDTH}} |")
    lines.append(BORDER)
    return "\n".join(lines)


def is_confirmation(reply):
    tokens = reply.split()
    return bool(tokens) and tokens[0].lower() == "y"


def console_confirm(out=None, read=input):
    """Ask the operator on the console; only a leading "y" confirms."""
    out = out or sys.stdout
    out.write(PROMPT)
    out.flush()
    try:
        reply = read()
    except (EOFError, OSError, ValueError) as e:
        raise PreviewReadError(e) from e
    return Decision.CONFIRMED if is_confirmation(reply) else Decision.ABORTED


def preview(cards, confirm=console_confirm, out=None):
    out = out or sys.stdout
    if confirm is console_confirm:
        # prompt goes to the same stream as the table
        confirm = partial(console_confirm, out=out)
    print("Preview of flashcards:", file=out)
    print(render_table(cards), file=out)
    try:
        return confirm()
    except PreviewReadError as e:
        logger.warning("{}", e)
        return Decision.ABORTED
