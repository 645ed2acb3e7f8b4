"""
Classify raw key-press payloads into line-editing events.
"""

from dataclasses import dataclass
from enum import Enum

CARRIAGE_RETURN = 13
BACKSPACE = 8
DELETE = 127
ESCAPE = 27
SPACE = 32

CURSOR_UP_SUFFIX = "[A"
CURSOR_DOWN_SUFFIX = "[B"


class EventKind(str, Enum):
    """Kinds of input the line editor reacts to."""

    printable = "printable"
    submit = "submit"
    erase = "erase"
    history_previous = "history_previous"
    history_next = "history_next"
    ignored = "ignored"


@dataclass(frozen=True)
class KeyEvent:
    kind: EventKind
    text: str = ""


def classify_event(raw: str) -> KeyEvent:
    """Map a raw payload to a KeyEvent based on its first code point.

    An escape marker only counts as a recall request when its two-character
    suffix arrives in the same payload.
    """
    if not raw:
        return KeyEvent(EventKind.ignored)

    code = ord(raw[0])
    if code == CARRIAGE_RETURN:
        return KeyEvent(EventKind.submit)
    if code in (DELETE, BACKSPACE):
        return KeyEvent(EventKind.erase)
    if code == ESCAPE:
        suffix = raw[1:]
        if suffix == CURSOR_UP_SUFFIX:
            return KeyEvent(EventKind.history_previous)
        if suffix == CURSOR_DOWN_SUFFIX:
            return KeyEvent(EventKind.history_next)
        return KeyEvent(EventKind.ignored)
    if code >= SPACE:
        # Pasted payloads arrive whole; keep only what can be echoed.
        text = "".join(ch for ch in raw if ord(ch) >= SPACE and ord(ch) != DELETE)
        return KeyEvent(EventKind.printable, text)
    return KeyEvent(EventKind.ignored)
