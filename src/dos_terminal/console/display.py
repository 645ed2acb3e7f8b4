"""
Display operations and the display sink protocol.

The line editor and the command handlers never draw directly. They return
lists of display operations which a session applies to a `Display`.
"""

from dataclasses import dataclass
from typing import Iterable, Protocol, Union

from rich.text import Text

TextType = Union[str, Text]


class Display(Protocol):
    """Sink accepting styled text writes, line breaks, erasure and a reset."""

    def write(self, text: TextType) -> None: ...

    def write_line(self, text: TextType = "") -> None: ...

    def erase(self, count: int) -> None: ...

    def clear(self) -> None: ...


@dataclass(frozen=True)
class Write:
    """Append text without a newline."""

    text: TextType


@dataclass(frozen=True)
class WriteLine:
    """Append text followed by a newline."""

    text: TextType = ""


@dataclass(frozen=True)
class Erase:
    """Visually erase `count` characters before the cursor (back, space, back)."""

    count: int = 1


@dataclass(frozen=True)
class Clear:
    """Reset the display to a blank state."""


DisplayOp = Union[Write, WriteLine, Erase, Clear]


def apply_ops(display: Display, ops: Iterable[DisplayOp]) -> None:
    """Perform each operation against the display, in order."""
    for op in ops:
        match op:
            case Write(text=text):
                display.write(text)
            case WriteLine(text=text):
                display.write_line(text)
            case Erase(count=count):
                if count > 0:
                    display.erase(count)
            case Clear():
                display.clear()
            case _:
                raise TypeError(f"Unknown display operation: {op!r}")
