"""
Line editor state (replaces the mutable buffer/history fields on the terminal).
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from dos_terminal.console.display import DisplayOp, Erase, Write, WriteLine
from dos_terminal.console.key_events import EventKind, classify_event

logger = logging.getLogger(__name__)


@dataclass
class EditResult:
    """Display operations produced by one event, plus a submitted command if any."""

    ops: List[DisplayOp] = field(default_factory=list)
    command: Optional[str] = None
    submitted: bool = False


class LineEditor:
    """Holds the line buffer and the recall history for one console session."""

    def __init__(self) -> None:
        self.buffer: str = ""
        self.history: List[str] = []
        self.history_index: int = 0

    def handle_event(self, raw: str) -> EditResult:
        """Apply one raw input event and describe what must be drawn."""
        event = classify_event(raw)
        match event.kind:
            case EventKind.printable:
                return self._insert(event.text)
            case EventKind.submit:
                return self._submit()
            case EventKind.erase:
                return self._backspace()
            case EventKind.history_previous:
                return self._history_previous()
            case EventKind.history_next:
                return self._history_next()
            case _:
                return EditResult()

    def _insert(self, text: str) -> EditResult:
        if not text:
            return EditResult()
        self.buffer += text
        return EditResult(ops=[Write(text)])

    def _submit(self) -> EditResult:
        line = self.buffer.strip()
        self.buffer = ""
        result = EditResult(ops=[WriteLine()], submitted=True)
        if line:
            logger.debug("Line submitted: %r", line)
            self.history.append(line)
            self.history_index = len(self.history)
            result.command = line.upper()
        return result

    def _backspace(self) -> EditResult:
        if not self.buffer:
            return EditResult()
        self.buffer = self.buffer[:-1]
        return EditResult(ops=[Erase(1)])

    def _replace_line(self, text: str) -> List[DisplayOp]:
        ops: List[DisplayOp] = []
        if self.buffer:
            ops.append(Erase(len(self.buffer)))
        self.buffer = text
        if text:
            ops.append(Write(text))
        return ops

    def _history_previous(self) -> EditResult:
        if self.history_index <= 0:
            return EditResult()
        self.history_index -= 1
        return EditResult(ops=self._replace_line(self.history[self.history_index]))

    def _history_next(self) -> EditResult:
        if self.history_index < len(self.history) - 1:
            self.history_index += 1
            return EditResult(
                ops=self._replace_line(self.history[self.history_index])
            )
        # Past the newest entry recall returns to a blank line.
        self.history_index = len(self.history)
        return EditResult(ops=self._replace_line(""))
