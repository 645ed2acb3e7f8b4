import logging
from typing import List

from dos_terminal.console.dispatcher import CommandDispatcher
from dos_terminal.console.display import Display, DisplayOp, apply_ops
from dos_terminal.console.rendering import prompt_op, welcome_ops
from dos_terminal.console.state import LineEditor
from dos_terminal.runtime_config import DEFAULT_PROMPT

logger = logging.getLogger(__name__)


class ConsoleSession:
    """One console instance: a line editor and a dispatcher drawing to one display."""

    def __init__(
        self,
        display: Display,
        dispatcher: CommandDispatcher,
        prompt: str = DEFAULT_PROMPT,
    ) -> None:
        self.display = display
        self.dispatcher = dispatcher
        self.prompt = prompt
        self.editor = LineEditor()

    def start(self) -> None:
        """Show the welcome banner and the first prompt."""
        apply_ops(
            self.display,
            [*welcome_ops(self.dispatcher.context.title), prompt_op(self.prompt)],
        )

    def handle_event(self, raw_event: str) -> None:
        """Process one raw input event to completion."""
        result = self.editor.handle_event(raw_event)
        ops: List[DisplayOp] = list(result.ops)
        if result.command is not None:
            logger.debug("Dispatching %r", result.command)
            output = self.dispatcher.dispatch(result.command)
            ops.extend(output)
        if result.submitted:
            ops.append(prompt_op(self.prompt))
        apply_ops(self.display, ops)
