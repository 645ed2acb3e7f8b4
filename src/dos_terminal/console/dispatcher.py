"""
Command dispatcher: parse a finalized line and route it to a registered command.
"""

import logging
from typing import Iterable, List, Tuple

from dos_terminal.console.commands import (
    DEFAULT_COMMANDS,
    Command,
    CommandContext,
    build_registry,
)
from dos_terminal.console.display import DisplayOp, WriteLine
from dos_terminal.console.rendering import DEFAULT_TITLE, error_line
from dos_terminal.content import ContentStore

logger = logging.getLogger(__name__)


def parse_command(line: str) -> Tuple[str, List[str]]:
    """Split on runs of whitespace into (verb, args). Empty input gives ("", [])."""
    parts = line.split()
    if not parts:
        return "", []
    return parts[0], parts[1:]


class CommandDispatcher:
    """Routes command lines to a registry built once at construction."""

    def __init__(
        self,
        store: ContentStore,
        commands: Iterable[Command] = DEFAULT_COMMANDS,
        title: str = DEFAULT_TITLE,
    ) -> None:
        commands = tuple(commands)
        self.registry = build_registry(commands)
        self.context = CommandContext(store=store, title=title, commands=commands)

    def dispatch(self, line: str) -> List[DisplayOp]:
        """Run one command line and return what to render. Never raises."""
        verb, args = parse_command(line)
        if not verb:
            return []

        command = self.registry.get(verb.upper())
        if command is None:
            logger.info("Unknown command: %s", verb)
            return [
                error_line(f"Bad command or file name: {verb}"),
                WriteLine("Type HELP for available commands."),
            ]

        try:
            return command.handler(self.context, args)
        except Exception as e:
            logger.exception("Command %s failed", command.name)
            return [error_line(f"Error executing {verb}: {e}")]
