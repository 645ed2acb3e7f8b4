"""
Built-in console commands.

Each handler receives the command context and its positional arguments and
returns the display operations to render. Handlers never touch the display
or the line editor directly.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Tuple

from rich.text import Text

from dos_terminal.console.display import Clear, DisplayOp, WriteLine
from dos_terminal.console.rendering import (
    DEFAULT_TITLE,
    entry_detail_ops,
    entry_summary_ops,
    error_line,
    heading_ops,
    welcome_ops,
)
from dos_terminal.content import ContentStore


@dataclass(frozen=True)
class CommandContext:
    """Read-only collaborators available to every handler."""

    store: ContentStore
    title: str = DEFAULT_TITLE
    commands: Tuple["Command", ...] = ()


Handler = Callable[[CommandContext, List[str]], List[DisplayOp]]


@dataclass(frozen=True)
class Command:
    """Definition of a command: verb, aliases, usage line and handler."""

    name: str
    handler: Handler
    aliases: Tuple[str, ...] = field(default_factory=tuple)
    usage: str = ""

    @property
    def verbs(self) -> Tuple[str, ...]:
        return (self.name, *self.aliases)

    @property
    def description(self) -> str:
        return self.handler.__doc__ or "No description available"


def cmd_help(ctx: CommandContext, args: List[str]) -> List[DisplayOp]:
    """Display this help message"""
    ops = heading_ops("AVAILABLE COMMANDS")
    for command in ctx.commands:
        usage = command.usage or command.name
        ops.append(
            WriteLine(
                Text.assemble("  ", (f"{usage:<9}", "green"), f" - {command.description}")
            )
        )
    ops.append(WriteLine())
    return ops


def cmd_list(ctx: CommandContext, args: List[str]) -> List[DisplayOp]:
    """List all entries"""
    entries = ctx.store.list_all()
    ops = heading_ops("ENTRIES")
    for entry in entries:
        ops.extend(entry_summary_ops(entry))
    ops.append(WriteLine(f"Total: {len(entries)} entr(y/ies)"))
    ops.append(WriteLine())
    return ops


def cmd_read(ctx: CommandContext, args: List[str]) -> List[DisplayOp]:
    """Read a specific entry"""
    if not args:
        return [
            error_line("Error: Please specify an entry ID."),
            WriteLine("Usage: READ <id>"),
        ]
    entry_id = args[0]
    entry = ctx.store.find_by_id(entry_id)
    if entry is None:
        return [
            error_line(f"Entry not found: {entry_id}"),
            WriteLine("Use LIST to see available entries."),
        ]
    return entry_detail_ops(entry)


def cmd_clear(ctx: CommandContext, args: List[str]) -> List[DisplayOp]:
    """Clear the terminal screen"""
    return [Clear(), *welcome_ops(ctx.title)]


def cmd_about(ctx: CommandContext, args: List[str]) -> List[DisplayOp]:
    """Show information about this terminal"""
    ops = heading_ops("ABOUT")
    for line in (
        "  A retro-inspired DOS terminal experience built with:",
        "  - Rich for rendering",
        "  - prompt_toolkit for raw key input",
        "  - Typer for the command line",
        "",
        "  Experience the nostalgia of DOS-era computing",
        "  with a modern twist.",
        "",
        "  Type HELP for available commands.",
        "",
    ):
        ops.append(WriteLine(line))
    return ops


def cmd_exit(ctx: CommandContext, args: List[str]) -> List[DisplayOp]:
    """Exit (press Ctrl+D)"""
    return [WriteLine(Text("To exit, press Ctrl+D.", style="yellow"))]


DEFAULT_COMMANDS: Tuple[Command, ...] = (
    Command("HELP", cmd_help, aliases=("?",)),
    Command("LIST", cmd_list, aliases=("DIR",)),
    Command("READ", cmd_read, usage="READ <id>"),
    Command("CLEAR", cmd_clear, aliases=("CLS",)),
    Command("ABOUT", cmd_about),
    Command("EXIT", cmd_exit, aliases=("QUIT",)),
)


def build_registry(commands: Iterable[Command] = DEFAULT_COMMANDS) -> Dict[str, Command]:
    """Map every verb and alias (upper-cased) to its command."""
    registry: Dict[str, Command] = {}
    for command in commands:
        for verb in command.verbs:
            key = verb.upper()
            if key in registry:
                raise ValueError(f"Verb {key!r} is registered twice")
            registry[key] = command
    return registry
