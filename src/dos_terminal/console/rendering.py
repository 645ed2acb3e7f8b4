from typing import List, Optional

from rich.console import Console
from rich.control import Control
from rich.text import Text

from dos_terminal.console.display import DisplayOp, TextType, Write, WriteLine
from dos_terminal.content import ContentEntry

WIDTH = 59
RULE = "═" * WIDTH
THIN_RULE = "─" * WIDTH
DEFAULT_TITLE = "DOS TERMINAL INTERFACE v1.0"


console = Console(highlight=False)


class RichDisplay:
    """Display sink that draws through a Rich console.

    Text is printed without markup parsing so typed input is always literal;
    styling travels inside Rich `Text` spans.
    """

    def __init__(self, rich_console: Optional[Console] = None) -> None:
        self.console = rich_console or console

    def write(self, text: TextType) -> None:
        self.console.print(
            text, end="", markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def write_line(self, text: TextType = "") -> None:
        self.console.print(
            text, markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def erase(self, count: int) -> None:
        for _ in range(count):
            self.console.control(Control.move(x=-1))
            self.console.print(" ", end="", markup=False, highlight=False)
            self.console.control(Control.move(x=-1))

    def clear(self) -> None:
        self.console.clear()


def prompt_text(prompt: str) -> Text:
    return Text.assemble((prompt, "green"), " ")


def error_line(message: str) -> DisplayOp:
    return WriteLine(Text(message, style="red"))


def welcome_ops(title: str = DEFAULT_TITLE) -> List[DisplayOp]:
    """The boxed banner shown at start-up and after CLEAR."""
    blank = f"║{' ' * WIDTH}║"
    box = [
        f"╔{RULE}╗",
        blank,
        f"║{title:^{WIDTH}}║",
        blank,
        f"╚{RULE}╝",
    ]
    ops: List[DisplayOp] = [WriteLine(Text(line, style="green")) for line in box]
    ops.append(WriteLine())
    ops.append(WriteLine(Text("Type HELP for available commands.", style="yellow")))
    ops.append(WriteLine())
    return ops


def heading_ops(title: str) -> List[DisplayOp]:
    return [
        WriteLine(),
        WriteLine(Text(RULE, style="yellow")),
        WriteLine(Text(f"{title:^{WIDTH}}".rstrip(), style="yellow")),
        WriteLine(Text(RULE, style="yellow")),
        WriteLine(),
    ]


def entry_summary_ops(entry: ContentEntry) -> List[DisplayOp]:
    """Two-line summary block used by LIST."""
    tags = Text(" ").join(Text(f"#{tag}", style="magenta") for tag in entry.tags)
    return [
        WriteLine(
            Text.assemble("  ", (f"[{entry.id}]", "green"), " ", (entry.title, "cyan"))
        ),
        WriteLine(
            Text.assemble(
                "      Date: ", (entry.date, "yellow"), "  Tags: ", tags
            )
        ),
        WriteLine(),
    ]


def entry_detail_ops(entry: ContentEntry) -> List[DisplayOp]:
    """Full view used by READ: title, date, tags, then the body line by line."""
    ops: List[DisplayOp] = [
        WriteLine(),
        WriteLine(Text(RULE, style="yellow")),
        WriteLine(Text(entry.title, style="cyan")),
        WriteLine(Text(RULE, style="yellow")),
        WriteLine(),
        WriteLine(Text.assemble(("Date:", "yellow"), f" {entry.date}")),
        WriteLine(
            Text.assemble(
                ("Tags:", "yellow"), " ", " ".join(f"#{tag}" for tag in entry.tags)
            )
        ),
        WriteLine(),
        WriteLine(Text(THIN_RULE, style="yellow")),
        WriteLine(),
    ]
    ops.extend(WriteLine(Text(f"  {line}")) for line in entry.lines)
    ops.extend(
        [
            WriteLine(),
            WriteLine(Text(THIN_RULE, style="yellow")),
            WriteLine(),
        ]
    )
    return ops


def prompt_op(prompt: str) -> DisplayOp:
    return Write(prompt_text(prompt))
