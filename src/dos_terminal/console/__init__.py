"""
Console subpackage: holds the line editor, command dispatcher, rendering, and front-ends.
"""

from dos_terminal.console.console import HeadlessConsole, ReplConsole
from dos_terminal.console.session import ConsoleSession

__all__ = ["ConsoleSession", "HeadlessConsole", "ReplConsole"]
