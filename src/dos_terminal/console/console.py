import asyncio
import logging
from typing import Callable, Optional, Protocol

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.keys import Keys

from dos_terminal.console.dispatcher import CommandDispatcher
from dos_terminal.console.display import Display, apply_ops
from dos_terminal.console.rendering import RichDisplay, console
from dos_terminal.console.session import ConsoleSession
from dos_terminal.content import ContentStore
from dos_terminal.runtime_config import RuntimeConfig

__all__ = ["ConsoleInterface", "HeadlessConsole", "ReplConsole"]

logger = logging.getLogger(__name__)

# Keys that end the interactive loop; the console itself never exits.
EXIT_KEYS = (Keys.ControlC, Keys.ControlD)


class ConsoleInterface(Protocol):
    """Common interface for console front-ends."""

    config: RuntimeConfig

    async def run(self) -> None:
        pass


class HeadlessConsole(ConsoleInterface):
    """Console that runs a single command without banner or prompt."""

    def __init__(
        self,
        config: RuntimeConfig,
        store: ContentStore,
        display: Optional[Display] = None,
    ) -> None:
        self.config = config
        self.store = store
        self.display = display or RichDisplay(console)

    async def run(self) -> None:
        if not self.config.command:
            raise ValueError("Command is required for headless mode")

        dispatcher = CommandDispatcher(self.store)
        # Same normalisation the line editor applies on submission
        line = self.config.command.strip().upper()
        logger.info("Running headless command: %s", line)
        apply_ops(self.display, dispatcher.dispatch(line))


class ReplConsole(ConsoleInterface):
    """Interactive console reading raw key presses from the terminal."""

    def __init__(
        self,
        config: RuntimeConfig,
        store: ContentStore,
        display: Optional[Display] = None,
        input_factory: Callable[[], Input] = create_input,
    ) -> None:
        self.config = config
        self.store = store
        self.display = display or RichDisplay(console)
        self._input_factory = input_factory

    def create_session(self) -> ConsoleSession:
        return ConsoleSession(
            self.display, CommandDispatcher(self.store), prompt=self.config.prompt
        )

    async def run(self) -> None:
        session = self.create_session()
        session.start()

        input_ = self._input_factory()
        done = asyncio.Event()

        def keys_ready() -> None:
            for key_press in input_.read_keys():
                if key_press.key in EXIT_KEYS:
                    done.set()
                    return
                session.handle_event(key_press.data)

        with input_.raw_mode():
            with input_.attach(keys_ready):
                await done.wait()

        self.display.write_line()
        logger.info("Console session ended")
