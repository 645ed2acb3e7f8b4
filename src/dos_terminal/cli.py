import asyncio
import logging
from pathlib import Path
from typing import Callable, Optional

import typer
from typing_extensions import Annotated

from dos_terminal.console.console import ConsoleInterface, HeadlessConsole, ReplConsole
from dos_terminal.content import (
    ContentLoadError,
    ContentStore,
    default_store,
    load_content,
)
from dos_terminal.logger import setup_logging
from dos_terminal.runtime_config import (
    CONTENT_ENV,
    DEFAULT_PROMPT,
    LOG_LEVEL_ENV,
    PROMPT_ENV,
    LogLevel,
    RuntimeConfig,
    load_envs,
)

# Global factory function - set by create_app()
_console_factory: Optional[Callable[[RuntimeConfig, ContentStore], ConsoleInterface]] = None


def default_console_factory(
    config: RuntimeConfig, store: ContentStore
) -> ConsoleInterface:
    """Default factory for creating Console instances."""
    if config.command:
        return HeadlessConsole(config, store)
    else:
        return ReplConsole(config, store)


def main(
    ctx: typer.Context,
    content: Annotated[
        Optional[Path],
        typer.Option(
            "--content",
            envvar=CONTENT_ENV,
            help="JSON file with entries to serve instead of the built-in ones",
        ),
    ] = None,
    prompt: Annotated[
        str,
        typer.Option("--prompt", envvar=PROMPT_ENV, help="Prompt text"),
    ] = DEFAULT_PROMPT,
    log_level: Annotated[
        LogLevel,
        typer.Option("--log-level", envvar=LOG_LEVEL_ENV, help="Log file verbosity"),
    ] = LogLevel.warning,
    command: Annotated[
        Optional[str],
        typer.Option(
            "--command",
            "-c",
            help="Run a single command and exit instead of starting the console",
        ),
    ] = None,
) -> None:
    """DOS TERMINAL - a retro command console"""
    if ctx.invoked_subcommand is not None:
        return

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        store = load_content(content) if content else default_store()
    except ContentLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    cfg = RuntimeConfig(
        prompt=prompt,
        content_path=content,
        log_level=log_level,
        command=command,
    )

    if command:
        logger.info(f"Running command in headless mode: {command}")
    else:
        logger.info(f"Starting console with {len(store)} entries")

    try:
        factory = _console_factory or default_console_factory
        console = factory(cfg, store)
        asyncio.run(console.run())
    except KeyboardInterrupt:
        print("\nExiting...")


def create_app(
    console_factory: Optional[
        Callable[[RuntimeConfig, ContentStore], ConsoleInterface]
    ] = None,
) -> typer.Typer:
    """
    Create and configure the Typer application.

    Args:
        console_factory: Factory function to create Console instances

    Returns:
        Typer application
    """
    # Load settings from .env if not already set in the environment
    load_envs()

    global _console_factory
    _console_factory = console_factory

    app = typer.Typer(rich_markup_mode=None)
    app.callback(invoke_without_command=True)(main)

    return app


# Create default app instance for the console script
app = create_app()


if __name__ == "__main__":
    app()
