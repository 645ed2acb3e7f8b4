"""
Runtime configuration for the DOS terminal.

This module provides:
- load_envs(): load DOS_TERMINAL_CONTENT, DOS_TERMINAL_PROMPT and DOS_TERMINAL_LOG_LEVEL
  from a .env file if they are not already present in the environment.
- RuntimeConfig: a dataclass holding runtime settings: prompt, content file, log level
  and the optional one-shot command.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

# Environment variable names for settings
CONTENT_ENV: str = "DOS_TERMINAL_CONTENT"
PROMPT_ENV: str = "DOS_TERMINAL_PROMPT"
LOG_LEVEL_ENV: str = "DOS_TERMINAL_LOG_LEVEL"

DEFAULT_PROMPT: str = "C:\\DOS>"


def load_envs(env_file: Optional[str] = None) -> None:
    """
    Load DOS_TERMINAL_CONTENT, DOS_TERMINAL_PROMPT and DOS_TERMINAL_LOG_LEVEL from a .env
    file into the process environment if they are not already set.
    """
    env_values = dotenv_values(env_file) if env_file else dotenv_values()
    for key in (CONTENT_ENV, PROMPT_ENV, LOG_LEVEL_ENV):
        if not os.environ.get(key):
            val = env_values.get(key)
            if val:
                os.environ[key] = str(val)


class LogLevel(str, Enum):
    """Supported log levels."""

    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


@dataclass(frozen=True)
class RuntimeConfig:
    """
    Holds runtime configuration for the DOS terminal.

    Attributes:
        prompt: The prompt text shown before each input line.
        content_path: JSON file with entries to serve instead of the built-in ones.
        log_level: Minimum level written to the log file.
        command: A single command to run in headless mode (if provided).
    """

    prompt: str = DEFAULT_PROMPT
    content_path: Optional[Path] = None
    log_level: LogLevel = LogLevel.warning
    command: Optional[str] = None


def get_data_dir() -> Path:
    """
    Return the DOS terminal data directory under XDG_DATA_HOME or fallback to ~/.local/share.
    """
    data_home = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local/share"))
    return data_home / "dos_terminal"
