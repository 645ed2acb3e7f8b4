import logging
from pathlib import Path
from typing import Optional

from dos_terminal.runtime_config import LogLevel, get_data_dir

LOG_FILE_NAME = "dos_terminal.log"


def setup_logging(
    level: LogLevel = LogLevel.warning, log_dir: Optional[Path] = None
) -> Path:
    """Send package logs to a file; the terminal belongs to the console.

    Returns the path of the log file.
    """
    log_dir = log_dir or get_data_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    logger = logging.getLogger("dos_terminal")
    logger.setLevel(getattr(logging, level.value.upper()))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return log_file
