"""
Logging setup using Loguru.

gridscroll logs through loguru but stays silent until an application opts in,
either with ``setup_loguru`` or ``logger.enable("gridscroll")``.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import LoggingConfig, get_data_dir

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def get_log_file_path() -> Path:
    """Get the path to the default log file."""
    return get_data_dir() / "gridscroll.log"


def setup_loguru(
    log_file: Optional[Path] = None, level: str = "INFO", console: bool = False
) -> None:
    """
    Configure loguru for file logging (the terminal UI owns stdout).

    Args:
        log_file: Path to log file (default: ~/.local/share/gridscroll/gridscroll.log)
        level: Minimum level for logging (DEBUG, INFO, WARNING, ERROR)
        console: Also log to stderr
    """
    log_file = log_file if log_file else get_log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default handler
    logger.remove()

    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,  # Keep 5 backup files
        level=level,
        format=LOG_FORMAT,
        enqueue=False,  # Synchronous writes
    )
    if console:
        logger.add(sys.stderr, level=level, format="{level}: {message}")

    logger.enable("gridscroll")
    logger.info(f"Loguru initialized: {log_file} (level={level})")


def setup_from_config(config: LoggingConfig) -> None:
    """Configure logging from the [logging] config section."""
    setup_loguru(
        Path(config.log_file) if config.log_file else None,
        level=config.level,
        console=config.console_output,
    )
