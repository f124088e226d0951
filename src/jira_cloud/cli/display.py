"""Console and logging setup for the CLI (Rich)."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGING_THEME = Theme(
    {
        "logging.level.debug": "dim",
        "logging.level.info": "blue",
        "logging.level.warning": "bold yellow",
        "logging.level.error": "bold red",
        "logging.level.critical": "bold red on white",
    }
)

console = Console(theme=LOGGING_THEME)


def configure_logging(level: str = "INFO", log_file: str | Path | None = None) -> logging.Logger:
    """Route log records through Rich, plus an optional plain-text file.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file; parent directories are created.

    Returns:
        The package logger (`jira_cloud`).
    """

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    rich_handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        markup=False,
        show_time=True,
        show_level=True,
        log_time_format="[%X]",
    )
    handlers: list[logging.Handler] = [rich_handler]

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s")
        )
        file_handler.setLevel(numeric_level)
        handlers.append(file_handler)

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )

    # httpx logs every request at INFO; keep it quiet unless debugging.
    logging.getLogger("httpx").setLevel(max(numeric_level, logging.WARNING))

    logger = logging.getLogger("jira_cloud")
    logger.debug("Rich logging configured")
    if log_file:
        logger.debug("Log file: %s", log_file)
    return logger
