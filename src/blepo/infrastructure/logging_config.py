"""Logging setup for the command line."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from blepo.infrastructure.config.models import LoggingConfig

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: LoggingConfig | None = None, verbose: bool = False) -> None:
    """
    Configure the root logger.

    Console records go to stderr through rich so they never mix with the
    queue printed on stdout. A rotating file handler is added when the
    configuration names a log file.

    Args:
        config: Logging settings (defaults apply when None)
        verbose: Force DEBUG level regardless of the configured level
    """
    if config is None:
        config = LoggingConfig()

    level = logging.DEBUG if verbose else getattr(logging, config.level)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=verbose,
    )
    console_handler.setFormatter(logging.Formatter(config.format))
    root.addHandler(console_handler)

    if config.file_path:
        log_path = Path(config.file_path).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        root.addHandler(file_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
