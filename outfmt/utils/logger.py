"""
Logging Utilities for outfmt
=============================
Rich console logging on stderr, with optional rotating file logs.

Formatted output goes to stdout, so log records never mix with it.
Library modules only create loggers; the CLI calls `setup_logging`
once per command.
"""

from __future__ import annotations

import logging
from contextlib import ContextDecorator
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "outfmt"
LOG_DIR = Path.home() / ".outfmt" / "logs"

# Record layouts for the log file; the console handler renders its own
RECORD_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
TRACE_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d %(funcName)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


@dataclass
class LogConfig:
    """Where outfmt sends its log records, and how much of them"""
    level: int = logging.WARNING
    to_stderr: bool = True
    to_file: bool = False
    log_dir: Path = field(default_factory=lambda: LOG_DIR)
    file_max_bytes: int = 512 * 1024
    file_backups: int = 2
    trace: bool = False

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"{ROOT_LOGGER}.log"


def _stderr_handler(config: LogConfig) -> logging.Handler:
    handler = RichHandler(
        console=Console(stderr=True),
        level=config.level,
        show_time=config.trace,
        show_path=config.trace,
        markup=False,
        rich_tracebacks=config.trace
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _file_handler(config: LogConfig) -> Optional[logging.Handler]:
    try:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            config.log_file,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backups,
            encoding="utf-8"
        )
    except OSError as e:
        logging.getLogger(ROOT_LOGGER).warning(f"File logging disabled: {e}")
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(TRACE_FORMAT if config.trace else RECORD_FORMAT, DATE_FORMAT))
    return handler


def setup_logging(
    name: str = ROOT_LOGGER,
    config: Optional[LogConfig] = None,
    verbose: bool = False
) -> logging.Logger:
    """
    Route the `name` logger to stderr and, if enabled, to a log file.

    Calling it again replaces the handlers installed before.

    Args:
        name: Logger to configure
        config: Handler settings; defaults to warnings on stderr only
        verbose: Log debug records, with times and source locations

    Returns:
        The configured logger
    """
    config = config or LogConfig()
    if verbose:
        config.level = logging.DEBUG
        config.trace = True

    handlers: List[logging.Handler] = []
    if config.to_stderr:
        handlers.append(_stderr_handler(config))
    if config.to_file:
        file_handler = _file_handler(config)
        if file_handler is not None:
            handlers.append(file_handler)

    logger = logging.getLogger(name)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(config.level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger below the outfmt root, e.g. get_logger(__name__)"""
    return logging.getLogger(name)


class LogContext(ContextDecorator):
    """
    Temporarily change a logger's level; usable as a decorator too.

    Usage:
        with LogContext("outfmt.manager", logging.DEBUG):
            manager.write(console, 'table', data, options)
    """

    def __init__(self, logger_name: str = ROOT_LOGGER, level: int = logging.DEBUG):
        self.logger = logging.getLogger(logger_name)
        self.level = level
        self._saved: List[int] = []

    def __enter__(self) -> logging.Logger:
        self._saved.append(self.logger.level)
        self.logger.setLevel(self.level)
        return self.logger

    def __exit__(self, *exc) -> bool:
        self.logger.setLevel(self._saved.pop())
        return False


__all__ = [
    'setup_logging',
    'get_logger',
    'LogConfig',
    'LogContext',
]
