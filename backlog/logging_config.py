"""Logging setup for backlog.

Everything is logged to a rotating file under ``~/.backlog/logs``. Nothing is
ever written to the terminal: the interactive session owns the screen and the
one-shot commands print only their own output.

The level comes from the ``BACKLOG_LOG_LEVEL`` environment variable unless
``setup_logging`` is given one explicitly; unknown names fall back to INFO.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Tuple


LOG_DIR = Path.home() / ".backlog" / "logs"
LOG_FILE = LOG_DIR / "backlog.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 10MB per file, five rotated files kept
MAX_BYTES = 10 * 1024 * 1024
BACKUP_COUNT = 5

DEFAULT_LEVEL = "INFO"


def resolve_log_level(log_level: Optional[str] = None) -> Tuple[int, str]:
    """Turn a level name (or the environment's) into ``(number, name)``.

    Examples:
        >>> resolve_log_level("debug")
        (10, 'DEBUG')
        >>> resolve_log_level("chatty")
        (20, 'INFO')
    """
    name = (log_level or os.getenv("BACKLOG_LOG_LEVEL") or DEFAULT_LEVEL).upper()
    number = logging.getLevelName(name)
    if not isinstance(number, int):
        return logging.INFO, DEFAULT_LEVEL
    return number, name


def _file_handler() -> logging.Handler:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        LOG_FILE,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )


def _textual_handler() -> logging.Handler:
    from textual.logging import TextualHandler

    return TextualHandler()


def setup_logging(
    log_level: Optional[str] = None,
    use_textual_handler: bool = False
) -> None:
    """Route all backlog logging to a single handler on the root logger.

    Args:
        log_level: Level name; defaults to ``BACKLOG_LOG_LEVEL``, then INFO
        use_textual_handler: Log to the Textual dev console (``textual console``)
            instead of the log file, for debugging the interactive session

    Calling it again replaces the previous handler.
    """
    level, level_name = resolve_log_level(log_level)

    handler = _textual_handler() if use_textual_handler else _file_handler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
        existing.close()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    destination = "textual console" if use_textual_handler else str(LOG_FILE)
    logging.getLogger(__name__).info(f"Logging to {destination} at {level_name}")


def get_logger(name: str) -> logging.Logger:
    """Logger for a backlog module; pass ``__name__``."""
    return logging.getLogger(name)
