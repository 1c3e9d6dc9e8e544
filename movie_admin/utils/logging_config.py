"""
Logging for the movie admin interface.

The admin UI logs to stdout, and additionally to a rotating file when
LOG_FILE is set. Streamlit re-executes page scripts on every interaction, so
the handlers installed here are tagged and replaced on each call instead of
being stacked on the root logger. Handlers added by Streamlit itself or by a
test harness are left alone.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from movie_admin.config import get_log_file, get_log_level

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

HANDLER_NAME = "movie_admin"
MAX_BYTES = 5 * 1024 * 1024  # 5MB
BACKUP_COUNT = 3

# Request-level chatter from these drowns out the admin's own messages
QUIET_LOGGERS = ("urllib3", "watchdog")


def _resolve_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def _admin_handlers(logger: logging.Logger) -> list:
    return [h for h in logger.handlers if h.get_name() == HANDLER_NAME]


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Install the admin's console and file handlers on the root logger.

    Args:
        level: Logging level name, case-insensitive
        log_file: Path of a rotating log file; parent directories are created

    Returns:
        The root logger

    Raises:
        ValueError: If level is not a logging level name
    """
    numeric = _resolve_level(level)
    root = logging.getLogger()

    for handler in _admin_handlers(root):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list = [logging.StreamHandler(sys.stdout)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT))

    for handler in handlers:
        handler.set_name(HANDLER_NAME)
        handler.setLevel(numeric)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(numeric)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric, logging.WARNING))

    if log_file:
        root.info("Logging to file: %s", log_file)
    return root


def configure_ui_logging() -> logging.Logger:
    """Configure logging from LOG_LEVEL and LOG_FILE."""
    return setup_logging(level=get_log_level(), log_file=get_log_file())
