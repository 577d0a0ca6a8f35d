"""Process-wide logging for Capy: one rotating log file plus an optional stderr stream.

The log directory comes from :class:`capy.settings.Settings`; this module does not
read the environment itself.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

__all__ = ["DEFAULT_LOG_DIR", "LOG_FILE_NAME", "log_file_for", "setup_logging", "shutdown_logging"]

DEFAULT_LOG_DIR = Path.home() / ".capy" / "logs"
LOG_FILE_NAME = "capy.log"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_MAX_BYTES = 1_000_000
_BACKUP_COUNT = 3
# Pillow logs every decoded chunk at DEBUG.
_QUIET_LOGGERS = {"PIL": logging.WARNING}

_installed: list[logging.Handler] = []


def log_file_for(log_dir: Path | str | None) -> Path:
    return Path(log_dir or DEFAULT_LOG_DIR).expanduser() / LOG_FILE_NAME


def setup_logging(level: int = logging.INFO, *, log_dir: Path | str | None = None, console: bool = True) -> Path:
    """Attach Capy's handlers to the root logger and return the log file path.

    Calling it again swaps out the handlers from the previous call, so the
    level or directory can change at runtime. Handlers installed by others
    are left alone.
    """

    log_path = log_file_for(log_dir)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    shutdown_logging()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [
        logging.handlers.RotatingFileHandler(
            log_path, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    root = logging.getLogger()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    _installed.extend(handlers)
    root.setLevel(level)

    for name, floor in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(max(floor, level))
    return log_path


def shutdown_logging() -> None:
    """Detach and close the handlers added by :func:`setup_logging`."""

    root = logging.getLogger()
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()
