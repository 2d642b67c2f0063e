from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from rich.logging import RichHandler

DEFAULT_LOG_FILE = "~/.cache/cleanos/cleanos.log"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger with a rich console handler and a rotating file handler.

    The console only shows warnings so it does not compete with the CLI's own
    output. Calling this repeatedly for the same name does not stack handlers.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    console = RichHandler(show_path=False, markup=False)
    console.setLevel(logging.WARNING)
    logger.addHandler(console)

    log_path = _resolve_log_path()
    if log_path is not None:
        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_path,
            when="midnight",
            interval=1,
            backupCount=5,
            encoding="utf-8",
            delay=True,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def set_console_level(level: str) -> None:
    """Apply *level* to the console handler of every cleanos logger."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    for name, candidate in logging.root.manager.loggerDict.items():
        if not name.startswith("cleanos") or not isinstance(candidate, logging.Logger):
            continue
        for handler in candidate.handlers:
            if isinstance(handler, RichHandler):
                handler.setLevel(numeric)


def _resolve_log_path() -> Path | None:
    raw = os.environ.get("CLEANOS_LOG_FILE", DEFAULT_LOG_FILE)
    if not raw:
        return None
    path = Path(raw).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    return path
