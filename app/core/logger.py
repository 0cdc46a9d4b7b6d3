"""Logging setup for the application.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger. It is safe to call from ``create_app`` more
than once; only the first call configures anything.
"""
import logging
from pathlib import Path
from typing import Optional

from app.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure the root logger from arguments or settings.

    ``level`` is a level name such as ``"DEBUG"`` (case insensitive) and
    falls back to ``settings.LOG_LEVEL``. ``logfile`` falls back to
    ``settings.LOG_FILE``; when neither is set no file handler is added.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level = level or settings.LOG_LEVEL
    logfile = logfile or settings.LOG_FILE

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
