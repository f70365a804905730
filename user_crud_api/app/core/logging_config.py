"""
Logging configuration for the API process.

``setup_logging`` installs a console handler (and optionally a file
handler) on the root logger and lines up uvicorn's own loggers with
the same level so request logs and service logs read as one stream.
Calling it again once handlers exist does nothing.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# uvicorn configures these itself when it starts the server
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the application.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``.  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        File to append log lines to, in addition to the console.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)
