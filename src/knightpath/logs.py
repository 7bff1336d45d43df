"""Logging setup shared by the CLI and the HTTP app."""

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# The console handler installed on the root logger, once created
_console_handler: logging.StreamHandler | None = None


def setup_logging(level: str | int = "INFO", stream: TextIO | None = None) -> None:
    """Configure logging for the application.

    Installs one console handler on the root logger, writing to stream
    (stdout by default). Calling it again updates the level and the stream
    without adding a second handler.
    """
    global _console_handler

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if _console_handler is None:
        _console_handler = logging.StreamHandler(stream or sys.stdout)
        _console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    else:
        _console_handler.setStream(stream or sys.stdout)

    if _console_handler not in root_logger.handlers:
        root_logger.addHandler(_console_handler)
    _console_handler.setLevel(level)

    logging.getLogger("knightpath").setLevel(level)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)

