"""Logging configuration.

Call configure_logging() once at startup (lifespan in main.py, or the CLI
entry point). After that, use logging.getLogger(__name__) throughout the app.
"""

import logging
import sys
from typing import TextIO

from pythonjsonlogger.json import JsonFormatter

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(
    level: str = "INFO",
    log_format: str = "console",
    stream: TextIO | None = None,
) -> None:
    """Install a root handler for the application.

    Args:
        level: Root log level name, INFO when the name is unknown
        log_format: "json" for JSON lines, anything else for plain console output
        stream: Output stream, stdout when omitted
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    if log_format == "json":
        handler.setFormatter(JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
