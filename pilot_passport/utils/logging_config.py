"""
Logging setup for the pilot passport command line.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
CLI configures the root logger once through ``setup_logging``.
"""

import logging
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger with a console and optional file handler.

    Does nothing if the root logger already has handlers, so repeated CLI
    invocations inside one process (tests) don't stack handlers.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.
    logfile : Optional[str]
        Path to also write log lines to.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
