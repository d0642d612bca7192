"""Logging configuration for the server and CLI."""

import logging
import sys

_QUIET_LOGGERS = ("httpx", "httpcore", "asyncio")


def setup_logging(level: str | int = logging.INFO) -> None:
    """Configure root logging with one stderr handler.

    Call this once, early. Chatty third-party loggers only pass WARNING and
    above.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
