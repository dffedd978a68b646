"""
Handler adapters onto stdlib logging and text streams.

Rendered messages are plain text, so a handler is any one-argument callable.
These helpers build the common ones:

    >>> log.add_handler(to_std_logger(logging.getLogger("app")), LogLevel.ERROR)
    >>> log.add_handler(to_stream())
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from ..core.constants import LogLevel

# logpool level -> stdlib level
STD_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
}


def to_std_logger(target: logging.Logger, level: int = logging.INFO) -> Callable[[str], None]:
    """Handler forwarding each rendered message to ``target`` at ``level``.

    Register one per logpool level (with a level filter) to keep severities
    aligned, e.g. ``to_std_logger(target, STD_LEVELS[LogLevel.ERROR])``.
    """
    def handler(message: str) -> None:
        target.log(level, message)
    handler.__qualname__ = f"to_std_logger({target.name!r})"
    return handler


def to_stream(stream: TextIO | None = None) -> Callable[[str], None]:
    """Handler writing each rendered message as a line (``sys.stdout`` by default).

    The stream is looked up at call time so pytest's capture still applies.
    """
    def handler(message: str) -> None:
        out = stream if stream is not None else sys.stdout
        out.write(message + "\n")
        out.flush()
    return handler
