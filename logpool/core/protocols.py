"""
Protocol definitions for pluggable logger collaborators.

This module defines the interfaces (Protocols) a Logger talks to. All
protocols use structural subtyping, so plain functions satisfy them.

Protocols:
    Handler: Receives each rendered message that passes its level filter
    TimestampRenderer: Turns a time format specifier into text
    ErrorReporter: Process-wide sink for handler failures
"""
from __future__ import annotations
from typing import Protocol

class Handler(Protocol):
    """Receives rendered messages from a Logger.

    A handler may raise; the Logger catches the failure, forwards it to the
    error reporter and carries on with the next handler.
    """
    def __call__(self, message: str) -> object:
        ...

class TimestampRenderer(Protocol):
    """Renders the ``time_format`` of a Logger.

    Renderers return the formatted text. Anything that is not a non-empty
    string, or any exception, makes the Logger drop the timestamp segment.
    """
    def __call__(self, time_format: str) -> str:
        """Render ``time_format`` (a strftime-like specifier) for the current time.

        Args:
            time_format: Format specifier, e.g. ``"%H:%M:%S"``; a leading ``!``
                asks for UTC instead of local time

        Returns:
            Rendered timestamp text
        """
        ...

class ErrorReporter(Protocol):
    """Consumes handler failures raised during dispatch."""
    def __call__(self, error: BaseException) -> None:
        ...
