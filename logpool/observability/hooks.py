"""
Process-wide error reporting for handler failures.

Loggers catch every exception a handler raises during dispatch and hand it to
the reporter registered here. The default reporter logs the failure through
the stdlib ``logpool`` logger with its traceback.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from threading import RLock

from ..core.protocols import ErrorReporter

_log = logging.getLogger("logpool")


def log_error(error: BaseException) -> None:
    """Default reporter."""
    _log.error("log handler failed: %s", error, exc_info=error)


class _ReporterRegistry:
    """Thread-safe holder for the single process-wide error reporter."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._reporter: ErrorReporter = log_error

    def set_reporter(self, reporter: ErrorReporter | None) -> None:
        with self._lock:
            self._reporter = reporter or log_error

    def get_reporter(self) -> ErrorReporter:
        with self._lock:
            return self._reporter

    def report(self, error: BaseException) -> None:
        reporter = self.get_reporter()
        try:
            reporter(error)
        except Exception:
            # A broken reporter must never reach the caller of Logger.log.
            _log.exception("error reporter %r failed while reporting %r", reporter, error)


_REGISTRY = _ReporterRegistry()


def set_error_reporter(reporter: ErrorReporter | None) -> None:
    """Register the process-wide error reporter (None restores the default)."""
    _REGISTRY.set_reporter(reporter)


def get_error_reporter() -> ErrorReporter:
    """Return the currently registered error reporter."""
    return _REGISTRY.get_reporter()


def report_error(error: BaseException) -> None:
    """Forward a handler failure to the registered reporter."""
    _REGISTRY.report(error)


@contextmanager
def use_error_reporter(reporter: ErrorReporter | None):
    """Context manager that temporarily sets the error reporter."""
    previous = get_error_reporter()
    set_error_reporter(reporter)
    try:
        yield
    finally:
        set_error_reporter(previous)
