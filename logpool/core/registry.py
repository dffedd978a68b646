"""
Named singleton registry for loggers.

This module provides:
- normalize_name: Reduce a requested name to its identifier-safe part
- LoggerRegistry: Thread-safe name -> Logger map that owns its instances
- get_logger, find_logger, dispose_logger: Helpers bound to the default registry

The registry never takes a logger's lock while holding its own, so a logger
may call back into the registry (on dispose) without risking deadlock.
"""
from __future__ import annotations
import logging
import re
from threading import RLock
from .errors import InvalidNameError, usage_error
from .logger import Logger
from .protocols import TimestampRenderer
from .render import strftime_renderer

_log = logging.getLogger(__name__)

_NAME_PATTERN = re.compile(r'[_0-9A-Za-z]+')

def _match_name(name: str) -> str | None:
    match = _NAME_PATTERN.search(name)
    return match.group(0) if match else None

def normalize_name(name: str) -> str:
    """First run of letters, digits and underscores in ``name``.

    ``"  my.app"`` -> ``"my"``.

    Raises:
        InvalidArgumentError: ``name`` is not a str
        InvalidNameError: ``name`` has no identifier characters
    """
    if not isinstance(name, str):
        raise usage_error("Logger(name)", "name", "string", name)
    key = _match_name(name)
    if key is None:
        raise InvalidNameError(f"Usage Logger(name) : name {name!r} has no identifier characters.")
    return key

class LoggerRegistry:
    """Thread-safe map from normalised name to its single live Logger.

    Args:
        renderer: Timestamp renderer given to every logger created here
            (defaults to ``strftime_renderer``)
    """

    def __init__(self, renderer: TimestampRenderer | None = None) -> None:
        self._lock = RLock()
        self._loggers: dict[str, Logger] = {}
        self.renderer: TimestampRenderer = renderer or strftime_renderer

    def get_or_create(self, name: str, factory: type[Logger] = Logger) -> Logger:
        """Return the live logger for ``name``, creating a fresh one if needed.

        An existing logger is returned as is, whatever ``factory`` says.
        """
        key = normalize_name(name)
        with self._lock:
            logger = self._loggers.get(key)
            if logger is None:
                logger = factory._create(key, self)
                self._loggers[key] = logger
                _log.debug("created logger %r", key)
            return logger

    def find(self, name: object) -> Logger | None:
        """The live logger for ``name`` without creating one; None for non-str names."""
        if not isinstance(name, str):
            return None
        key = _match_name(name)
        if key is None:
            return None
        with self._lock:
            return self._loggers.get(key)

    def dispose(self, name: str) -> bool:
        """Dispose the logger for ``name``; False if there was none."""
        logger = self.find(name)
        if logger is None:
            return False
        logger.dispose()
        return True

    def clear(self) -> None:
        """Dispose every logger in the registry."""
        with self._lock:
            loggers = list(self._loggers.values())
        for logger in loggers:
            logger.dispose()

    def names(self) -> list[str]:
        with self._lock:
            return list(self._loggers)

    def _forget(self, logger: Logger) -> None:
        with self._lock:
            if self._loggers.get(logger.name) is logger:
                del self._loggers[logger.name]
                _log.debug("disposed logger %r", logger.name)

    def __contains__(self, name: object) -> bool:
        return self.find(name) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __repr__(self) -> str:
        return f"LoggerRegistry({self.names()!r})"


_DEFAULT = LoggerRegistry()

def default_registry() -> LoggerRegistry:
    """The process-wide registry used by ``Logger(name)`` and ``get_logger``."""
    return _DEFAULT

def get_logger(name: str) -> Logger:
    """Get or create the logger for ``name`` in the default registry."""
    return _DEFAULT.get_or_create(name)

def find_logger(name: object) -> Logger | None:
    """The existing logger for ``name``, or None; never creates one."""
    return _DEFAULT.find(name)

def dispose_logger(name: str) -> bool:
    return _DEFAULT.dispose(name)
