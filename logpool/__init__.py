"""
logpool: named in-memory loggers with a recent-message cache

A Logger keeps and distributes log messages:
  - Level gate: messages below ``log_level`` are discarded
  - History: the last ``max_log`` rendered messages, ``log[1]`` is the newest
  - Handlers: callables receiving each rendered message, optionally per level

Example usage:
    from logpool import get_logger

    log = get_logger("app")
    log.max_log = 10
    log.set_prefix(2, "[INFO]")
    log.add_handler(print)
    log(2, "started %d workers", 4)     # prints '[INFO] started 4 workers'
    print(log[1], len(log))
"""

from .config import make_logger, make_standard_logger, LoggerConfig
from .core import (Logger, LoggerRegistry, LogLevel, ALL, get_logger, find_logger, dispose_logger,
                   LoggerError, InvalidArgumentError, InvalidNameError, LogFormatError,
                   ReadOnlyViolation, DisposedLoggerError)
from .observability import set_error_reporter, get_error_reporter, use_error_reporter

__all__ = [
    'make_logger', 'make_standard_logger', 'LoggerConfig',
    'Logger', 'LoggerRegistry', 'LogLevel', 'ALL', 'get_logger', 'find_logger', 'dispose_logger',
    'LoggerError', 'InvalidArgumentError', 'InvalidNameError', 'LogFormatError',
    'ReadOnlyViolation', 'DisposedLoggerError',
    'set_error_reporter', 'get_error_reporter', 'use_error_reporter',
]
