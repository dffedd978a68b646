from .constants import LogLevel, ALL, TIME_FORMAT_CODES, CLEARING_TIME_FORMATS
from .errors import (LoggerError, InvalidArgumentError, InvalidNameError, LogFormatError,
                     ReadOnlyViolation, DisposedLoggerError)
from .ring import RingBuffer
from .handlers import HandlerRegistry
from .render import strftime_renderer
from .logger import Logger
from .registry import LoggerRegistry, default_registry, get_logger, find_logger, dispose_logger, normalize_name

__all__ = [
    'LogLevel', 'ALL', 'TIME_FORMAT_CODES', 'CLEARING_TIME_FORMATS',
    'LoggerError', 'InvalidArgumentError', 'InvalidNameError', 'LogFormatError',
    'ReadOnlyViolation', 'DisposedLoggerError',
    'RingBuffer', 'HandlerRegistry', 'strftime_renderer',
    'Logger', 'LoggerRegistry', 'default_registry', 'get_logger', 'find_logger', 'dispose_logger',
    'normalize_name',
]
