"""
Error taxonomy for logpool.

Every error derives from ``LoggerError`` and from the builtin exception a
caller would naturally catch for the same mistake, so ``except TypeError``
around a bad ``add_handler`` call keeps working.

Errors:
    InvalidArgumentError: Wrong type or shape for a level, message, handler or name
    InvalidNameError: A logger name with no identifier characters in it
    LogFormatError: Message template and arguments do not match
    ReadOnlyViolation: Direct attribute or item assignment on a Logger
    DisposedLoggerError: Use of a logger after ``dispose()``
"""


class LoggerError(Exception):
    """Base class for all logpool errors."""


class InvalidArgumentError(LoggerError, TypeError, ValueError):
    pass


class InvalidNameError(InvalidArgumentError):
    pass


class LogFormatError(LoggerError, ValueError):
    pass


class ReadOnlyViolation(LoggerError, AttributeError):
    pass


class DisposedLoggerError(LoggerError, RuntimeError):
    pass


def usage_error(usage: str, param: str, expected: str, value: object) -> InvalidArgumentError:
    """Build the standard argument error, e.g.

    ``Usage Logger.log(level, message, *args) : level - number expected, got str.``
    """
    return InvalidArgumentError(
        f"Usage {usage} : {param} - {expected} expected, got {type(value).__name__}.")
