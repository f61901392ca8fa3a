"""Coloured, levelled messages on standard error."""

from __future__ import annotations

import enum
import sys

_RESET = "\x1b[0m"


class LogLevel(enum.IntEnum):
    """Kinds of log message."""

    INFO = 1
    ERROR = 2
    GOOD = 3
    TODO = 4
    FATAL = 5

    @property
    def color(self) -> str:
        return _COLORS[self]

    @property
    def is_fatal(self) -> bool:
        """Whether a message of this level stops the program."""
        return self in (LogLevel.FATAL, LogLevel.TODO)


_COLORS = {
    LogLevel.INFO: "\x1b[33m",
    LogLevel.ERROR: "\x1b[31m",
    LogLevel.GOOD: "\x1b[32m",
    LogLevel.TODO: "\x1b[42m",
    LogLevel.FATAL: "\x1b[41m",
}


class FatalError(Exception):
    """Raised after a FATAL or TODO message has been written."""

    def __init__(self, level: LogLevel, message: str) -> None:
        super().__init__(message)
        self.level = level
        self.message = message


def log(level: LogLevel | int, fmt: str, *args: object) -> str:
    """Write a tagged message to standard error and return the line written.

    ``fmt`` is formatted with ``%`` when arguments are given. An empty
    message writes nothing. FATAL and TODO messages raise FatalError
    once written.
    """
    level = LogLevel(level)
    message = fmt % args if args else fmt
    if not message:
        return ""

    line = f"[{level.color}{level.name}{_RESET}] {message}\n"
    sys.stderr.write(line)
    sys.stderr.flush()

    if level.is_fatal:
        raise FatalError(level, message)
    return line