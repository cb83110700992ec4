"""Levelled logging to the standard streams."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Any, TextIO


class LogLevel(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5


class Logger:
    """Writes messages at or above its level; errors go to the error stream."""

    def __init__(
        self,
        out: TextIO | None = None,
        err: TextIO | None = None,
        level: LogLevel = LogLevel.INFO,
    ) -> None:
        self._out = out
        self._err = err
        self.level = LogLevel(level)

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def _emit(self, threshold: LogLevel, stream: TextIO, message: Any, end: str) -> None:
        if self.level <= threshold:
            stream.write(f"{message}{end}")
            stream.flush()

    def fatal(self, message: Any, end: str = "\n") -> None:
        self._emit(LogLevel.FATAL, self.err, message, end)

    def error(self, message: Any, end: str = "\n") -> None:
        self._emit(LogLevel.ERROR, self.err, message, end)

    def warning(self, message: Any, end: str = "\n") -> None:
        self._emit(LogLevel.WARNING, self.out, message, end)

    def info(self, message: Any, end: str = "\n") -> None:
        self._emit(LogLevel.INFO, self.out, message, end)

    def debug(self, message: Any, end: str = "\n") -> None:
        self._emit(LogLevel.DEBUG, self.out, message, end)

    def trace(self, message: Any, end: str = "\n") -> None:
        self._emit(LogLevel.TRACE, self.out, message, end)


logger = Logger()