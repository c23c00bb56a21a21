"""Multi-level logging to a shared log file and the console."""

from __future__ import annotations

import os
import sys
import time
from enum import IntEnum
from typing import IO, Optional, Union


class LogLevel(IntEnum):
    DEBUG = 1
    INFO = 5
    WARNING = 10
    ERROR = 15


_LEVEL_NAMES = {
    "INFO": LogLevel.INFO,
    "WARNING": LogLevel.WARNING,
    "ERROR": LogLevel.ERROR,
}


class _Sink:
    """Shared state: the log file (opened lazily) and the global level."""

    def __init__(self) -> None:
        self.file_name = "application.log"
        self.level = LogLevel.DEBUG
        self._handle: Optional[IO[str]] = None
        self._open_attempted = False

    def _file(self) -> Optional[IO[str]]:
        if not self._open_attempted:
            self._open_attempted = True
            try:
                self._handle = open(
                    self.file_name, "w", encoding="latin-1", errors="replace"
                )
            except OSError:
                print(
                    f"> Cannot open file {self.file_name} in write mode!",
                    file=sys.stderr,
                )
        return self._handle

    def write(self, line: str) -> None:
        print(line, file=sys.stderr)
        handle = self._file()
        if handle is not None:
            handle.write(line + "\n")
            handle.flush()

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
        self._handle = None
        self._open_attempted = False


_sink = _Sink()


class Logger:
    """Logger tagging each line with a class name and the current time."""

    def __init__(self, class_name: str = "") -> None:
        self.class_name = class_name

    def _write(self, priority: str, text: str) -> None:
        stamp = time.strftime("%H:%M:%S")
        _sink.write(f"{priority}[{self.class_name}][{stamp}] {text}")

    def debug(self, text: str) -> None:
        if _sink.level <= LogLevel.DEBUG:
            self._write("DEBUG", text)

    def info(self, text: str) -> None:
        if _sink.level <= LogLevel.INFO:
            self._write("INFO", text)

    def warning(self, text: str) -> None:
        if _sink.level <= LogLevel.WARNING:
            self._write("WARNING", text)

    def error(self, text: str) -> None:
        if _sink.level <= LogLevel.ERROR:
            self._write("ERROR", text)


def set_log_file(name: Union[str, os.PathLike]) -> None:
    """Direct subsequent log lines to the given file (truncated on first write)."""
    _sink.close()
    _sink.file_name = os.fspath(name)


def set_level(level: Union[LogLevel, int, str] = LogLevel.DEBUG) -> None:
    """Set the global level; unknown level names fall back to DEBUG."""
    if isinstance(level, str):
        _sink.level = _LEVEL_NAMES.get(level, LogLevel.DEBUG)
    else:
        _sink.level = LogLevel(level)


def get_level() -> LogLevel:
    return _sink.level