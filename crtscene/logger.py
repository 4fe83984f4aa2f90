"""Process-wide logger that prints coloured records and keeps a JSON log file."""

from __future__ import annotations

import functools
import inspect
import os
from types import FrameType
from typing import Any

from .clock import current_datetime
from .entry import Entry
from .files import create_file, save_json
from .severity import Severity

LOG_DIRECTORY = ".cache/logs"


class Logger:
    """Collects log entries, echoes them to stdout and rewrites the log file on each one."""

    def __init__(self, directory: str | os.PathLike[str] = LOG_DIRECTORY) -> None:
        filename = current_datetime("%d-%m-%Y_%H-%M-%S") + ".log"
        self.log_path = os.path.join(os.fspath(directory), filename)
        self.entries: list[Entry] = []
        create_file(self.log_path)

    def log(self, severity: Severity, file: str, function: str, line: int, message: str) -> Entry:
        """Record a message and print it."""
        entry = Entry(severity, file, function, line, message)
        self.add_entry(entry)
        print(entry.to_string(), flush=True)
        return entry

    def add_entry(self, entry: Entry) -> None:
        """Append an entry and save the log."""
        self.entries.append(entry)
        self.save()

    def save(self) -> None:
        """Write every entry so far to the log file as a JSON array."""
        save_json([entry.to_dict() for entry in self.entries], self.log_path)


@functools.lru_cache(maxsize=1)
def get_logger() -> Logger:
    """Return the shared logger, creating it on first use."""
    return Logger()


def _emit(severity: Severity, message: str, args: tuple[Any, ...], frame: FrameType | None) -> None:
    text = message.format(*args)
    if frame is None:
        get_logger().log(severity, "<unknown>", "<unknown>", 0, text)
        return
    get_logger().log(severity, frame.f_code.co_filename, frame.f_code.co_name, frame.f_lineno, text)


def _caller() -> FrameType | None:
    frame = inspect.currentframe()
    if frame is None or frame.f_back is None:
        return None
    return frame.f_back.f_back


def debug(message: str, *args: Any) -> None:
    """Log a formatted debug message; disabled when Python runs optimised."""
    if __debug__:
        _emit(Severity.DEBUG, message, args, _caller())


def info(message: str, *args: Any) -> None:
    """Log a formatted informational message."""
    _emit(Severity.INFO, message, args, _caller())


def warn(message: str, *args: Any) -> None:
    """Log a formatted warning."""
    _emit(Severity.WARN, message, args, _caller())


def error(message: str, *args: Any) -> None:
    """Log a formatted error."""
    _emit(Severity.ERROR, message, args, _caller())


def fatal(message: str, *args: Any) -> None:
    """Log a formatted fatal error."""
    _emit(Severity.FATAL, message, args, _caller())