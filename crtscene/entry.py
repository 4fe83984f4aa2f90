"""A single log record with its terminal and JSON renderings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .clock import current_datetime
from .colour import ansi_background_from_hex, ansi_foreground_from_hex
from .files import filename_from_path
from .severity import Severity

_BOLD = "\033[1m"
_RESET = "\033[0m"


@dataclass
class Entry:
    """A log record stamped with the local date and time of its creation."""

    severity: Severity
    file: str
    function: str
    line: int
    message: str
    date: str = field(init=False)
    time: str = field(init=False)
    filename: str = field(init=False)

    def __post_init__(self) -> None:
        self.severity = Severity(self.severity)
        self.date = current_datetime("%A %d %Y")
        self.time = current_datetime("%H:%M:%S")
        self.filename = filename_from_path(self.file)

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a JSON-ready mapping."""
        return {
            "severity": self.severity.label,
            "level": int(self.severity),
            "date": self.date,
            "time": self.time,
            "file": self.file,
            "function": self.function,
            "line": self.line,
            "message": self.message,
        }

    def to_string(self) -> str:
        """Render the record as a coloured two-line terminal message."""
        background = ansi_background_from_hex(self.severity.background_colour)
        foreground = ansi_foreground_from_hex(self.severity.text_colour)
        return (
            f"{_BOLD}{background}{foreground}[{self.severity.label}]{_RESET}"
            f" [{self.date} ~ {self.time}]"
            f" [{self.filename} | {self.function}:{self.line}]\n"
            f"  {self.message}"
        )