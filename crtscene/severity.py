"""Log severities and the colours used to display them."""

from __future__ import annotations

from enum import IntEnum


class Severity(IntEnum):
    """How serious a log entry is."""

    INFO = 0
    DEBUG = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    @property
    def label(self) -> str:
        """The upper-case name printed in log lines."""
        return self.name

    @property
    def background_colour(self) -> str:
        """Hex colour of the label's background."""
        return _BACKGROUND_COLOURS[self]

    @property
    def text_colour(self) -> str:
        """Hex colour of the label's text."""
        return _TEXT_COLOURS[self]


_BACKGROUND_COLOURS = {
    Severity.INFO: "#a6e3a1",
    Severity.DEBUG: "#89b4fa",
    Severity.WARN: "#f9e2af",
    Severity.ERROR: "#eba0ac",
    Severity.FATAL: "#f38ba8",
}

_TEXT_COLOURS = {severity: "#11111b" for severity in Severity}