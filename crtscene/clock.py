"""Formatting of the current local date and time."""

from __future__ import annotations

from datetime import datetime


def current_datetime(pattern: str) -> str:
    """Format the current local time with a strftime pattern."""
    return datetime.now().strftime(pattern)