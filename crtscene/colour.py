"""Colour constants and conversions between hex, ANSI escape codes and normalised RGB."""

from __future__ import annotations

from collections.abc import Sequence

GREY_RGB = (178.0, 178.0, 178.0)
WHITE_RGB = (255.0, 255.0, 255.0)
BLUE_RGB = (0.0, 0.0, 255.0)

_CHANNEL_STARTS = (0, 2, 4)


def rgb_from_hex(hex_colour: str) -> tuple[int, int, int]:
    """Parse a colour written as ``#rrggbb`` into three integer channels."""
    digits = hex_colour[1:]
    try:
        red, green, blue = (int(digits[start : start + 2], 16) for start in _CHANNEL_STARTS)
    except ValueError as exc:
        raise ValueError(f"invalid hex colour: {hex_colour!r}") from exc
    return red, green, blue


def ansi_foreground_from_hex(hex_colour: str) -> str:
    """Return the 24-bit ANSI escape sequence that sets the text colour."""
    red, green, blue = rgb_from_hex(hex_colour)
    return f"\033[38;2;{red};{green};{blue}m"


def ansi_background_from_hex(hex_colour: str) -> str:
    """Return the 24-bit ANSI escape sequence that sets the background colour."""
    red, green, blue = rgb_from_hex(hex_colour)
    return f"\033[48;2;{red};{green};{blue}m"


def high_precision_rgb(rgb: Sequence[float]) -> tuple[float, float, float]:
    """Scale 0-255 channels to the 0.0-1.0 range used by shaders."""
    if len(rgb) != 3:
        raise ValueError(f"expected three colour channels, got {len(rgb)}")
    red, green, blue = (float(channel) / 255.0 for channel in rgb)
    return red, green, blue