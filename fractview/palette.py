"""Named colours used when painting fractals."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """24-bit RGB colours packed as 0xRRGGBB integers."""

    BLACK = 0x000000
    WHITE = 0xFFFFFF
    RED = 0xFF0000
    GREEN = 0x00FF00
    BLUE = 0x0000FF
    YELLOW = 0xFFFF00
    CYAN = 0x00FFFF
    MAGENTA = 0xFF00FF
    NEON_GREEN = 0x39FF14
    NEON_PINK = 0xFF1493
    ELECTRIC_BLUE = 0x7DF9FF
    VIOLET = 0xEE82EE
    TURQUOISE = 0x40E0D0
    LAVENDER = 0xE6E6FA
    ORANGE = 0xFFA500

    def rgb(self) -> tuple[int, int, int]:
        """Return the colour as a (red, green, blue) tuple of bytes."""
        value = int(self)
        return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF