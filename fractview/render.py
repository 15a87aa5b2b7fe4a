"""Escape-time rendering of the Mandelbrot and Julia sets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from PIL import Image

from .palette import Color
from .scaling import scale

WIDTH = 800
HEIGHT = 800

DEFAULT_ESCAPE_VALUE = 4.0
DEFAULT_MAX_ITERATION = 42


class FractalKind(Enum):
    """Which fractal is drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


@dataclass
class FractalState:
    """Everything needed to draw one view of a fractal."""

    kind: FractalKind = FractalKind.MANDELBROT
    title: str = "mandel"
    julia_x: float = 0.0
    julia_y: float = 0.0
    escape_value: float = DEFAULT_ESCAPE_VALUE
    max_iteration: int = DEFAULT_MAX_ITERATION
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0
    width: int = WIDTH
    height: int = HEIGHT

    def reset(self) -> None:
        """Restore the default view: iterations, escape radius, pan and zoom."""
        self.escape_value = DEFAULT_ESCAPE_VALUE
        self.max_iteration = DEFAULT_MAX_ITERATION
        self.shift_x = 0.0
        self.shift_y = 0.0
        self.zoom = 1.0


def pixel_color(state: FractalState, x: int, y: int) -> int:
    """Return the 0xRRGGBB colour of the pixel at (x, y)."""
    zx = scale(x, -2, 2, state.width - 1) * state.zoom + state.shift_x
    zy = scale(y, -2, 2, state.height - 1) * state.zoom + state.shift_y
    if state.kind is FractalKind.JULIA:
        cx, cy = state.julia_x, state.julia_y
    else:
        cx, cy = zx, zy
    for i in range(state.max_iteration):
        zx, zy = zx * zx - zy * zy + cx, 2 * zx * zy + cy
        if zx * zx + zy * zy > state.escape_value:
            return int(scale(i, Color.BLACK, Color.WHITE, state.max_iteration))
    return int(Color.TURQUOISE)


def render(state: FractalState) -> Image.Image:
    """Draw the whole view into a new RGB image."""
    data = bytearray()
    for y in range(state.height):
        for x in range(state.width):
            data += pixel_color(state, x, y).to_bytes(3, "big")
    return Image.frombytes("RGB", (state.width, state.height), bytes(data))