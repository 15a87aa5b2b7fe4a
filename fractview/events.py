"""Keyboard and mouse handling for the fractal view."""

from __future__ import annotations

from enum import IntEnum

from .render import FractalState

PAN_STEP = 0.5
ITERATION_STEP = 10
ZOOM_OUT_FACTOR = 0.95
ZOOM_IN_FACTOR = 1.05


class Key(IntEnum):
    """X11 keysym numbers the view reacts to."""

    ESC = 65307
    Q = 113
    UP = 65362
    DOWN = 65364
    LEFT = 65361
    RIGHT = 65363
    ZOOM_PLUS = 65451
    ZOOM_SUB = 65453


class Button(IntEnum):
    """Mouse buttons the view reacts to."""

    WHEEL_UP = 4
    WHEEL_DOWN = 5


def handle_key(state: FractalState, keycode: int) -> bool:
    """Apply a key press to the state; return True when it asks to close."""
    if keycode in (Key.ESC, Key.Q):
        return True
    step = PAN_STEP * state.zoom
    if keycode == Key.LEFT:
        state.shift_x += step
    elif keycode == Key.RIGHT:
        state.shift_x -= step
    elif keycode == Key.UP:
        state.shift_y += step
    elif keycode == Key.DOWN:
        state.shift_y -= step
    elif keycode == Key.ZOOM_PLUS:
        state.max_iteration += ITERATION_STEP
    elif keycode == Key.ZOOM_SUB:
        state.max_iteration -= ITERATION_STEP
    return False


def handle_mouse(state: FractalState, button: int) -> None:
    """Apply a mouse button press (wheel) to the zoom level."""
    if button == Button.WHEEL_DOWN:
        state.zoom *= ZOOM_OUT_FACTOR
    elif button == Button.WHEEL_UP:
        state.zoom *= ZOOM_IN_FACTOR