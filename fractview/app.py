"""Command-line entry point and interactive window for the fractal view."""

from __future__ import annotations

import sys
from typing import Any, Sequence

from .events import Button, handle_key, handle_mouse
from .params import UsageError, check_param, parse_decimal
from .render import FractalKind, FractalState, render
from .textutil import compare


def parse_args(argv: Sequence[str]) -> FractalState:
    """Build the initial state from the arguments after the program name.

    Accepts ``mandel`` alone, or ``julia`` followed by two decimal numbers.
    Raises UsageError otherwise.
    """
    args = list(argv)
    is_mandel = len(args) == 1 and compare(args[0], "mandel", 6) == 0
    is_julia = len(args) == 3 and compare(args[0], "julia", 5) == 0
    if not (is_mandel or is_julia):
        raise UsageError()
    title = args[0]
    if compare(title, "julia", 5) == 0:
        check_param(args[1])
        check_param(args[2])
        return FractalState(
            kind=FractalKind.JULIA,
            title=title,
            julia_x=parse_decimal(args[1]),
            julia_y=parse_decimal(args[2]),
        )
    return FractalState(kind=FractalKind.MANDELBROT, title=title)


class Viewer:
    """A window that shows the fractal and reacts to keys and the mouse wheel."""

    def __init__(self, state: FractalState) -> None:
        self.state = state
        self.closed = False
        self._root: Any = None
        self._label: Any = None
        self._photo: Any = None

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        import tkinter as tk

        root = tk.Tk()
        root.title(self.state.title)
        root.resizable(False, False)
        label = tk.Label(root, borderwidth=0)
        label.pack()
        root.bind("<KeyPress>", self._on_key)
        root.bind("<Button-4>", lambda _event: self._on_button(Button.WHEEL_UP))
        root.bind("<Button-5>", lambda _event: self._on_button(Button.WHEEL_DOWN))
        root.bind("<MouseWheel>", self._on_wheel)
        root.protocol("WM_DELETE_WINDOW", self.close)
        self._root = root
        self._label = label
        self.closed = False
        self._redraw()
        root.mainloop()

    def close(self) -> None:
        """Close the window if it is open."""
        self.closed = True
        if self._root is not None:
            root, self._root = self._root, None
            self._label = None
            self._photo = None
            root.destroy()

    def _redraw(self) -> None:
        if self._label is None:
            return
        from PIL import ImageTk

        self._photo = ImageTk.PhotoImage(render(self.state))
        self._label.configure(image=self._photo)

    def _on_key(self, event: Any) -> None:
        if handle_key(self.state, event.keysym_num):
            self.close()
        else:
            self._redraw()

    def _on_button(self, button: int) -> None:
        handle_mouse(self.state, button)
        self._redraw()

    def _on_wheel(self, event: Any) -> None:
        self._on_button(Button.WHEEL_UP if event.delta > 0 else Button.WHEEL_DOWN)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer; print usage and return 0 when the arguments are wrong."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        state = parse_args(argv)
    except UsageError as error:
        sys.stdout.write(str(error))
        return 0
    Viewer(state).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())