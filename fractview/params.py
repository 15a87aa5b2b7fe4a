"""Command-line parameter checking and decimal parsing."""

from __future__ import annotations

_HELP_LINES = (
    "Fractal allowed: [Julia, Mandelbrot]",
    "Julia Fractal exemple:",
    "Exemple: ./fractol julia 0.285[>= -2.0] 0.01[<= 2.0]",
    "Mandelbrot Fractal exemple : ./fractol mandel",
)


def help_text() -> str:
    """Return the usage message shown for bad or missing arguments."""
    return "\n".join(_HELP_LINES) + "\n"


class UsageError(Exception):
    """Raised when the command line is not usable; carries the help text."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else help_text())


def check_param(text: str) -> None:
    """Validate a decimal argument: optional sign, digits, at most one point.

    Raises UsageError when the text does not have that shape.
    """
    body = text[1:] if text[:1] in ("+", "-") else text
    if not body:
        raise UsageError()
    if body.count(".") > 1:
        raise UsageError()
    if any(ch != "." and not ("0" <= ch <= "9") for ch in body):
        raise UsageError()


def parse_decimal(text: str) -> float:
    """Parse a decimal number leniently.

    A leading sign is honoured, every digit after the first point shifts the
    value one decimal place, and any other character is ignored.
    """
    factor = 1.0
    value = 0.0
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            factor = -1.0
        text = text[1:]
    after_point = False
    for ch in text:
        if ch == ".":
            after_point = True
        elif "0" <= ch <= "9":
            if after_point:
                factor /= 10.0
            value = value * 10.0 + (ord(ch) - ord("0"))
    return factor * value