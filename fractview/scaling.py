"""Linear mapping between numeric ranges."""

from __future__ import annotations


def scale(num: float, new_min: float, new_max: float, old_max: float) -> float:
    """Map ``num`` from the range [0, old_max] onto [new_min, new_max]."""
    return (new_max - new_min) * num / old_max + new_min