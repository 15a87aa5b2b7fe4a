"""Interactive Mandelbrot and Julia set viewer with a windowless rendering core."""

__version__ = "0.1.0"
__all__ = ["__version__"]