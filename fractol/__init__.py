"""Interactive Mandelbrot and Julia set explorer with progressive rendering, plus small text helpers."""

__version__ = "0.1.0"