"""Escape-time iteration for the Mandelbrot and Julia sets."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

MAX_ITER = 1000
MAX_CALCULATIONS_PER_FRAME = 10_000_000
ESCAPE_RADIUS_SQUARED = 4.0
COST_PER_STEP = 7


class FractalKind(Enum):
    """Which fractal is being drawn."""

    MANDELBROT = 0
    JULIA = 1


@dataclass
class Budget:
    """Work counter that limits how much iteration one frame may do."""

    limit: int = MAX_CALCULATIONS_PER_FRAME
    spent: int = 0

    def spend(self, cost: int) -> bool:
        """Record ``cost`` units of work; return True once the budget is used up."""
        self.spent += cost
        return self.exhausted

    def reset(self) -> None:
        """Start a fresh frame with nothing spent."""
        self.spent = 0

    @property
    def exhausted(self) -> bool:
        return self.spent >= self.limit


def absolute_squared(z: complex) -> float:
    """Squared magnitude of ``z``."""
    return z.real * z.real + z.imag * z.imag


def next_z(z: complex, c: complex) -> complex:
    """One step of z -> z**2 + c."""
    real = z.real * z.real - z.imag * z.imag + c.real
    imag = 2 * z.real * z.imag + c.imag
    return complex(real, imag)


def smooth_iteration(count: int, z: complex) -> float:
    """Fractional escape count for a point that escaped after ``count`` steps."""
    log_zn = 0.5 * math.log(absolute_squared(z))
    return count + 1.0 - math.log(log_zn) / math.log(2.0)


def iterate(
    z: complex,
    c: complex,
    max_iter: int,
    budget: Budget | None = None,
) -> float:
    """Iterate from ``z`` with constant ``c`` and return the smoothed escape count.

    Returns ``max_iter`` for points that did not escape, and ``MAX_ITER``
    when the frame budget ran out before the point was decided.
    """
    z = complex(z)
    c = complex(c)
    count = 0
    while True:
        if budget is not None and budget.spend(COST_PER_STEP):
            return float(MAX_ITER)
        if absolute_squared(z) > ESCAPE_RADIUS_SQUARED:
            return smooth_iteration(count, z)
        if count == max_iter:
            return float(count)
        z = next_z(z, c)
        count += 1


def escape(
    point: complex,
    kind: FractalKind,
    julia_c: complex,
    max_iter: int,
    budget: Budget | None = None,
) -> float:
    """Smoothed escape count of ``point`` for the chosen fractal."""
    if kind is FractalKind.MANDELBROT:
        return iterate(0j, point, max_iter, budget)
    return iterate(point, julia_c, max_iter, budget)