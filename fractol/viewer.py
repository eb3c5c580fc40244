"""Progressive fractal rendering state and its response to user input."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from fractol.fractal import MAX_ITER, Budget, FractalKind, escape
from fractol.palette import color_for, generate_palette
from fractol.printf import printf

WIN_W = 800
WIN_H = 800

SCROLL_UP = 4
SCROLL_DOWN = 5
ZOOM_IN_FACTOR = 0.8
ZOOM_OUT_FACTOR = 1.2

FIRST_PASS_MAX_ITER = 50
PASS_ITER_STEP = 50


@dataclass
class Viewport:
    """The rectangle of the complex plane shown in a window of pixels."""

    re_start: float = -2.0
    re_end: float = 1.0
    im_start: float = -1.5
    im_end: float = 1.5
    width: int = WIN_W
    height: int = WIN_H

    def to_complex(self, x: int, y: int) -> complex:
        """The point of the plane under pixel (x, y); y grows downwards."""
        real = self.re_start + x / self.width * (self.re_end - self.re_start)
        imag = self.im_end - y / self.height * (self.im_end - self.im_start)
        return complex(real, imag)

    def zoom(self, x: int, y: int, factor: float) -> None:
        """Scale the view by ``factor`` about the point under pixel (x, y)."""
        centre = self.to_complex(x, y)
        self.re_start = centre.real - (centre.real - self.re_start) * factor
        self.re_end = centre.real + (self.re_end - centre.real) * factor
        self.im_start = centre.imag - (centre.imag - self.im_start) * factor
        self.im_end = centre.imag + (self.im_end - centre.imag) * factor


@dataclass
class FractalView:
    """A fractal drawn in passes of increasing iteration depth.

    Each call to :meth:`render_step` does at most one frame's worth of work,
    as allowed by ``budget``, and carries on where the last call stopped.
    """

    kind: FractalKind = FractalKind.MANDELBROT
    julia_c: complex = 0j
    viewport: Viewport = field(default_factory=Viewport)
    palette: list[int] = field(default_factory=generate_palette)
    budget: Budget = field(default_factory=Budget)
    output: TextIO | None = None
    pixel_x: int = 0
    pixel_y: int = 0
    pass_max_iter: int = FIRST_PASS_MAX_ITER
    rendering: bool = True
    image: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.image:
            self.image = [
                [0] * self.viewport.width for _ in range(self.viewport.height)
            ]

    def pixel_color(self, point: complex) -> int:
        """Colour of ``point`` at the current pass depth."""
        smooth = escape(
            point, self.kind, self.julia_c, self.pass_max_iter, self.budget
        )
        return color_for(smooth, self.pass_max_iter, self.palette)

    def render_step(self) -> bool:
        """Render one frame's share of pixels.

        Returns True when a pass was completed, meaning the image is ready to
        be shown.
        """
        if not self.rendering:
            return False
        width, height = self.viewport.width, self.viewport.height
        self.budget.reset()
        while self.pixel_y < height and not self.budget.exhausted:
            while self.pixel_x < width and not self.budget.exhausted:
                point = self.viewport.to_complex(self.pixel_x, self.pixel_y)
                self.image[self.pixel_y][self.pixel_x] = self.pixel_color(point)
                self.pixel_x += 1
            if self.pixel_x >= width:
                self.pixel_x = 0
                self.pixel_y += 1
        return self.finish_pass()

    def finish_pass(self) -> bool:
        """If every row is drawn, deepen the next pass or stop rendering.

        Returns True when a pass had been completed.
        """
        if self.pixel_y < self.viewport.height:
            return False
        if self.pass_max_iter < MAX_ITER:
            self.pass_max_iter = min(self.pass_max_iter + PASS_ITER_STEP, MAX_ITER)
            self.pixel_x = 0
            self.pixel_y = 0
            printf(
                "Render pass complete.Increasing MAX_ITER to %d.\n",
                self.pass_max_iter,
                file=self.output,
            )
        else:
            self.rendering = False
            printf("Rendering complete to MAX_ITER %d.\n", MAX_ITER, file=self.output)
            printf(
                "Current pixel at (%i, %i).\n",
                self.pixel_x,
                self.pixel_y,
                file=self.output,
            )
        return True

    def handle_scroll(self, button: int, x: int, y: int) -> bool:
        """Zoom about (x, y) for wheel buttons; return whether the view changed."""
        if button == SCROLL_UP:
            factor = ZOOM_IN_FACTOR
        elif button == SCROLL_DOWN:
            factor = ZOOM_OUT_FACTOR
        else:
            return False
        self.viewport.zoom(x, y, factor)
        self.pixel_x = 0
        self.pixel_y = 0
        self.pass_max_iter = FIRST_PASS_MAX_ITER
        self.rendering = True
        return True

    def seed_at(self, x: int, y: int) -> complex:
        """The point under pixel (x, y), usable as a Julia constant."""
        return self.viewport.to_complex(x, y)