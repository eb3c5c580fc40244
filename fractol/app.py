"""Command-line entry point and the interactive window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from fractol.fractal import FractalKind
from fractol.printf import printf, printf_format
from fractol.textutil import atoi
from fractol.viewer import WIN_H, WIN_W, FractalView, Viewport

WINDOW_TITLE = "fract'ol"
USAGE = "1=Mandelbrot 2=Julia\n"
JULIA_USAGE = "Julia set? (x, y) for c as u int\n"


class UsageError(Exception):
    """The command line did not describe a fractal to draw."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def parse_args(argv: Sequence[str]) -> FractalView:
    """Build the view described by the arguments (program name excluded)."""
    if not argv:
        raise UsageError(USAGE)
    choice = atoi(argv[0])
    if choice == 1:
        return FractalView(kind=FractalKind.MANDELBROT)
    if choice != 2:
        raise UsageError(USAGE)
    if len(argv) < 3:
        raise UsageError(JULIA_USAGE)
    x, y = atoi(argv[1]), atoi(argv[2])
    if not (0 <= x < WIN_W and 0 <= y < WIN_H):
        raise UsageError(printf_format(">= 0 ; x < %i: y < %i\n", WIN_W, WIN_H))
    return FractalView(kind=FractalKind.JULIA, julia_c=Viewport().to_complex(x, y))


def _rgb_bytes(view: FractalView) -> bytes:
    return b"".join(
        color.to_bytes(3, "big") for row in view.image for color in row
    )


def run(view: FractalView) -> int:
    """Open a window and render ``view`` until it is closed."""
    import pygame

    size = (view.viewport.width, view.viewport.height)
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_TITLE)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        seed = view.seed_at(view.pixel_x, view.pixel_y)
                        printf("Pixel: (%d, %d)\n", view.pixel_x, view.pixel_y)
                        print(f"Julia seed: ({seed.real:.6f} + {seed.imag:f}i", flush=True)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    view.handle_scroll(event.button, *event.pos)
            if not running:
                break
            if view.render_step():
                surface = pygame.image.frombuffer(_rgb_bytes(view), size, "RGB")
                screen.blit(surface, (0, 0))
                pygame.display.flip()
            elif not view.rendering:
                pygame.time.wait(10)
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run the viewer; -1 on a usage error."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        view = parse_args(args)
    except UsageError as error:
        printf(error.message)
        return -1
    return run(view)


if __name__ == "__main__":
    sys.exit(main())