# fractol

An interactive viewer for the Mandelbrot set and Julia sets, drawn in a
pygame window of 800×800 pixels.

The image is built up in passes. The first pass stops iterating at 50
steps. Each later pass raises that limit by 50, up to a maximum of 1000, so
the picture gets sharper while you watch. Every frame does a limited amount
of work, so the window stays responsive during a pass. Escape times are
smoothed and mapped onto a 512-colour sinusoidal palette. Points that do not
escape are drawn black.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

Show the Mandelbrot set:

```
fractol 1
```

Show a Julia set:

```
fractol 2 400 200
```

For a Julia set, the constant `c` is chosen by pixel position `x y`. The
pixel is mapped onto the starting view of the complex plane, which runs from
−2 to 1 on the real axis and from −1.5 to 1.5 on the imaginary axis. Both
coordinates must satisfy `0 <= x < 800` and `0 <= y < 800`.

If the arguments are missing or invalid, the command prints a short usage
message and exits with a failure status. It takes numbers the way C's `atoi`
does: leading whitespace and a sign are allowed, and parsing stops at the
first non-digit.

The same entry point can also be started with `python -m fractol.app`.

While it renders, the viewer prints a line when each pass completes and
another when rendering has finished at the full depth.

## Controls

| Input            | Effect                                                                      |
|------------------|-----------------------------------------------------------------------------|
| Mouse wheel up   | Zoom in (×0.8) around the cursor and restart rendering from the first pass  |
| Mouse wheel down | Zoom out (×1.2) around the cursor and restart rendering from the first pass |
| Space            | Print the renderer's current pixel position and the complex value under it  |
| Escape           | Close the window                                                            |
| Window close     | Close the window                                                            |

## Library use

The pieces behind the viewer can also be used on their own:

- **`fractol.fractal`**
  - `escape(point, kind, julia_c, max_iter, budget)`.
  - `iterate`, `next_z`, `smooth_iteration` and `absolute_squared`.
  - `FractalKind` chooses Mandelbrot or Julia.
  - `Budget` caps the work done in one frame.
- **`fractol.palette`**
  - `generate_palette`, `interpolate_color` and `split_channels`.
  - `clamp_channel`.
  - `color_for`, which turns a smoothed escape count into a packed `0xRRGGBB` colour.
- **`fractol.viewer`**
  - `Viewport` maps pixels to the complex plane (`to_complex`) and zooms about a pixel (`zoom`).
  - `FractalView` holds the progressive rendering state:
    - `render_step` and `finish_pass` advance the rendering.
    - `handle_scroll` reacts to the mouse wheel.
    - `seed_at` and `pixel_color` give the point and colour at a position.
    - The image is kept as rows of packed colours in `image`.
- **`fractol.app`**
  - `parse_args` builds a `FractalView` from arguments, or raises `UsageError`.
  - `run` opens the window.
  - `main` is the command.

Small text helpers ship alongside:

- **`fractol.printf`**: `printf_format` and `printf`, for the `%c %s %p %d %i %u %x %X` conversions.
- **`fractol.chars`**: ASCII classification and case conversion.
- **`fractol.textutil`**: `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp` and `strmapi`.
- **`fractol.lines`**: `LineReader`, which reads a stream one line at a time.

## Limitations

The viewer has no keyboard panning. It cannot save the image to a file. The
window size and iteration limits are fixed.