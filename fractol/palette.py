"""Colour palette and escape-count colouring."""

from __future__ import annotations

import math
from collections.abc import Sequence

PALETTE_SIZE = 512
BLACK = 0x000000


def clamp_channel(value: int) -> int:
    """Clamp a colour channel to 0..255."""
    return max(0, min(255, value))


def generate_palette(size: int = PALETTE_SIZE) -> list[int]:
    """Build a smooth rainbow palette of packed 0xRRGGBB colours."""
    palette = []
    for i in range(size):
        r = clamp_channel(int(math.sin(0.1 * i) * 127 + 128))
        g = clamp_channel(int(math.sin(0.1 * i + 2 * math.pi / 3) * 127 + 128))
        b = clamp_channel(int(math.sin(0.1 * i + 4 * math.pi / 3) * 127 + 128))
        palette.append(r << 16 | g << 8 | b)
    return palette


def split_channels(color: int) -> tuple[int, int, int]:
    """Return the (red, green, blue) channels of a packed colour."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def interpolate_color(color1: int, color2: int, t: float) -> int:
    """Blend linearly from ``color1`` (t=0) towards ``color2`` (t=1)."""
    r, g, b = (
        int(a + t * (b - a))
        for a, b in zip(split_channels(color1), split_channels(color2))
    )
    return (r << 16) | (g << 8) | b


def color_for(smooth: float, max_iter: int, palette: Sequence[int]) -> int:
    """Colour for a smoothed escape count; black for points that stayed bounded."""
    if smooth == float(max_iter):
        return BLACK
    size = len(palette)
    scaled = smooth * 10.0
    if not math.isfinite(scaled):
        # Points too far out to give a usable count.
        return palette[0]
    scaled = math.fmod(scaled, size)
    index = math.floor(scaled)
    return interpolate_color(
        palette[index % size], palette[(index + 1) % size], scaled - index
    )