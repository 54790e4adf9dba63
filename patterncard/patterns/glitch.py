"""Horizontal glitch bars with jitter, topped by thin scanlines."""

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import GLITCH_BARS, config_for
from ._common import maybe_animate


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(GLITCH_BARS)
    count, rng = rng.uniform_range(cfg["bar_count"])

    bars = []
    for i in range(count):
        y, rng = rng.uniform_float(0, height)
        bar_width, rng = rng.uniform_range(cfg["bar_width"])
        bar_height, rng = rng.uniform_range(cfg["bar_height"])
        x, rng = rng.uniform_float(0, width - bar_width) if width > bar_width else (0, rng)
        opacity, rng = rng.uniform_range(cfg["opacity"])
        shifted, rng = rng.chance(cfg["offset_chance"])
        if shifted:
            offset, rng = rng.uniform_range(cfg["offset_range"])
            x += offset

        bar = svg.rect(x, y, bar_width, bar_height).with_attributes(
            fill=palette.color(i), opacity=opacity
        )
        bars.append(maybe_animate(bar, animate, "glitch-bar"))

    scanlines = []
    count = cfg["scanline_count"]
    for i in range(count + 1):
        opacity, rng = rng.uniform_range(cfg["scanline_opacity"])
        y = height * i / count
        scan = svg.rect(0, y, width, cfg["scanline_height"]).with_attributes(
            fill=palette.color(0), opacity=opacity
        )
        scanlines.append(maybe_animate(scan, animate, "scanline"))
    return bars + scanlines, rng
