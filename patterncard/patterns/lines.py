"""Parallel vertical lines or a radial burst from the centre."""

import math

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import LINES, config_for
from ._common import maybe_animate


def _parallel(width, height, rng, palette, animate, cfg):
    count = cfg["parallel_count"]
    spacing = width / count
    lines = []
    for i in range(count):
        thickness, rng = rng.uniform_range(cfg["parallel_thickness"])
        opacity, rng = rng.uniform_range(cfg["parallel_opacity"])
        x = i * spacing + spacing / 2
        seg = svg.line(x, 0, x, height).with_attributes(
            stroke=palette.color(i), stroke_width=thickness, opacity=opacity
        )
        lines.append(maybe_animate(seg, animate, "line-pulse"))
    return lines, rng


def _radial(width, height, rng, palette, animate, cfg):
    count = cfg["radial_count"]
    cx, cy = width / 2, height / 2
    length = max(width, height)
    lines = []
    for i in range(count):
        thickness, rng = rng.uniform_range(cfg["radial_thickness"])
        opacity, rng = rng.uniform_range(cfg["radial_opacity"])
        angle = 2 * math.pi * i / count
        seg = svg.line(
            cx, cy, cx + math.cos(angle) * length, cy + math.sin(angle) * length
        ).with_attributes(stroke=palette.color(i), stroke_width=thickness, opacity=opacity)
        lines.append(maybe_animate(seg, animate, "line-pulse"))
    return lines, rng


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(LINES)
    mode, rng = rng.choice(cfg["modes"])
    if mode == "parallel":
        return _parallel(width, height, rng, palette, animate, cfg)
    return _radial(width, height, rng, palette, animate, cfg)
