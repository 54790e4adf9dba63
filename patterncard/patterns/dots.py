"""Halftone dots that shrink away from a random focal point."""

import math

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import HALFTONE_DOTS, config_for
from ._common import distance, maybe_animate


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(HALFTONE_DOTS)
    spacing, rng = rng.uniform_range(cfg["spacing"])
    fx, rng = rng.uniform_range(cfg["center_offset"])
    fy, rng = rng.uniform_range(cfg["center_offset"])
    cx, cy = width * fx, height * fy
    max_dist = math.hypot(width, height)

    dots = []
    for y in range(0, height + 1, spacing):
        for x in range(0, width + 1, spacing):
            jitter, rng = rng.uniform_range(cfg["size_randomness"])
            size_factor = (1 - distance(x, y, cx, cy) / max_dist) * jitter
            radius = size_factor * spacing / cfg["radius_divisor"]
            if radius <= cfg["min_radius"]:
                continue
            dot = svg.circle(x, y, radius).with_attributes(
                fill=palette.color(0), opacity=cfg["opacity"]
            )
            dots.append(maybe_animate(dot, animate, "dot-pulse"))
    return dots, rng
