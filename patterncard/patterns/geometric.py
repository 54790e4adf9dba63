"""Outlined circles, rotated squares and triangles scattered on the canvas."""

import math

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import GEOMETRIC_SHAPES, config_for
from ..svg import fmt
from ._common import maybe_animate


def _shape(kind, x, y, size, rotation):
    if kind == "circle":
        return svg.circle(x, y, size / 2)
    if kind == "rect":
        half = size / 2
        return svg.rect(x - half, y - half, size, size).with_attributes(
            transform=f"rotate({fmt(rotation)} {fmt(x)} {fmt(y)})"
        )
    r = size / 2
    points = [
        (x + r * math.cos(a), y + r * math.sin(a))
        for a in (-math.pi / 2, math.pi / 6, 5 * math.pi / 6)
    ]
    return svg.polygon(points)


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(GEOMETRIC_SHAPES)
    count, rng = rng.uniform_range(cfg["shape_count"])

    shapes = []
    for i in range(count):
        kind, rng = rng.choice(cfg["shapes"])
        x, rng = rng.uniform_float(0, width)
        y, rng = rng.uniform_float(0, height)
        size, rng = rng.uniform_range(cfg["size"])
        opacity, rng = rng.uniform_range(cfg["opacity"])
        rotation, rng = rng.uniform_range(cfg["rotation"])

        shape = _shape(kind, x, y, size, rotation).with_attributes(
            fill="none",
            stroke=palette.color(i),
            stroke_width=cfg["stroke_width"],
            opacity=opacity,
        )
        shapes.append(maybe_animate(shape, animate, "shape-rotate"))
    return shapes, rng
