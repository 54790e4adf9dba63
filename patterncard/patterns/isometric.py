"""Lattice of isometric cubes with randomly shown cells and heights."""

import math

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import ISOMETRIC_GRID, config_for
from ._common import maybe_animate, polyline_d


def cube(x, y, w, h, height, palette, stroke_width, opacity, cfg):
    """Top, left and right faces plus edge lines of one cube anchored at its top vertex."""
    top_shade, left_shade, right_shade = cfg["face_shades"]
    left = (x - w, y + h)
    right = (x + w, y + h)
    front = (x, y + 2 * h)
    drop = (0, height)

    def lowered(p):
        return p[0] + drop[0], p[1] + drop[1]

    faces = [
        svg.polygon([(x, y), right, front, left]).with_attributes(
            fill=palette.color(0), opacity=opacity * top_shade
        ),
        svg.polygon([left, front, lowered(front), lowered(left)]).with_attributes(
            fill=palette.color(1), opacity=opacity * left_shade
        ),
        svg.polygon([front, right, lowered(right), lowered(front)]).with_attributes(
            fill=palette.color(2), opacity=opacity * right_shade
        ),
    ]
    edges = [svg.line(*p, *lowered(p)) for p in (left, front, right)]
    edges.append(svg.path(polyline_d([lowered(left), lowered(front), lowered(right)])))
    edge_style = {
        "fill": "none",
        "stroke": palette.color(0),
        "stroke-width": stroke_width * cfg["edge_width_factor"],
        "opacity": opacity * cfg["edge_opacity"],
    }
    return faces + [edge.with_attributes(edge_style) for edge in edges]


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(ISOMETRIC_GRID)
    size, rng = rng.uniform_range(cfg["cube_size"])
    show_probability, rng = rng.uniform_range(cfg["show_probability"])
    stroke_width, rng = rng.uniform_range(cfg["stroke_width"])
    opacity, rng = rng.uniform_range(cfg["opacity"])

    angle = math.radians(cfg["iso_angle"])
    w = size * math.cos(angle)
    h = size * math.sin(angle)
    start_y = height * cfg["start_y_ratio"]
    cols = int(width / (2 * w)) + 2
    rows = int((height - start_y) / h) + 2

    cubes = []
    for row in range(rows):
        for col in range(cols):
            shown, rng = rng.chance(show_probability)
            if not shown:
                continue
            variation, rng = rng.uniform_range(cfg["height_variation"])
            x = col * 2 * w + (row % 2) * w
            y = start_y + row * h - 2 * h
            parts = cube(x, y, w, h, size * variation, palette, stroke_width, opacity, cfg)
            block = svg.group(*parts)
            cubes.append(
                maybe_animate(block, animate, "iso-cube", row + col, cfg["class_variants"])
            )
    return cubes, rng
