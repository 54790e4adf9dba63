"""Contour lines extracted from a layered sine field with marching squares."""

import math

import numpy as np

from .. import svg
from ..noise import trig_field
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import CONTOUR_TOPOLOGY, config_for
from ..svg import fmt
from ._common import lerp_factor, maybe_animate

# case index -> edge pairs the contour crosses
# bits: top-left=8, top-right=4, bottom-right=2, bottom-left=1
MARCHING_CASES: tuple[tuple[tuple[str, str], ...], ...] = (
    (),
    (("left", "bottom"),),
    (("bottom", "right"),),
    (("left", "right"),),
    (("top", "right"),),
    (("left", "top"), ("bottom", "right")),
    (("top", "bottom"),),
    (("left", "top"),),
    (("top", "left"),),
    (("top", "bottom"),),
    (("top", "right"), ("left", "bottom")),
    (("top", "right"),),
    (("left", "right"),),
    (("bottom", "right"),),
    (("left", "bottom"),),
    (),
)


def cell_case(tl: float, tr: float, br: float, bl: float, threshold: float) -> int:
    return (
        (8 if tl > threshold else 0)
        | (4 if tr > threshold else 0)
        | (2 if br > threshold else 0)
        | (1 if bl > threshold else 0)
    )


def edge_point(edge, x, y, step, tl, tr, br, bl, threshold):
    if edge == "left":
        return x, y + step * lerp_factor(tl, bl, threshold)
    if edge == "right":
        return x + step, y + step * lerp_factor(tr, br, threshold)
    if edge == "top":
        return x + step * lerp_factor(tl, tr, threshold), y
    return x + step * lerp_factor(bl, br, threshold), y + step


def contour_segments(field: list[list[float]], step: int, threshold: float):
    """All (start, end) segments for one threshold over a row-major grid."""
    segments = []
    for row in range(len(field) - 1):
        top, bottom = field[row], field[row + 1]
        y = row * step
        for col in range(len(top) - 1):
            tl, tr, br, bl = top[col], top[col + 1], bottom[col + 1], bottom[col]
            for a, b in MARCHING_CASES[cell_case(tl, tr, br, bl, threshold)]:
                x = col * step
                segments.append(
                    (
                        edge_point(a, x, y, step, tl, tr, br, bl, threshold),
                        edge_point(b, x, y, step, tl, tr, br, bl, threshold),
                    )
                )
    return segments


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(CONTOUR_TOPOLOGY)
    levels, rng = rng.uniform_range(cfg["contour_count"])
    scale, rng = rng.uniform_range(cfg["noise_scale"])
    octaves, rng = rng.uniform_range(cfg["octaves"])
    offset_x, rng = rng.uniform_range(cfg["noise_offset"])
    offset_y, rng = rng.uniform_range(cfg["noise_offset"])
    stroke_width, rng = rng.uniform_range(cfg["stroke_width"])
    opacity, rng = rng.uniform_range(cfg["opacity"])

    step = cfg["grid_step"]
    xs = np.arange(math.ceil(width / step) + 1) * step
    ys = np.arange(math.ceil(height / step) + 1) * step
    grid_x, grid_y = np.meshgrid(xs, ys)
    field = trig_field(grid_x, grid_y, scale, octaves, offset_x, offset_y).tolist()

    level_base, level_falloff = cfg["level_opacity_base"], cfg["level_opacity_falloff"]
    contours = []
    for level in range(1, levels + 1):
        threshold = level / levels
        segments = contour_segments(field, step, threshold)
        if not segments:
            continue
        d = " ".join(
            f"M {fmt(x1)},{fmt(y1)} L {fmt(x2)},{fmt(y2)}" for (x1, y1), (x2, y2) in segments
        )
        contour = svg.path(d).with_attributes(
            fill="none",
            stroke=palette.color(level),
            stroke_width=stroke_width,
            opacity=opacity * (level_base + level_falloff * (1 - threshold)),
        )
        contours.append(
            maybe_animate(contour, animate, "topo-line", level, cfg["class_variants"])
        )
    return contours, rng
