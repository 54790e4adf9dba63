"""Moire and interference: concentric rings, multi-source waves, rotated grids."""

import math

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import WAVE_INTERFERENCE, config_for
from ..svg import fmt
from ._common import distance, maybe_animate, polyline_d


def _concentric(width, height, rng, palette, animate, cfg):
    centers, rng = rng.uniform_range(cfg["center_count"])
    spacing, rng = rng.uniform_range(cfg["ring_spacing"])
    rings = int(math.hypot(width, height) / spacing)

    out = []
    for i in range(centers):
        cx, rng = rng.uniform_float(0, width)
        cy, rng = rng.uniform_float(0, height)
        stroke_width, rng = rng.uniform_range(cfg["stroke_width"])
        opacity, rng = rng.uniform_range(cfg["opacity"])
        for k in range(1, rings + 1):
            ring = svg.circle(cx, cy, k * spacing).with_attributes(
                fill="none",
                stroke=palette.color(i),
                stroke_width=stroke_width,
                opacity=opacity,
            )
            out.append(
                maybe_animate(ring, animate, "interference-ring", k, cfg["class_variants"])
            )
    return out, rng


def _waves(width, height, rng, palette, animate, cfg):
    count, rng = rng.uniform_range(cfg["wave_sources"])
    frequency, rng = rng.uniform_range(cfg["wave_frequency"])
    sources = []
    for _ in range(count):
        sx, rng = rng.uniform_float(0, width)
        sy, rng = rng.uniform_float(0, height)
        phase, rng = rng.uniform_range(cfg["phase"])
        sources.append((sx, sy, phase))
    stroke_width, rng = rng.uniform_range(cfg["stroke_width"])
    opacity, rng = rng.uniform_range(cfg["opacity"])

    step = cfg["sample_step"]
    half = height / 2
    fade_base, fade, fade_distance = cfg["edge_fade_base"], cfg["edge_fade"], cfg["edge_fade_distance"]
    out = []
    for j, y in enumerate(range(0, height + 1, cfg["line_spacing"])):
        points = []
        for x in range(0, width + step, step):
            total = sum(
                math.sin(distance(x, y, sx, sy) * frequency + phase)
                for sx, sy, phase in sources
            )
            points.append((x, y + total / count * cfg["displacement"]))
        # lines fade toward the top and bottom edges
        center_distance = abs(y - half) / half if half else 0.0
        scan = svg.path(polyline_d(points)).with_attributes(
            fill="none",
            stroke=palette.color(j),
            stroke_width=stroke_width,
            opacity=opacity * (fade_base + fade * (1 - center_distance * fade_distance)),
        )
        out.append(
            maybe_animate(scan, animate, "interference-wave", j, cfg["class_variants"])
        )
    return out, rng


def _grids(width, height, rng, palette, animate, cfg):
    count, rng = rng.uniform_range(cfg["grid_count"])
    cx, cy = width / 2, height / 2
    reach = math.hypot(width, height) / 2

    out = []
    for g in range(count):
        spacing, rng = rng.uniform_range(cfg["grid_spacing"])
        angle, rng = rng.uniform_range(cfg["grid_rotation"])
        stroke_width, rng = rng.uniform_range(cfg["stroke_width"])
        opacity, rng = rng.uniform_range(cfg["opacity"])

        lines = []
        offset = -reach
        while offset <= reach:
            lines.append(svg.line(cx + offset, cy - reach, cx + offset, cy + reach))
            offset += spacing
        grid = svg.group(*lines).with_attributes(
            stroke=palette.color(g),
            stroke_width=stroke_width,
            opacity=opacity,
            transform=f"rotate({fmt(angle)} {fmt(cx)} {fmt(cy)})",
        )
        out.append(maybe_animate(grid, animate, "interference-grid", g, cfg["class_variants"]))
    return out, rng


_MODES = {"concentric": _concentric, "waves": _waves, "grids": _grids}


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(WAVE_INTERFERENCE)
    mode, rng = rng.choice(cfg["modes"])
    return _MODES[mode](width, height, rng, palette, animate, cfg)
