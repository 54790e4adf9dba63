"""Particles traced through a seeded fBm angle field."""

import math

from .. import svg
from ..noise import fbm_2d
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import FLOW_FIELD, config_for
from ._common import maybe_animate, smooth_d


def _trace(x, y, steps, noise_seed, width, height, cfg):
    scale = cfg["noise_scale"]
    step_length = cfg["step_length"]
    turns = 2.0 * math.pi * cfg["angle_turns"]

    points = [(x, y)]
    for _ in range(steps):
        n = fbm_2d(
            x * scale, y * scale, noise_seed, octaves=cfg["octaves"], gain=cfg["persistence"]
        )
        angle = turns * n
        x += math.cos(angle) * step_length
        y += math.sin(angle) * step_length
        if not (0 <= x <= width and 0 <= y <= height):
            break
        points.append((x, y))
    return points


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(FLOW_FIELD)
    noise_seed, rng = rng.uniform_range(cfg["noise_seed"])
    count, rng = rng.uniform_range(cfg["particle_count"])

    lines = []
    for i in range(count):
        x, rng = rng.uniform_float(0, width)
        y, rng = rng.uniform_float(0, height)
        steps, rng = rng.uniform_range(cfg["steps"])
        stroke_width, rng = rng.uniform_range(cfg["stroke_width"])
        opacity, rng = rng.uniform_range(cfg["opacity"])

        points = _trace(x, y, steps, noise_seed, width, height, cfg)
        if len(points) < cfg["min_points"]:
            continue
        flow = svg.path(smooth_d(points, cfg["tension"])).with_attributes(
            stroke=palette.color(i),
            stroke_width=stroke_width,
            fill="none",
            opacity=opacity,
            stroke_linecap="round",
            stroke_linejoin="round",
        )
        lines.append(maybe_animate(flow, animate, "flow-line", i, cfg["class_variants"]))
    return lines, rng
