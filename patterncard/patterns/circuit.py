"""Axis-aligned random walks that look like PCB traces."""

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import CIRCUIT_TRACE, config_for
from ._common import maybe_animate, polyline_d


def _walk(rng, x, y, segments, cfg):
    points = [(x, y)]
    for _ in range(segments):
        length, rng = rng.uniform_range(cfg["segment_length"])
        horizontal, rng = rng.chance(cfg["turn_chance"])
        positive, rng = rng.chance(cfg["direction_chance"])
        step = length if positive else -length
        if horizontal:
            x += step
        else:
            y += step
        points.append((x, y))
    return points, rng


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(CIRCUIT_TRACE)
    count, rng = rng.uniform_range(cfg["trace_count"])

    traces = []
    for i in range(count):
        x, rng = rng.uniform_float(0, width)
        y, rng = rng.uniform_float(0, height)
        segments, rng = rng.uniform_range(cfg["segments"])
        thickness, rng = rng.uniform_range(cfg["thickness"])
        opacity, rng = rng.uniform_range(cfg["opacity"])
        points, rng = _walk(rng, x, y, segments, cfg)

        trace = svg.path(polyline_d(points)).with_attributes(
            stroke=palette.color(i),
            stroke_width=thickness,
            fill="none",
            opacity=opacity,
            stroke_linecap="square",
            stroke_linejoin="miter",
        )
        traces.append(maybe_animate(trace, animate, "circuit-glow"))
    return traces, rng
