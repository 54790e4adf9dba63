"""Stacked sine waves sampled across the canvas."""

import math

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import WAVE_FIELD, config_for
from ._common import maybe_animate, polyline_d


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(WAVE_FIELD)
    count, rng = rng.uniform_range(cfg["wave_count"])
    spacing = cfg["point_spacing"]

    waves = []
    for i in range(count):
        amplitude, rng = rng.uniform_range(cfg["amplitude"])
        frequency, rng = rng.uniform_range(cfg["frequency"])
        phase, rng = rng.uniform_range(cfg["phase"])
        y_offset, rng = rng.uniform_float(0, height)
        opacity, rng = rng.uniform_range(cfg["opacity"])

        points = [
            (x, y_offset + amplitude * math.sin(frequency * x + phase))
            for x in range(0, width + spacing, spacing)
        ]
        wave = svg.path(polyline_d(points)).with_attributes(
            stroke=palette.color(i),
            stroke_width=cfg["stroke_width"],
            fill="none",
            opacity=opacity,
        )
        waves.append(maybe_animate(wave, animate, "wave", i, cfg["class_variants"]))
    return waves, rng
