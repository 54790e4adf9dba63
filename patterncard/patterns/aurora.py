"""Soft glowing aurora bands built from layered sines."""

import math

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import AURORA_BANDS, config_for
from ._common import maybe_animate, smooth_d

GLOW_ID = "aurora-glow"
WASH_ID = "aurora-wash"


def definitions(palette: Palette) -> tuple[svg.Definition, ...]:
    cfg = config_for(AURORA_BANDS)
    accent = palette.color(0)
    return (
        svg.glow_filter(GLOW_ID, cfg["glow_deviation"]),
        svg.linear_gradient(
            WASH_ID, [(0, accent, 0), (1, accent, cfg["wash_opacity"])]
        ),
    )


def band_points(width, base_y, amplitude, frequency, phase, cfg):
    harmonics = cfg["harmonics"]
    total = sum(weight for weight, _ in harmonics)
    points = []
    for x in range(0, width + cfg["sample_step"], cfg["sample_step"]):
        wave = sum(
            weight * math.sin(frequency * mult * x + phase * mult)
            for weight, mult in harmonics
        )
        points.append((x, base_y + amplitude * wave / total))
    return points


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(AURORA_BANDS)
    count, rng = rng.uniform_range(cfg["band_count"])

    out = [svg.rect(0, 0, width, height).with_attributes(fill=f"url(#{WASH_ID})")]
    for i in range(count):
        base, rng = rng.uniform_range(cfg["base_y"])
        amplitude, rng = rng.uniform_range(cfg["amplitude"])
        frequency, rng = rng.uniform_range(cfg["frequency"])
        phase, rng = rng.uniform_range(cfg["phase"])
        thickness, rng = rng.uniform_range(cfg["thickness"])
        opacity, rng = rng.uniform_range(cfg["opacity"])

        points = band_points(width, height * base, amplitude, frequency, phase, cfg)
        band = svg.path(smooth_d(points)).with_attributes(
            fill="none",
            stroke=palette.color(i),
            stroke_width=thickness,
            stroke_linecap="round",
            opacity=opacity,
            filter=f"url(#{GLOW_ID})",
        )
        out.append(maybe_animate(band, animate, "aurora-band", i, cfg["class_variants"]))
    return out, rng
