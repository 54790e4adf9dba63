"""Several simpler styles drawn on top of each other."""

from typing import Sequence

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import (
    CELL_GRID,
    FLOW_FIELD,
    HALFTONE_DOTS,
    LAYERED_COMPOSITE,
    LINES,
    NOISE_FIELD,
    WAVE_FIELD,
    config_for,
)
from . import dots, flow_field, grid, lines, noise_field, waves
from ._common import scale_opacity

LAYERS = {
    WAVE_FIELD: waves.generate,
    HALFTONE_DOTS: dots.generate,
    LINES: lines.generate,
    CELL_GRID: grid.generate,
    NOISE_FIELD: noise_field.generate,
    FLOW_FIELD: flow_field.generate,
}


def _stack(styles, factor_for, width, height, rng, palette, animate):
    out: list[svg.Primitive] = []
    for index, style in enumerate(styles):
        primitives, rng = LAYERS[style](width, height, rng, palette, animate)
        factor = factor_for(index)
        if factor != 1.0:
            primitives = [scale_opacity(p, factor) for p in primitives]
        out.extend(primitives)
    return out, rng


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(LAYERED_COMPOSITE)
    count, rng = rng.uniform_range(cfg["layer_count"])

    pool = list(cfg["layers"])
    chosen = []
    for _ in range(count):
        style, rng = rng.choice(pool)
        pool.remove(style)
        chosen.append(style)

    base = cfg["secondary_opacity_base"]
    falloff = cfg["secondary_opacity_falloff"]

    def factor(index):
        return 1.0 if index == 0 else base + falloff / (index + 1)

    return _stack(chosen, factor, width, height, rng, palette, animate)


def generate_with_layers(
    styles: Sequence[str],
    width: int,
    height: int,
    rng: SeededGenerator,
    palette: Palette,
    animate: bool,
) -> tuple[list[svg.Primitive], SeededGenerator]:
    """Compose an explicit list of layer styles; later layers are dimmed."""
    unknown = [s for s in styles if s not in LAYERS]
    if unknown:
        raise ValueError(f"Styles cannot be layered: {', '.join(unknown)}")
    dimmed = config_for(LAYERED_COMPOSITE)["explicit_layer_opacity"]
    return _stack(
        styles, lambda index: 1.0 if index == 0 else dimmed, width, height, rng, palette, animate
    )
