"""Regular grid with a sinusoidal fill probability along the diagonals."""

import math

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import CELL_GRID, config_for
from ._common import maybe_animate


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(CELL_GRID)
    cell, rng = rng.uniform_range(cfg["cell_size"])
    frequency, rng = rng.uniform_range(cfg["wave_frequency"])
    gap = cfg["cell_gap"]
    cols = width // cell + 1
    rows = height // cell + 1

    cells = []
    for row in range(rows):
        for col in range(cols):
            probability = math.sin((row + col) / frequency) * 0.5 + 0.5
            filled, rng = rng.chance(min(max(probability, 0.0), 1.0))
            if not filled:
                continue
            opacity, rng = rng.uniform_range(cfg["opacity"])
            square = svg.rect(
                col * cell, row * cell, cell - gap, cell - gap
            ).with_attributes(fill=palette.color(row + col), opacity=opacity)
            cells.append(maybe_animate(square, animate, "grid-cell"))
    return cells, rng
