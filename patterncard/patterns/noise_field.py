"""Static-like field of square cells lit above a brightness threshold."""

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import NOISE_FIELD, config_for
from ._common import maybe_animate


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(NOISE_FIELD)
    cell, rng = rng.uniform_range(cfg["cell_size"])
    threshold = cfg["brightness_threshold"]
    lo, hi = cfg["opacity"].min, cfg["opacity"].max

    cells = []
    for row in range(0, height, cell):
        for col in range(0, width, cell):
            brightness, rng = rng.uniform()
            if brightness < threshold:
                continue
            # map [threshold, 1) onto the opacity range
            level = (brightness - threshold) / (1.0 - threshold)
            square = svg.rect(col, row, cell, cell).with_attributes(
                fill=palette.color(row // cell + col // cell),
                opacity=lo + (hi - lo) * level,
            )
            cells.append(maybe_animate(square, animate, "noise-cell"))
    return cells, rng
