"""Style -> generator dispatch table.

Every generator has the signature
``generate(width, height, rng, palette, animate) -> (primitives, rng)``.
"""

from typing import Callable

from .. import styles
from ..palette import Palette
from ..rng import SeededGenerator
from ..svg import Definition, Primitive
from . import (
    aurora,
    circuit,
    composite,
    dots,
    flow_field,
    geometric,
    glitch,
    grid,
    interference,
    isometric,
    lines,
    noise_field,
    star_graph,
    topology,
    voronoi,
    waves,
)

Generator = Callable[
    [int, int, SeededGenerator, Palette, bool], tuple[list[Primitive], SeededGenerator]
]

GENERATORS: dict[str, Generator] = {
    styles.WAVE_FIELD: waves.generate,
    styles.NOISE_FIELD: noise_field.generate,
    styles.LINES: lines.generate,
    styles.HALFTONE_DOTS: dots.generate,
    styles.CIRCUIT_TRACE: circuit.generate,
    styles.GLITCH_BARS: glitch.generate,
    styles.GEOMETRIC_SHAPES: geometric.generate,
    styles.CELL_GRID: grid.generate,
    styles.FLOW_FIELD: flow_field.generate,
    styles.WAVE_INTERFERENCE: interference.generate,
    styles.CONTOUR_TOPOLOGY: topology.generate,
    styles.CELL_TESSELLATION: voronoi.generate,
    styles.ISOMETRIC_GRID: isometric.generate,
    styles.STAR_GRAPH: star_graph.generate,
    styles.AURORA_BANDS: aurora.generate,
    styles.LAYERED_COMPOSITE: composite.generate,
}

DEFINITIONS: dict[str, Callable[[Palette], tuple[Definition, ...]]] = {
    styles.AURORA_BANDS: aurora.definitions,
}


def generate_style(
    style: str,
    width: int,
    height: int,
    rng: SeededGenerator,
    palette: Palette,
    animate: bool = False,
) -> tuple[list[Primitive], SeededGenerator]:
    return GENERATORS[style](width, height, rng, palette, animate)


def definitions_for(style: str, palette: Palette) -> tuple[Definition, ...]:
    builder = DEFINITIONS.get(style)
    return builder(palette) if builder else ()
