"""Voronoi tessellation of random sites, clipped to the canvas."""

from shapely.geometry import MultiPoint, Point, box
from shapely.ops import voronoi_diagram

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import CELL_TESSELLATION, config_for
from ._common import maybe_animate


def cell_outlines(sites: list[tuple[float, float]], width: int, height: int):
    """Polygon outline of each site's cell, in site order."""
    canvas = box(0, 0, width, height)
    regions = list(voronoi_diagram(MultiPoint(sites), envelope=canvas).geoms)

    outlines = []
    for site in sites:
        anchor = Point(site)
        region = next((r for r in regions if r.covers(anchor)), None)
        if region is None:
            continue
        clipped = region.intersection(canvas)
        if clipped.is_empty or clipped.geom_type != "Polygon":
            continue
        outlines.append(list(clipped.exterior.coords)[:-1])
    return outlines


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(CELL_TESSELLATION)
    count, rng = rng.uniform_range(cfg["cell_count"])
    sites = []
    for _ in range(count):
        x, rng = rng.uniform_float(0, width)
        y, rng = rng.uniform_float(0, height)
        sites.append((x, y))
    stroke_width, rng = rng.uniform_range(cfg["stroke_width"])
    opacity, rng = rng.uniform_range(cfg["opacity"])
    show_points, rng = rng.chance(cfg["show_points_chance"])

    cells = []
    for i, outline in enumerate(cell_outlines(sites, width, height)):
        cell = svg.polygon(outline).with_attributes(
            fill="none",
            stroke=palette.color(i),
            stroke_width=stroke_width,
            opacity=opacity,
        )
        cells.append(maybe_animate(cell, animate, "voronoi-edge", i, cfg["class_variants"]))

    if show_points:
        for i, (x, y) in enumerate(sites):
            dot = svg.circle(x, y, cfg["point_radius"]).with_attributes(
                fill=palette.color(i), opacity=opacity * cfg["point_opacity_factor"]
            )
            cells.append(maybe_animate(dot, animate, "voronoi-point"))
    return cells, rng
