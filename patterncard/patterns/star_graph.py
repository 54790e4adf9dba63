"""Constellation of stars joined to their nearest later neighbours."""

from .. import svg
from ..palette import Palette
from ..rng import SeededGenerator
from ..styles import STAR_GRAPH, config_for
from ._common import distance, maybe_animate


def connections(stars, max_distance: float, max_connections: int) -> list[tuple[int, int]]:
    """Index pairs (i, j), j > i, at most max_connections per star i."""
    pairs = []
    for i, (x1, y1, *_rest) in enumerate(stars):
        near = [
            j
            for j in range(i + 1, len(stars))
            if distance(x1, y1, stars[j][0], stars[j][1]) <= max_distance
        ]
        pairs.extend((i, j) for j in near[:max_connections])
    return pairs


def generate(
    width: int, height: int, rng: SeededGenerator, palette: Palette, animate: bool
) -> tuple[list[svg.Primitive], SeededGenerator]:
    cfg = config_for(STAR_GRAPH)
    count, rng = rng.uniform_range(cfg["star_count"])
    max_distance, rng = rng.uniform_range(cfg["connection_distance"])
    margin = min(cfg["margin"], width / 2, height / 2)
    variants = cfg["class_variants"]

    stars = []
    for _ in range(count):
        x, rng = rng.uniform_float(margin, width - margin)
        y, rng = rng.uniform_float(margin, height - margin)
        size, rng = rng.uniform_range(cfg["star_size"])
        brightness, rng = rng.uniform_range(cfg["brightness"])
        stars.append((x, y, size, brightness))

    lines = []
    for n, (i, j) in enumerate(connections(stars, max_distance, cfg["max_connections"])):
        link = svg.line(stars[i][0], stars[i][1], stars[j][0], stars[j][1]).with_attributes(
            stroke=palette.color(i),
            stroke_width=cfg["line_width"],
            opacity=cfg["line_opacity"],
        )
        lines.append(maybe_animate(link, animate, "constellation-line", n, variants))

    circles = []
    for i, (x, y, size, brightness) in enumerate(stars):
        star = svg.circle(x, y, size).with_attributes(
            fill=palette.color(i), opacity=brightness
        )
        circles.append(maybe_animate(star, animate, "constellation-star", i, variants))
    return lines + circles, rng
