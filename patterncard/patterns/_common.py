"""Helpers shared by the pattern generators."""

import math
from typing import Sequence

from ..svg import Point, Primitive, fmt

Bezier = tuple[Point, Point, Point, Point]


def maybe_animate(
    primitive: Primitive, animate: bool, prefix: str, index: int | None = None, variants: int = 1
) -> Primitive:
    """Attach an animation class when animating; `index` picks one of `variants`."""
    if not animate:
        return primitive
    if index is None:
        return primitive.with_class(prefix)
    return primitive.with_class(f"{prefix}-{index % variants}")


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def lerp_factor(v1: float, v2: float, threshold: float) -> float:
    """Where `threshold` sits between v1 and v2, as a factor in [0, 1]."""
    if abs(v2 - v1) < 1e-4:
        return 0.5
    return clamp((threshold - v1) / (v2 - v1), 0.0, 1.0)


def polyline_d(points: Sequence[Point]) -> str:
    head, *rest = points
    d = f"M {fmt(head[0])},{fmt(head[1])}"
    if rest:
        d += " L " + " ".join(f"{fmt(x)},{fmt(y)}" for x, y in rest)
    return d


def catmull_rom_to_beziers(
    points: Sequence[Point], closed: bool = False, tension: float = 1.0
) -> list[Bezier]:
    """
    Returns list of cubic bezier segments (P0, C1, C2, P3).
    For closed curves, points are treated cyclically.
    tension: 1.0 is standard Catmull-Rom; smaller => tighter.
    """
    n = len(points)
    if n < 4:
        raise ValueError("Need at least 4 points for Catmull-Rom.")

    segs = []
    for i in range(n if closed else n - 1):
        p0 = points[(i - 1) % n] if closed else points[max(i - 1, 0)]
        p1 = points[i % n]
        p2 = points[(i + 1) % n] if closed else points[min(i + 1, n - 1)]
        p3 = points[(i + 2) % n] if closed else points[min(i + 2, n - 1)]

        # C1 = P1 + (P2 - P0) / 6, C2 = P2 - (P3 - P1) / 6
        t = tension
        c1 = (p1[0] + (p2[0] - p0[0]) / 6.0 * t, p1[1] + (p2[1] - p0[1]) / 6.0 * t)
        c2 = (p2[0] - (p3[0] - p1[0]) / 6.0 * t, p2[1] - (p3[1] - p1[1]) / 6.0 * t)
        segs.append((p1, c1, c2, p2))
    return segs


def smooth_d(points: Sequence[Point], tension: float = 1.0) -> str:
    """Smooth open path through points; straight segments when too short."""
    if len(points) < 4:
        return polyline_d(points)
    segs = catmull_rom_to_beziers(points, closed=False, tension=tension)
    start = segs[0][0]
    parts = [f"M {fmt(start[0])},{fmt(start[1])}"]
    for _p0, c1, c2, p3 in segs:
        parts.append(
            f"C {fmt(c1[0])},{fmt(c1[1])} {fmt(c2[0])},{fmt(c2[1])} {fmt(p3[0])},{fmt(p3[1])}"
        )
    return " ".join(parts)


def scale_opacity(primitive: Primitive, factor: float) -> Primitive:
    """Multiply a primitive's opacity (default 1) by factor."""
    current = primitive.get("opacity", 1.0)
    return primitive.with_attributes(opacity=float(current) * factor)
