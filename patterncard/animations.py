"""CSS keyframe blocks and SMIL animation children for generated patterns."""

from typing import Callable

from . import styles
from .svg import Primitive, animate, animate_transform, fmt

# -------------------------
# CSS
# -------------------------


def _rule(selector: str, keyframes: str, duration: float, delay: float = 0.0, timing: str = "ease-in-out") -> str:
    return (
        f".{selector} {{ animation: {keyframes} {fmt(duration)}s {timing} infinite; "
        f"animation-delay: {fmt(delay)}s; }}"
    )


def _variants(prefix: str, count: int, keyframes: str, duration: float, step: float) -> list[str]:
    return [
        _rule(f"{prefix}-{i}", keyframes, duration + i * step, i * step)
        for i in range(count)
    ]


_KEYFRAMES = {
    "drift": "@keyframes drift { 0%, 100% { transform: translateY(0); } 50% { transform: translateY(-5px); } }",
    "flicker": "@keyframes flicker { 0%, 100% { opacity: 1; } 50% { opacity: 0.3; } }",
    "pulse": "@keyframes pulse { 0%, 100% { opacity: 1; } 50% { opacity: 0.5; } }",
    "breathe": "@keyframes breathe { 0%, 100% { transform: scale(1); } 50% { transform: scale(1.15); } }",
    "glow": "@keyframes glow { 0%, 100% { opacity: 0.6; } 50% { opacity: 1; } }",
    "jitter": "@keyframes jitter { 0%, 90%, 100% { transform: translateX(0); } 92% { transform: translateX(8px); } 96% { transform: translateX(-4px); } }",
    "sweep": "@keyframes sweep { from { transform: translateY(0); } to { transform: translateY(12px); } }",
    "spin": "@keyframes spin { from { transform: rotate(0deg); } to { transform: rotate(360deg); } }",
    "dash": "@keyframes dash { from { stroke-dashoffset: 200; } to { stroke-dashoffset: 0; } }",
    "sway": "@keyframes sway { 0%, 100% { transform: translateX(0); } 50% { transform: translateX(-12px); } }",
    "twinkle": "@keyframes twinkle { 0%, 100% { opacity: 1; } 40% { opacity: 0.2; } }",
}


def _block(keyframes: list[str], rules: list[str], extra: str = "") -> str:
    lines = [_KEYFRAMES[name] for name in keyframes] + rules
    if extra:
        lines.append(extra)
    return "\n".join(lines)


_CSS: dict[str, Callable[[], str]] = {
    styles.WAVE_FIELD: lambda: _block(["drift"], _variants("wave", 3, "drift", 6, 1)),
    styles.NOISE_FIELD: lambda: _block(["flicker"], [_rule("noise-cell", "flicker", 3)]),
    styles.LINES: lambda: _block(["pulse"], [_rule("line-pulse", "pulse", 4)]),
    styles.HALFTONE_DOTS: lambda: _block(
        ["breathe"],
        [_rule("dot-pulse", "breathe", 3)],
        ".dot-pulse { transform-box: fill-box; transform-origin: center; }",
    ),
    styles.CIRCUIT_TRACE: lambda: _block(["glow"], [_rule("circuit-glow", "glow", 2.5)]),
    styles.GLITCH_BARS: lambda: _block(
        ["jitter", "sweep"],
        [_rule("glitch-bar", "jitter", 2, timing="steps(2)"), _rule("scanline", "sweep", 4, timing="linear")],
    ),
    styles.GEOMETRIC_SHAPES: lambda: _block(
        ["spin"],
        [_rule("shape-rotate", "spin", 30, timing="linear")],
        ".shape-rotate { transform-box: fill-box; transform-origin: center; }",
    ),
    styles.CELL_GRID: lambda: _block(["pulse"], [_rule("grid-cell", "pulse", 5)]),
    styles.FLOW_FIELD: lambda: _block(
        ["dash"],
        _variants("flow-line", 4, "dash", 8, 1.5),
        "[class^='flow-line'] { stroke-dasharray: 100 100; }",
    ),
    styles.WAVE_INTERFERENCE: lambda: _block(
        ["pulse", "drift"],
        _variants("interference-ring", 3, "pulse", 4, 0.8)
        + _variants("interference-wave", 3, "drift", 6, 1)
        + _variants("interference-grid", 3, "pulse", 8, 2),
    ),
    styles.CONTOUR_TOPOLOGY: lambda: _block(["glow"], _variants("topo-line", 3, "glow", 5, 1.2)),
    styles.CELL_TESSELLATION: lambda: _block(
        ["pulse", "twinkle"],
        _variants("voronoi-edge", 3, "pulse", 6, 1) + [_rule("voronoi-point", "twinkle", 3)],
    ),
    styles.ISOMETRIC_GRID: lambda: _block(["glow"], _variants("iso-cube", 3, "glow", 4, 1)),
    styles.STAR_GRAPH: lambda: _block(
        ["pulse", "twinkle"],
        _variants("constellation-line", 3, "pulse", 6, 1.5)
        + _variants("constellation-star", 3, "twinkle", 3, 0.7),
    ),
    styles.AURORA_BANDS: lambda: _block(["sway"], _variants("aurora-band", 4, "sway", 10, 2)),
}


def css_for(style: str) -> str:
    """CSS block for every animation class a style can emit."""
    if style == styles.LAYERED_COMPOSITE:
        layers = styles.config_for(style)["layers"]
        # keyframes shared between layers are emitted once
        seen: list[str] = []
        for layer in layers:
            for line in _CSS[layer]().splitlines():
                if line not in seen:
                    seen.append(line)
        return "\n".join(seen)
    return _CSS[style]()


# -------------------------
# SMIL
# -------------------------


def stagger(index: int, step: float = 0.2, cycle: int = 10) -> str:
    return f"{fmt((index % cycle) * step)}s"


def opacity(values: str, dur: str, begin: str = "0s") -> Primitive:
    return animate("opacity", values=values, dur=dur, begin=begin, repeatCount="indefinite")


def transform(kind: str, values: str, dur: str, begin: str = "0s") -> Primitive:
    return animate_transform(
        kind, values=values, dur=dur, begin=begin, additive="sum", repeatCount="indefinite"
    )


def stroke_dash(length: float, dur: str, begin: str = "0s") -> Primitive:
    return animate(
        "stroke-dashoffset",
        values=f"{fmt(length)};0;{fmt(length)}",
        dur=dur,
        begin=begin,
        repeatCount="indefinite",
    )


def pulse(radius: float, dur: str, begin: str = "0s", scale: float = 1.3) -> Primitive:
    return animate(
        "r",
        values=f"{fmt(radius)};{fmt(radius * scale)};{fmt(radius)}",
        dur=dur,
        begin=begin,
        repeatCount="indefinite",
    )


def float_(distance: float, dur: str, begin: str = "0s") -> Primitive:
    return transform("translate", f"0,0;0,{fmt(-distance)};0,0", dur, begin)


def _fade(primitive: Primitive, index: int, dur: str = "4s") -> tuple[Primitive, ...]:
    base = float(primitive.get("opacity", 1.0))
    values = f"{fmt(base)};{fmt(base * 0.4)};{fmt(base)}"
    return (opacity(values, dur, stagger(index)),)


def _glint(primitive: Primitive, index: int) -> tuple[Primitive, ...]:
    if primitive.kind == "circle":
        return (pulse(float(primitive.get("r")), "3s", stagger(index)),)
    return _fade(primitive, index)


def _dash(primitive: Primitive, index: int) -> tuple[Primitive, ...]:
    return (stroke_dash(200, "8s", stagger(index)),)


_SMIL: dict[str, Callable[[Primitive, int], tuple[Primitive, ...]]] = {
    styles.WAVE_FIELD: lambda p, i: (float_(5, "6s", stagger(i)),),
    styles.NOISE_FIELD: lambda p, i: _fade(p, i, "3s"),
    styles.HALFTONE_DOTS: _glint,
    styles.GLITCH_BARS: lambda p, i: (
        transform("translate", "0,0;8,0;-4,0;0,0", "0.6s", stagger(i, 0.3)),
    ),
    styles.GEOMETRIC_SHAPES: lambda p, i: (float_(10, "8s", stagger(i, 0.5)),),
    styles.FLOW_FIELD: _dash,
    styles.STAR_GRAPH: _glint,
    styles.AURORA_BANDS: lambda p, i: (float_(10, "10s", stagger(i, 1.0)),),
}


def with_smil(style: str, primitive: Primitive, index: int) -> Primitive:
    """Attach SMIL animation children matching the style."""
    build = _SMIL.get(style, _fade)
    animated = primitive.with_children(*build(primitive, index))
    if build is _dash:
        animated = animated.with_attributes(stroke_dasharray="200 200")
    return animated
