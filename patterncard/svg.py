"""Immutable drawing primitives and their serialisation through svgwrite."""

import io
from dataclasses import dataclass, replace
from typing import Any, Iterable, Mapping, Sequence

import svgwrite

Point = tuple[float, float]


def fmt(value: Any) -> str:
    """Format a number for SVG output, rounded to two decimals."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # + 0.0 turns -0.0 into 0.0
        text = f"{round(value, 2) + 0.0:.2f}"
        return text.rstrip("0").rstrip(".")
    return str(value)


def _attr_name(key: str) -> str:
    # same convention as svgwrite: class_ -> class, stroke_width -> stroke-width
    return key.rstrip("_").replace("_", "-")


# -------------------------
# Primitives
# -------------------------


@dataclass(frozen=True)
class Primitive:
    kind: str
    geometry: tuple[tuple[str, Any], ...] = ()
    attributes: tuple[tuple[str, Any], ...] = ()
    class_name: str | None = None
    children: tuple["Primitive", ...] = ()

    def get(self, name: str, default: Any = None) -> Any:
        for key, value in self.attributes:
            if key == name:
                return value
        for key, value in self.geometry:
            if key == name:
                return value
        return default

    def with_class(self, class_name: str) -> "Primitive":
        return replace(self, class_name=class_name)

    def with_attributes(
        self, attributes: Mapping[str, Any] | None = None, **extra: Any
    ) -> "Primitive":
        merged = dict(self.attributes)
        for key, value in (attributes or {}).items():
            merged[key] = value
        for key, value in extra.items():
            merged[_attr_name(key)] = value
        return replace(self, attributes=tuple(merged.items()))

    def with_children(self, *children: "Primitive") -> "Primitive":
        return replace(self, children=self.children + tuple(children))


def circle(cx: float, cy: float, r: float) -> Primitive:
    return Primitive("circle", (("cx", cx), ("cy", cy), ("r", r)))


def rect(x: float, y: float, width: float, height: float) -> Primitive:
    return Primitive("rect", (("x", x), ("y", y), ("width", width), ("height", height)))


def line(x1: float, y1: float, x2: float, y2: float) -> Primitive:
    return Primitive("line", (("x1", x1), ("y1", y1), ("x2", x2), ("y2", y2)))


def path(d: str) -> Primitive:
    return Primitive("path", (("d", d),))


def polygon(points: Iterable[Point]) -> Primitive:
    return Primitive("polygon", (("points", tuple(points)),))


def group(*children: Primitive) -> Primitive:
    return Primitive("g", children=tuple(children))


def animate(attribute: str, **timing: Any) -> Primitive:
    return Primitive("animate", (("attributeName", attribute),)).with_attributes(**timing)


def animate_transform(transform: str, **timing: Any) -> Primitive:
    return Primitive(
        "animateTransform", (("attributeName", "transform"), ("type", transform))
    ).with_attributes(**timing)


# -------------------------
# Definitions (<defs> content)
# -------------------------


@dataclass(frozen=True)
class Definition:
    kind: str
    id: str
    params: tuple[tuple[str, Any], ...] = ()
    stops: tuple[tuple[float, str, float], ...] = ()

    def param(self, name: str) -> Any:
        return dict(self.params)[name]


def glow_filter(filter_id: str, deviation: float) -> Definition:
    return Definition("glow", filter_id, (("deviation", deviation),))


def linear_gradient(
    gradient_id: str,
    stops: Sequence[tuple[float, str, float]],
    start: Point = (0, 0),
    end: Point = (0, 1),
) -> Definition:
    return Definition(
        "linear", gradient_id, (("start", start), ("end", end)), tuple(stops)
    )


# -------------------------
# Rendering
# -------------------------


def _drawing(**extra: Any) -> svgwrite.Drawing:
    return svgwrite.Drawing(debug=False, **extra)


def _points(points: Iterable[Point]) -> list[tuple[str, str]]:
    return [(fmt(x), fmt(y)) for x, y in points]


def _element(dwg: svgwrite.Drawing, primitive: Primitive):
    g = dict(primitive.geometry)
    kind = primitive.kind
    if kind == "circle":
        elem = dwg.circle(center=(fmt(g["cx"]), fmt(g["cy"])), r=fmt(g["r"]))
    elif kind == "rect":
        elem = dwg.rect(
            insert=(fmt(g["x"]), fmt(g["y"])),
            size=(fmt(g["width"]), fmt(g["height"])),
        )
    elif kind == "line":
        elem = dwg.line(
            start=(fmt(g["x1"]), fmt(g["y1"])), end=(fmt(g["x2"]), fmt(g["y2"]))
        )
    elif kind == "path":
        elem = dwg.path(d=g["d"])
    elif kind == "polygon":
        elem = dwg.polygon(points=_points(g["points"]))
    elif kind == "g":
        elem = dwg.g()
    elif kind == "animate":
        elem = dwg.animate()
        elem["attributeName"] = g["attributeName"]
    elif kind == "animateTransform":
        elem = dwg.animateTransform(g["type"])
        elem["attributeName"] = g["attributeName"]
    else:
        raise ValueError(f"Unknown primitive kind: {kind!r}")

    for name, value in primitive.attributes:
        elem[name] = fmt(value)
    if primitive.class_name:
        elem["class"] = primitive.class_name
    for child in primitive.children:
        elem.add(_element(dwg, child))
    return elem


def _definition(dwg: svgwrite.Drawing, definition: Definition):
    if definition.kind == "glow":
        filt = dwg.filter(id=definition.id, start=("-50%", "-50%"), size=("200%", "200%"))
        filt.feGaussianBlur(
            in_="SourceGraphic",
            stdDeviation=fmt(definition.param("deviation")),
            result="blur",
        )
        filt.feMerge(["blur", "SourceGraphic"])
        return filt
    if definition.kind == "linear":
        (x1, y1), (x2, y2) = definition.param("start"), definition.param("end")
        gradient = dwg.linearGradient(
            start=(fmt(x1), fmt(y1)), end=(fmt(x2), fmt(y2)), id=definition.id
        )
        for offset, color, opacity in definition.stops:
            gradient.add_stop_color(offset=fmt(offset), color=color, opacity=fmt(opacity))
        return gradient
    raise ValueError(f"Unknown definition kind: {definition.kind!r}")


def render(primitive: Primitive) -> str:
    """Serialise a single primitive (and its children) to markup."""
    return _element(_drawing(), primitive).tostring()


def build_document(
    primitives: Iterable[Primitive],
    width: int,
    height: int,
    background: str,
    style_block: str | None = None,
    definitions: Iterable[Definition] = (),
) -> str:
    """
    Assemble a complete SVG document.

    The <defs> section (style block, filters, gradients) comes first, then a
    full-size background rect, then every primitive in the given order.
    Attributes are written sorted by name (svgwrite), not in insertion order.
    """
    dwg = _drawing(size=(width, height))
    dwg["viewBox"] = f"0 0 {width} {height}"
    dwg["preserveAspectRatio"] = "none"

    if style_block:
        dwg.embed_stylesheet(style_block)
    for definition in definitions:
        dwg.defs.add(_definition(dwg, definition))

    dwg.add(dwg.rect(insert=(0, 0), size=(width, height), fill=background))
    for primitive in primitives:
        dwg.add(_element(dwg, primitive))

    out = io.StringIO()
    dwg.write(out)
    return out.getvalue()
