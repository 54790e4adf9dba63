"""Entry points: validate options, pick style and palette, build the SVG."""

import logging
from dataclasses import dataclass
from typing import Sequence

from . import animations, patterns, svg
from .errors import (
    InvalidDimension,
    InvalidFlag,
    InvalidSeed,
    InvalidStyle,
    InvalidTags,
    PatternInputError,
)
from .palette import Palette, muted_palette_for_tags, palette_for_style, palette_for_tags
from .rng import SeededGenerator
from .styles import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MAX_DIMENSION,
    is_valid_style,
    style_for_seed,
)

log = logging.getLogger(__name__)

FALLBACK_BACKGROUND = "#000000"


@dataclass(frozen=True)
class Options:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    style: str | None = None
    animate: bool = False
    tags: tuple[str, ...] = ()
    muted: bool = False


def _check_dimension(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}")
    if not 1 <= value <= MAX_DIMENSION:
        raise InvalidDimension(f"{name} must be within [1, {MAX_DIMENSION}], got {value}")
    return value


def _check_flag(name: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise InvalidFlag(f"{name} must be a boolean, got {value!r}")
    return value


def validate_options(
    seed: object,
    width: object = DEFAULT_WIDTH,
    height: object = DEFAULT_HEIGHT,
    style: object = None,
    animate: object = False,
    tags: object = (),
    muted: object = False,
) -> Options:
    """Check raw caller input; raises a PatternInputError subclass on the first problem."""
    if not isinstance(seed, str) or not seed:
        raise InvalidSeed(f"seed must be a non-empty string, got {seed!r}")
    try:
        seed.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidSeed(f"seed is not encodable as UTF-8: {seed!r}") from exc
    if style is not None and not is_valid_style(style):
        raise InvalidStyle(f"unknown style {style!r}")
    if not isinstance(tags, (list, tuple)) or not all(isinstance(t, str) for t in tags):
        raise InvalidTags(f"tags must be a list of strings, got {tags!r}")
    return Options(
        width=_check_dimension("width", width),
        height=_check_dimension("height", height),
        style=style,
        animate=_check_flag("animate", animate),
        tags=tuple(tags),
        muted=_check_flag("muted", muted),
    )


def resolve_palette(seed: str, style: str, tags: Sequence[str], muted: bool = False) -> tuple[str, Palette]:
    if not tags:
        return palette_for_style(seed, style)
    if muted:
        return muted_palette_for_tags(tags)
    return palette_for_tags(tags, seed)


def fallback_document(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> str:
    """Minimal document returned whenever input is rejected."""
    marker = svg.circle(width / 2, height / 2, 100).with_attributes(
        fill="none", stroke="#ffffff", stroke_width=2, opacity=0.5
    )
    return svg.build_document([marker], width, height, FALLBACK_BACKGROUND)


def _render(seed: str, options: Options, smil: bool = False) -> str:
    style = options.style or style_for_seed(seed)
    palette_id, palette = resolve_palette(seed, style, options.tags, options.muted)
    log.debug("seed=%r style=%s palette=%s", seed, style, palette_id)

    rng = SeededGenerator.new(seed)
    css = options.animate and not smil
    primitives, _ = patterns.generate_style(
        style, options.width, options.height, rng, palette, css
    )
    if smil:
        primitives = [animations.with_smil(style, p, i) for i, p in enumerate(primitives)]

    return svg.build_document(
        primitives,
        options.width,
        options.height,
        palette.background,
        style_block=animations.css_for(style) if css else None,
        definitions=patterns.definitions_for(style, palette),
    )


def generate(
    seed: str,
    *,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    style: str | None = None,
    animate: bool = False,
    tags: Sequence[str] = (),
    muted: bool = False,
) -> str:
    """
    Generate a deterministic SVG pattern for a seed.

    Invalid input never raises: the problem is logged and a fixed
    1200x630 fallback document is returned instead.
    """
    try:
        options = validate_options(seed, width, height, style, animate, tags, muted)
    except PatternInputError as exc:
        log.warning("Pattern input rejected (%s): %s; using fallback", type(exc).__name__, exc)
        return fallback_document()
    return _render(seed, options)


def generate_social_card(
    seed: str,
    *,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    style: str | None = None,
    tags: Sequence[str] = (),
    muted: bool = False,
) -> str:
    """Like generate(), but animated with SMIL elements instead of CSS."""
    try:
        options = validate_options(seed, width, height, style, False, tags, muted)
    except PatternInputError as exc:
        log.warning("Social card input rejected (%s): %s; using fallback", type(exc).__name__, exc)
        return fallback_document()
    return _render(seed, options, smil=True)
