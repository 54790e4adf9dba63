"""File helpers for the batch renderer."""

import os
import sys
from pathlib import Path


def write_svg(document: str, target: Path) -> Path:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(document, encoding="utf-8")
    return target


def svg_to_png(source: Path) -> Path:
    """Rasterise a written card next to it, same name with a .png suffix."""
    if not source.exists():
        raise FileNotFoundError(source)

    output_path = source.with_suffix(".png")

    if sys.platform == "darwin":
        _ensure_macos_cairo_path()

    try:
        import cairosvg
    except ModuleNotFoundError as exc:
        raise ModuleNotFoundError(
            "cairosvg is required for PNG export (pip install 'patterncard[png]')."
        ) from exc

    cairosvg.svg2png(url=str(source), write_to=str(output_path))
    return output_path


def _ensure_macos_cairo_path() -> None:
    if os.environ.get("DYLD_FALLBACK_LIBRARY_PATH"):
        return

    candidates = ["/opt/homebrew/lib", "/usr/local/lib"]
    existing = [path for path in candidates if Path(path).is_dir()]
    if not existing:
        return

    os.environ["DYLD_FALLBACK_LIBRARY_PATH"] = ":".join(existing)


def output_name(style: str, seed: str, suffix: str = ".svg") -> str:
    """File name for one rendered card; path separators in seeds are replaced."""
    safe_seed = "".join(c if c.isalnum() or c in "-_." else "_" for c in seed)
    return f"{style}_{safe_seed}{suffix}"
