"""Batch renderer and config.toml helpers.

    patterncard render [--config config.toml] [--output output] [--png]
    patterncard seedlist COUNT [--min 0] [--max 9999]
    patterncard sync-styles
    patterncard show SEED [--style wave-field] [--animate]
"""

import argparse
import logging
import os
import random
import sys
import tomllib
from pathlib import Path

from . import variables
from .file_utils import output_name, svg_to_png, write_svg
from .generator import generate, generate_social_card
from .logs import get_logger
from .styles import DEFAULT_HEIGHT, DEFAULT_WIDTH, available_styles, is_valid_style

log = logging.getLogger(__name__)

# -------------------------
# config.toml
# -------------------------


def _format_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, list):
        return "[" + ", ".join(_format_value(item) for item in value) + "]"
    raise TypeError(f"Unsupported TOML value: {type(value).__name__}")


def _write_toml(data: dict, path: Path) -> None:
    lines: list[str] = []

    root_items = [(k, v) for k, v in data.items() if not isinstance(v, dict)]
    for key, value in root_items:
        lines.append(f"{key} = {_format_value(value)}")
    if root_items:
        lines.append("")

    sections = [k for k, v in data.items() if isinstance(v, dict)]
    for idx, section in enumerate(sections):
        lines.append(f"[{section}]")
        table = data[section]
        for key in sorted(table.keys()):
            lines.append(f"    {key} = {_format_value(table[key])}")
        if idx != len(sections) - 1:
            lines.append("")
            lines.append("")

    path.write_text("\n".join(lines).rstrip() + "\n", encoding="utf-8")


def load_config(path: Path) -> dict:
    with path.open("rb") as f:
        return tomllib.load(f)


def _table(config: dict, name: str) -> dict:
    table = config.get(name)
    if table is None:
        return {}
    if not isinstance(table, dict):
        raise TypeError(f"[{name}] must be a table in config.toml")
    return table


def resolve_seeds(config: dict) -> list[str]:
    env_seed = os.getenv(variables.SEED_ENV)
    if env_seed:
        return [env_seed]
    seed_list = _table(config, "style").get("seedlist")
    if seed_list is None:
        raise ValueError("Missing [style].seedlist in config.toml")
    if not isinstance(seed_list, list) or not seed_list:
        raise ValueError("[style].seedlist must be a non-empty list in config.toml")
    return [str(value) for value in seed_list]


def enabled_styles(config: dict) -> list[str]:
    table = _table(config, "styles")
    unknown = sorted(name for name in table if not is_valid_style(name))
    if unknown:
        raise ValueError(f"Unknown styles in [styles]: {', '.join(unknown)}")
    enabled = [name for name in available_styles() if table.get(name)]
    if not enabled:
        raise ValueError("No styles enabled in [styles] of config.toml")
    return enabled


# -------------------------
# Commands
# -------------------------


def render_batch(config: dict, output_dir: Path, png: bool | None = None) -> list[Path]:
    """Render every enabled style for every seed; returns the written files."""
    style_cfg = _table(config, "style")
    width = style_cfg.get("width", DEFAULT_WIDTH)
    height = style_cfg.get("height", DEFAULT_HEIGHT)
    animate = style_cfg.get("animate", False)
    smil = style_cfg.get("smil", False)
    tags = style_cfg.get("tags", [])
    as_png = style_cfg.get("png", False) if png is None else png

    written: list[Path] = []
    for style in enabled_styles(config):
        for seed in resolve_seeds(config):
            if smil:
                document = generate_social_card(
                    seed, width=width, height=height, style=style, tags=tags
                )
            else:
                document = generate(
                    seed, width=width, height=height, style=style, animate=animate, tags=tags
                )
            target = write_svg(document, output_dir / output_name(style, seed))
            if as_png:
                png_path = svg_to_png(target)
                target.unlink()
                target = png_path
            log.info("Wrote %s", target)
            written.append(target)
    return written


def sync_styles(config_path: Path) -> dict:
    """Make [styles] list exactly the available styles; new ones default to off."""
    data = load_config(config_path)
    table = _table(data, "styles")
    styles = available_styles()

    for name in styles:
        table.setdefault(name, False)
    for key in list(table.keys()):
        if key not in styles:
            del table[key]

    data["styles"] = table
    _write_toml(data, config_path)
    return data


def write_seedlist(
    config_path: Path, count: int, min_value: int = 0, max_value: int = 9999
) -> list[int]:
    if count <= 0:
        raise ValueError("count must be a positive integer")
    if min_value > max_value:
        raise ValueError("--min must be <= --max")

    config = load_config(config_path)
    style = _table(config, "style")

    rng = random.Random()
    style["seedlist"] = [rng.randint(min_value, max_value) for _ in range(count)]
    config["style"] = style

    _write_toml(config, config_path)
    return style["seedlist"]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patterncard", description="Deterministic SVG pattern cards."
    )
    parser.add_argument("--config", type=Path, default=Path(variables.CONFIG))
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render enabled styles for every seed.")
    render.add_argument("--output", type=Path, default=Path(variables.OUTPUT))
    render.add_argument("--png", action="store_true", default=None, help="Export PNG.")

    seeds = sub.add_parser("seedlist", help="Create a random seed list.")
    seeds.add_argument("count", type=int, help="How many seeds to generate.")
    seeds.add_argument("--min", dest="min_value", type=int, default=0)
    seeds.add_argument("--max", dest="max_value", type=int, default=9999)

    sub.add_parser("sync-styles", help="Sync [styles] with the available styles.")

    show = sub.add_parser("show", help="Print one document to stdout.")
    show.add_argument("seed")
    show.add_argument("--style", default=None)
    show.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    show.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    show.add_argument("--animate", action="store_true")
    show.add_argument("--tag", dest="tags", action="append", default=[])
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    get_logger("patterncard", logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "render":
        render_batch(load_config(args.config), args.output, args.png)
    elif args.command == "seedlist":
        write_seedlist(args.config, args.count, args.min_value, args.max_value)
    elif args.command == "sync-styles":
        sync_styles(args.config)
    elif args.command == "show":
        sys.stdout.write(
            generate(
                args.seed,
                width=args.width,
                height=args.height,
                style=args.style,
                animate=args.animate,
                tags=args.tags,
            )
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
