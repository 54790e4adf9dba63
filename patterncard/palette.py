"""Deterministic palette selection from seeds, styles and post tags."""

import colorsys
from dataclasses import dataclass
from typing import Iterable, Sequence

from .rng import fnv1a_32


@dataclass(frozen=True)
class Palette:
    background: str
    foreground: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.foreground:
            raise ValueError("Palette needs at least one foreground colour")

    def color(self, index: int) -> str:
        return self.foreground[index % len(self.foreground)]


PALETTES: dict[str, Palette] = {
    "pure_mono": Palette("#000000", ("#ffffff", "#ffffff", "#ffffff")),
    "mono_bright": Palette("#0a0a0a", ("#ffffff", "#e6e6e6", "#ffffff")),
    "mono_accent": Palette("#000000", ("#ffffff", "#808080", "#ffffff")),
}

NEUTRAL = "#ffffff"
MUTE_FACTOR = 0.4

TAG_COLORS: dict[str, str] = {
    # languages
    "elixir": "#9b59b6",
    "phoenix": "#f47920",
    "erlang": "#a90533",
    "rust": "#dea584",
    "go": "#00add8",
    "golang": "#00add8",
    "python": "#3776ab",
    "javascript": "#f7df1e",
    "typescript": "#3178c6",
    "ruby": "#cc342d",
    "haskell": "#5e5086",
    "gleam": "#ffaff3",
    "lua": "#000080",
    "zig": "#f7a41d",
    # web
    "react": "#61dafb",
    "vue": "#42b883",
    "svelte": "#ff3e00",
    "tailwind": "#06b6d4",
    "css": "#264de4",
    "html": "#e34c26",
    # blockchain
    "ethereum": "#627eea",
    "solidity": "#363636",
    "blockchain": "#f7931a",
    "web3": "#627eea",
    "defi": "#8b5cf6",
    "nft": "#ff6b6b",
    # infrastructure
    "docker": "#2496ed",
    "kubernetes": "#326ce5",
    "aws": "#ff9900",
    "linux": "#fcc624",
    "nix": "#5277c3",
    "terraform": "#7b42bc",
    # topics
    "security": "#ef4444",
    "cryptography": "#10b981",
    "performance": "#f59e0b",
    "testing": "#22c55e",
    "architecture": "#6366f1",
    "functional": "#8b5cf6",
    "systems": "#64748b",
    "distributed": "#0ea5e9",
    "ai": "#10b981",
    "ml": "#10b981",
    "database": "#336791",
    "postgres": "#336791",
    "redis": "#dc382d",
    "api": "#0ea5e9",
    # tools
    "cli": "#4ade80",
    "terminal": "#22c55e",
    "vim": "#019733",
    "neovim": "#57a143",
    "emacs": "#7f5ab6",
}

# checked in order, first bucket with a keyword hit wins
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("programming", ("code", "programming", "lang")),
    ("infrastructure", ("deploy", "server", "devops")),
    ("web", ("web", "frontend", "backend")),
    ("blockchain", ("crypto", "chain", "token")),
    ("design", ("design", "ui", "ux")),
    ("tutorial", ("tutorial", "guide", "howto")),
)

CATEGORY_COLORS: dict[str, str] = {
    "programming": "#a855f7",
    "infrastructure": "#0ea5e9",
    "web": "#f97316",
    "blockchain": "#627eea",
    "design": "#ec4899",
    "tutorial": "#22c55e",
}


# -------------------------
# Colour conversion
# -------------------------


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #rrggbb colour, got {hex_color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def mute_color(hex_color: str, factor: float = MUTE_FACTOR) -> str:
    """Scale the HSL saturation of a colour and quantise back to 8-bit hex."""
    try:
        r, g, b = hex_to_rgb(hex_color)
    except ValueError:
        return hex_color
    h, lightness, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    s = max(0.0, min(1.0, s * factor))
    nr, ng, nb = colorsys.hls_to_rgb(h, lightness, s)
    return rgb_to_hex(*(round(c * 255) for c in (nr, ng, nb)))


# -------------------------
# Selection
# -------------------------


def palette_for(key: str) -> tuple[str, Palette]:
    names = sorted(PALETTES)
    name = names[fnv1a_32(key) % len(names)]
    return name, PALETTES[name]


def palette_for_seed(seed: str) -> tuple[str, Palette]:
    return palette_for(seed)


def palette_for_style(seed: str, style: str) -> tuple[str, Palette]:
    return palette_for(f"{seed}-{style}")


def color_for_tag(tag: str) -> str | None:
    return TAG_COLORS.get(tag.lower())


def category_color(tags: Iterable[str]) -> str:
    lowered = [tag.lower() for tag in tags]
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in tag for tag in lowered for keyword in keywords):
            return CATEGORY_COLORS[category]
    return NEUTRAL


def accent_color(tags: Sequence[str]) -> str:
    """First exact tag match, else a category guess, else neutral white."""
    for tag in tags:
        color = color_for_tag(tag)
        if color is not None:
            return color
    return category_color(tags)


def palette_for_tags(tags: Sequence[str], seed: str) -> tuple[str, Palette]:
    accent = accent_color(tags)
    if accent == NEUTRAL:
        return palette_for_seed(seed)
    return "tag_based", Palette("#000000", (accent, NEUTRAL, accent))


def muted_palette_for_tags(tags: Sequence[str]) -> tuple[str, Palette]:
    muted = mute_color(accent_color(tags), MUTE_FACTOR)
    return "tag_based_muted", Palette("#000000", (muted, NEUTRAL, muted))
