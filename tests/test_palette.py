import colorsys

import pytest

from patterncard import palette
from patterncard.palette import PALETTES, Palette


class TestSelection:
    def test_seed_palette_is_deterministic(self) -> None:
        name, pal = palette.palette_for_seed("hello-world")
        assert name in PALETTES
        assert palette.palette_for_seed("hello-world") == (name, pal)

    def test_style_key_is_seed_and_style(self) -> None:
        assert palette.palette_for_style("demo", "cell-grid") == palette.palette_for(
            "demo-cell-grid"
        )

    def test_every_palette_reachable(self) -> None:
        names = {palette.palette_for(f"key-{i}")[0] for i in range(100)}
        assert names == set(PALETTES)


class TestTags:
    def test_exact_tag_is_case_insensitive(self) -> None:
        assert palette.color_for_tag("Rust") == "#dea584"
        assert palette.color_for_tag("GOLANG") == "#00add8"
        assert palette.color_for_tag("cobol") is None

    def test_first_matching_tag_wins(self) -> None:
        assert palette.accent_color(["unknown", "python", "rust"]) == "#3776ab"

    @pytest.mark.parametrize(
        "tags, expected",
        [
            (["my-code-notes"], "#a855f7"),
            (["devops-diary"], "#0ea5e9"),
            (["frontend"], "#f97316"),
            (["tokenomics"], "#627eea"),
            (["ux-research"], "#ec4899"),
            (["howto"], "#22c55e"),
            (["random"], "#ffffff"),
            ([], "#ffffff"),
        ],
    )
    def test_category_fallback(self, tags, expected) -> None:
        assert palette.accent_color(tags) == expected

    def test_tag_palette(self) -> None:
        name, pal = palette.palette_for_tags(["elixir"], "seed")
        assert name == "tag_based"
        assert pal == Palette("#000000", ("#9b59b6", "#ffffff", "#9b59b6"))

    def test_neutral_tags_use_seed_palette(self) -> None:
        assert palette.palette_for_tags(["random"], "seed") == palette.palette_for_seed("seed")

    def test_muted_palette(self) -> None:
        name, pal = palette.muted_palette_for_tags(["python"])
        assert name == "tag_based_muted"
        assert pal.foreground[0] == palette.mute_color("#3776ab")
        assert pal.foreground[1] == "#ffffff"


class TestColors:
    def test_hex_round_trip(self) -> None:
        assert palette.hex_to_rgb("#3776ab") == (0x37, 0x76, 0xAB)
        assert palette.rgb_to_hex(0x37, 0x76, 0xAB) == "#3776ab"

    def test_mute_reduces_saturation(self) -> None:
        def saturation(hex_color):
            r, g, b = palette.hex_to_rgb(hex_color)
            return colorsys.rgb_to_hls(r / 255, g / 255, b / 255)[2]

        muted = palette.mute_color("#3776ab", 0.4)
        assert muted != "#3776ab"
        assert saturation(muted) < saturation("#3776ab")

    @pytest.mark.parametrize("color", ["#ff0000", "#3776ab", "#9b59b6", "#0a0a0a", "#ffffff"])
    def test_unit_factor_is_stable(self, color) -> None:
        assert palette.mute_color(color, 1.0) == color

    def test_grey_is_unchanged(self) -> None:
        assert palette.mute_color("#808080") == "#808080"

    def test_non_hex_passes_through(self) -> None:
        assert palette.mute_color("tomato") == "tomato"

    def test_palette_needs_foreground(self) -> None:
        with pytest.raises(ValueError):
            Palette("#000000", ())

    def test_color_cycles(self) -> None:
        pal = Palette("#000000", ("#111111", "#222222"))
        assert [pal.color(i) for i in range(4)] == ["#111111", "#222222", "#111111", "#222222"]
