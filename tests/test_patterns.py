import math

import numpy as np
import pytest

from patterncard import patterns, styles
from patterncard.animations import css_for
from patterncard.noise import fbm_2d, trig_field
from patterncard.patterns import (
    circuit,
    composite,
    dots,
    isometric,
    star_graph,
    topology,
    voronoi,
    waves,
)
from patterncard.patterns._common import lerp_factor, smooth_d
from patterncard.rng import SeededGenerator
from patterncard.svg import Primitive, fmt

W, H = 800, 600


def _flatten(primitives):
    for p in primitives:
        yield p
        yield from _flatten(p.children)


@pytest.mark.parametrize("style", styles.STYLES)
class TestContract:
    def test_returns_primitives_and_advanced_state(self, style, rng, palette) -> None:
        primitives, next_rng = patterns.generate_style(style, W, H, rng, palette)
        if style != styles.CONTOUR_TOPOLOGY:
            assert primitives
        assert all(isinstance(p, Primitive) for p in primitives)
        assert next_rng != rng

    def test_deterministic(self, style, rng, palette) -> None:
        first = patterns.generate_style(style, W, H, rng, palette)
        second = patterns.generate_style(style, W, H, rng, palette)
        assert first == second

    def test_no_classes_unless_animating(self, style, rng, palette) -> None:
        primitives, _ = patterns.generate_style(style, W, H, rng, palette, False)
        assert all(p.class_name is None for p in _flatten(primitives))

    def test_animation_classes_have_css(self, style, rng, palette) -> None:
        primitives, _ = patterns.generate_style(style, W, H, rng, palette, True)
        classes = {p.class_name for p in _flatten(primitives) if p.class_name}
        assert classes or style == styles.CONTOUR_TOPOLOGY
        css = css_for(style)
        for name in classes:
            assert f".{name} " in css

    def test_animation_does_not_change_geometry(self, style, rng, palette) -> None:
        plain, rng_a = patterns.generate_style(style, W, H, rng, palette, False)
        animated, rng_b = patterns.generate_style(style, W, H, rng, palette, True)
        assert rng_a == rng_b
        assert [p.geometry for p in plain] == [p.geometry for p in animated]


class TestCellGrid:
    def test_fill_and_opacity(self, rng, palette) -> None:
        cfg = styles.config_for(styles.CELL_GRID)
        cells, _ = patterns.generate_style(styles.CELL_GRID, 400, 400, rng, palette)
        for cell in cells:
            assert cell.kind == "rect"
            assert cell.get("fill") in palette.foreground
            assert cfg["opacity"].contains(cell.get("opacity"))
            assert cfg["cell_size"].contains(cell.get("width") + cfg["cell_gap"])


class TestTopology:
    def test_case_table(self) -> None:
        assert len(topology.MARCHING_CASES) == 16
        assert topology.MARCHING_CASES[0] == ()
        assert topology.MARCHING_CASES[15] == ()
        assert len(topology.MARCHING_CASES[5]) == 2
        assert len(topology.MARCHING_CASES[10]) == 2

    def test_cell_case_bits(self) -> None:
        assert topology.cell_case(1, 0, 0, 0, 0.5) == 8
        assert topology.cell_case(0, 1, 0, 0, 0.5) == 4
        assert topology.cell_case(0, 0, 1, 0, 0.5) == 2
        assert topology.cell_case(0, 0, 0, 1, 0.5) == 1
        assert topology.cell_case(1, 1, 1, 1, 0.5) == 15

    def test_interpolated_crossing(self) -> None:
        # only bottom-right above threshold: bottom and right edges crossed halfway
        field = [[0.0, 0.0], [0.0, 1.0]]
        assert topology.contour_segments(field, 10, 0.5) == [((5.0, 10), (10, 5.0))]

    def test_flat_field_has_no_segments(self) -> None:
        assert topology.contour_segments([[0.2] * 4] * 4, 15, 0.5) == []

    def test_levels_within_config(self, palette) -> None:
        cfg = styles.config_for(styles.CONTOUR_TOPOLOGY)
        found = 0
        for seed in ("a", "b", "c", "d", "e"):
            contours, _ = topology.generate(800, 600, SeededGenerator.new(seed), palette, False)
            assert len(contours) <= cfg["contour_count"].max
            found += len(contours)
            for contour in contours:
                assert contour.kind == "path"
                assert cfg["stroke_width"].contains(contour.get("stroke-width"))
        assert found > 0

    @pytest.mark.parametrize("seed", ["demo", "a", "b", "c"])
    def test_opacity_falls_as_level_rises(self, seed, palette) -> None:
        contours, _ = topology.generate(800, 600, SeededGenerator.new(seed), palette, False)
        cfg = styles.config_for(styles.CONTOUR_TOPOLOGY)
        opacities = [c.get("opacity") for c in contours]
        assert all(o <= cfg["opacity"].max for o in opacities)
        assert opacities == sorted(opacities, reverse=True)
        assert len({c.get("stroke-width") for c in contours}) <= 1


class TestNoise:
    def test_trig_field_normalised(self) -> None:
        xs, ys = np.meshgrid(np.arange(0, 900, 15), np.arange(0, 600, 15))
        for octaves in (1, 2, 4):
            field = trig_field(xs, ys, 0.008, octaves, 12.5, 400.0)
            assert field.min() >= 0.0
            assert field.max() <= 1.0

    def test_fbm_range_and_determinism(self) -> None:
        values = [fbm_2d(x * 0.37, x * 0.11, 99) for x in range(200)]
        assert all(0.0 <= v <= 1.0 for v in values)
        assert values == [fbm_2d(x * 0.37, x * 0.11, 99) for x in range(200)]

    def test_lerp_factor(self) -> None:
        assert lerp_factor(0.0, 1.0, 0.25) == 0.25
        assert lerp_factor(0.3, 0.3, 0.3) == 0.5
        assert lerp_factor(0.0, 1.0, 2.0) == 1.0


class TestStarGraph:
    def test_connections_capped_and_forward(self) -> None:
        stars = [(x, 0.0, 1.0, 1.0) for x in (0, 10, 20, 30, 40)]
        pairs = star_graph.connections(stars, 100, 3)
        assert [j for i, j in pairs if i == 0] == [1, 2, 3]
        assert all(j > i for i, j in pairs)

    def test_distance_limit(self) -> None:
        stars = [(0.0, 0.0, 1, 1), (500.0, 0.0, 1, 1)]
        assert star_graph.connections(stars, 100, 3) == []

    def test_lines_before_stars(self, rng, palette) -> None:
        primitives, _ = star_graph.generate(1200, 630, rng, palette, False)
        kinds = [p.kind for p in primitives]
        assert "circle" in kinds
        first_circle = kinds.index("circle")
        assert all(kind == "line" for kind in kinds[:first_circle])
        assert all(kind == "circle" for kind in kinds[first_circle:])


class TestTessellation:
    def test_cells_cover_canvas(self) -> None:
        sites = [(25.0, 25.0), (75.0, 25.0), (25.0, 75.0), (75.0, 75.0)]
        outlines = voronoi.cell_outlines(sites, 100, 100)
        assert len(outlines) == 4

        def area(points):
            total = 0.0
            for (x1, y1), (x2, y2) in zip(points, points[1:] + points[:1]):
                total += x1 * y2 - x2 * y1
            return abs(total) / 2

        assert sum(area(o) for o in outlines) == pytest.approx(100 * 100)
        for outline in outlines:
            assert all(-1e-9 <= x <= 100 + 1e-9 and -1e-9 <= y <= 100 + 1e-9 for x, y in outline)


class TestIsometric:
    def test_cube_parts(self, palette) -> None:
        cfg = styles.config_for(styles.ISOMETRIC_GRID)
        parts = isometric.cube(50, 50, 26, 15, 20, palette, 1.0, 0.5, cfg)
        assert [p.kind for p in parts] == ["polygon"] * 3 + ["line"] * 3 + ["path"]


class TestComposite:
    def test_single_explicit_layer_is_unchanged(self, rng, palette) -> None:
        assert composite.generate_with_layers(
            [styles.WAVE_FIELD], W, H, rng, palette, False
        ) == waves.generate(W, H, rng, palette, False)

    def test_later_layers_dimmed(self, rng, palette) -> None:
        first, rng_after = waves.generate(W, H, rng, palette, False)
        second, _ = dots.generate(W, H, rng_after, palette, False)
        combined, _ = composite.generate_with_layers(
            [styles.WAVE_FIELD, styles.HALFTONE_DOTS], W, H, rng, palette, False
        )
        assert combined[: len(first)] == first
        dimmed = combined[len(first):]
        assert [p.get("opacity") for p in dimmed] == pytest.approx(
            [p.get("opacity") * 0.4 for p in second]
        )

    def test_unknown_layer(self, rng, palette) -> None:
        with pytest.raises(ValueError):
            composite.generate_with_layers([styles.STAR_GRAPH], W, H, rng, palette, False)


class TestSmoothing:
    def test_short_traces_are_straight(self) -> None:
        assert smooth_d([(0, 0), (1, 1), (2, 0)]) == "M 0,0 L 1,1 2,0"

    def test_long_traces_are_curves(self) -> None:
        d = smooth_d([(0, 0), (10, 5), (20, 0), (30, 5), (40, 0)])
        assert d.startswith("M 0,0 C ")
        assert d.count("C ") == 4
        assert d.endswith("40,0")


class TestWaves:
    def test_offsets_come_from_the_generator(self, rng, palette) -> None:
        primitives, _ = waves.generate(W, H, rng, palette, False)
        cfg = styles.config_for(styles.WAVE_FIELD)
        count, gen = rng.uniform_range(cfg["wave_count"])
        assert len(primitives) == count
        for wave in primitives:
            amplitude, gen = gen.uniform_range(cfg["amplitude"])
            _, gen = gen.uniform_range(cfg["frequency"])
            phase, gen = gen.uniform_range(cfg["phase"])
            y_offset, gen = gen.uniform_float(0, H)
            _, gen = gen.uniform_range(cfg["opacity"])
            start = y_offset + amplitude * math.sin(phase)
            assert wave.get("d").startswith(f"M 0,{fmt(start)} ")


class TestCircuit:
    def test_direction_follows_config(self, rng) -> None:
        cfg = dict(styles.config_for(styles.CIRCUIT_TRACE), direction_chance=1.0)
        points, _ = circuit._walk(rng, 0.0, 0.0, 20, cfg)
        assert len(points) == 21
        for (x1, y1), (x2, y2) in zip(points, points[1:]):
            assert x2 >= x1 and y2 >= y1

        cfg["direction_chance"] = 0.0
        points, _ = circuit._walk(rng, 0.0, 0.0, 20, cfg)
        for (x1, y1), (x2, y2) in zip(points, points[1:]):
            assert x2 <= x1 and y2 <= y1
