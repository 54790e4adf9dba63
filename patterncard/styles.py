"""Per-style parameter table: every number a pattern consumes is declared here."""

from types import MappingProxyType
from typing import Any, Mapping

from .rng import Range, fnv1a_32

DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 630
MAX_DIMENSION = 2400

WAVE_FIELD = "wave-field"
NOISE_FIELD = "noise-field"
LINES = "lines"
HALFTONE_DOTS = "halftone-dots"
CIRCUIT_TRACE = "circuit-trace"
GLITCH_BARS = "glitch-bars"
GEOMETRIC_SHAPES = "geometric-shapes"
CELL_GRID = "cell-grid"
FLOW_FIELD = "flow-field"
WAVE_INTERFERENCE = "wave-interference"
CONTOUR_TOPOLOGY = "contour-topology"
CELL_TESSELLATION = "cell-tessellation"
ISOMETRIC_GRID = "isometric-grid"
STAR_GRAPH = "star-graph"
AURORA_BANDS = "aurora-bands"
LAYERED_COMPOSITE = "layered-composite"

STYLES: tuple[str, ...] = (
    WAVE_FIELD,
    NOISE_FIELD,
    LINES,
    HALFTONE_DOTS,
    CIRCUIT_TRACE,
    GLITCH_BARS,
    GEOMETRIC_SHAPES,
    CELL_GRID,
    FLOW_FIELD,
    WAVE_INTERFERENCE,
    CONTOUR_TOPOLOGY,
    CELL_TESSELLATION,
    ISOMETRIC_GRID,
    STAR_GRAPH,
    AURORA_BANDS,
    LAYERED_COMPOSITE,
)

# -------------------------
# Parameter table
# -------------------------

_CONFIGS: dict[str, dict[str, Any]] = {
    WAVE_FIELD: {
        "wave_count": Range(15, 40),
        "amplitude": Range(30, 110),
        "frequency": Range(0.003, 0.018),
        "phase": Range(0.0, 6.283),
        "opacity": Range(0.1, 0.5),
        "stroke_width": 2,
        "point_spacing": 10,
        "class_variants": 3,
    },
    NOISE_FIELD: {
        "cell_size": Range(5, 13),
        "brightness_threshold": 0.5,
        "opacity": Range(0.15, 0.6),
    },
    LINES: {
        "modes": ("parallel", "radial"),
        "parallel_count": 40,
        "parallel_thickness": Range(1, 4),
        "parallel_opacity": Range(0.2, 0.6),
        "radial_count": 60,
        "radial_thickness": Range(0.5, 2.5),
        "radial_opacity": Range(0.1, 0.4),
    },
    HALFTONE_DOTS: {
        "spacing": Range(15, 30),
        "center_offset": Range(0.3, 0.7),
        "size_randomness": Range(0.3, 1.0),
        "opacity": 0.8,
        "radius_divisor": 1.5,
        "min_radius": 1.0,
    },
    CIRCUIT_TRACE: {
        "trace_count": Range(30, 70),
        "segments": Range(3, 8),
        "segment_length": Range(50, 200),
        "thickness": Range(1, 4),
        "opacity": Range(0.2, 0.5),
        "turn_chance": 0.5,
        "direction_chance": 0.5,
    },
    GLITCH_BARS: {
        "bar_count": Range(20, 45),
        "bar_width": Range(80, 480),
        "bar_height": Range(3, 23),
        "opacity": Range(0.15, 0.65),
        "offset_chance": 0.4,
        "offset_range": Range(-15, 30),
        "scanline_count": 10,
        "scanline_height": 1,
        "scanline_opacity": Range(0.05, 0.15),
    },
    GEOMETRIC_SHAPES: {
        "shape_count": Range(12, 28),
        "size": Range(40, 220),
        "opacity": Range(0.15, 0.55),
        "stroke_width": 2,
        "shapes": ("circle", "rect", "triangle"),
        "rotation": Range(1, 360),
    },
    CELL_GRID: {
        "cell_size": Range(25, 55),
        "wave_frequency": Range(2, 7),
        "opacity": Range(0.2, 0.7),
        "cell_gap": 1,
    },
    FLOW_FIELD: {
        "particle_count": Range(80, 200),
        "steps": Range(30, 100),
        "step_length": 4.0,
        "stroke_width": Range(0.5, 2.5),
        "opacity": Range(0.15, 0.6),
        "noise_scale": 0.005,
        "noise_seed": Range(0, 1_000_000),
        "octaves": 3,
        "persistence": 0.5,
        "angle_turns": 2.0,
        "min_points": 2,
        "class_variants": 4,
        "tension": 1.0,
    },
    WAVE_INTERFERENCE: {
        "modes": ("concentric", "waves", "grids"),
        "center_count": Range(2, 4),
        "ring_spacing": Range(8, 20),
        "wave_sources": Range(2, 5),
        "wave_frequency": Range(0.02, 0.08),
        "grid_count": Range(2, 3),
        "grid_spacing": Range(6, 15),
        "grid_rotation": Range(0.0, 180.0),
        "phase": Range(0.0, 6.283),
        "stroke_width": Range(0.3, 1.0),
        "opacity": Range(0.2, 0.5),
        "line_spacing": 6,
        "sample_step": 8,
        "displacement": 8.0,
        "edge_fade_base": 0.3,
        "edge_fade": 0.7,
        "edge_fade_distance": 0.5,
        "class_variants": 3,
    },
    CONTOUR_TOPOLOGY: {
        "contour_count": Range(8, 20),
        "noise_scale": Range(0.003, 0.008),
        "octaves": Range(2, 4),
        "noise_offset": Range(0.0, 1000.0),
        "stroke_width": Range(0.5, 1.5),
        "opacity": Range(0.3, 0.7),
        "grid_step": 15,
        "level_opacity_base": 0.5,
        "level_opacity_falloff": 0.5,
        "class_variants": 3,
    },
    CELL_TESSELLATION: {
        "cell_count": Range(20, 60),
        "stroke_width": Range(0.5, 2.0),
        "opacity": Range(0.3, 0.6),
        "show_points_chance": 0.3,
        "point_radius": 3,
        "point_opacity_factor": 0.7,
        "class_variants": 3,
    },
    ISOMETRIC_GRID: {
        "cube_size": Range(30, 60),
        "show_probability": Range(0.4, 0.8),
        "height_variation": Range(0.2, 1.0),
        "stroke_width": Range(0.5, 1.5),
        "opacity": Range(0.3, 0.6),
        "iso_angle": 30,
        "start_y_ratio": 0.1,
        "face_shades": (1.0, 0.7, 0.5),
        "edge_opacity": 0.6,
        "edge_width_factor": 0.5,
        "class_variants": 3,
    },
    STAR_GRAPH: {
        "star_count": Range(40, 100),
        "connection_distance": Range(80, 180),
        "star_size": Range(1.0, 3.5),
        "brightness": Range(0.4, 1.0),
        "margin": 20,
        "max_connections": 3,
        "line_width": 0.5,
        "line_opacity": 0.3,
        "class_variants": 3,
    },
    AURORA_BANDS: {
        "band_count": Range(4, 9),
        "amplitude": Range(20, 80),
        "frequency": Range(0.002, 0.008),
        "thickness": Range(20, 60),
        "opacity": Range(0.08, 0.25),
        "phase": Range(0.0, 6.283),
        "base_y": Range(0.2, 0.8),
        "harmonics": ((1.0, 1.0), (0.5, 2.3), (0.25, 4.1)),
        "sample_step": 20,
        "glow_deviation": 12,
        "wash_opacity": 0.15,
        "class_variants": 4,
    },
    LAYERED_COMPOSITE: {
        "layer_count": Range(2, 3),
        "layers": (WAVE_FIELD, HALFTONE_DOTS, LINES, CELL_GRID, NOISE_FIELD, FLOW_FIELD),
        "secondary_opacity_base": 0.3,
        "secondary_opacity_falloff": 0.2,
        "explicit_layer_opacity": 0.4,
    },
}


def config_for(style: str) -> Mapping[str, Any]:
    try:
        return MappingProxyType(_CONFIGS[style])
    except KeyError:
        raise KeyError(f"Unknown style: {style!r}") from None


def is_valid_style(value: object) -> bool:
    return isinstance(value, str) and value in _CONFIGS


def available_styles() -> list[str]:
    return list(STYLES)


def style_for_seed(seed: str) -> str:
    """Style picked for a seed when the caller does not name one."""
    return STYLES[fnv1a_32(seed) % len(STYLES)]
