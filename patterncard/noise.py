"""Deterministic noise fields used by the flow and contour styles."""

import math

import numpy as np

# -------------------------
# Smooth 2D value noise + fBm
# -------------------------


def _hash_int(n: int) -> int:
    # 32-bit integer mix
    n &= 0xFFFFFFFF
    n = (n ^ 61) ^ (n >> 16)
    n = (n + (n << 3)) & 0xFFFFFFFF
    n = n ^ (n >> 4)
    n = (n * 0x27D4EB2D) & 0xFFFFFFFF
    n = n ^ (n >> 15)
    return n & 0xFFFFFFFF


def _lattice(ix: int, iy: int, seed: int) -> float:
    h = _hash_int(ix * 374761393 + iy * 668265263 + seed * 362437)
    return h / 2**32


def _fade(t: float) -> float:
    # Perlin fade curve
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def value_noise_2d(x: float, y: float, seed: int) -> float:
    """Value noise in [0, 1]."""
    x0 = math.floor(x)
    y0 = math.floor(y)

    sx = _fade(x - x0)
    sy = _fade(y - y0)

    n00 = _lattice(x0, y0, seed)
    n10 = _lattice(x0 + 1, y0, seed)
    n01 = _lattice(x0, y0 + 1, seed)
    n11 = _lattice(x0 + 1, y0 + 1, seed)

    return _lerp(_lerp(n00, n10, sx), _lerp(n01, n11, sx), sy)


def fbm_2d(
    x: float,
    y: float,
    seed: int,
    octaves: int = 3,
    lacunarity: float = 2.0,
    gain: float = 0.5,
) -> float:
    amp = 1.0
    freq = 1.0
    total = 0.0
    norm = 0.0
    for o in range(octaves):
        total += amp * value_noise_2d(x * freq, y * freq, seed + 1013 * o)
        norm += amp
        amp *= gain
        freq *= lacunarity
    return total / max(norm, 1e-9)


# -------------------------
# Trigonometric pseudo-noise
# -------------------------


def trig_field(
    xs: np.ndarray,
    ys: np.ndarray,
    scale: float,
    octaves: int,
    offset_x: float = 0.0,
    offset_y: float = 0.0,
) -> np.ndarray:
    """
    Closed-form layered sine field sampled on a grid.

    Each octave doubles the frequency and halves the amplitude. Every octave
    term lies in [-1.5, 1.5], so dividing by the summed amplitude bound maps
    the result into [0, 1].
    """
    nx = xs * scale + offset_x
    ny = ys * scale + offset_y
    total = np.zeros(np.broadcast(nx, ny).shape)
    bound = 0.0
    for octave in range(octaves):
        freq = 2.0**octave
        amp = 0.5**octave
        term = np.sin(nx * freq) * np.cos(ny * freq * 0.7)
        term = term + np.sin((nx + ny) * freq * 0.5) * 0.5
        total += amp * term
        bound += 1.5 * amp
    return np.clip((total / bound + 1.0) / 2.0, 0.0, 1.0)
