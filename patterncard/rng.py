"""Deterministic pseudo-random stream with explicit, immutable state."""

from dataclasses import dataclass
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

MASK64 = (1 << 64) - 1
GOLDEN_GAMMA = 0x9E3779B97F4A7C15

FNV_OFFSET = 0x811C9DC5
FNV_PRIME = 0x01000193


def fnv1a_32(text: str) -> int:
    """Stable 32-bit FNV-1a hash of the UTF-8 encoded text."""
    h = FNV_OFFSET
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * FNV_PRIME) & 0xFFFFFFFF
    return h


def _mix64(z: int) -> int:
    # splitmix64 finaliser
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return z ^ (z >> 31)


@dataclass(frozen=True)
class Range:
    min: float
    max: float

    def __post_init__(self) -> None:
        if self.max < self.min:
            raise ValueError(f"Range max {self.max} is below min {self.min}")

    @property
    def is_integer(self) -> bool:
        return all(
            isinstance(v, int) and not isinstance(v, bool) for v in (self.min, self.max)
        )

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class SeededGenerator:
    """
    Value-semantics generator. Every draw returns (value, next_generator);
    the receiver is never modified, so a generator can be shared freely
    between threads without any two calls observing each other.
    """

    state: int

    @classmethod
    def new(cls, seed: str | int) -> "SeededGenerator":
        if isinstance(seed, str):
            seed = fnv1a_32(seed)
        return cls(_mix64(seed & MASK64))

    def _next(self) -> tuple[int, "SeededGenerator"]:
        state = (self.state + GOLDEN_GAMMA) & MASK64
        return _mix64(state), SeededGenerator(state)

    def uniform(self) -> tuple[float, "SeededGenerator"]:
        bits, gen = self._next()
        return (bits >> 11) * (1.0 / (1 << 53)), gen

    def uniform_int(self, n: int) -> tuple[int, "SeededGenerator"]:
        """Integer in 1..n."""
        if n < 1:
            raise ValueError("n must be >= 1")
        bits, gen = self._next()
        return bits % n + 1, gen

    def uniform_float(self, lo: float, hi: float) -> tuple[float, "SeededGenerator"]:
        u, gen = self.uniform()
        return min(lo + u * (hi - lo), hi), gen

    def uniform_range(self, bounds: Range) -> tuple[float, "SeededGenerator"]:
        if bounds.is_integer:
            value, gen = self.uniform_int(bounds.max - bounds.min + 1)
            return bounds.min + value - 1, gen
        return self.uniform_float(bounds.min, bounds.max)

    def chance(self, probability: float) -> tuple[bool, "SeededGenerator"]:
        if not 0.0 <= probability <= 1.0:
            raise ValueError("probability must be within [0, 1]")
        u, gen = self.uniform()
        return u < probability, gen

    def choice(self, items: Sequence[T]) -> tuple[T, "SeededGenerator"]:
        if not items:
            raise ValueError("cannot choose from an empty sequence")
        index, gen = self.uniform_int(len(items))
        return items[index - 1], gen

    def draw_many(
        self, count: int, draw: Callable[["SeededGenerator"], tuple[T, "SeededGenerator"]]
    ) -> tuple[list[T], "SeededGenerator"]:
        values: list[T] = []
        gen = self
        for _ in range(count):
            value, gen = draw(gen)
            values.append(value)
        return values, gen
