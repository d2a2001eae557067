# src/scribbles/rng.py
"""
Sine-hash generator used for every wallpaper decision.

Each call advances s = sin(s) * 10000 and returns the fractional part. It is
statistically weak (seeds on multiples of pi, 0 included, collapse to a
constant stream) but portable and bit-stable, which is what keeps a seed's
wallpaper looking the same everywhere.
"""

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

SCALE = 10000.0

def sine_next(state: float) -> float:
    return math.sin(state) * SCALE

def fract(x: float) -> float:
    return x - math.floor(x)

@dataclass
class SineRandom:
    state: float

    def __call__(self) -> float:
        self.state = sine_next(self.state)
        return fract(self.state)

    def index(self, n: int) -> int:
        """floor(rand * n); one draw."""
        assert n > 0
        # fract() can round up to 1.0 for |s| < 1ulp
        return min(n - 1, math.floor(self() * n))

    def pick(self, seq: Sequence[T]) -> T:
        return seq[self.index(len(seq))]

def create_rng(seed: float) -> SineRandom:
    """Fresh generator for one render. Never share one across renders."""
    if not math.isfinite(seed):
        raise ValueError(f"seed must be finite, got {seed!r}")
    return SineRandom(float(seed))
