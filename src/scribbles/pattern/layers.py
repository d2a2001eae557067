# src/scribbles/pattern/layers.py
# Motif layers: every PRNG draw a layer needs, taken in paint order.

import math
from dataclasses import dataclass, field
from typing import List

from ..palettes import MOTIFS, Motif, Palette
from ..rng import SineRandom

TAU = math.pi * 2

# Threshold for the per-shape "filled" draw (filled when rand > 0.6)
FILL_THRESHOLD = 0.6
RING_THRESHOLD = 0.5

def scaled_count(base: int, density: float) -> int:
    """floor(base * density), never negative."""
    return max(0, math.floor(base * density))

@dataclass(frozen=True)
class ShapePlan:
    x: float
    y: float
    size: float
    rotation: float
    filled: bool
    ring: bool = False   # circles only: concentric inner ring

@dataclass
class LayerPlan:
    motif: Motif
    color: str
    alpha: float
    line_width: float
    base_count: int
    shapes: List[ShapePlan] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.shapes)

def plan_shape(rng: SineRandom, motif: Motif, width: float, height: float) -> ShapePlan:
    # Placement first, then the motif's own draws.
    x = rng() * width
    y = rng() * height
    size = 40 + rng() * (min(width, height) * 0.3)
    rotation = rng() * TAU
    filled = rng() > FILL_THRESHOLD
    ring = motif is Motif.CIRCLES and rng() > RING_THRESHOLD
    return ShapePlan(x, y, size, rotation, filled, ring)

def plan_layer(
    rng: SineRandom,
    palette: Palette,
    width: float,
    height: float,
    density: float,
) -> LayerPlan:
    """
    Draw order per layer (part of every seed's identity):
      motif, color, alpha, line width, base count, then each shape.
    """
    motif = rng.pick(MOTIFS)
    color = rng.pick(palette.colors)
    alpha = 0.2 + rng() * 0.6
    line_width = 2 + rng() * 8
    base_count = 10 + rng.index(40)
    layer = LayerPlan(motif, color, alpha, line_width, base_count)
    for _ in range(scaled_count(base_count, density)):
        layer.shapes.append(plan_shape(rng, motif, width, height))
    return layer
