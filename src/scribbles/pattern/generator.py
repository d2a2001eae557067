# src/scribbles/pattern/generator.py
# Wallpaper generator: plan every PRNG decision, then paint the plan.

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

from ..palettes import PALETTES, Palette
from ..rng import create_rng
from .layers import LayerPlan, plan_layer
from .motifs import draw_motif
from .scribble import ScribblePlan, paint_scribbles, plan_scribbles

log = logging.getLogger(__name__)

@dataclass
class PatternPlan:
    seed: float
    width: float
    height: float
    density: float
    palette: Palette
    background: str
    layers: List[LayerPlan] = field(default_factory=list)
    scribbles: List[ScribblePlan] = field(default_factory=list)

    def colors_used(self) -> List[str]:
        out = [self.background]
        out += [layer.color for layer in self.layers]
        out += [s.color for s in self.scribbles]
        return out

def plan_pattern(seed: float, width: float, height: float, density: float = 1.0) -> PatternPlan:
    """
    Consume a fresh PRNG in paint order:
      1) palette, background
      2) layer count 3..6
      3) each layer (see plan_layer)
      4) scribble overlay
    """
    rng = create_rng(seed)
    palette = rng.pick(PALETTES)
    background = rng.pick(palette.colors)
    plan = PatternPlan(seed, width, height, density, palette, background)
    layer_count = 3 + rng.index(4)
    for _ in range(layer_count):
        plan.layers.append(plan_layer(rng, palette, width, height, density))
    plan.scribbles = plan_scribbles(rng, palette, width, height, density)
    return plan

def paint_layer(canvas, layer: LayerPlan) -> None:
    with canvas.scoped():
        canvas.global_alpha = layer.alpha
        canvas.fill_style = layer.color
        canvas.stroke_style = layer.color
        canvas.line_width = layer.line_width
        canvas.line_cap = "round"
        canvas.line_join = "round"
        for shape in layer.shapes:
            with canvas.scoped():
                canvas.translate(shape.x, shape.y)
                canvas.rotate(shape.rotation)
                draw_motif(canvas, layer.motif, shape)

def paint_pattern(canvas, plan: PatternPlan) -> None:
    """Paint a plan; no PRNG draws happen here."""
    with canvas.scoped():
        canvas.fill_style = plan.background
        canvas.fill_rect(0, 0, plan.width, plan.height)
    for layer in plan.layers:
        paint_layer(canvas, layer)
    paint_scribbles(canvas, plan.scribbles)

def draw_pattern(canvas, width, height, seed, density: float = 1.0) -> Optional[PatternPlan]:
    """
    Render one wallpaper onto canvas. Bad input (no canvas, non-positive size,
    non-finite seed/density) is logged and skipped so callers drawing many
    wallpapers keep going. Returns the painted plan, or None when skipped.
    """
    if canvas is None:
        log.warning("[pattern] no drawing surface; skipped seed %s", seed)
        return None
    if not (width > 0 and height > 0):
        log.warning("[pattern] invalid size %sx%s; skipped seed %s", width, height, seed)
        return None
    if not (math.isfinite(seed) and math.isfinite(density)):
        log.warning("[pattern] non-finite seed/density (%s, %s); skipped", seed, density)
        return None
    plan = plan_pattern(seed, width, height, density)
    paint_pattern(canvas, plan)
    log.debug(
        "[pattern] seed=%s %sx%s density=%s palette=%s layers=%d scribbles=%d",
        seed, width, height, density, plan.palette.name, len(plan.layers), len(plan.scribbles),
    )
    return plan
