# src/scribbles/pattern/scribble.py
# Freehand overlay: wandering quadratic curves stroked on top of every layer.

from dataclasses import dataclass, field
from typing import List, Tuple

from ..palettes import Palette
from ..rng import SineRandom
from .layers import scaled_count

BASE_SCRIBBLES = 15
SCRIBBLE_ALPHA = 0.6
STEP = 200      # max offset per segment (+-STEP/2 per axis)
WOBBLE = 50     # control point spread (+-WOBBLE/2 per axis)

@dataclass(frozen=True)
class Segment:
    cpx: float
    cpy: float
    x: float
    y: float

@dataclass
class ScribblePlan:
    color: str
    line_width: float
    start: Tuple[float, float]
    segments: List[Segment] = field(default_factory=list)

def _clamp(v: float, hi: float) -> float:
    return max(0.0, min(hi, v))

def plan_scribbles(
    rng: SineRandom,
    palette: Palette,
    width: float,
    height: float,
    density: float,
) -> List[ScribblePlan]:
    out: List[ScribblePlan] = []
    for _ in range(scaled_count(BASE_SCRIBBLES, density)):
        color = rng.pick(palette.colors)
        line_width = 1 + rng() * 2
        x = rng() * width
        y = rng() * height
        s = ScribblePlan(color, line_width, (x, y))
        for _ in range(5 + rng.index(10)):
            x = _clamp(x + (rng() - 0.5) * STEP, width)
            y = _clamp(y + (rng() - 0.5) * STEP, height)
            # Control point is not clamped; curves may bow past the edge.
            cpx = x + (rng() - 0.5) * WOBBLE
            cpy = y + (rng() - 0.5) * WOBBLE
            s.segments.append(Segment(cpx, cpy, x, y))
        out.append(s)
    return out

def paint_scribbles(canvas, scribbles: List[ScribblePlan]) -> None:
    with canvas.scoped():
        canvas.global_alpha = SCRIBBLE_ALPHA
        for s in scribbles:
            canvas.stroke_style = s.color
            canvas.line_width = s.line_width
            canvas.begin_path()
            canvas.move_to(*s.start)
            for seg in s.segments:
                canvas.quadratic_curve_to(seg.cpx, seg.cpy, seg.x, seg.y)
            canvas.stroke()
