# src/scribbles/pattern/motifs.py
"""
One painter per Motif. Each draws centered on the origin of the current
frame; the caller has already translated/rotated to the shape and owns the
save/restore around the call.
"""

from typing import Callable, Dict

from ..palettes import Motif
from ..render.canvas import DESTINATION_OUT, TAU
from .layers import ShapePlan

def _fill_or_stroke(canvas, filled: bool) -> None:
    if filled:
        canvas.fill()
    else:
        canvas.stroke()

def _circle(canvas, r: float) -> None:
    canvas.begin_path()
    canvas.arc(0, 0, r, 0, TAU)

def zigzag(canvas, s: ShapePlan) -> None:
    size = s.size
    canvas.begin_path()
    canvas.move_to(-size / 2, 0)
    for j in range(4):
        canvas.line_to(-size / 2 + (j + 1) * (size / 4), (-1 if j % 2 == 0 else 1) * size / 4)
    canvas.stroke()

def diamonds(canvas, s: ShapePlan) -> None:
    h = s.size / 2
    canvas.begin_path()
    canvas.move_to(0, -h)
    canvas.line_to(h, 0)
    canvas.line_to(0, h)
    canvas.line_to(-h, 0)
    canvas.close_path()
    _fill_or_stroke(canvas, s.filled)

def triangles(canvas, s: ShapePlan) -> None:
    h = s.size / 2
    canvas.begin_path()
    canvas.move_to(0, -h)
    canvas.line_to(h, h)
    canvas.line_to(-h, h)
    canvas.close_path()
    _fill_or_stroke(canvas, s.filled)

def circles(canvas, s: ShapePlan) -> None:
    _circle(canvas, s.size / 2)
    _fill_or_stroke(canvas, s.filled)
    if s.ring:
        _circle(canvas, s.size / 3)
        canvas.stroke()

def waves(canvas, s: ShapePlan) -> None:
    size = s.size
    canvas.begin_path()
    canvas.move_to(-size / 2, 0)
    canvas.bezier_curve_to(-size / 4, -size / 2, size / 4, size / 2, size / 2, 0)
    canvas.stroke()

def crescents(canvas, s: ShapePlan) -> None:
    size = s.size
    # Carve: erase the offset disc from whatever is underneath.
    with canvas.scoped():
        canvas.global_composite_operation = DESTINATION_OUT
        canvas.translate(size / 5, 0)
        _circle(canvas, size / 2.2)
        canvas.fill()
    _circle(canvas, size / 2)
    _fill_or_stroke(canvas, s.filled)

def grid(canvas, s: ShapePlan) -> None:
    size = s.size
    step = size / 4
    canvas.begin_path()
    # Accumulating k (not k = i*step) matches the shipped line set exactly.
    k = -size / 2
    while k <= size / 2:
        canvas.move_to(k, -size / 2)
        canvas.line_to(k, size / 2)
        canvas.move_to(-size / 2, k)
        canvas.line_to(size / 2, k)
        k += step
    canvas.stroke()

PAINTERS: Dict[Motif, Callable] = {
    Motif.ZIGZAG: zigzag,
    Motif.DIAMONDS: diamonds,
    Motif.TRIANGLES: triangles,
    Motif.CIRCLES: circles,
    Motif.WAVES: waves,
    Motif.CRESCENTS: crescents,
    Motif.GRID: grid,
}
assert set(PAINTERS) == set(Motif), "every Motif needs a painter"

def draw_motif(canvas, motif: Motif, shape: ShapePlan) -> None:
    try:
        painter = PAINTERS[motif]
    except KeyError:
        raise ValueError(f"unknown motif {motif!r}") from None
    painter(canvas, shape)
