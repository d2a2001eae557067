# src/scribbles/render/canvas.py
"""
Pillow-backed 2D context with the slice of the HTML canvas API the pattern
painter needs:
  - path building: move_to / line_to / quadratic_curve_to / bezier_curve_to / arc / close_path
  - fill, stroke, fill_rect
  - save / restore of transform + paint state (and scoped() around them)
  - translate / rotate / scale, global_alpha, source-over / destination-out

Points are mapped to device space when they are added to the path (same as
the browser). Curves and arcs are flattened to polylines there, and every
paint call only touches the bounding box of what it draws.
"""

from __future__ import annotations

import math
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional, Tuple

from PIL import Image, ImageChops, ImageColor, ImageDraw

# (a, b, c, d, e, f): x' = a*x + c*y + e ; y' = b*x + d*y + f
Matrix = Tuple[float, float, float, float, float, float]
Point = Tuple[float, float]

IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
TAU = math.pi * 2

SOURCE_OVER = "source-over"
DESTINATION_OUT = "destination-out"
COMPOSITE_MODES = (SOURCE_OVER, DESTINATION_OUT)
LINE_CAPS = ("butt", "round", "square")
LINE_JOINS = ("miter", "round", "bevel")


def apply(m: Matrix, x: float, y: float) -> Point:
    a, b, c, d, e, f = m
    return (a * x + c * y + e, b * x + d * y + f)


def matrix_scale(m: Matrix) -> float:
    """Uniform scale factor of m (sqrt of |det|)."""
    a, b, c, d, _, _ = m
    return math.sqrt(abs(a * d - b * c))


@dataclass
class PaintState:
    matrix: Matrix = IDENTITY
    global_alpha: float = 1.0
    fill_style: str = "#000000"
    stroke_style: str = "#000000"
    line_width: float = 1.0
    line_cap: str = "butt"
    line_join: str = "miter"
    composite: str = SOURCE_OVER


@dataclass
class _Subpath:
    points: List[Point] = field(default_factory=list)
    closed: bool = False


def _curve_steps(pts: List[Point]) -> int:
    # Control polygon length bounds the curve length.
    length = sum(math.dist(p, q) for p, q in zip(pts, pts[1:]))
    return max(4, min(64, int(length / 3) + 1))


class Canvas:
    def __init__(self, width: int, height: int, supersample: int = 1):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        if supersample < 1:
            raise ValueError("supersample must be >= 1")
        self.width = int(width)
        self.height = int(height)
        self.supersample = int(supersample)
        self.image = Image.new(
            "RGBA", (self.width * self.supersample, self.height * self.supersample), (0, 0, 0, 0)
        )
        ss = float(self.supersample)
        self._base = PaintState(matrix=(ss, 0.0, 0.0, ss, 0.0, 0.0))
        self._state = replace(self._base)
        self._stack: List[PaintState] = []
        self._subpaths: List[_Subpath] = []

    # ---------- state ----------
    def save(self) -> None:
        self._stack.append(replace(self._state))

    def restore(self) -> None:
        # Unbalanced restore is a no-op, as in the browser.
        if self._stack:
            self._state = self._stack.pop()

    @contextmanager
    def scoped(self) -> Iterator["Canvas"]:
        """save() now, restore() on every exit path."""
        self.save()
        try:
            yield self
        finally:
            self.restore()

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def state(self) -> PaintState:
        return replace(self._state)

    @property
    def global_alpha(self) -> float:
        return self._state.global_alpha

    @global_alpha.setter
    def global_alpha(self, value: float) -> None:
        if math.isfinite(value) and 0.0 <= value <= 1.0:
            self._state.global_alpha = float(value)

    @property
    def fill_style(self) -> str:
        return self._state.fill_style

    @fill_style.setter
    def fill_style(self, value: str) -> None:
        ImageColor.getrgb(value)
        self._state.fill_style = value

    @property
    def stroke_style(self) -> str:
        return self._state.stroke_style

    @stroke_style.setter
    def stroke_style(self, value: str) -> None:
        ImageColor.getrgb(value)
        self._state.stroke_style = value

    @property
    def line_width(self) -> float:
        return self._state.line_width

    @line_width.setter
    def line_width(self, value: float) -> None:
        if math.isfinite(value) and value > 0:
            self._state.line_width = float(value)

    @property
    def line_cap(self) -> str:
        return self._state.line_cap

    @line_cap.setter
    def line_cap(self, value: str) -> None:
        if value in LINE_CAPS:
            self._state.line_cap = value

    @property
    def line_join(self) -> str:
        return self._state.line_join

    @line_join.setter
    def line_join(self, value: str) -> None:
        if value in LINE_JOINS:
            self._state.line_join = value

    @property
    def global_composite_operation(self) -> str:
        return self._state.composite

    @global_composite_operation.setter
    def global_composite_operation(self, value: str) -> None:
        if value not in COMPOSITE_MODES:
            raise ValueError(f"unsupported composite mode {value!r}")
        self._state.composite = value

    # ---------- transforms ----------
    def translate(self, tx: float, ty: float) -> None:
        a, b, c, d, e, f = self._state.matrix
        self._state.matrix = (a, b, c, d, a * tx + c * ty + e, b * tx + d * ty + f)

    def rotate(self, angle: float) -> None:
        a, b, c, d, e, f = self._state.matrix
        cs, sn = math.cos(angle), math.sin(angle)
        self._state.matrix = (a * cs + c * sn, b * cs + d * sn, c * cs - a * sn, d * cs - b * sn, e, f)

    def scale(self, sx: float, sy: Optional[float] = None) -> None:
        if sy is None:
            sy = sx
        a, b, c, d, e, f = self._state.matrix
        self._state.matrix = (a * sx, b * sx, c * sy, d * sy, e, f)

    def reset_transform(self) -> None:
        self._state.matrix = self._base.matrix

    # ---------- path ----------
    def begin_path(self) -> None:
        self._subpaths = []

    def _current(self) -> Optional[_Subpath]:
        return self._subpaths[-1] if self._subpaths else None

    def _to_device(self, x: float, y: float) -> Point:
        return apply(self._state.matrix, x, y)

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(_Subpath([self._to_device(x, y)]))

    def _line_to_device(self, p: Point) -> None:
        sp = self._current()
        if sp is None or sp.closed:
            start = sp.points[0] if sp is not None else p
            sp = _Subpath([start])
            self._subpaths.append(sp)
        sp.points.append(p)

    def line_to(self, x: float, y: float) -> None:
        self._line_to_device(self._to_device(x, y))

    def _last_point(self, x: float, y: float) -> Point:
        sp = self._current()
        if sp is None:
            # No current point: the curve starts at its first control point.
            self.move_to(x, y)
            sp = self._current()
        return sp.points[-1]

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        p0 = self._last_point(cpx, cpy)
        p1 = self._to_device(cpx, cpy)
        p2 = self._to_device(x, y)
        n = _curve_steps([p0, p1, p2])
        for i in range(1, n + 1):
            t = i / n
            u = 1 - t
            self._line_to_device((
                u * u * p0[0] + 2 * u * t * p1[0] + t * t * p2[0],
                u * u * p0[1] + 2 * u * t * p1[1] + t * t * p2[1],
            ))

    def bezier_curve_to(self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float) -> None:
        p0 = self._last_point(cp1x, cp1y)
        p1 = self._to_device(cp1x, cp1y)
        p2 = self._to_device(cp2x, cp2y)
        p3 = self._to_device(x, y)
        n = _curve_steps([p0, p1, p2, p3])
        for i in range(1, n + 1):
            t = i / n
            u = 1 - t
            self._line_to_device((
                u ** 3 * p0[0] + 3 * u * u * t * p1[0] + 3 * u * t * t * p2[0] + t ** 3 * p3[0],
                u ** 3 * p0[1] + 3 * u * u * t * p1[1] + 3 * u * t * t * p2[1] + t ** 3 * p3[1],
            ))

    def arc(self, x: float, y: float, radius: float, start: float, end: float, anticlockwise: bool = False) -> None:
        if radius < 0:
            raise ValueError(f"negative arc radius {radius}")
        sweep = end - start
        if not anticlockwise:
            sweep = TAU if sweep >= TAU else sweep % TAU
        else:
            sweep = -TAU if -sweep >= TAU else -((-sweep) % TAU)
        r_dev = radius * matrix_scale(self._state.matrix)
        n = max(12, min(360, int(abs(sweep) * r_dev / 3) + 1))
        for i in range(n + 1):
            t = start + sweep * i / n
            p = self._to_device(x + radius * math.cos(t), y + radius * math.sin(t))
            if i == 0 and self._current() is None:
                self._subpaths.append(_Subpath([p]))
            else:
                self._line_to_device(p)

    def close_path(self) -> None:
        sp = self._current()
        if sp is not None and not sp.closed:
            sp.closed = True

    # ---------- painting ----------
    def _bbox(self, pts: List[Point], pad: float) -> Optional[Tuple[int, int, int, int]]:
        w, h = self.image.size
        x0 = max(0, math.floor(min(p[0] for p in pts) - pad))
        y0 = max(0, math.floor(min(p[1] for p in pts) - pad))
        x1 = min(w, math.ceil(max(p[0] for p in pts) + pad) + 1)
        y1 = min(h, math.ceil(max(p[1] for p in pts) + pad) + 1)
        if x0 >= x1 or y0 >= y1:
            return None
        return (x0, y0, x1, y1)

    def _paint(self, mask: Image.Image, box: Tuple[int, int, int, int], color: str) -> None:
        alpha = self._state.global_alpha
        if alpha <= 0:
            return
        if alpha < 1:
            mask = mask.point(lambda v: int(v * alpha + 0.5))
        x0, y0 = box[0], box[1]
        if self._state.composite == DESTINATION_OUT:
            region = self.image.crop(box)
            kept = ImageChops.multiply(region.getchannel("A"), ImageChops.invert(mask))
            region.putalpha(kept)
            self.image.paste(region, (x0, y0))
            return
        rgb = ImageColor.getrgb(color)[:3]
        layer = Image.new("RGBA", mask.size, rgb + (0,))
        layer.putalpha(mask)
        self.image.alpha_composite(layer, dest=(x0, y0))

    def _fill_polygons(self, polys: List[List[Point]], color: str) -> None:
        polys = [p for p in polys if len(p) >= 3]
        if not polys:
            return
        box = self._bbox([pt for poly in polys for pt in poly], 1)
        if box is None:
            return
        x0, y0, x1, y1 = box
        mask = Image.new("L", (x1 - x0, y1 - y0), 0)
        draw = ImageDraw.Draw(mask)
        for poly in polys:
            draw.polygon([(x - x0, y - y0) for x, y in poly], fill=255)
        self._paint(mask, box, color)

    def fill(self) -> None:
        self._fill_polygons([sp.points for sp in self._subpaths], self._state.fill_style)

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        """Fill a rectangle without touching the current path."""
        corners = [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]
        self._fill_polygons([[self._to_device(px, py) for px, py in corners]], self._state.fill_style)

    def stroke(self) -> None:
        lines = []
        for sp in self._subpaths:
            pts = list(sp.points)
            if sp.closed and len(pts) > 1:
                pts.append(pts[0])
            if len(pts) >= 2:
                lines.append((pts, sp.closed))
        if not lines:
            return
        width = self._state.line_width * matrix_scale(self._state.matrix)
        px = max(1, int(round(width)))
        box = self._bbox([pt for pts, _ in lines for pt in pts], px / 2 + 1)
        if box is None:
            return
        x0, y0, x1, y1 = box
        mask = Image.new("L", (x1 - x0, y1 - y0), 0)
        draw = ImageDraw.Draw(mask)
        joint = "curve" if self._state.line_join == "round" else None
        r = px / 2
        for pts, closed in lines:
            local = [(x - x0, y - y0) for x, y in pts]
            draw.line(local, fill=255, width=px, joint=joint)
            if self._state.line_cap == "round" and not closed and px > 2:
                for cx, cy in (local[0], local[-1]):
                    draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=255)
        self._paint(mask, box, self._state.stroke_style)

    # ---------- output ----------
    def to_image(self) -> Image.Image:
        """Copy of the surface at its logical size."""
        if self.supersample == 1:
            return self.image.copy()
        return self.image.resize((self.width, self.height), Image.LANCZOS)
