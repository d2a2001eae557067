# tests/test_render.py
import pytest

from scribbles.palettes import Motif
from scribbles.pattern.generator import draw_pattern, plan_pattern
from scribbles.pattern.layers import ShapePlan
from scribbles.pattern.motifs import draw_motif
from scribbles.render.canvas import SOURCE_OVER, Canvas
from scribbles.studio import render_image, render_previews
from scribbles.catalog import find_ratio, wallpapers

class RecordingCanvas(Canvas):
    """Canvas that remembers the color and composite mode of every paint call."""
    def __init__(self, *a, **kw):
        super().__init__(*a, **kw)
        self.painted = []

    def fill(self):
        self.painted.append(("fill", self.fill_style, self.global_composite_operation))
        super().fill()

    def fill_rect(self, *a):
        self.painted.append(("fill_rect", self.fill_style, self.global_composite_operation))
        super().fill_rect(*a)

    def stroke(self):
        self.painted.append(("stroke", self.stroke_style, self.global_composite_operation))
        super().stroke()

def test_scenario_1379_phone_is_deterministic():
    a = render_image(1379, 1080, 1920, 1.0)
    b = render_image(1379, 1080, 1920, 1.0)
    assert a.size == (1080, 1920)
    assert a.tobytes() == b.tobytes()

def test_different_seeds_differ():
    assert render_image(1379, 120, 200).tobytes() != render_image(2716, 120, 200).tobytes()

def test_palette_consistency_while_painting():
    for seed in (1379, 2716, 4053, 5390):
        c = RecordingCanvas(200, 300)
        plan = draw_pattern(c, 200, 300, seed, 1.0)
        assert c.painted[0] == ("fill_rect", plan.background, SOURCE_OVER)
        assert {color for _, color, _ in c.painted} <= set(plan.palette.colors)
        # state fully unwound after the render
        assert c.depth == 0
        assert c.global_composite_operation == SOURCE_OVER

def test_background_only_when_density_is_zero():
    for density in (0, 0.01, -2.0):
        img = render_image(1379, 64, 96, density)
        plan = plan_pattern(1379, 64, 96, density)
        colors = img.getcolors()
        assert len(colors) == 1
        rgb = tuple(int(plan.background[i:i + 2], 16) for i in (1, 3, 5))
        assert colors[0][1] == rgb + (255,)

@pytest.mark.parametrize("w,h", [(0, 100), (100, 0), (-5, 10)])
def test_invalid_size_is_a_noop(w, h):
    c = Canvas(10, 10)
    assert draw_pattern(c, w, h, 1379) is None
    assert c.to_image().getextrema()[3] == (0, 0)

def test_missing_surface_and_bad_numbers_are_noops():
    assert draw_pattern(None, 100, 100, 1379) is None
    c = Canvas(10, 10)
    assert draw_pattern(c, 10, 10, float("nan")) is None
    assert draw_pattern(c, 10, 10, 1379, float("inf")) is None
    assert c.to_image().getextrema()[3] == (0, 0)

def test_crescent_restores_normal_compositing():
    c = RecordingCanvas(100, 100)
    c.fill_style = "#264653"
    c.fill_rect(0, 0, 100, 100)
    c.translate(50, 50)
    draw_motif(c, Motif.CRESCENTS, ShapePlan(0, 0, 60, 0, filled=False))
    modes = [m for kind, _, m in c.painted[1:]]
    assert modes == ["destination-out", SOURCE_OVER]
    assert c.global_composite_operation == SOURCE_OVER
    img = c.to_image()
    # inside the carved disc and inside the outline: translucent
    assert img.getpixel((60, 50))[3] < 255
    # far corner untouched
    assert img.getpixel((2, 2)) == (0x26, 0x46, 0x53, 255)

def test_every_motif_paints():
    for motif in Motif:
        c = Canvas(120, 120)
        c.stroke_style = c.fill_style = "#ffffff"
        c.line_width = 4
        c.translate(60, 60)
        draw_motif(c, motif, ShapePlan(0, 0, 80, 0.3, filled=True, ring=True))
        assert c.to_image().getextrema()[3][1] == 255, motif

def test_unknown_motif_is_a_programming_error():
    with pytest.raises(ValueError):
        draw_motif(Canvas(10, 10), "spirals", ShapePlan(0, 0, 40, 0, True))

def test_previews_parallel_match_serial():
    ratio = find_ratio("square")
    items = wallpapers(count=6)
    serial = render_previews(items, ratio, 1.0, preview_width=64, workers=1)
    parallel = render_previews(items, ratio, 1.0, preview_width=64, workers=3)
    assert sorted(serial) == [1, 2, 3, 4, 5, 6]
    assert all(serial[i].tobytes() == parallel[i].tobytes() for i in serial)
    assert serial[1].size == (64, 64)
