# tests/test_pattern_plan.py
import math

import pytest

from scribbles.palettes import MOTIFS, PALETTES, Motif
from scribbles.pattern.generator import plan_pattern
from scribbles.pattern.layers import scaled_count
from scribbles.rng import create_rng

# Independent replay of the draw order, written straight from the formulas.
def replay(seed, width, height, density):
    r = create_rng(seed)
    palette = PALETTES[math.floor(r() * len(PALETTES))]
    background = palette.colors[math.floor(r() * 5)]
    layers = []
    for _ in range(3 + math.floor(r() * 4)):
        motif = MOTIFS[math.floor(r() * 7)]
        r(); r(); r()                              # color, alpha, line width
        base = 10 + math.floor(r() * 40)
        count = max(0, math.floor(base * density))
        for _ in range(count):
            r(); r(); r(); r(); r()                # x, y, size, rotation, filled
            if motif is Motif.CIRCLES:
                r()                                # ring
        layers.append((motif, base, count))
    scribbles = []
    for _ in range(max(0, math.floor(15 * density))):
        r(); r(); r(); r()                         # color, width, x, y
        segs = 5 + math.floor(r() * 10)
        for _ in range(segs):
            r(); r(); r(); r()
        scribbles.append(segs)
    return palette, background, layers, scribbles

def summary(plan):
    return (
        plan.palette,
        plan.background,
        [(l.motif, l.base_count, l.count) for l in plan.layers],
        [len(s.segments) for s in plan.scribbles],
    )

@pytest.mark.parametrize("seed,density", [
    (1379, 1.0), (2716, 1.0), (42, 0.5), (1379, 2.0), (99999, 3.0), (-17, 1.3), (0.5, 0.2),
])
def test_counts_match_formula_replay(seed, density):
    assert summary(plan_pattern(seed, 1080, 1920, density)) == replay(seed, 1080, 1920, density)

def test_layer_count_range_and_fields():
    for wid in range(1, 60):
        plan = plan_pattern(wid * 1337 + 42, 300, 533)
        assert 3 <= len(plan.layers) <= 6
        for layer in plan.layers:
            assert 0.2 <= layer.alpha <= 0.8
            assert 2 <= layer.line_width <= 10
            assert 10 <= layer.base_count <= 49
            for s in layer.shapes:
                assert 0 <= s.x <= 300 and 0 <= s.y <= 533
                assert 40 <= s.size <= 40 + 300 * 0.3
                assert 0 <= s.rotation <= 2 * math.pi
                assert not s.ring or layer.motif is Motif.CIRCLES
        assert len(plan.scribbles) == 15
        for s in plan.scribbles:
            assert 1 <= s.line_width <= 3
            assert 5 <= len(s.segments) <= 14
            for seg in s.segments:
                assert 0 <= seg.x <= 300 and 0 <= seg.y <= 533

def test_same_seed_same_plan():
    assert plan_pattern(1379, 1080, 1920) == plan_pattern(1379, 1080, 1920)

def test_resolution_independent_decisions():
    small = plan_pattern(1379, 300, 533, 1.0)
    big = plan_pattern(1379, 1080, 1920, 1.0)
    assert summary(small) == summary(big)
    for ls, lb in zip(small.layers, big.layers):
        assert (ls.color, ls.alpha, ls.line_width) == (lb.color, lb.alpha, lb.line_width)
        for a, b in zip(ls.shapes, lb.shapes):
            assert (a.rotation, a.filled, a.ring) == (b.rotation, b.filled, b.ring)
            # placement scales with the surface
            assert a.x / 300 == pytest.approx(b.x / 1080)
            assert a.y / 533 == pytest.approx(b.y / 1920)
    assert [s.color for s in small.scribbles] == [s.color for s in big.scribbles]

def test_density_two_doubles_counts():
    d1 = plan_pattern(1379, 1080, 1920, 1.0)
    d2 = plan_pattern(1379, 1080, 1920, 2.0)
    assert (d1.palette, d1.background, len(d1.layers)) == (d2.palette, d2.background, len(d2.layers))
    a, b = d1.layers[0], d2.layers[0]
    assert (a.motif, a.color, a.alpha, a.line_width, a.base_count) == (b.motif, b.color, b.alpha, b.line_width, b.base_count)
    assert b.count == 2 * a.count
    # first layer's shapes are drawn before anything density-dependent diverges
    assert b.shapes[:a.count] == a.shapes
    assert len(d1.scribbles) == 15 and len(d2.scribbles) == 30

def test_density_monotonic():
    densities = [0.2, 0.5, 1.0, 1.7, 2.5, 3.0]
    for seed in (1379, 2716, 4053):
        plans = [plan_pattern(seed, 1080, 1920, d) for d in densities]
        firsts = [p.layers[0].count for p in plans]
        assert firsts == sorted(firsts)
        assert [len(p.scribbles) for p in plans] == sorted(len(p.scribbles) for p in plans)
    for base in range(10, 50):
        counts = [scaled_count(base, d) for d in densities]
        assert counts == sorted(counts)

@pytest.mark.parametrize("density", [0, 0.01, -1.0])
def test_tiny_or_negative_density_gives_zero_counts(density):
    plan = plan_pattern(1379, 1080, 1920, density)
    assert 3 <= len(plan.layers) <= 6
    assert all(l.count == 0 for l in plan.layers)
    assert plan.scribbles == []

def test_palette_consistency():
    for wid in range(1, 40):
        plan = plan_pattern(wid * 1337 + 42, 1080, 1920, 1.5)
        assert set(plan.colors_used()) <= set(plan.palette.colors)
