import pytest

from scribbles.catalog import DEFAULT_RATIO, RATIOS, find_ratio, preview_size, seed_for_id, wallpapers
from scribbles.config import CONFIG, StudioConfig

def test_seed_derivation():
    assert seed_for_id(1) == 1379
    assert seed_for_id(2) == 2 * 1337 + 42

def test_catalog_is_fixed_and_reproducible():
    cat = wallpapers()
    assert len(cat) == 240
    assert [w.id for w in cat] == list(range(1, 241))
    assert cat == wallpapers()
    assert cat[0].seed == 1379

def test_catalog_respects_config():
    cfg = StudioConfig(wallpaper_count=3, seed_step=10, seed_offset=1)
    assert [(w.id, w.seed) for w in wallpapers(config=cfg)] == [(1, 11), (2, 21), (3, 31)]

def test_ratio_presets():
    assert DEFAULT_RATIO.id == "9:16"
    assert [(r.name, r.width, r.height) for r in RATIOS] == [
        ("Phone", 1080, 1920), ("Desktop", 1920, 1080), ("Tablet", 2048, 1536), ("Square", 1080, 1080),
    ]

def test_find_ratio_by_id_or_name():
    assert find_ratio("16:9").name == "Desktop"
    assert find_ratio("TABLET").id == "4:3"
    with pytest.raises(KeyError):
        find_ratio("21:9")

def test_preview_size():
    assert preview_size(find_ratio("phone")) == (300, 533)
    assert preview_size(find_ratio("desktop")) == (300, 169)
    assert preview_size(find_ratio("tablet")) == (300, 225)
    assert preview_size(find_ratio("square"), 120) == (120, 120)

def test_density_slider_semantics():
    assert CONFIG.clamp_density(5.0) == 3.0
    assert CONFIG.clamp_density(0.0) == 0.2
    assert CONFIG.clamp_density(1.04) == 1.0
    assert CONFIG.step_density(1.0, +1) == 1.1
    assert CONFIG.step_density(0.2, -1) == 0.2
