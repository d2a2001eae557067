# tests/test_ui.py
import pytest

from scribbles.catalog import wallpapers
from scribbles.ui.card import card_label, card_rects, hit_test
from scribbles.ui.selection import Selection
from scribbles.ui.status_bar import StatusBarState, status_text

def test_card_label():
    assert card_label(1) == "#001"
    assert card_label(240) == "#240"
    with pytest.raises(ValueError):
        card_label(-1)

def test_card_rects_and_hit_test():
    rects = card_rects(3, 2, (100, 200), 10)
    assert len(rects) == 6
    assert rects[0] == (10, 10, 100, 200)
    assert rects[1] == (120, 10, 100, 200)
    assert rects[3] == (10, 220, 100, 200)
    assert hit_test(rects, (125, 15)) == 1
    assert hit_test(rects, (5, 5)) == -1   # gap

def test_selection_toggle_and_order():
    cat = wallpapers(count=10)
    sel = Selection()
    assert sel.toggle(7) is True
    sel.toggle(2)
    sel.toggle(5)
    assert sel.toggle(5) is False
    assert len(sel) == 2 and 7 in sel and 5 not in sel
    # bulk export walks the catalog order, not click order
    assert [w.id for w in sel.picked(cat)] == [2, 7]

def test_select_all_then_deselect_all():
    ids = [w.id for w in wallpapers(count=4)]
    sel = Selection()
    sel.toggle(1)
    sel.toggle_all(ids)
    assert len(sel) == 4
    sel.toggle_all(ids)
    assert len(sel) == 0

def test_status_text():
    st = StatusBarState(ratio_name="Desktop", width=1920, height=1080, density=1.5,
                        selected=3, total=240, page=0, pages=24)
    text = status_text(st)
    assert "Desktop 1920×1080" in text
    assert "Density 1.5x" in text
    assert "Selected 3/240" in text
    assert "Exporting" not in text
    st.export_done, st.export_total = 1, 3
    assert "Exporting 1/3" in status_text(st)
