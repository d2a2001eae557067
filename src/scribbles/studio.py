# src/scribbles/studio.py
# Render wallpapers to Pillow images: single full-size renders and preview batches.

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, Optional

from PIL import Image

from .catalog import AspectRatio, Wallpaper, preview_size
from .config import CONFIG
from .pattern.generator import draw_pattern
from .render.canvas import Canvas

log = logging.getLogger(__name__)


def render_image(seed: float, width: int, height: int, density: float = 1.0, supersample: Optional[int] = None) -> Image.Image:
    """Fresh canvas, one draw_pattern call, RGBA image at width x height."""
    ss = CONFIG.supersample if supersample is None else supersample
    canvas = Canvas(width, height, supersample=ss)
    draw_pattern(canvas, width, height, seed, density)
    return canvas.to_image()


def render_wallpaper(wallpaper: Wallpaper, ratio: AspectRatio, density: float = 1.0, supersample: Optional[int] = None) -> Image.Image:
    return render_image(wallpaper.seed, ratio.width, ratio.height, density, supersample)


def render_preview(wallpaper: Wallpaper, ratio: AspectRatio, density: float = 1.0, preview_width: Optional[int] = None) -> Image.Image:
    w, h = preview_size(ratio, preview_width)
    return render_image(wallpaper.seed, w, h, density)


def render_previews(
    items: Iterable[Wallpaper],
    ratio: AspectRatio,
    density: float = 1.0,
    *,
    preview_width: Optional[int] = None,
    workers: int = 4,
) -> Dict[int, Image.Image]:
    """
    Render previews keyed by wallpaper id. Renders share nothing (each has its
    own PRNG and canvas), so they can run on a thread pool.
    """
    items = list(items)
    if workers <= 1:
        return {w.id: render_preview(w, ratio, density, preview_width) for w in items}
    with ThreadPoolExecutor(max_workers=workers) as ex:
        futs = {w.id: ex.submit(render_preview, w, ratio, density, preview_width) for w in items}
        out = {wid: f.result() for wid, f in futs.items()}
    log.debug("[studio] rendered %d previews (%s, density %s)", len(out), ratio.name, density)
    return out
