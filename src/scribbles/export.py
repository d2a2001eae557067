# src/scribbles/export.py
"""
PNG export sink and the bulk export flow.

Bulk export runs one render+save at a time, in the order given, with a short
pause between items. One item failing is recorded in its ExportResult and the
batch moves on. Cancellation is checked between items only.
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from PIL import Image

from .catalog import AspectRatio, Wallpaper
from .config import CONFIG
from .studio import render_wallpaper
from .timing import paced

log = logging.getLogger(__name__)


@dataclass
class ExportResult:
    wallpaper: Wallpaper
    path: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def export_filename(wallpaper: Wallpaper, ratio: AspectRatio, product: Optional[str] = None) -> str:
    """<product>-<id>-<ratio name lowercased>.png"""
    name = CONFIG.product_name if product is None else product
    return f"{name}-{wallpaper.id}-{ratio.name.lower()}.png"


def save_png(image: Image.Image, path: str) -> str:
    """
    Encode to PNG next to the destination, then move it into place. A failed
    encode leaves neither a partial file nor the temp file behind.
    """
    d = os.path.dirname(os.path.abspath(path))
    os.makedirs(d, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".export-", suffix=".png", dir=d)
    try:
        with os.fdopen(fd, "wb") as fh:
            image.save(fh, format="PNG")
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise
    return path


def export_wallpaper(
    wallpaper: Wallpaper,
    ratio: AspectRatio,
    density: float,
    outdir: str,
    *,
    supersample: Optional[int] = None,
) -> str:
    """Full-resolution render of one wallpaper, saved under outdir."""
    image = render_wallpaper(wallpaper, ratio, density, supersample)
    path = os.path.join(outdir, export_filename(wallpaper, ratio))
    save_png(image, path)
    log.info("[export] wrote %s (%dx%d)", path, ratio.width, ratio.height)
    return path


Exporter = Callable[[Wallpaper, AspectRatio, float, str], str]


def export_batch(
    items: Iterable[Wallpaper],
    ratio: AspectRatio,
    density: float,
    outdir: str,
    *,
    pause_s: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
    cancel: Optional[threading.Event] = None,
    on_result: Optional[Callable[[ExportResult], None]] = None,
    exporter: Exporter = export_wallpaper,
) -> List[ExportResult]:
    """
    Export items sequentially. Returns one result per item attempted; items
    after a cancel are not attempted and not reported.
    """
    pause = CONFIG.export_pause_s if pause_s is None else pause_s
    results: List[ExportResult] = []
    for wp in paced(items, pause, sleep=sleep, cancel=cancel):
        try:
            res = ExportResult(wp, path=exporter(wp, ratio, density, outdir))
        except (OSError, ValueError) as e:
            log.error("[export] wallpaper %s failed: %s", wp.id, e)
            res = ExportResult(wp, error=str(e) or e.__class__.__name__)
        results.append(res)
        if on_result is not None:
            on_result(res)
    if cancel is not None and cancel.is_set():
        log.info("[export] cancelled after %d item(s)", len(results))
    return results
