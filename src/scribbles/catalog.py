from dataclasses import dataclass
import math
from typing import List, Optional, Tuple

from .config import CONFIG

@dataclass(frozen=True)
class AspectRatio:
    id: str
    name: str
    label: str
    width: int
    height: int

@dataclass(frozen=True)
class Wallpaper:
    id: int
    seed: int

RATIOS: Tuple[AspectRatio, ...] = (
    AspectRatio("9:16", "Phone",   "9:16", 1080, 1920),
    AspectRatio("16:9", "Desktop", "16:9", 1920, 1080),
    AspectRatio("4:3",  "Tablet",  "4:3",  2048, 1536),
    AspectRatio("1:1",  "Square",  "1:1",  1080, 1080),
)
DEFAULT_RATIO = RATIOS[0]

def find_ratio(key: str) -> AspectRatio:
    """Look up a preset by id ("16:9") or name ("desktop")."""
    k = key.strip().lower()
    for r in RATIOS:
        if r.id == k or r.name.lower() == k:
            return r
    raise KeyError(key)

def seed_for_id(wallpaper_id: int, config=CONFIG) -> int:
    return wallpaper_id * config.seed_step + config.seed_offset

def wallpapers(count: Optional[int] = None, config=CONFIG) -> List[Wallpaper]:
    """The fixed catalog: ids 1..count, seeds derived from the id alone."""
    n = config.wallpaper_count if count is None else count
    return [Wallpaper(i, seed_for_id(i, config)) for i in range(1, n + 1)]

def preview_size(ratio: AspectRatio, preview_width: Optional[int] = None) -> Tuple[int, int]:
    """Fixed-width preview keeping the ratio; height rounds half up."""
    w = CONFIG.preview_width if preview_width is None else preview_width
    return w, math.floor(w * ratio.height / ratio.width + 0.5)
