from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ..catalog import Wallpaper

@dataclass
class Selection:
    # dict keeps insertion order; values unused
    _ids: Dict[int, None] = field(default_factory=dict)

    def __contains__(self, wallpaper_id: int) -> bool:
        return wallpaper_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def toggle(self, wallpaper_id: int) -> bool:
        """Flip one id; returns True if it is now selected."""
        if wallpaper_id in self._ids:
            del self._ids[wallpaper_id]
            return False
        self._ids[wallpaper_id] = None
        return True

    def toggle_all(self, ids: Iterable[int]) -> None:
        """Select every id, or clear if all of them are already selected."""
        ids = list(ids)
        if ids and len(self._ids) == len(ids) and all(i in self._ids for i in ids):
            self.clear()
        else:
            self._ids = dict.fromkeys(ids)

    def clear(self) -> None:
        self._ids = {}

    def picked(self, catalog: Iterable[Wallpaper]) -> List[Wallpaper]:
        """Selected wallpapers in catalog order (the order bulk export uses)."""
        return [w for w in catalog if w.id in self._ids]
