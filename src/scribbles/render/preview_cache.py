# src/scribbles/render/preview_cache.py
from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Tuple

from ..studio import render_image

def to_surface(image) -> pygame.Surface:
    """Pillow RGBA image -> pygame Surface (no display needed)."""
    rgba = image.convert("RGBA")
    return pygame.image.fromstring(rgba.tobytes(), rgba.size, "RGBA")

class PreviewCache:
    """
    Tiny cached preview renderer:
      - keyed by (seed, width, height, density), so changing the ratio or the
        density slider re-renders while paging back and forth does not
      - returns pygame.Surface of exactly (width, height)
    """
    def __init__(self, backdrop: Tuple[int, int, int] = (255, 255, 255)):
        # Crescent carving leaves translucent holes; show them over a backdrop.
        self.backdrop = backdrop

    @lru_cache(maxsize=256)
    def get(self, seed: int, width: int, height: int, density: float) -> pygame.Surface:
        img = render_image(seed, width, height, density)
        surf = pygame.Surface((width, height))
        surf.fill(self.backdrop)
        surf.blit(to_surface(img), (0, 0))
        return surf

    def clear(self) -> None:
        self.get.cache_clear()
