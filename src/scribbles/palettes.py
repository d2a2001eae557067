# Canonical palette table and motif kinds.
# Order matters: the generator indexes both tuples with PRNG draws.

from enum import Enum
from typing import NamedTuple, Tuple

class Palette(NamedTuple):
    name: str
    colors: Tuple[str, str, str, str, str]

PALETTES: Tuple[Palette, ...] = (
    Palette("Nautical", ("#E63946", "#F1FAEE", "#A8DADC", "#457B9D", "#1D3557")),
    Palette("Earth",    ("#264653", "#2A9D8F", "#E9C46A", "#F4A261", "#E76F51")),
    Palette("Sunset",   ("#003049", "#D62828", "#F77F00", "#FCBF49", "#EAE2B7")),
    Palette("Deep",     ("#5F0F40", "#9A031E", "#FB8B24", "#E36414", "#0F4C5C")),
    Palette("Urban",    ("#2B2D42", "#8D99AE", "#EDF2F4", "#EF233C", "#D90429")),
    Palette("Savanna",  ("#606c38", "#283618", "#fefae0", "#dda15e", "#bc6c25")),
)

class Motif(Enum):
    ZIGZAG = "zigzag"
    DIAMONDS = "diamonds"
    TRIANGLES = "triangles"
    CIRCLES = "circles"
    WAVES = "waves"
    CRESCENTS = "crescents"
    GRID = "grid"

MOTIFS: Tuple[Motif, ...] = tuple(Motif)

def palette_named(name: str) -> Palette:
    for p in PALETTES:
        if p.name.lower() == name.lower():
            return p
    raise KeyError(name)
