from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass
class StatusBarState:
    ratio_name: str = "Phone"
    width: int = 1080
    height: int = 1920
    density: float = 1.0
    selected: int = 0
    total: int = 0
    page: int = 0
    pages: int = 1
    export_done: Optional[int] = None   # None = no export running
    export_total: int = 0

def status_text(state: StatusBarState) -> str:
    parts = [
        f"{state.ratio_name} {state.width}×{state.height}",
        f"Density {state.density:.1f}x",
        f"Selected {state.selected}/{state.total}",
        f"Page {state.page + 1}/{max(1, state.pages)}",
    ]
    if state.export_done is not None:
        parts.append(f"Exporting {state.export_done}/{state.export_total}")
    return "   ".join(parts)

def render_status_bar(
    screen, origin_xy: Tuple[int, int], size_wh: Tuple[int, int],
    state: StatusBarState, font=None,
) -> None:
    """
    Draw a one-line status bar. Does not touch the preview grid.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    w, h = size_wh
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, w, h))
    font = font or pygame.font.SysFont(None, max(14, h // 2))
    img = font.render(status_text(state), True, (220, 220, 220))
    screen.blit(img, (ox + h // 2, oy + (h - img.get_height()) // 2))
