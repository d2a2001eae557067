from typing import List, Tuple

Rect = Tuple[int, int, int, int]

def card_label(wallpaper_id: int) -> str:
    """Zero-padded id as shown under each preview: 7 -> "#007"."""
    if wallpaper_id < 0:
        raise ValueError("wallpaper_id must be >= 0")
    return f"#{wallpaper_id:03d}"

def card_rects(
    cols: int, rows: int, card_wh: Tuple[int, int], gap: int, origin: Tuple[int, int] = (0, 0)
) -> List[Rect]:
    """Row-major (x, y, w, h) slots for one page of cards."""
    cw, ch = card_wh
    ox, oy = origin
    return [
        (ox + gap + c * (cw + gap), oy + gap + r * (ch + gap), cw, ch)
        for r in range(rows)
        for c in range(cols)
    ]

def hit_test(rects: List[Rect], pos: Tuple[int, int]) -> int:
    """Index of the slot containing pos, or -1."""
    px, py = pos
    for i, (x, y, w, h) in enumerate(rects):
        if x <= px < x + w and y <= py < y + h:
            return i
    return -1

def draw_card(screen, rect: Rect, preview, label: str, selected: bool, font) -> None:
    """Blit one preview with its label strip and selection ring."""
    import pygame
    x, y, w, h = rect
    strip = font.get_height() + 6
    screen.blit(pygame.transform.smoothscale(preview, (w, h - strip)), (x, y))
    pygame.draw.rect(screen, (255, 255, 255), pygame.Rect(x, y + h - strip, w, strip))
    txt = font.render(label, True, (120, 120, 120))
    screen.blit(txt, (x + 6, y + h - strip + 3))
    if selected:
        pygame.draw.rect(screen, (79, 70, 229), pygame.Rect(x - 3, y - 3, w + 6, h + 6), 4)
        pygame.draw.circle(screen, (79, 70, 229), (x + w - 16, y + 16), 11)
