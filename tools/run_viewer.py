#!/usr/bin/env python3
# Interactive preview browser for the wallpaper catalog.
# - Click a card (or SPACE on the hovered card) to toggle selection; A: select/deselect all
# - LEFT/RIGHT or PAGEUP/PAGEDOWN: page through the catalog
# - R: cycle aspect ratio;  +/-: density in 0.1 steps
# - D: export the selection in the background (one at a time, paced); ESC cancels it
# - ENTER: export the hovered card
# - ESC with no export running: quit

import argparse, threading
import pygame

from scribbles.catalog import RATIOS, find_ratio, preview_size, wallpapers
from scribbles.config import CONFIG
from scribbles.export import export_batch
from scribbles.logs import setup_logging
from scribbles.render.preview_cache import PreviewCache
from scribbles.ui.card import card_label, card_rects, draw_card, hit_test
from scribbles.ui.selection import Selection
from scribbles.ui.status_bar import StatusBarState, render_status_bar

BACKGROUND = (249, 250, 251)

class ExportJob:
    """Bulk export on a worker thread; the UI only reads progress."""
    def __init__(self, items, ratio, density, outdir, pause_s):
        self.total = len(items)
        self.done = 0
        self.failed = 0
        self.cancel = threading.Event()
        self.thread = threading.Thread(
            target=self._run, args=(items, ratio, density, outdir, pause_s), daemon=True
        )

    def _on_result(self, res):
        self.done += 1
        if not res.ok:
            self.failed += 1
            print(f"[viewer] export of #{res.wallpaper.id:03d} failed: {res.error}")

    def _run(self, items, ratio, density, outdir, pause_s):
        export_batch(items, ratio, density, outdir, pause_s=pause_s,
                     cancel=self.cancel, on_result=self._on_result)

    def start(self):
        self.thread.start()
        return self

    @property
    def running(self):
        return self.thread.is_alive()

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--ratio", type=str, default="9:16", help="Ratio id or name")
    ap.add_argument("--density", type=float, default=CONFIG.density_default)
    ap.add_argument("--cols", type=int, default=5)
    ap.add_argument("--rows", type=int, default=2)
    ap.add_argument("--card", type=int, default=160, help="Card width in pixels")
    ap.add_argument("--outdir", type=str, default="out")
    ap.add_argument("--pause", type=float, default=CONFIG.export_pause_s)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    setup_logging(args.verbose)

    try:
        ratio = find_ratio(args.ratio)
    except KeyError:
        raise SystemExit(f"unknown ratio {args.ratio!r}")
    density = CONFIG.clamp_density(args.density)

    catalog = wallpapers()
    per_page = args.cols * args.rows
    pages = max(1, -(-len(catalog) // per_page))
    page = 0
    selection = Selection()
    job = None

    pygame.init()
    pygame.display.set_caption("Hausa Scribbles")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 18)
    previews = PreviewCache()
    gap, bar_h = 12, 28

    def layout():
        # Card height follows the ratio; previews render at CONFIG.preview_width
        _, ph = preview_size(ratio, args.card)
        card_h = ph + font.get_height() + 6
        rects = card_rects(args.cols, args.rows, (args.card, card_h), gap)
        size = (args.cols * (args.card + gap) + gap, args.rows * (card_h + gap) + gap + bar_h)
        return rects, size

    rects, size = layout()
    screen = pygame.display.set_mode(size)

    def page_items():
        return catalog[page * per_page:(page + 1) * per_page]

    def start_export(items):
        nonlocal job
        if not items or (job is not None and job.running):
            return
        job = ExportJob(items, ratio, density, args.outdir, args.pause).start()

    running = True
    while running:
        items = page_items()
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                i = hit_test(rects, ev.pos)
                if 0 <= i < len(items):
                    selection.toggle(items[i].id)
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    if job is not None and job.running:
                        job.cancel.set()
                    else:
                        running = False
                elif ev.key in (pygame.K_RIGHT, pygame.K_PAGEDOWN):
                    page = (page + 1) % pages
                elif ev.key in (pygame.K_LEFT, pygame.K_PAGEUP):
                    page = (page - 1) % pages
                elif ev.key == pygame.K_r:
                    ratio = RATIOS[(RATIOS.index(ratio) + 1) % len(RATIOS)]
                    rects, size = layout()
                    screen = pygame.display.set_mode(size)
                elif ev.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    density = CONFIG.step_density(density, +1)
                elif ev.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    density = CONFIG.step_density(density, -1)
                elif ev.key == pygame.K_a:
                    selection.toggle_all(w.id for w in catalog)
                elif ev.key == pygame.K_SPACE:
                    i = hit_test(rects, pygame.mouse.get_pos())
                    if 0 <= i < len(items):
                        selection.toggle(items[i].id)
                elif ev.key == pygame.K_RETURN:
                    i = hit_test(rects, pygame.mouse.get_pos())
                    if 0 <= i < len(items):
                        start_export([items[i]])
                elif ev.key == pygame.K_d and len(selection):
                    start_export(selection.picked(catalog))
                    selection.clear()

        items = page_items()
        screen.fill(BACKGROUND)
        pw, ph = preview_size(ratio)
        for wp, rect in zip(items, rects):
            surf = previews.get(wp.seed, pw, ph, density)
            draw_card(screen, rect, surf, card_label(wp.id), wp.id in selection, font)

        exporting = job is not None and job.running
        state = StatusBarState(
            ratio_name=ratio.name, width=ratio.width, height=ratio.height, density=density,
            selected=len(selection), total=len(catalog), page=page, pages=pages,
            export_done=job.done if exporting else None, export_total=job.total if exporting else 0,
        )
        render_status_bar(screen, (0, size[1] - bar_h), (size[0], bar_h), state, font)
        pygame.display.flip()
        clock.tick(30)

    if job is not None and job.running:
        job.cancel.set()
        job.thread.join()
    pygame.quit()

if __name__ == "__main__":
    main()
