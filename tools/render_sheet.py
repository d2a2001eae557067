#!/usr/bin/env python3
# Render a page of wallpaper previews to one contact-sheet PNG using Pillow.
# Cards are laid out like the preview browser: label strip under each preview.

import argparse
from PIL import Image, ImageDraw, ImageFont

from scribbles.catalog import find_ratio, preview_size, wallpapers
from scribbles.config import CONFIG
from scribbles.export import save_png
from scribbles.studio import render_previews
from scribbles.ui.card import card_label, card_rects

LABEL_H = 18

def render_sheet(ratio, density, first_id, count, cols=5, gap=12, preview_width=None, workers=4):
    pw, ph = preview_size(ratio, preview_width)
    items = [w for w in wallpapers() if first_id <= w.id < first_id + count]
    previews = render_previews(items, ratio, density, preview_width=pw, workers=workers)
    rows = max(1, -(-len(items) // cols))
    rects = card_rects(cols, rows, (pw, ph + LABEL_H), gap)
    w = cols * (pw + gap) + gap
    h = rows * (ph + LABEL_H + gap) + gap
    sheet = Image.new("RGBA", (w, h), (243, 244, 246, 255))
    draw = ImageDraw.Draw(sheet)
    font = ImageFont.load_default()
    for wp, (x, y, cw, ch) in zip(items, rects):
        img = previews[wp.id]
        # Use the preview's own alpha so carved crescents show the sheet backdrop
        sheet.paste(img, (x, y, x + pw, y + ph), img)
        draw.rectangle([x, y + ph, x + cw - 1, y + ch - 1], fill=(255, 255, 255, 255))
        draw.text((x + 6, y + ph + 3), card_label(wp.id), fill=(120, 120, 120, 255), font=font)
    return sheet

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--ratio", type=str, default="9:16", help="Ratio id or name")
    ap.add_argument("--density", type=float, default=CONFIG.density_default)
    ap.add_argument("--first", type=int, default=1, help="First wallpaper id on the sheet")
    ap.add_argument("--count", type=int, default=20, help="Cards on the sheet")
    ap.add_argument("--cols", type=int, default=5)
    ap.add_argument("--preview-width", type=int, default=CONFIG.preview_width)
    ap.add_argument("--workers", type=int, default=4)
    ap.add_argument("--out", type=str, default="out/sheet.png")
    args = ap.parse_args()

    try:
        ratio = find_ratio(args.ratio)
    except KeyError:
        raise SystemExit(f"unknown ratio {args.ratio!r}")
    sheet = render_sheet(ratio, args.density, args.first, args.count, cols=args.cols,
                         preview_width=args.preview_width, workers=args.workers)
    save_png(sheet, args.out)
    print(f"Wrote {args.out} ({sheet.width}x{sheet.height})")

if __name__ == "__main__":
    main()
