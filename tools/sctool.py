#!/usr/bin/env python3
import argparse, os
from functools import partial

from scribbles.config import CONFIG
from scribbles.catalog import Wallpaper, find_ratio, seed_for_id, wallpapers
from scribbles.export import export_batch, export_filename, export_wallpaper, save_png
from scribbles.logs import setup_logging
from scribbles.pattern.generator import plan_pattern
from scribbles.studio import render_wallpaper

def parse_ids(text):
    """'1,4,10-12' -> [1, 4, 10, 11, 12]"""
    out = []
    for part in text.split(','):
        part = part.strip()
        if not part:
            continue
        if '-' in part:
            a, b = part.split('-', 1)
            out.extend(range(int(a), int(b) + 1))
        else:
            out.append(int(part))
    return out

def _ratio(args):
    try:
        return find_ratio(args.ratio)
    except KeyError:
        raise SystemExit(f"unknown ratio {args.ratio!r} (try phone, desktop, tablet, square)")

def _wallpaper(args):
    if args.seed is not None:
        return Wallpaper(args.id, args.seed)
    return Wallpaper(args.id, seed_for_id(args.id))

def cmd_emit(args):
    ratio = _ratio(args)
    wp = _wallpaper(args)
    img = render_wallpaper(wp, ratio, args.density, args.supersample)
    out = args.out or os.path.join(args.outdir, export_filename(wp, ratio))
    save_png(img, out)
    print(f"Wrote {out}")

def cmd_batch(args):
    ratio = _ratio(args)
    catalog = wallpapers()
    if args.all:
        items = catalog
    else:
        wanted = set(parse_ids(args.ids or ''))
        items = [w for w in catalog if w.id in wanted]
    if not items:
        raise SystemExit("nothing to export (use --ids or --all)")

    def report(res):
        if res.ok:
            print(f"  ok   #{res.wallpaper.id:03d} -> {res.path}")
        else:
            print(f"  FAIL #{res.wallpaper.id:03d}: {res.error}")

    results = export_batch(items, ratio, args.density, args.outdir,
                           pause_s=args.pause, on_result=report,
                           exporter=partial(export_wallpaper, supersample=args.supersample))
    failed = sum(1 for r in results if not r.ok)
    print(f"Exported {len(results) - failed}/{len(items)} to {args.outdir}")
    if failed:
        raise SystemExit(1)

def cmd_plan(args):
    ratio = _ratio(args)
    wp = _wallpaper(args)
    plan = plan_pattern(wp.seed, ratio.width, ratio.height, args.density)
    print(f"wallpaper #{wp.id:03d} seed={wp.seed} {ratio.width}x{ratio.height} density={args.density}")
    print(f"palette    {plan.palette.name}  background {plan.background}")
    for i, layer in enumerate(plan.layers, 1):
        filled = sum(1 for s in layer.shapes if s.filled)
        print(f"layer {i}    {layer.motif.value:<9} {layer.color} alpha={layer.alpha:.2f} "
              f"width={layer.line_width:.1f} shapes={layer.count} (base {layer.base_count}, {filled} filled)")
    print(f"scribbles  {len(plan.scribbles)}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--verbose', action='store_true')
    p.add_argument('--supersample', type=int, default=None, help='Render N times larger and downsample')
    sub = p.add_subparsers(dest='cmd', required=True)

    def common(sp):
        sp.add_argument('--ratio', type=str, default="9:16", help="Ratio id or name (phone, desktop, tablet, square)")
        sp.add_argument('--density', type=float, default=CONFIG.density_default)

    p1 = sub.add_parser('emit')
    p1.add_argument('--id', type=int, required=True)
    p1.add_argument('--seed', type=int, default=None, help='Override the catalog seed')
    p1.add_argument('--out', type=str, default=None)
    p1.add_argument('--outdir', type=str, default='out')
    common(p1)
    p1.set_defaults(func=cmd_emit)

    p2 = sub.add_parser('batch')
    p2.add_argument('--ids', type=str, default=None, help="e.g. 1,4,10-12")
    p2.add_argument('--all', action='store_true')
    p2.add_argument('--outdir', type=str, default='out')
    p2.add_argument('--pause', type=float, default=CONFIG.export_pause_s)
    common(p2)
    p2.set_defaults(func=cmd_batch)

    p3 = sub.add_parser('plan')
    p3.add_argument('--id', type=int, required=True)
    p3.add_argument('--seed', type=int, default=None)
    common(p3)
    p3.set_defaults(func=cmd_plan)

    args = p.parse_args()
    setup_logging(args.verbose)
    args.func(args)

if __name__ == '__main__':
    main()
