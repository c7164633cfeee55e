#!/usr/bin/env python3
# Render text maps (as written by fmtool.py or the fieldmap CLI) to PNGs.

import argparse, glob, os
from fieldmap.render.image import save_png
from fieldmap.render.text import parse_text

def read_map(path):
    with open(path, encoding="utf-8") as f:
        rows = parse_text(f.read())
    if not rows:
        raise SystemExit(f"{path}: empty map.")
    return rows

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("paths", nargs="+", help="Text map files or globs")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    args = ap.parse_args()

    files = []
    for p in args.paths:
        files.extend(sorted(glob.glob(p)) or [p])
    for path in files:
        name = os.path.splitext(os.path.basename(path))[0] + ".png"
        save_png(read_map(path), os.path.join(args.outdir, name), tile_size=args.tile)
    print(f"Wrote {len(files)} PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
