# src/fieldmap/render/image.py
# Render text maps to PNG using Pillow.

import os
from typing import Dict, List, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from ..tiles import WALL, ROAD, CLEARING, TALL_GRASS, WATER, UNSET, is_building

RGBA = Tuple[int, int, int, int]

TERRAIN_COLORS: Dict[str, RGBA] = {
    WALL:       ( 90,  90,  90, 255),
    ROAD:       (181, 137,  84, 255),
    CLEARING:   (170, 215, 120, 255),
    TALL_GRASS: ( 60, 140,  50, 255),
    WATER:      ( 60, 110, 200, 255),
    UNSET:      (  0,   0,   0, 255),
}
BUILDING_COLOR: RGBA = (200, 60, 50, 255)

def color_for(tile: str) -> RGBA:
    # Anything that is not terrain is a building.
    return TERRAIN_COLORS.get(tile, BUILDING_COLOR)

def tile_image(tile: str, tile_size: int) -> Image.Image:
    img = Image.new("RGBA", (tile_size, tile_size), color=color_for(tile))
    if is_building(tile) and tile_size >= 8:
        # buildings get their letter drawn on top
        draw = ImageDraw.Draw(img)
        font = ImageFont.load_default()
        tw = draw.textlength(tile, font=font)
        draw.text(((tile_size - tw) / 2, (tile_size - 10) / 2), tile, fill=(255, 255, 255, 255), font=font)
    return img

def render_rows(rows: Sequence[str], tile_size: int = 8, margin: int = 0) -> Image.Image:
    if not rows:
        raise ValueError("empty map")
    h, w = len(rows), len(rows[0])
    canvas = Image.new("RGBA", (w * tile_size + 2 * margin, h * tile_size + 2 * margin), (0, 0, 0, 0))
    cache: Dict[str, Image.Image] = {}
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            img = cache.get(tile)
            if img is None:
                img = cache[tile] = tile_image(tile, tile_size)
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            canvas.paste(img, (x0, y0, x0 + tile_size, y0 + tile_size), img)
    return canvas

def save_png(rows: List[str], out_png: str, tile_size: int = 8) -> None:
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    render_rows(rows, tile_size=tile_size).save(out_png)
