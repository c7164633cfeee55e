# src/fieldmap/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache

from ..tiles import is_building
from .image import color_for

class Tileset:
    """
    Tiny cached surface factory for the viewer:
      - one solid swatch per terrain symbol (colors shared with the PNG renderer)
      - building symbols get their letter drawn on the swatch
    """
    def __init__(self, tile_size: int, font=None):
        self.tile_size = tile_size
        self.font = font or pygame.font.SysFont(None, max(10, tile_size))

    @lru_cache(maxsize=64)
    def get(self, tile: str) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(color_for(tile))
        if is_building(tile):
            txt = self.font.render(tile, True, (255, 255, 255))
            r = txt.get_rect(center=(self.tile_size // 2, self.tile_size // 2))
            img.blit(txt, r)
        return img

    @lru_cache(maxsize=256)
    def view(self, tile: str, size: int) -> pygame.Surface:
        base = self.get(tile)
        if base.get_size() == (size, size):
            return base
        return pygame.transform.scale(base, (size, size))
