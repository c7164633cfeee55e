#!/usr/bin/env python3
# Minimal read-only viewer for generated maps.
# - LEFT/RIGHT: previous/next seed
# - G: fresh time-based seed
# - ESC: quit
# - 30 Hz fixed loop

import argparse
import pygame
from fieldmap.mapgen.generator import generate_map
from fieldmap.render.tileset import Tileset
from fieldmap.rng import SEED_MASK, seed_from_time

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=None, help="Starting seed (default: time)")
    ap.add_argument("--tile", type=int, default=12, help="Tile size in pixels")
    args = ap.parse_args()

    seed = seed_from_time() if args.seed is None else args.seed & SEED_MASK
    m = generate_map(seed)
    w, h = m.grid.width, m.grid.height

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((w * args.tile, h * args.tile))
    tiles = Tileset(args.tile)

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_RIGHT:
                    seed = (seed + 1) & SEED_MASK
                    m = generate_map(seed)
                elif ev.key == pygame.K_LEFT:
                    seed = (seed - 1) & SEED_MASK
                    m = generate_map(seed)
                elif ev.key == pygame.K_g:
                    seed = seed_from_time()
                    m = generate_map(seed)

        screen.fill((0, 0, 0))
        for y, row in enumerate(m.grid.rows()):
            for x, tile in enumerate(row):
                screen.blit(tiles.view(tile, args.tile), (x * args.tile, y * args.tile))

        pygame.display.set_caption(
            f"fieldmap viewer - seed {seed}  buildings {m.buildings_placed}/{len(m.buildings)}"
        )
        pygame.display.flip()
        clock.tick(30)

    pygame.quit()

if __name__ == "__main__":
    main()
