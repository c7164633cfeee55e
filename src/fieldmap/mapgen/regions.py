# src/fieldmap/mapgen/regions.py
# Base terrain fill plus random-walk terrain blobs.

import logging
from typing import Iterable, List

from ..grid import Grid
from ..tiles import ROAD

logger = logging.getLogger(__name__)

# 0=+x, 1=-x, 2=+y, 3=-y
DIRS = ((1, 0), (-1, 0), (0, 1), (0, -1))

def fill_interior(g: Grid, tile: str) -> None:
    for y in range(1, g.height - 1):
        for x in range(1, g.width - 1):
            g.set(x, y, tile)

def clamp_interior(g: Grid, x: int, y: int):
    x = min(max(x, 1), g.width - 2)
    y = min(max(y, 1), g.height - 2)
    return x, y

def paint_blob(g: Grid, rng, tile: str, steps: int) -> int:
    """
    Bounded random walk from a random interior cell.

    Each step writes `tile` unless the cell is a road, then moves one cell in a
    random cardinal direction.  Moves that would leave the interior are clamped
    back onto its edge, so walks tend to stick to the rim.

    Returns the number of writes (a cell may be counted more than once).
    """
    x = rng.range(1, g.width - 2)
    y = rng.range(1, g.height - 2)
    written = 0
    for _ in range(steps):
        if g.is_interior(x, y) and g.get(x, y) != ROAD:
            g.set(x, y, tile)
            written += 1
        dx, dy = DIRS[rng.below(4)]
        x, y = clamp_interior(g, x + dx, y + dy)
    return written

def paint_regions(g: Grid, rng, blobs: Iterable) -> List[int]:
    # Order matters: later blobs overwrite earlier ones.
    counts = []
    for spec in blobs:
        n = paint_blob(g, rng, spec.symbol, spec.steps)
        logger.debug("blob %r: %d steps, %d writes", spec.symbol, spec.steps, n)
        counts.append(n)
    return counts
