# src/fieldmap/mapgen/placement.py
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..grid import Grid, Point
from ..tiles import CLEARING, ROAD, blocks_footprint, keeps_through_clear

logger = logging.getLogger(__name__)

# Top-left anchors tried around a sampled road tile (rx, ry), in order:
# left/right of the road (two rows each), then above/below (two columns each).
# Every anchor keeps the 2x2 footprint off the road tile itself.
ANCHOR_OFFSETS = (
    (-2, -1), (1, -1),
    (-2, 0), (1, 0),
    (-1, -2), (0, -2),
    (-1, 1), (0, 1),
)

@dataclass(frozen=True)
class PlacementResult:
    symbol: str
    anchor: Optional[Point]
    attempts: int

    @property
    def placed(self) -> bool:
        return self.anchor is not None

    def cells(self) -> Tuple[Point, ...]:
        if self.anchor is None:
            return ()
        x, y = self.anchor
        return (Point(x, y), Point(x + 1, y), Point(x, y + 1), Point(x + 1, y + 1))

def can_place_2x2(g: Grid, x: int, y: int) -> bool:
    # x,y is the top-left of the footprint
    if not (g.is_interior(x, y) and g.is_interior(x + 1, y + 1)):
        return False
    return not any(blocks_footprint(g.get(x + dx, y + dy)) for dy in (0, 1) for dx in (0, 1))

def clear_ring(g: Grid, x: int, y: int) -> None:
    # footprint plus a one-tile margin, clipped to the interior; roads and
    # earlier buildings survive
    for yy in range(y - 1, y + 3):
        for xx in range(x - 1, x + 3):
            if not g.is_interior(xx, yy):
                continue
            if not keeps_through_clear(g.get(xx, yy)):
                g.set(xx, yy, CLEARING)

def stamp_2x2(g: Grid, x: int, y: int, tile: str) -> None:
    for dy in (0, 1):
        for dx in (0, 1):
            g.set(x + dx, y + dy, tile)

def place_building(g: Grid, rng, tile: str, attempts: int = 8000) -> PlacementResult:
    """
    Place one 2x2 building next to the road network.

    Per attempt:
    - Sample (x in 1..W-2, y in 1..H-2); skip unless it is a road tile.
    - Try ANCHOR_OFFSETS in order; take the first anchor whose footprint is
      interior and free of wall, road and other buildings.
    - Clear the 4x4 ring around it to clearing (roads and buildings kept)
      and stamp `tile`.

    Gives up after `attempts` samples and returns an unplaced result; the grid
    is untouched in that case.
    """
    for n in range(1, attempts + 1):
        rx = rng.range(1, g.width - 2)
        ry = rng.range(1, g.height - 2)
        if g.get(rx, ry) != ROAD:
            continue
        for ox, oy in ANCHOR_OFFSETS:
            x, y = rx + ox, ry + oy
            if not can_place_2x2(g, x, y):
                continue
            clear_ring(g, x, y)
            stamp_2x2(g, x, y, tile)
            logger.debug("building %r at (%d, %d) after %d attempts", tile, x, y, n)
            return PlacementResult(symbol=tile, anchor=Point(x, y), attempts=n)

    logger.warning("building %r not placed after %d attempts", tile, attempts)
    return PlacementResult(symbol=tile, anchor=None, attempts=attempts)
