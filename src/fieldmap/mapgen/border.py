# src/fieldmap/mapgen/border.py
# Rim of walls plus one road exit per side.

import logging
from typing import NamedTuple

from ..grid import Grid, Point
from ..tiles import WALL, ROAD

logger = logging.getLogger(__name__)

class Exits(NamedTuple):
    top: Point
    bottom: Point
    left: Point
    right: Point

def place_outer_rim(g: Grid) -> None:
    for x in range(g.width):
        g.set(x, 0, WALL)
        g.set(x, g.height - 1, WALL)
    for y in range(g.height):
        g.set(0, y, WALL)
        g.set(g.width - 1, y, WALL)

def place_border_and_exits(g: Grid, rng) -> Exits:
    """
    Wall the rim, then open one exit per side.
    Draw order is fixed: top x, bottom x, left y, right y.
    Corners are never chosen (x in 1..W-2, y in 1..H-2).
    """
    place_outer_rim(g)
    w, h = g.width, g.height
    exits = Exits(
        top=Point(rng.range(1, w - 2), 0),
        bottom=Point(rng.range(1, w - 2), h - 1),
        left=Point(0, rng.range(1, h - 2)),
        right=Point(w - 1, rng.range(1, h - 2)),
    )
    for p in exits:
        g.set(p.x, p.y, ROAD)
    logger.debug("exits top=%s bottom=%s left=%s right=%s", *exits)
    return exits
