# src/fieldmap/mapgen/generator.py
# Full map pipeline: rim/exits -> terrain -> roads -> buildings.

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import DEFAULT_CONFIG, MapConfig
from ..grid import Grid, Point
from ..render.text import render_text
from ..rng import MapRandom
from ..tiles import CLEARING
from .border import Exits, place_border_and_exits
from .carve import CarveResult, carve_path
from .placement import PlacementResult, place_building
from .regions import fill_interior, paint_regions

logger = logging.getLogger(__name__)

class GenerationError(RuntimeError):
    """Raised in strict mode when a road or building could not be completed."""

@dataclass
class GeneratedMap:
    seed: Optional[int]
    grid: Grid
    exits: Exits
    intersection: Point
    blob_cells: List[int] = field(default_factory=list)
    carves: List[CarveResult] = field(default_factory=list)
    buildings: List[PlacementResult] = field(default_factory=list)

    @property
    def buildings_placed(self) -> int:
        return sum(1 for b in self.buildings if b.placed)

    @property
    def complete(self) -> bool:
        return all(c.reached for c in self.carves) and all(b.placed for b in self.buildings)

    def render(self) -> str:
        return render_text(self.grid)

def axis_range(size: int, margin: int) -> Tuple[int, int]:
    """Inclusive draw range for one intersection coordinate.

    Keeps `margin` cells from each edge when that leaves a non-empty range,
    otherwise falls back to the whole interior (1..size-2).
    """
    lo, hi = margin, size - 1 - margin
    if lo < 1 or hi > size - 2 or lo > hi:
        return 1, size - 2
    return lo, hi

def pick_intersection(g: Grid, rng, margin: Tuple[int, int]) -> Point:
    x = rng.range(*axis_range(g.width, margin[0]))
    y = rng.range(*axis_range(g.height, margin[1]))
    return Point(x, y)

def connect_exits(g: Grid, rng, exits: Exits, inter: Point, cfg: MapConfig) -> List[CarveResult]:
    # Fixed order; part of the seed contract.
    legs = (
        (exits.top, inter),
        (inter, exits.bottom),
        (exits.left, inter),
        (inter, exits.right),
    )
    return [
        carve_path(g, rng, a, b, wiggle_percent=cfg.wiggle_percent, step_limit=cfg.step_limit)
        for a, b in legs
    ]

def generate_map(seed: Optional[int] = None, config: MapConfig = DEFAULT_CONFIG,
                 rng=None) -> GeneratedMap:
    """
    Build one map.  Either `seed` or an explicit `rng` must be given; an
    injected `rng` takes precedence (used by tests to script draws).

    Random draws happen in this order: exits, each blob, intersection, the
    four carves, then each building.
    """
    if rng is None:
        if seed is None:
            raise ValueError("generate_map needs a seed or an rng")
        rng = MapRandom.from_seed(seed)

    g = Grid.empty(config.width, config.height)
    exits = place_border_and_exits(g, rng)
    fill_interior(g, CLEARING)
    blob_cells = paint_regions(g, rng, config.blobs)

    inter = pick_intersection(g, rng, config.intersection_margin)
    logger.debug("intersection %s", inter)
    carves = connect_exits(g, rng, exits, inter, config)

    buildings = [
        place_building(g, rng, sym, attempts=config.placement_attempts)
        for sym in config.building_symbols
    ]

    result = GeneratedMap(
        seed=seed, grid=g, exits=exits, intersection=inter,
        blob_cells=blob_cells, carves=carves, buildings=buildings,
    )
    logger.debug(
        "seed=%s roads_complete=%s buildings=%d/%d",
        seed, all(c.reached for c in carves), result.buildings_placed, len(buildings),
    )
    if config.strict and not result.complete:
        missing = [b.symbol for b in buildings if not b.placed]
        broken = [(c.start, c.goal) for c in carves if not c.reached]
        raise GenerationError(f"incomplete map: unplaced buildings {missing}, unfinished roads {broken}")
    return result
