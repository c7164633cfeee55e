from dataclasses import dataclass
from typing import Optional, Tuple

from .tiles import TALL_GRASS, WATER, BUILDING_A, BUILDING_B, TERRAIN, UNSET

@dataclass(frozen=True)
class BlobSpec:
    symbol: str
    steps: int

# Two tall-grass blobs and one water blob, painted in this order.
DEFAULT_BLOBS = (
    BlobSpec(TALL_GRASS, 260),
    BlobSpec(TALL_GRASS, 260),
    BlobSpec(WATER, 170),
)

@dataclass(frozen=True)
class MapConfig:
    width: int = 80
    height: int = 21
    blobs: Tuple[BlobSpec, ...] = DEFAULT_BLOBS
    # Intersection is drawn at least this far from the rim (x, y) when it fits.
    intersection_margin: Tuple[int, int] = (10, 5)
    wiggle_percent: int = 20
    placement_attempts: int = 8000
    building_symbols: Tuple[str, ...] = (BUILDING_A, BUILDING_B)
    # None -> 4 * width * height per carve
    carve_step_limit: Optional[int] = None
    # Raise GenerationError instead of logging when a carve or building fails.
    strict: bool = False

    def __post_init__(self):
        if self.width < 3 or self.height < 3:
            raise ValueError(f"map must be at least 3x3, got {self.width}x{self.height}")
        grass = sum(1 for b in self.blobs if b.symbol == TALL_GRASS)
        water = sum(1 for b in self.blobs if b.symbol == WATER)
        if grass < 2 or water < 1:
            raise ValueError("blobs need at least two tall-grass and one water entry")
        if any(b.steps < 0 for b in self.blobs):
            raise ValueError("blob steps must be >= 0")
        if not 0 <= self.wiggle_percent <= 100:
            raise ValueError("wiggle_percent must be in 0..100")
        if self.placement_attempts <= 0:
            raise ValueError("placement_attempts must be positive")
        if self.carve_step_limit is not None and self.carve_step_limit <= 0:
            raise ValueError("carve_step_limit must be positive")
        syms = self.building_symbols
        if len(set(syms)) != len(syms):
            raise ValueError("building symbols must be distinct")
        for s in syms:
            if len(s) != 1 or not s.isprintable() or s in TERRAIN or s == UNSET:
                raise ValueError(f"bad building symbol {s!r}")

    @property
    def step_limit(self) -> int:
        if self.carve_step_limit is not None:
            return self.carve_step_limit
        return 4 * self.width * self.height

# Reference configuration (80x21, C and M buildings)
DEFAULT_CONFIG = MapConfig()
