# src/fieldmap/rng.py
"""
Park–Miller "minimal standard" generator used for every random draw in a run.

Each component receives the generator explicitly; nothing touches the
process-wide `random` module, so a seed reproduces the same map on any
interpreter.  Tests may pass any object with `below(n)` and `range(lo, hi)`.
"""

import time
from dataclasses import dataclass

A = 16807
M = 0x7FFFFFFF  # 2^31-1
SEED_MASK = 0xFFFFFFFF  # seeds are unsigned 32-bit

def pm_next(state: int) -> int:
    return (state * A) % M

def state_from_seed(seed: int) -> int:
    """Map an unsigned 32-bit seed onto the generator's valid states 1..M-1."""
    return (seed & SEED_MASK) % (M - 1) + 1

def seed_from_time() -> int:
    return int(time.time()) & SEED_MASK

@dataclass
class MapRandom:
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "MapRandom":
        return cls(state_from_seed(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def below(self, n: int) -> int:
        """Uniform-ish integer in 0..n-1."""
        if n <= 0:
            raise ValueError("n must be positive")
        return self.next32() % n

    def range(self, lo: int, hi: int) -> int:
        # inclusive on both ends
        if hi < lo:
            raise ValueError(f"empty range {lo}..{hi}")
        return lo + self.below(hi - lo + 1)
