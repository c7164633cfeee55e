# src/fieldmap/mapgen/carve.py
# Wiggly directed road carving between two points.
#
# The walk heads along the axis with the larger remaining distance (ties go to
# y) and, with `wiggle_percent` probability, also drifts one cell sideways.
# Border cells are only entered when they are the goal or already road, so the
# rim keeps exactly the holes the exit placer made.

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..grid import Grid, Point
from ..tiles import ROAD

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class CarveResult:
    start: Point
    goal: Point
    steps: int
    reached: bool

def _sign(v: int) -> int:
    return (v > 0) - (v < 0)

def can_step(g: Grid, x: int, y: int, goal: Point) -> bool:
    if not g.in_bounds(x, y):
        return False
    if g.is_border(x, y) and (x, y) != goal and g.get(x, y) != ROAD:
        return False
    return True

def pick_elbow(g: Grid, x: int, y: int, primary: Tuple[int, int],
               side: Tuple[int, int], goal: Point) -> Optional[Tuple[int, int]]:
    """
    A diagonal step needs one of the two shared neighbours as road so the
    network stays 4-connected.  Prefer the cell along the primary axis.
    """
    for ex, ey in ((x + primary[0], y + primary[1]), (x + side[0], y + side[1])):
        if can_step(g, ex, ey, goal):
            return (ex, ey)
    return None

def wiggle_offset(r: int, wiggle_percent: int) -> int:
    # r in 0..99; lower half of the wiggle band drifts -1, upper half +1
    if r < wiggle_percent / 2:
        return -1
    if r < wiggle_percent:
        return 1
    return 0

def carve_path(
    g: Grid,
    rng,
    start: Point,
    goal: Point,
    wiggle_percent: int = 20,
    step_limit: Optional[int] = None,
) -> CarveResult:
    """
    Mark a road from `start` to `goal`, one grid step per iteration.

    Exactly one rng draw (`below(100)`) is consumed per step.  If the wiggled
    move is not allowed the plain move is used, then a single-axis move on the
    other axis; if none is allowed the walk stops early.  `step_limit` caps the
    number of iterations.  Either way the goal cell itself is marked road and
    the result says whether the walk actually got there.
    """
    x, y = start
    gx, gy = goal
    steps = 0
    while (x, y) != (gx, gy):
        g.set(x, y, ROAD)
        if step_limit is not None and steps >= step_limit:
            break

        dx, dy = gx - x, gy - y
        if abs(dx) > abs(dy):
            primary = (_sign(dx), 0)
        else:
            primary = (0, _sign(dy))

        w = wiggle_offset(rng.below(100), wiggle_percent)
        side = (0, w) if primary[0] else (w, 0)

        nxt = None
        elbow = None
        if w:
            cx, cy = x + primary[0] + side[0], y + primary[1] + side[1]
            if can_step(g, cx, cy, goal):
                elbow = pick_elbow(g, x, y, primary, side, goal)
                if elbow is not None:
                    nxt = (cx, cy)
        if nxt is None and can_step(g, x + primary[0], y + primary[1], goal):
            nxt = (x + primary[0], y + primary[1])
        if nxt is None:
            # corrective move toward the goal on the other axis
            ax, ay = (0, _sign(dy)) if primary[0] else (_sign(dx), 0)
            if (ax or ay) and can_step(g, x + ax, y + ay, goal):
                nxt = (x + ax, y + ay)
        if nxt is None:
            break

        if elbow is not None:
            g.set(elbow[0], elbow[1], ROAD)
        x, y = nxt
        steps += 1

    reached = (x, y) == (gx, gy)
    g.set(gx, gy, ROAD)
    if not reached:
        logger.warning("carve %s -> %s stopped at (%d, %d) after %d steps", start, goal, x, y, steps)
    return CarveResult(start=Point(*start), goal=Point(gx, gy), steps=steps, reached=reached)
