from fieldmap.grid import Grid
from fieldmap.mapgen.border import place_border_and_exits
from fieldmap.rng import MapRandom
from fieldmap.tiles import ROAD, UNSET, WALL

from scripted_rng import ScriptedRandom

def test_rim_is_wall_except_exits():
    g = Grid.empty(10, 6)
    rng = ScriptedRandom([3, 7, 2, 4])  # top x, bottom x, left y, right y
    exits = place_border_and_exits(g, rng)
    assert rng.exhausted
    assert exits == ((3, 0), (7, 5), (0, 2), (9, 4))

    for y in range(6):
        for x in range(10):
            t = g.get(x, y)
            if (x, y) in exits:
                assert t == ROAD
            elif g.is_border(x, y):
                assert t == WALL
            else:
                assert t == UNSET

def test_exits_never_on_corners():
    for seed in range(200):
        g = Grid.empty(80, 21)
        top, bottom, left, right = place_border_and_exits(g, MapRandom.from_seed(seed))
        assert top.y == 0 and 1 <= top.x <= 78
        assert bottom.y == 20 and 1 <= bottom.x <= 78
        assert left.x == 0 and 1 <= left.y <= 19
        assert right.x == 79 and 1 <= right.y <= 19

def test_smallest_grid_has_midpoint_exits():
    g = Grid.empty(3, 3)
    exits = place_border_and_exits(g, MapRandom.from_seed(5))
    assert exits == ((1, 0), (1, 2), (0, 1), (2, 1))
    assert g.rows() == ["%#%", "# #", "%#%"]
