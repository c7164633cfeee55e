# Whole-pipeline properties over a spread of seeds.
from collections import deque

import pytest

from fieldmap.config import MapConfig
from fieldmap.mapgen.generator import GenerationError, axis_range, generate_map
from fieldmap.tiles import CLEARING, ROAD, TALL_GRASS, UNSET, WALL, WATER, is_building

SEEDS = range(1, 41)

def road_component(g, start):
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            n = (x + dx, y + dy)
            if n not in seen and g.in_bounds(*n) and g.get(*n) == ROAD:
                seen.add(n)
                q.append(n)
    return seen

@pytest.fixture(scope="module")
def maps():
    return {s: generate_map(s) for s in SEEDS}

def test_output_shape_and_alphabet(maps):
    allowed = {WALL, ROAD, CLEARING, TALL_GRASS, WATER, "C", "M"}
    for m in maps.values():
        lines = m.render().split("\n")
        assert lines[-1] == ""
        assert len(lines[:-1]) == 21
        assert all(len(ln) == 80 for ln in lines[:-1])
        assert set("".join(lines)) <= allowed
        assert m.grid.count(UNSET) == 0

def test_border_is_wall_except_four_exits(maps):
    for s, m in maps.items():
        g = m.grid
        rim_roads = set()
        for y in range(g.height):
            for x in range(g.width):
                if not g.is_border(x, y):
                    continue
                t = g.get(x, y)
                assert t in (WALL, ROAD), (s, x, y, t)
                if t == ROAD:
                    rim_roads.add((x, y))
        assert rim_roads == set(m.exits), s

def test_roads_connect_every_exit(maps):
    for s, m in maps.items():
        assert all(c.reached for c in m.carves), s
        reach = road_component(m.grid, m.exits.top)
        assert set(m.exits) <= reach, s
        assert m.intersection in reach, s

def test_buildings_are_valid(maps):
    for s, m in maps.items():
        assert [b.symbol for b in m.buildings] == ["C", "M"]
        assert m.buildings_placed == 2, s
        for b in m.buildings:
            x, y = b.anchor
            for cx, cy in b.cells():
                assert m.grid.is_interior(cx, cy)
                assert m.grid.get(cx, cy) == b.symbol
            for yy in range(y - 1, y + 3):
                for xx in range(x - 1, x + 3):
                    t = m.grid.get(xx, yy)
                    assert t != WALL or m.grid.is_border(xx, yy)
                    if m.grid.is_interior(xx, yy):
                        assert t in (CLEARING, ROAD) or is_building(t), (s, xx, yy, t)

def test_terrain_coverage(maps):
    for s, m in maps.items():
        assert m.grid.count(TALL_GRASS) > 0, s
        assert m.grid.count(WATER) > 0, s
        assert m.blob_cells[:2] == [260, 260] and m.blob_cells[2] == 170

def test_intersection_respects_margins(maps):
    for m in maps.values():
        assert 10 <= m.intersection.x <= 69
        assert 5 <= m.intersection.y <= 15
        assert m.grid.get(*m.intersection) == ROAD

def test_same_seed_same_map():
    a = generate_map(1).render()
    b = generate_map(1).render()
    assert a.splitlines() == b.splitlines()

def test_different_seeds_differ():
    assert generate_map(1).render() != generate_map(2).render()

def test_complete_flag(maps):
    assert all(m.complete for m in maps.values())

def test_axis_range_fallback():
    assert axis_range(80, 10) == (10, 69)
    assert axis_range(21, 5) == (5, 15)
    assert axis_range(3, 10) == (1, 1)
    assert axis_range(12, 6) == (1, 10)

def test_tiny_map_terminates():
    cfg = MapConfig(width=3, height=3, placement_attempts=200)
    for seed in range(20):
        m = generate_map(seed, cfg)
        assert m.intersection == (1, 1)
        assert all(c.reached for c in m.carves)
        assert m.buildings_placed == 0
        assert [b.attempts for b in m.buildings] == [200, 200]
        assert not m.complete
        assert m.render() == "%#%\n###\n%#%\n"

def test_strict_mode_raises_on_missing_building():
    cfg = MapConfig(width=3, height=3, placement_attempts=10, strict=True)
    with pytest.raises(GenerationError):
        generate_map(4, cfg)

def test_needs_seed_or_rng():
    with pytest.raises(ValueError):
        generate_map()
