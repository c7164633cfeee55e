from fieldmap.tiles import (
    WALL, ROAD, CLEARING, TALL_GRASS, WATER, BUILDING_A, BUILDING_B, UNSET,
    blocks_footprint, is_building, keeps_through_clear,
)

def test_output_alphabet():
    assert (WALL, ROAD, CLEARING, TALL_GRASS, WATER) == ("%", "#", ".", ":", "~")
    assert (BUILDING_A, BUILDING_B) == ("C", "M")

def test_building_classification():
    assert is_building("C") and is_building("M")
    assert not any(is_building(t) for t in (WALL, ROAD, CLEARING, TALL_GRASS, WATER, UNSET))

def test_footprint_blockers():
    assert blocks_footprint(WALL) and blocks_footprint(ROAD) and blocks_footprint("C")
    assert not any(blocks_footprint(t) for t in (CLEARING, TALL_GRASS, WATER))
    assert keeps_through_clear(ROAD) and keeps_through_clear("M")
    assert not keeps_through_clear(TALL_GRASS)
