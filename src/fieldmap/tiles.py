# Terrain symbols (one character per cell)

WALL = "%"
ROAD = "#"
CLEARING = "."
TALL_GRASS = ":"
WATER = "~"
BUILDING_A = "C"
BUILDING_B = "M"
UNSET = " "  # only before the border/interior pass

TERRAIN = (WALL, ROAD, CLEARING, TALL_GRASS, WATER)
NAMES = {
    WALL: "wall",
    ROAD: "road",
    CLEARING: "clearing",
    TALL_GRASS: "tall-grass",
    WATER: "water",
    BUILDING_A: "building-A",
    BUILDING_B: "building-B",
    UNSET: "unset",
}

def is_building(tile: str) -> bool:
    return tile not in TERRAIN and tile != UNSET

def blocks_footprint(tile: str) -> bool:
    # Buildings never cover the rim, a road, or each other.
    return tile in (WALL, ROAD) or is_building(tile)

def keeps_through_clear(tile: str) -> bool:
    # Cells the clearing ring around a new building leaves alone.
    return tile == ROAD or is_building(tile)
