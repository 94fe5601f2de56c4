# constants.py — Static rule data for Resource Realms

from __future__ import annotations

from typing import Dict, List, Tuple

# Axial direction vectors, indexed 0-5. Direction i is also the tile that
# shares edge i and corner i.
DIRECTIONS: List[Tuple[int, int]] = [
    (+1, 0), (0, +1), (-1, +1),
    (-1, 0), (0, -1), (+1, -1),
]

# Edge i runs between corners i and i+1.
EDGE_CORNERS: Dict[int, Tuple[int, int]] = {
    0: (0, 1),
    1: (1, 2),
    2: (2, 3),
    3: (3, 4),
    4: (4, 5),
    5: (5, 0),
}

RESOURCES = ["wood", "clay", "wheat", "sheep", "ore"]

RESOURCE_COUNTS = {
    "wood": 4,
    "clay": 3,
    "sheep": 4,
    "wheat": 4,
    "ore": 3,
    "desert": 1,
}

NUMBER_TOKENS = [2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12]

ROAD_COST       = {"wood": 1, "clay": 1}
SETTLEMENT_COST = {"wood": 1, "clay": 1, "sheep": 1, "wheat": 1}
CITY_COST       = {"wheat": 2, "ore": 3}
DEV_CARD_COST   = {"wheat": 1, "sheep": 1, "ore": 1}

DEV_CARD_COUNTS = {
    "knight": 5,
    "road_building": 2,
    "monopoly": 2,
    "year_of_plenty": 2,
    "victory_point": 3,
}

VICTORY_POINTS_TO_WIN = 10
MIN_ROAD_LENGTH_FOR_LONGEST_ROAD = 5
LONGEST_ROAD_VICTORY_POINTS = 2
MIN_KNIGHTS_FOR_LARGEST_ARMY = 3
LARGEST_ARMY_VICTORY_POINTS = 2
DEV_CARD_HAND_LIMIT = 5

MIN_PLAYERS = 2
MAX_PLAYERS = 4

# Land tiles lie within LAND_RADIUS of the origin; the ring out to
# WATER_RADIUS is sea.
LAND_RADIUS = 2
WATER_RADIUS = 3

SETTLEMENT = "settlement"
CITY = "city"
