# board.py — Fixed island layout: land tiles, sea ring, resource/number tokens

from __future__ import annotations

import random
from typing import Dict, List, Optional

from .constants import LAND_RADIUS, NUMBER_TOKENS, RESOURCE_COUNTS, WATER_RADIUS
from .geometry import axial_hexes, equivalent_corners, hex_distance
from .models import Corner, HexCoord, Tile


def is_land_tile(q: int, r: int) -> bool:
    return hex_distance(q, r) <= LAND_RADIUS


def is_water_tile(q: int, r: int) -> bool:
    return LAND_RADIUS < hex_distance(q, r) <= WATER_RADIUS


def corner_on_land(corner: Corner) -> bool:
    """A vertex is buildable when at least one of its tiles is land."""
    return any(is_land_tile(eq.q, eq.r) for eq in equivalent_corners(corner.q, corner.r, corner.corner))


def build_board(rng: random.Random) -> Dict[HexCoord, Tile]:
    """Generate a randomised island of 19 land tiles.

    The desert carries no number token.
    """
    coords = axial_hexes(LAND_RADIUS)

    resources: List[str] = []
    for res, count in RESOURCE_COUNTS.items():
        resources.extend([res] * count)
    rng.shuffle(resources)

    numbers = NUMBER_TOKENS[:]
    rng.shuffle(numbers)

    tiles: Dict[HexCoord, Tile] = {}
    for (q, r), res in zip(coords, resources):
        number: Optional[int] = None if res == "desert" else numbers.pop()
        tiles[HexCoord(q, r)] = Tile(coord=HexCoord(q, r), resource=res, number=number)
    return tiles


def tiles_at_corner(tiles: Dict[HexCoord, Tile], corner: Corner) -> List[Tile]:
    """Land tiles touching a vertex."""
    out: List[Tile] = []
    for eq in equivalent_corners(corner.q, corner.r, corner.corner):
        tile = tiles.get(eq.tile)
        if tile is not None:
            out.append(tile)
    return out
