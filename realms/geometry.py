# geometry.py — Hex corner/edge equivalence and canonicalisation

"""Axial hex coordinate algebra.

A physical vertex is described by three ``(q, r, corner)`` triples, one per
adjacent tile, and a physical edge by two ``(q, r, edge)`` triples. Anything
that compares or hashes vertices goes through :func:`canonical_corner`.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .constants import DIRECTIONS, EDGE_CORNERS
from .models import Corner, Edge

logger = logging.getLogger(__name__)


def axial_hexes(radius: int = 2) -> List[Tuple[int, int]]:
    """Return all axial hex coordinates within *radius* of the origin."""
    coords: List[Tuple[int, int]] = []
    for q in range(-radius, radius + 1):
        r1 = max(-radius, -q - radius)
        r2 = min(radius, -q + radius)
        for r in range(r1, r2 + 1):
            coords.append((q, r))
    return coords


def hex_distance(q: int, r: int) -> int:
    """Distance in tiles from the origin."""
    return max(abs(q), abs(r), abs(q + r))


def neighbor_axial(q: int, r: int, direction: int) -> Tuple[int, int]:
    if not isinstance(direction, int) or not 0 <= direction <= 5:
        logger.warning("neighbor_axial: invalid direction %r at (%s,%s)", direction, q, r)
        return q, r
    dq, dr = DIRECTIONS[direction]
    return q + dq, r + dr


def normalize_index(index: int) -> int:
    """Fold any integer onto 0-5."""
    return (index or 0) % 6


def neighbor_corner(q: int, r: int, corner: int) -> Corner:
    """The same vertex as seen from the tile in direction *corner*."""
    if not isinstance(corner, int) or not 0 <= corner <= 5:
        logger.warning("neighbor_corner: invalid corner %r at (%s,%s)", corner, q, r)
        if not isinstance(corner, int):
            return Corner(q, r, 0)
        corner = normalize_index(corner)
    nq, nr = neighbor_axial(q, r, corner)
    return Corner(nq, nr, (corner + 4) % 6)


def equivalent_corners(q: int, r: int, corner: int) -> List[Corner]:
    """All representations of one physical vertex, input first."""
    corner = normalize_index(corner)
    a = Corner(q, r, corner)
    b = neighbor_corner(a.q, a.r, a.corner)
    c = neighbor_corner(b.q, b.r, b.corner)
    out: List[Corner] = []
    for rep in (a, b, c):
        if rep not in out:
            out.append(rep)
    return out


def canonical_corner(q: int, r: int, corner: int) -> Corner:
    return min(equivalent_corners(q, r, corner))


def canonical(c: Corner) -> Corner:
    return canonical_corner(c.q, c.r, c.corner)


def same_physical_corner(a: Optional[Corner], b: Optional[Corner]) -> bool:
    if a is None or b is None:
        return False
    return canonical(a) == canonical(b)


def adjacent_corners(q: int, r: int, corner: int) -> List[Corner]:
    """Canonical vertices one edge away from the given vertex."""
    out: List[Corner] = []
    for eq in equivalent_corners(q, r, corner):
        for ac in ((eq.corner + 5) % 6, (eq.corner + 1) % 6):
            adj = canonical_corner(eq.q, eq.r, ac)
            if adj not in out:
                out.append(adj)
    return out


# ── Edges ─────────────────────────────────────────────────────────────────────

def neighbor_edge(road: Edge) -> Edge:
    """The other representation of the same physical edge."""
    if not 0 <= road.edge <= 5:
        logger.warning("neighbor_edge: invalid edge %r at (%s,%s)", road.edge, road.q, road.r)
        return road
    nq, nr = neighbor_axial(road.q, road.r, road.edge)
    return Edge(nq, nr, (road.edge + 3) % 6)


def canonical_road(road: Edge) -> Edge:
    return min(road, neighbor_edge(road))


def same_physical_edge(a: Edge, b: Edge) -> bool:
    if a == b:
        return True
    return neighbor_edge(a) == b or neighbor_edge(b) == a


def edge_corners(road: Edge) -> Optional[Tuple[Corner, Corner]]:
    """Canonical endpoints of a road, or None for a bad edge index."""
    pair = EDGE_CORNERS.get(road.edge)
    if pair is None:
        logger.warning("edge_corners: invalid edge %r at (%s,%s)", road.edge, road.q, road.r)
        return None
    return (
        canonical_corner(road.q, road.r, pair[0]),
        canonical_corner(road.q, road.r, pair[1]),
    )


def corner_touches_road(corner: Corner, road: Edge) -> bool:
    ends = edge_corners(road)
    return ends is not None and canonical(corner) in ends
