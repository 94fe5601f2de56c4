# roads.py — Build a vertex/edge graph from a player's road segments

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set, Tuple

from .geometry import canonical_road, edge_corners, same_physical_edge
from .models import Corner, Edge

logger = logging.getLogger(__name__)


@dataclass
class RoadGraph:
    """Vertices are canonical corners; each graph edge is one road segment.

    ``isolated`` holds roads whose edge index could not be mapped to
    endpoints. They take no part in the graph.
    """

    adjacency: Dict[Corner, List[Tuple[Edge, Corner]]] = field(default_factory=dict)
    edges: Set[Edge] = field(default_factory=set)
    isolated: List[Edge] = field(default_factory=list)

    @property
    def vertices(self) -> List[Corner]:
        return sorted(self.adjacency)

    def degree(self, vertex: Corner) -> int:
        return len(self.adjacency.get(vertex, ()))

    def incident(self, vertex: Corner) -> List[Tuple[Edge, Corner]]:
        return self.adjacency.get(vertex, [])


def build_road_graph(roads: Iterable[Edge]) -> RoadGraph:
    graph = RoadGraph()
    for road in roads:
        ends = edge_corners(road)
        if ends is None:
            graph.isolated.append(road)
            continue
        key = canonical_road(road)
        if key in graph.edges:
            logger.debug("Duplicate road representation ignored: %s", road)
            continue
        graph.edges.add(key)
        a, b = ends
        graph.adjacency.setdefault(a, []).append((key, b))
        graph.adjacency.setdefault(b, []).append((key, a))
    return graph


def roads_connected(a: Edge, b: Edge) -> bool:
    """True if two roads are the same physical edge or share an endpoint.

    Endpoints are compared canonically, which covers adjacent edges on one
    tile as well as roads described from different tiles.
    """
    if same_physical_edge(a, b):
        return True
    ends_a = edge_corners(a)
    ends_b = edge_corners(b)
    if ends_a is None or ends_b is None:
        return False
    return bool(set(ends_a) & set(ends_b))


def road_endpoints(roads: Iterable[Edge]) -> Set[Corner]:
    """Canonical corners touched by any of the roads."""
    out: Set[Corner] = set()
    for road in roads:
        ends = edge_corners(road)
        if ends is not None:
            out.update(ends)
    return out
