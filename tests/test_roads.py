from __future__ import annotations

import pytest

from realms.geometry import canonical_corner
from realms.models import Edge
from realms.roads import build_road_graph, road_endpoints, roads_connected


def test_single_road_has_two_canonical_vertices() -> None:
    graph = build_road_graph([Edge(1, 0, 4)])
    assert graph.vertices == sorted([canonical_corner(1, 0, 4), canonical_corner(1, 0, 5)])
    assert len(graph.edges) == 1


def test_two_representations_collapse_to_one_edge() -> None:
    graph = build_road_graph([Edge(0, 0, 0), Edge(1, 0, 3)])
    assert len(graph.edges) == 1
    assert all(graph.degree(v) == 1 for v in graph.vertices)


def test_roads_authored_from_different_tiles_share_a_vertex() -> None:
    # (0, 1, 4) is edge 1 of the origin tile seen from its neighbour.
    graph = build_road_graph([Edge(0, 0, 0), Edge(0, 1, 4)])
    assert len(graph.vertices) == 3
    assert graph.degree(canonical_corner(0, 0, 1)) == 2


@pytest.mark.parametrize(
    "a, b",
    [
        (Edge(0, 0, 0), Edge(0, 0, 1)),  # adjacent edges on one tile
        (Edge(0, 0, 5), Edge(0, 0, 0)),  # wrap-around 5 -> 0
        (Edge(0, 0, 0), Edge(1, 0, 3)),  # same physical edge
        (Edge(0, 0, 0), Edge(1, 0, 2)),  # different tiles, shared vertex
        (Edge(0, 0, 0), Edge(0, 1, 4)),
    ],
)
def test_connected_roads(a: Edge, b: Edge) -> None:
    assert roads_connected(a, b)
    assert roads_connected(b, a)


@pytest.mark.parametrize(
    "a, b",
    [
        (Edge(0, 0, 0), Edge(0, 0, 3)),
        (Edge(0, 0, 0), Edge(2, 0, 0)),
        (Edge(0, 0, 0), Edge(0, 0, 8)),
    ],
)
def test_unconnected_roads(a: Edge, b: Edge) -> None:
    assert not roads_connected(a, b)


def test_bad_edge_index_is_isolated() -> None:
    graph = build_road_graph([Edge(0, 0, 9), Edge(0, 0, 0)])
    assert graph.isolated == [Edge(0, 0, 9)]
    assert len(graph.edges) == 1


def test_road_endpoints_are_canonical() -> None:
    ends = road_endpoints([Edge(1, 0, 3), Edge(0, 0, 9)])
    assert ends == {canonical_corner(0, 0, 0), canonical_corner(0, 0, 1)}
