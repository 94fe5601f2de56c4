from __future__ import annotations

from typing import List

import pytest

from realms.achievements import (
    calculate_longest_road,
    get_army_statistics,
    get_current_largest_army_holder,
    get_current_longest_road_holder,
    get_road_statistics,
    play_knight,
    process_knight_play,
    reset_knight_tracking,
    update_largest_army,
    update_longest_road,
)
from realms.models import Edge, Player
from realms.realms_models import RulesConfig


def ring(q: int, r: int, count: int) -> List[Edge]:
    """`count` consecutive edges around one tile: a straight chain."""
    return [Edge(q, r, e) for e in range(count)]


# Edges 0-4 of the origin tile, three of them written from neighbouring tiles.
MIXED_CHAIN_5 = [Edge(0, 0, 0), Edge(0, 1, 4), Edge(0, 0, 2), Edge(-1, 0, 0), Edge(0, 0, 4)]

# Three roads meeting at corner 1 of the origin tile.
Y_SHAPE = [Edge(0, 0, 0), Edge(0, 0, 1), Edge(1, 0, 2)]


def lr(player: Player) -> int:
    return player.victory_points.longest_road


def la(player: Player) -> int:
    return player.victory_points.largest_army


# ── Longest road length ───────────────────────────────────────────────────────

def test_no_roads_is_zero() -> None:
    assert calculate_longest_road(Player("A")) == 0


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_straight_chain_length(n: int) -> None:
    assert calculate_longest_road(Player("A", roads=ring(0, 0, n))) == n


def test_chain_written_from_several_tiles() -> None:
    assert calculate_longest_road(Player("A", roads=MIXED_CHAIN_5)) == 5


def test_two_disconnected_roads_count_one() -> None:
    assert calculate_longest_road(Player("A", roads=[Edge(0, 0, 0), Edge(0, 0, 3)])) == 1


def test_y_shape_counts_two_arms() -> None:
    assert calculate_longest_road(Player("A", roads=Y_SHAPE)) == 2


def test_closed_loop_uses_every_edge() -> None:
    assert calculate_longest_road(Player("A", roads=ring(0, 0, 6))) == 6


def test_trail_may_revisit_a_vertex() -> None:
    # Spur into a closed loop: walk the spur, then all the way round.
    roads = ring(0, 0, 6) + [Edge(1, 0, 2)]
    assert calculate_longest_road(Player("A", roads=roads)) == 7


def test_duplicate_representation_is_not_double_counted() -> None:
    assert calculate_longest_road(Player("A", roads=[Edge(0, 0, 0), Edge(1, 0, 3)])) == 1


def test_bad_edge_index_degrades_to_one() -> None:
    assert calculate_longest_road(Player("A", roads=[Edge(0, 0, 11)])) == 1


# ── Longest road achievement ──────────────────────────────────────────────────

def test_four_roads_never_qualify() -> None:
    a = Player("A", roads=ring(0, 0, 4))
    result = update_longest_road([a])
    assert result.holder is None
    assert lr(a) == 0
    assert a.longest_road_length == 4


def test_five_roads_qualify() -> None:
    a = Player("A", roads=ring(0, 0, 5))
    result = update_longest_road([a, Player("B")])
    assert result.holder is a
    assert result.value == 5
    assert lr(a) == 2


def test_holder_keeps_award_on_tie() -> None:
    a = Player("A", roads=ring(0, 0, 5))
    b = Player("B")
    players = [b, a]
    update_longest_road(players)
    assert lr(a) == 2

    b.roads = ring(3, 3, 5)
    update_longest_road(players)
    assert lr(a) == 2
    assert lr(b) == 0


def test_tie_without_holder_goes_to_first_player() -> None:
    a = Player("A", roads=ring(0, 0, 5))
    b = Player("B", roads=ring(3, 3, 5))
    update_longest_road([b, a])
    assert lr(b) == 2
    assert lr(a) == 0


def test_longer_road_takes_award() -> None:
    a = Player("A", roads=ring(0, 0, 5))
    b = Player("B", roads=ring(3, 3, 5))
    players = [a, b]
    update_longest_road(players)
    b.roads.append(Edge(3, 3, 5))
    update_longest_road(players)
    assert lr(b) == 2
    assert lr(a) == 0
    assert get_current_longest_road_holder(players) is b


def test_award_cleared_when_nobody_qualifies() -> None:
    a = Player("A", roads=ring(0, 0, 5))
    update_longest_road([a])
    a.roads.pop()
    result = update_longest_road([a])
    assert result.holder is None
    assert lr(a) == 0


def test_custom_threshold() -> None:
    a = Player("A", roads=ring(0, 0, 3))
    update_longest_road([a], RulesConfig(min_longest_road=3, longest_road_bonus=4))
    assert lr(a) == 4


def test_road_statistics() -> None:
    a = Player("A", roads=ring(0, 0, 5))
    b = Player("B", roads=Y_SHAPE)
    update_longest_road([a, b])
    stats = get_road_statistics([a, b])
    assert [(s.length, s.has_achievement) for s in stats] == [(5, True), (2, False)]


# ── Largest army ──────────────────────────────────────────────────────────────

def test_three_knights_qualify() -> None:
    a, b = Player("A"), Player("B")
    play_knight(a, [a, b])
    play_knight(a, [a, b])
    assert la(a) == 0
    assert play_knight(a, [a, b]) == 3
    assert la(a) == 2
    assert get_current_largest_army_holder([a, b]) is a


def test_army_holder_keeps_award_on_tie() -> None:
    a = Player("A", knights_played=3)
    b = Player("B")
    players = [b, a]
    update_largest_army(players)
    b.knights_played = 3
    update_largest_army(players)
    assert la(a) == 2
    assert la(b) == 0
    b.knights_played = 4
    update_largest_army(players)
    assert la(b) == 2
    assert la(a) == 0


def test_army_tie_without_holder_goes_to_first_player() -> None:
    a = Player("A", knights_played=4)
    b = Player("B", knights_played=4)
    result = update_largest_army([a, b])
    assert result.holder is a
    assert result.value == 4


def test_process_knight_play_reports_change() -> None:
    a, b = Player("A", knights_played=2), Player("B")
    first = process_knight_play(a, [a, b])
    assert first.knight_count == 3
    assert first.largest_army_holder is a
    assert first.achievement_changed
    second = process_knight_play(a, [a, b])
    assert not second.achievement_changed


def test_army_statistics_and_reset() -> None:
    a, b = Player("A", knights_played=3), Player("B", knights_played=1)
    update_largest_army([a, b])
    stats = get_army_statistics([a, b])
    assert [(s.knights, s.has_achievement, s.qualifies) for s in stats] == [
        (3, True, True),
        (1, False, False),
    ]
    reset_knight_tracking([a, b])
    assert a.knights_played == 0
    assert la(a) == 0


def test_empty_player_list() -> None:
    assert update_longest_road([]).holder is None
    assert update_largest_army([]).holder is None
