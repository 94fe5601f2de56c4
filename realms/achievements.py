# achievements.py — Longest Road and Largest Army

"""Comparative achievements.

Both achievements follow one policy: players at or above a minimum compete,
the strict maximum wins, and on a tie the current holder keeps the award if
tied, otherwise the first tied player in array order gets it. With nobody
qualifying the award is cleared for everyone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from .models import Corner, Edge, Player, ensure_victory_points
from .realms_models import DEFAULT_RULES, RulesConfig
from .roads import RoadGraph, build_road_graph

logger = logging.getLogger(__name__)


@dataclass
class AchievementResult:
    holder: Optional[Player]
    value: int


@dataclass
class RoadStat:
    player: Player
    length: int
    has_achievement: bool


@dataclass
class ArmyStat:
    player: Player
    knights: int
    has_achievement: bool
    qualifies: bool


@dataclass
class KnightPlayResult:
    knight_count: int
    largest_army_holder: Optional[Player]
    achievement_changed: bool


def _award(
    players: Sequence[Player],
    scores: Sequence[int],
    minimum: int,
    bonus: int,
    field_name: str,
) -> AchievementResult:
    for p in players:
        ensure_victory_points(p)

    qualified = [(p, s) for p, s in zip(players, scores) if s >= minimum]
    if not qualified:
        logger.debug("%s: nobody reaches %d", field_name, minimum)
        for p in players:
            setattr(p.victory_points, field_name, 0)
        return AchievementResult(holder=None, value=0)

    top = max(s for _, s in qualified)
    tied = [p for p, s in qualified if s == top]
    if len(tied) == 1:
        winner = tied[0]
    else:
        current = next((p for p in players if getattr(p.victory_points, field_name) > 0), None)
        winner = current if current in tied else tied[0]
        logger.debug(
            "%s tie at %d between %s, awarded to %s",
            field_name, top, [p.name for p in tied], winner.name,
        )

    for p in players:
        setattr(p.victory_points, field_name, bonus if p is winner else 0)
    logger.debug("%s held by %s (%d)", field_name, winner.name, top)
    return AchievementResult(holder=winner, value=top)


def _current_holder(players: Sequence[Player], field_name: str) -> Optional[Player]:
    for p in players:
        if p.victory_points is not None and getattr(p.victory_points, field_name) > 0:
            return p
    return None


# ── Longest Road ──────────────────────────────────────────────────────────────

def _longest_trail_from(graph: RoadGraph, vertex: Corner, used: Set[Edge]) -> int:
    best = 0
    for edge, far in graph.incident(vertex):
        if edge in used:
            continue
        used.add(edge)
        best = max(best, 1 + _longest_trail_from(graph, far, used))
        used.remove(edge)
    return best


def longest_trail(graph: RoadGraph) -> int:
    """Most road segments in one walk that never reuses a segment."""
    best = 0
    for vertex in graph.adjacency:
        best = max(best, _longest_trail_from(graph, vertex, set()))
    if graph.isolated:
        best = max(best, 1)
    return best


def calculate_longest_road(player: Player) -> int:
    if player is None or not player.roads:
        return 0
    return longest_trail(build_road_graph(player.roads))


def update_longest_road(
    players: Sequence[Player], rules: RulesConfig = DEFAULT_RULES
) -> AchievementResult:
    if not players:
        return AchievementResult(holder=None, value=0)
    lengths = [calculate_longest_road(p) for p in players]
    for p, length in zip(players, lengths):
        p.longest_road_length = length
    return _award(players, lengths, rules.min_longest_road, rules.longest_road_bonus, "longest_road")


def get_current_longest_road_holder(players: Sequence[Player]) -> Optional[Player]:
    return _current_holder(players, "longest_road")


def get_road_statistics(players: Sequence[Player]) -> List[RoadStat]:
    holder = get_current_longest_road_holder(players)
    return [
        RoadStat(
            player=p,
            length=calculate_longest_road(p),
            has_achievement=p is holder,
        )
        for p in players
    ]


# ── Largest Army ──────────────────────────────────────────────────────────────

def get_knight_count(player: Optional[Player]) -> int:
    return player.knights_played if player is not None else 0


def qualifies_for_largest_army(player: Player, rules: RulesConfig = DEFAULT_RULES) -> bool:
    return get_knight_count(player) >= rules.min_largest_army


def update_largest_army(
    players: Sequence[Player], rules: RulesConfig = DEFAULT_RULES
) -> AchievementResult:
    if not players:
        return AchievementResult(holder=None, value=0)
    counts = [get_knight_count(p) for p in players]
    return _award(players, counts, rules.min_largest_army, rules.largest_army_bonus, "largest_army")


def play_knight(
    player: Player, players: Sequence[Player], rules: RulesConfig = DEFAULT_RULES
) -> int:
    """Count a played knight and re-evaluate Largest Army for everyone."""
    player.knights_played += 1
    logger.debug("%s played knight (%d total)", player.name, player.knights_played)
    update_largest_army(players, rules)
    return player.knights_played


def process_knight_play(
    player: Player, players: Sequence[Player], rules: RulesConfig = DEFAULT_RULES
) -> KnightPlayResult:
    before = get_current_largest_army_holder(players)
    count = play_knight(player, players, rules)
    holder = get_current_largest_army_holder(players)
    return KnightPlayResult(
        knight_count=count,
        largest_army_holder=holder,
        achievement_changed=holder is player and before is not player,
    )


def get_current_largest_army_holder(players: Sequence[Player]) -> Optional[Player]:
    return _current_holder(players, "largest_army")


def get_army_statistics(
    players: Sequence[Player], rules: RulesConfig = DEFAULT_RULES
) -> List[ArmyStat]:
    holder = get_current_largest_army_holder(players)
    return [
        ArmyStat(
            player=p,
            knights=get_knight_count(p),
            has_achievement=p is holder,
            qualifies=qualifies_for_largest_army(p, rules),
        )
        for p in players
    ]


def reset_knight_tracking(players: Sequence[Player]) -> None:
    for p in players:
        p.knights_played = 0
        if p.victory_points is not None:
            p.victory_points.largest_army = 0
