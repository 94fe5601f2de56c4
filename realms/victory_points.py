# victory_points.py — Victory point aggregation and display views

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .achievements import update_largest_army, update_longest_road
from .models import Player, VictoryPoints, ensure_victory_points
from .realms_models import DEFAULT_RULES, RulesConfig, VictoryPointBreakdown, VictoryPointDisplay

logger = logging.getLogger(__name__)


def initialize_victory_points(players: Sequence[Player]) -> None:
    for p in players:
        ensure_victory_points(p)


def basic_vp(player: Optional[Player]) -> int:
    if player is None:
        return 0
    return len(player.settlements) + 2 * len(player.cities)


def special_vp(player: Optional[Player]) -> int:
    if player is None:
        return 0
    vp = ensure_victory_points(player)
    return vp.longest_road + vp.largest_army


def hidden_vp(player: Optional[Player]) -> int:
    if player is None:
        return 0
    return ensure_victory_points(player).hidden_vp


def calculate_victory_points(player: Optional[Player], include_hidden: bool = True) -> int:
    if player is None:
        return 0
    total = basic_vp(player) + special_vp(player)
    if include_hidden:
        total += hidden_vp(player)
    return total


def calculate_public_victory_points(player: Optional[Player]) -> int:
    return calculate_victory_points(player, include_hidden=False)


def refresh_basic_vp(player: Player) -> VictoryPoints:
    """Sync the cached settlement/city counters with the player's buildings."""
    vp = ensure_victory_points(player)
    vp.settlements = len(player.settlements)
    vp.cities = 2 * len(player.cities)
    return vp


def add_victory_point_card(player: Player) -> int:
    vp = ensure_victory_points(player)
    vp.hidden_vp += 1
    logger.debug("%s gained a hidden victory point (%d)", player.name, vp.hidden_vp)
    return vp.hidden_vp


def update_achievements(players: Sequence[Player], rules: RulesConfig = DEFAULT_RULES) -> None:
    """Re-run both comparative achievements across the whole table."""
    update_longest_road(players, rules)
    update_largest_army(players, rules)


def update_all_victory_points(
    player: Player,
    players: Optional[Sequence[Player]] = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> int:
    refresh_basic_vp(player)
    if players:
        update_achievements(players, rules)
    return calculate_victory_points(player)


def get_victory_points_breakdown(player: Optional[Player]) -> VictoryPointBreakdown:
    if player is None:
        return VictoryPointBreakdown()
    vp = refresh_basic_vp(player)
    return VictoryPointBreakdown(
        settlements=vp.settlements,
        cities=vp.cities,
        hidden_vp=vp.hidden_vp,
        longest_road=vp.longest_road,
        largest_army=vp.largest_army,
        total=calculate_victory_points(player, include_hidden=True),
        public=calculate_public_victory_points(player),
    )


def get_victory_points_for_display(
    player: Optional[Player], is_current_player: bool = False
) -> VictoryPointDisplay:
    """Scoreboard view. Opponents never see hidden points."""
    if player is None:
        return VictoryPointDisplay()
    b = get_victory_points_breakdown(player)
    if is_current_player:
        display = f"{b.public} (+{b.hidden_vp})" if b.hidden_vp > 0 else f"{b.total}"
        return VictoryPointDisplay(display=display, total=b.total, public=b.public, hidden=b.hidden_vp)
    return VictoryPointDisplay(display=f"{b.public}", total=b.public, public=b.public, hidden=0)
