# game.py — RealmsGame: build actions, undo, turns and score bookkeeping

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .achievements import process_knight_play, update_longest_road
from .board import build_board, corner_on_land, is_land_tile, tiles_at_corner
from .constants import CITY, CITY_COST, RESOURCES, ROAD_COST, SETTLEMENT, SETTLEMENT_COST
from .dev_cards import (
    KNIGHT,
    buy_development_card,
    create_development_deck,
    mature_new_cards,
    take_playable_card,
)
from .geometry import canonical, corner_touches_road, edge_corners, neighbor_axial, same_physical_edge
from .models import Corner, Edge, HexCoord, Player, Tile
from .placement import PlacementIndex
from .realms_models import GameConfig, PlayerConfig, RulesConfig, VictoryPointDisplay
from .roads import road_endpoints
from .utils import add_resources, can_afford, pay_cost
from .victory_points import (
    get_victory_points_for_display,
    initialize_victory_points,
    refresh_basic_vp,
)
from .win import WinManager

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """Everything the core mutates, passed around explicitly."""

    players: List[Player]
    rules: RulesConfig
    rng: random.Random
    tiles: Dict[HexCoord, Tile]
    placement: PlacementIndex
    win: WinManager
    deck: List[str]
    current_player: int = 0
    round_num: int = 1
    setup_phase: bool = True
    setup_corners: Dict[int, Corner] = field(default_factory=dict)
    starting_grants: Dict[int, Dict[str, int]] = field(default_factory=dict)


class RealmsGame:
    def __init__(
        self,
        players: List[str],
        seed: Optional[int] = None,
        rules: Optional[RulesConfig] = None,
    ):
        config = GameConfig(
            players=[PlayerConfig(name=name) for name in players],
            rules=rules or RulesConfig(),
        )
        self.config = config
        rng = random.Random(seed)
        self.state = GameState(
            players=[Player(name=p.name) for p in config.players],
            rules=config.rules,
            rng=rng,
            tiles=build_board(rng),
            placement=PlacementIndex(),
            win=WinManager(config.rules),
            deck=create_development_deck(rng),
        )
        initialize_victory_points(self.state.players)

    @property
    def players(self) -> List[Player]:
        return self.state.players

    @property
    def game_over(self) -> bool:
        return self.state.win.is_game_won()

    # ── Guards ────────────────────────────────────────────────────────────────

    def _check_actor(self, player_idx: int) -> Tuple[bool, str]:
        if self.game_over:
            return False, "Game is over."
        if player_idx < 0 or player_idx >= len(self.players):
            return False, "Invalid player."
        return True, ""

    def _owned_corners(self, player: Player) -> List[Corner]:
        return [canonical(c) for c in player.settlements + player.cities]

    def _check_wins(self, actor_idx: int) -> None:
        order = [actor_idx] + [i for i in range(len(self.players)) if i != actor_idx]
        self.state.win.check_multiple_win_conditions([self.players[i] for i in order])

    # ── Placement validation ──────────────────────────────────────────────────

    def can_build_settlement(
        self, player_idx: int, corner: Corner, setup: bool = False, free: bool = False
    ) -> Tuple[bool, str]:
        ok, reason = self._check_actor(player_idx)
        if not ok:
            return ok, reason
        if not corner_on_land(corner):
            return False, "Corner is not on land."
        if self.state.placement.is_occupied(corner) or self._corner_taken(corner):
            return False, "Corner is already occupied."
        if self.state.placement.is_blocked_by_distance(corner.q, corner.r, corner.corner, self.players):
            return False, "Distance rule violated (adjacent settlement/city)."
        player = self.players[player_idx]
        if not setup and canonical(corner) not in road_endpoints(player.roads):
            return False, "Settlement must connect to one of your roads."
        if not (free or setup) and not can_afford(player.hand, SETTLEMENT_COST):
            return False, "Not enough resources for settlement."
        return True, ""

    def _corner_taken(self, corner: Corner) -> bool:
        target = canonical(corner)
        return any(target in self._owned_corners(p) for p in self.players)

    def can_build_city(self, player_idx: int, corner: Corner, free: bool = False) -> Tuple[bool, str]:
        ok, reason = self._check_actor(player_idx)
        if not ok:
            return ok, reason
        player = self.players[player_idx]
        if self._find_own_settlement(player, corner) is None:
            return False, "You have no settlement here."
        if not free and not can_afford(player.hand, CITY_COST):
            return False, "Not enough resources for city."
        return True, ""

    def _find_own_settlement(self, player: Player, corner: Corner) -> Optional[Corner]:
        target = canonical(corner)
        for s in player.settlements:
            if canonical(s) == target:
                return s
        return None

    def is_road_occupied(self, road: Edge) -> bool:
        return any(
            same_physical_edge(road, other) for p in self.players for other in p.roads
        )

    def can_build_road(
        self,
        player_idx: int,
        road: Edge,
        setup_corner: Optional[Corner] = None,
        free: bool = False,
    ) -> Tuple[bool, str]:
        ok, reason = self._check_actor(player_idx)
        if not ok:
            return ok, reason
        ends = edge_corners(road)
        if ends is None:
            return False, "Invalid edge."
        nq, nr = neighbor_axial(road.q, road.r, road.edge)
        if not is_land_tile(road.q, road.r) and not is_land_tile(nq, nr):
            return False, "Roads cannot be built on water."
        if self.is_road_occupied(road):
            return False, "Edge already has a road."
        player = self.players[player_idx]
        if setup_corner is not None:
            if corner_touches_road(setup_corner, road):
                return True, ""
            return False, "Setup road must touch the just-placed settlement."
        reachable = road_endpoints(player.roads) | set(self._owned_corners(player))
        if not reachable.intersection(ends):
            return False, "Road must connect to your existing road or building."
        if not free and not can_afford(player.hand, ROAD_COST):
            return False, "Not enough resources for road."
        return True, ""

    # ── Build actions ─────────────────────────────────────────────────────────

    def build_settlement(
        self, player_idx: int, corner: Corner, free: bool = False, setup: Optional[bool] = None
    ) -> Tuple[bool, str]:
        setup = self.state.setup_phase if setup is None else setup
        ok, reason = self.can_build_settlement(player_idx, corner, setup=setup, free=free)
        if not ok:
            logger.info("Settlement refused for player %d: %s", player_idx, reason)
            return False, reason
        player = self.players[player_idx]
        if not (free or setup):
            pay_cost(player.hand, SETTLEMENT_COST)
        player.settlements.append(corner)
        self.state.placement.mark_occupy(
            corner.q, corner.r, corner.corner, SETTLEMENT, player_idx, self.players
        )
        if setup:
            self.state.setup_corners[player_idx] = corner
            if len(player.settlements) == 2:
                self._grant_starting_resources(player_idx, corner)
        refresh_basic_vp(player)
        logger.debug("%s built settlement at %s", player.name, corner)
        self._check_wins(player_idx)
        return True, ""

    def _grant_starting_resources(self, player_idx: int, corner: Corner) -> None:
        gains: Dict[str, int] = {r: 0 for r in RESOURCES}
        for tile in tiles_at_corner(self.state.tiles, corner):
            if tile.resource in gains:
                gains[tile.resource] += 1
        add_resources(self.players[player_idx].hand, gains)
        self.state.starting_grants[player_idx] = gains

    def build_city(self, player_idx: int, corner: Corner, free: bool = False) -> Tuple[bool, str]:
        ok, reason = self.can_build_city(player_idx, corner, free=free)
        if not ok:
            logger.info("City refused for player %d: %s", player_idx, reason)
            return False, reason
        player = self.players[player_idx]
        if not free:
            pay_cost(player.hand, CITY_COST)
        settlement = self._find_own_settlement(player, corner)
        player.settlements.remove(settlement)
        player.cities.append(settlement)
        self.state.placement.mark_occupy(
            settlement.q, settlement.r, settlement.corner, CITY, player_idx, self.players
        )
        refresh_basic_vp(player)
        logger.debug("%s upgraded %s to city", player.name, settlement)
        self._check_wins(player_idx)
        return True, ""

    def build_road(
        self,
        player_idx: int,
        road: Edge,
        free: bool = False,
        setup_corner: Optional[Corner] = None,
    ) -> Tuple[bool, str]:
        if setup_corner is None and self.state.setup_phase:
            setup_corner = self.state.setup_corners.get(player_idx)
            if setup_corner is None:
                return False, "Place a settlement before its road."
        free = free or setup_corner is not None
        ok, reason = self.can_build_road(player_idx, road, setup_corner=setup_corner, free=free)
        if not ok:
            logger.info("Road refused for player %d: %s", player_idx, reason)
            return False, reason
        player = self.players[player_idx]
        if not free:
            pay_cost(player.hand, ROAD_COST)
        player.roads.append(road)
        if self.state.setup_phase:
            self.state.setup_corners.pop(player_idx, None)
        update_longest_road(self.players, self.state.rules)
        logger.debug("%s built road at %s", player.name, road)
        self._check_wins(player_idx)
        return True, ""

    # ── Setup undo ────────────────────────────────────────────────────────────

    def undo_last_road(self, player_idx: int) -> Tuple[bool, str]:
        ok, reason = self._check_actor(player_idx)
        if not ok:
            return ok, reason
        if not self.state.setup_phase:
            return False, "Roads can only be undone during setup."
        player = self.players[player_idx]
        if not player.roads:
            return False, "No road to undo."
        road = player.roads.pop()
        if player.settlements:
            self.state.setup_corners[player_idx] = player.settlements[-1]
        update_longest_road(self.players, self.state.rules)
        logger.debug("%s took back road %s", player.name, road)
        return True, ""

    def undo_last_settlement(self, player_idx: int) -> Tuple[bool, str]:
        ok, reason = self._check_actor(player_idx)
        if not ok:
            return ok, reason
        if not self.state.setup_phase:
            return False, "Settlements can only be undone during setup."
        player = self.players[player_idx]
        if not player.settlements:
            return False, "No settlement to undo."
        corner = player.settlements[-1]
        if any(corner_touches_road(corner, road) for road in player.roads):
            return False, "Undo the road from this settlement first."
        player.settlements.pop()
        if len(player.settlements) == 1 and player_idx in self.state.starting_grants:
            pay_cost(player.hand, self.state.starting_grants.pop(player_idx))
        self.state.placement.unmark_occupy(corner.q, corner.r, corner.corner, self.players)
        self.state.setup_corners.pop(player_idx, None)
        refresh_basic_vp(player)
        logger.debug("%s took back settlement %s", player.name, corner)
        return True, ""

    def finish_setup(self) -> None:
        self.state.setup_phase = False
        self.state.setup_corners.clear()
        self.state.current_player = 0

    # ── Development cards ─────────────────────────────────────────────────────

    def buy_development_card(self, player_idx: int, free: bool = False) -> Tuple[Optional[str], str]:
        ok, reason = self._check_actor(player_idx)
        if not ok:
            return None, reason
        player = self.players[player_idx]
        card, reason = buy_development_card(player, self.state.deck, self.state.rules, free=free)
        if card is not None:
            self._check_wins(player_idx)
        return card, reason

    def play_knight_card(self, player_idx: int) -> Tuple[bool, str]:
        ok, reason = self._check_actor(player_idx)
        if not ok:
            return ok, reason
        player = self.players[player_idx]
        if not take_playable_card(player, KNIGHT):
            return False, "No playable knight card."
        result = process_knight_play(player, self.players, self.state.rules)
        if result.achievement_changed:
            logger.info("%s now holds the largest army", player.name)
        self._check_wins(player_idx)
        return True, ""

    # ── Turns and production ──────────────────────────────────────────────────

    def end_turn(self) -> Tuple[bool, str]:
        if self.game_over:
            return False, "Game is over."
        mature_new_cards(self.players[self.state.current_player])
        self.state.current_player = (self.state.current_player + 1) % len(self.players)
        if self.state.current_player == 0:
            self.state.round_num += 1
        return True, ""

    def distribute_resources(self, roll: int) -> List[Dict[str, int]]:
        gains: List[Dict[str, int]] = [{r: 0 for r in RESOURCES} for _ in self.players]
        for tile in self.state.tiles.values():
            if tile.number != roll or tile.resource == "desert":
                continue
            for c in range(6):
                occ = self.state.placement.occupant(Corner(tile.coord.q, tile.coord.r, c))
                if occ is None:
                    continue
                gains[occ.player_index][tile.resource] += 2 if occ.kind == CITY else 1
        for player, gain in zip(self.players, gains):
            add_resources(player.hand, gain)
            logger.debug("%s after roll %d: %s", player.name, roll, player.hand_str())
        return gains

    # ── Views and lifecycle ───────────────────────────────────────────────────

    def scoreboard(self, viewer_idx: Optional[int] = None) -> List[VictoryPointDisplay]:
        viewer = self.state.current_player if viewer_idx is None else viewer_idx
        return [
            get_victory_points_for_display(p, is_current_player=(i == viewer))
            for i, p in enumerate(self.players)
        ]

    def new_game(self) -> None:
        """Discard every player and start over with the same names and rules."""
        names = [p.name for p in self.players]
        self.state.win.reset(self.players)
        self.state.players = [Player(name=n) for n in names]
        initialize_victory_points(self.state.players)
        self.state.placement.reset()
        self.state.tiles = build_board(self.state.rng)
        self.state.deck = create_development_deck(self.state.rng)
        self.state.current_player = 0
        self.state.round_num = 1
        self.state.setup_phase = True
        self.state.setup_corners.clear()
        self.state.starting_grants.clear()
