# win.py — One-shot win detection

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union

from .models import Player, ensure_victory_points
from .realms_models import DEFAULT_RULES, RulesConfig
from .victory_points import (
    calculate_public_victory_points,
    calculate_victory_points,
    hidden_vp,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotWon:
    pass


@dataclass(frozen=True)
class Won:
    winner: Player
    total_vp: int


WinState = Union[NotWon, Won]


@dataclass
class GameWonEvent:
    winner: Player
    total_vp: int
    public_vp: int
    hidden_vp: int
    cleanup: Callable[[], None]


WinListener = Callable[[GameWonEvent], None]


class WinManager:
    """NotWon -> Won(winner). Terminal until :meth:`reset`.

    Only the first player to reach the threshold wins; any later check is a
    no-op.
    """

    def __init__(self, rules: RulesConfig = DEFAULT_RULES) -> None:
        self.rules = rules
        self.state: WinState = NotWon()
        self._winner_callback: Optional[Callable[[Player, int], None]] = None
        self._listeners: List[WinListener] = []

    @property
    def winner(self) -> Optional[Player]:
        return self.state.winner if isinstance(self.state, Won) else None

    def is_game_won(self) -> bool:
        return isinstance(self.state, Won)

    def set_winner_callback(self, callback: Optional[Callable[[Player, int], None]]) -> None:
        self._winner_callback = callback

    def subscribe(self, listener: WinListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: WinListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def check_win_condition(self, player: Optional[Player]) -> bool:
        if self.is_game_won():
            logger.debug("Game already won, ignoring win check")
            return False
        if player is None:
            return False
        total = calculate_victory_points(player, include_hidden=True)
        logger.debug("Win check for %s: %d/%d", player.name, total, self.rules.victory_points_to_win)
        if total < self.rules.victory_points_to_win:
            return False
        self.state = Won(winner=player, total_vp=total)
        logger.info("%s wins with %d victory points", player.name, total)
        self._trigger_game_win(player, total)
        return True

    def check_multiple_win_conditions(self, players: Sequence[Player]) -> Optional[Player]:
        for p in players:
            if self.check_win_condition(p):
                return p
        return None

    def _trigger_game_win(self, winner: Player, total: int) -> None:
        if self._winner_callback is not None:
            self._winner_callback(winner, total)
        event = GameWonEvent(
            winner=winner,
            total_vp=total,
            public_vp=calculate_public_victory_points(winner),
            hidden_vp=hidden_vp(winner),
            cleanup=self.reset,
        )
        for listener in list(self._listeners):
            listener(event)

    def reset(self, players: Optional[Sequence[Player]] = None) -> None:
        """Back to NotWon; with *players*, also clear achievement caches."""
        self.state = NotWon()
        for p in players or ():
            vp = ensure_victory_points(p)
            vp.longest_road = 0
            vp.largest_army = 0
            p.longest_road_length = 0
        logger.debug("Win state reset")
