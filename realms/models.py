# models.py — Dataclasses for Resource Realms game entities

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .constants import RESOURCES


@dataclass(frozen=True, order=True)
class HexCoord:
    q: int
    r: int


@dataclass(frozen=True, order=True)
class Corner:
    """A vertex of tile (q, r). Ordering is (q, r, corner)."""

    q: int
    r: int
    corner: int

    @property
    def tile(self) -> HexCoord:
        return HexCoord(self.q, self.r)


@dataclass(frozen=True, order=True)
class Edge:
    """An edge of tile (q, r); a road segment when owned by a player."""

    q: int
    r: int
    edge: int

    @property
    def tile(self) -> HexCoord:
        return HexCoord(self.q, self.r)


@dataclass(frozen=True)
class Occupant:
    kind: str
    player_index: int


@dataclass
class VictoryPoints:
    settlements: int = 0
    cities: int = 0
    hidden_vp: int = 0
    longest_road: int = 0
    largest_army: int = 0


@dataclass(eq=False)
class Player:
    name: str
    settlements: List[Corner] = field(default_factory=list)
    cities: List[Corner] = field(default_factory=list)
    roads: List[Edge] = field(default_factory=list)
    knights_played: int = 0
    victory_points: Optional[VictoryPoints] = None
    longest_road_length: int = 0
    hand: Dict[str, int] = field(default_factory=lambda: {r: 0 for r in RESOURCES})
    development_cards: List[str] = field(default_factory=list)
    new_development_cards: List[str] = field(default_factory=list)

    @property
    def resource_count(self) -> int:
        return sum(self.hand.values())

    def hand_str(self) -> str:
        return ", ".join(f"{r}:{self.hand[r]}" for r in RESOURCES)


@dataclass
class Tile:
    coord: HexCoord
    resource: str
    number: Optional[int]


def ensure_victory_points(player: Player) -> VictoryPoints:
    """Return the player's VP record, creating it on first access."""
    if player.victory_points is None:
        player.victory_points = VictoryPoints()
    return player.victory_points
