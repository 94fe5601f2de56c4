"""Strict pydantic models for Resource Realms settings and UI payloads."""

from __future__ import annotations

import logging
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import (
    DEV_CARD_HAND_LIMIT,
    LARGEST_ARMY_VICTORY_POINTS,
    LONGEST_ROAD_VICTORY_POINTS,
    MAX_PLAYERS,
    MIN_KNIGHTS_FOR_LARGEST_ARMY,
    MIN_PLAYERS,
    MIN_ROAD_LENGTH_FOR_LONGEST_ROAD,
    VICTORY_POINTS_TO_WIN,
)
from .models import Corner, Edge

logger = logging.getLogger(__name__)


class RulesConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    victory_points_to_win: int = Field(default=VICTORY_POINTS_TO_WIN, ge=1)
    min_longest_road: int = Field(default=MIN_ROAD_LENGTH_FOR_LONGEST_ROAD, ge=1)
    longest_road_bonus: int = Field(default=LONGEST_ROAD_VICTORY_POINTS, ge=1)
    min_largest_army: int = Field(default=MIN_KNIGHTS_FOR_LARGEST_ARMY, ge=1)
    largest_army_bonus: int = Field(default=LARGEST_ARMY_VICTORY_POINTS, ge=1)
    dev_card_hand_limit: int = Field(default=DEV_CARD_HAND_LIMIT, ge=1)


DEFAULT_RULES = RulesConfig()


class PlayerConfig(BaseModel):
    name: str = Field(min_length=1, max_length=32)


class GameConfig(BaseModel):
    players: List[PlayerConfig] = Field(min_length=MIN_PLAYERS, max_length=MAX_PLAYERS)
    rules: RulesConfig = Field(default_factory=RulesConfig)

    @field_validator("players")
    @classmethod
    def names_must_be_unique(cls, players: List[PlayerConfig]) -> List[PlayerConfig]:
        names = [p.name for p in players]
        if len(set(names)) != len(names):
            raise ValueError("player names must be unique")
        return players


def _fold_index(value: int, field_name: str) -> int:
    if not 0 <= value <= 5:
        logger.warning("%s %d out of range, normalised to %d", field_name, value, value % 6)
    return value % 6


class CornerPayload(BaseModel):
    q: int
    r: int
    corner: int

    @field_validator("corner")
    @classmethod
    def corner_in_range(cls, value: int) -> int:
        return _fold_index(value, "corner")

    def to_corner(self) -> Corner:
        return Corner(self.q, self.r, self.corner)


class RoadPayload(BaseModel):
    q: int
    r: int
    edge: int

    @field_validator("edge")
    @classmethod
    def edge_in_range(cls, value: int) -> int:
        return _fold_index(value, "edge")

    def to_edge(self) -> Edge:
        return Edge(self.q, self.r, self.edge)


class VictoryPointBreakdown(BaseModel):
    settlements: int = 0
    cities: int = 0
    hidden_vp: int = 0
    longest_road: int = 0
    largest_army: int = 0
    total: int = 0
    public: int = 0


class VictoryPointDisplay(BaseModel):
    display: str = "0"
    total: int = 0
    public: int = 0
    hidden: int = 0
