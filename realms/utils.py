# utils.py — Resource helpers and payload adapters

from __future__ import annotations

from typing import Dict, Mapping

from .models import Corner, Edge
from .realms_models import CornerPayload, RoadPayload


def can_afford(hand: Dict[str, int], cost: Dict[str, int]) -> bool:
    return all(hand.get(res, 0) >= amount for res, amount in cost.items())


def pay_cost(hand: Dict[str, int], cost: Dict[str, int]) -> None:
    for res, amount in cost.items():
        hand[res] -= amount


def add_resources(hand: Dict[str, int], gains: Dict[str, int]) -> None:
    for res, amount in gains.items():
        hand[res] = hand.get(res, 0) + amount


# ── Payload validation ────────────────────────────────────────────────────────

def parse_corner(payload: Mapping[str, object]) -> Corner:
    """Validate a raw ``{q, r, corner}`` dict from the UI layer."""
    return CornerPayload.model_validate(payload).to_corner()


def parse_road(payload: Mapping[str, object]) -> Edge:
    """Validate a raw ``{q, r, edge}`` dict from the UI layer."""
    return RoadPayload.model_validate(payload).to_edge()
