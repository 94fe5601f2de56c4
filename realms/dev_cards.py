# dev_cards.py — Development card deck and purchase

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from .constants import DEV_CARD_COST, DEV_CARD_COUNTS
from .models import Player
from .realms_models import DEFAULT_RULES, RulesConfig
from .utils import can_afford, pay_cost
from .victory_points import add_victory_point_card

logger = logging.getLogger(__name__)

KNIGHT = "knight"
VICTORY_POINT = "victory_point"


def create_development_deck(rng: random.Random) -> List[str]:
    deck: List[str] = []
    for card, count in DEV_CARD_COUNTS.items():
        deck.extend([card] * count)
    rng.shuffle(deck)
    return deck


def held_card_count(player: Player) -> int:
    return len(player.development_cards) + len(player.new_development_cards)


def can_buy_development_card(
    player: Player, deck: List[str], rules: RulesConfig = DEFAULT_RULES, free: bool = False
) -> Tuple[bool, str]:
    if not deck:
        return False, "No development cards left."
    if held_card_count(player) >= rules.dev_card_hand_limit:
        return False, f"Development card limit reached ({rules.dev_card_hand_limit})."
    if not free and not can_afford(player.hand, DEV_CARD_COST):
        return False, "Not enough resources for development card."
    return True, ""


def buy_development_card(
    player: Player, deck: List[str], rules: RulesConfig = DEFAULT_RULES, free: bool = False
) -> Tuple[Optional[str], str]:
    """Draw a card into the player's new cards. Returns (card, reason)."""
    ok, reason = can_buy_development_card(player, deck, rules, free=free)
    if not ok:
        return None, reason
    if not free:
        pay_cost(player.hand, DEV_CARD_COST)
    card = deck.pop()
    player.new_development_cards.append(card)
    if card == VICTORY_POINT:
        add_victory_point_card(player)
    logger.debug("%s bought %s (%d left)", player.name, card, len(deck))
    return card, ""


def mature_new_cards(player: Player) -> None:
    """Cards bought this turn become playable next turn."""
    player.development_cards.extend(player.new_development_cards)
    player.new_development_cards.clear()


def take_playable_card(player: Player, card: str) -> bool:
    if card not in player.development_cards:
        return False
    player.development_cards.remove(card)
    return True
