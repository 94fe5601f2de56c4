"""Resource Realms: hex-grid topology and victory-point scoring core."""

from .achievements import (
    calculate_longest_road,
    play_knight,
    update_largest_army,
    update_longest_road,
)
from .game import GameState, RealmsGame
from .geometry import (
    canonical_corner,
    equivalent_corners,
    neighbor_axial,
    neighbor_corner,
    same_physical_corner,
)
from .log import configure_logging
from .models import Corner, Edge, HexCoord, Player
from .placement import PlacementIndex
from .victory_points import calculate_victory_points, get_victory_points_for_display
from .win import GameWonEvent, WinManager

__all__ = [
    "Corner",
    "Edge",
    "GameState",
    "GameWonEvent",
    "HexCoord",
    "PlacementIndex",
    "Player",
    "RealmsGame",
    "WinManager",
    "calculate_longest_road",
    "calculate_victory_points",
    "canonical_corner",
    "configure_logging",
    "equivalent_corners",
    "get_victory_points_for_display",
    "neighbor_axial",
    "neighbor_corner",
    "play_knight",
    "same_physical_corner",
    "update_largest_army",
    "update_longest_road",
]
