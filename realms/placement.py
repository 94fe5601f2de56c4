# placement.py — Occupancy index for settlement/city distance-rule checks

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .constants import CITY, SETTLEMENT
from .geometry import canonical_corner, equivalent_corners, neighbor_corner
from .models import Corner, Occupant, Player

logger = logging.getLogger(__name__)


class PlacementIndex:
    """Map from canonical corner to the structure standing on it.

    The index is built lazily from the player list on first use and then kept
    current with :meth:`mark_occupy` / :meth:`unmark_occupy`.
    """

    def __init__(self) -> None:
        self._occupied: Dict[Corner, Occupant] = {}
        self._initialized = False

    def __len__(self) -> int:
        return len(self._occupied)

    def build_index_from_players(self, players: Sequence[Player]) -> None:
        self._occupied.clear()
        for pi, player in enumerate(players):
            for s in player.settlements:
                self._occupied[canonical_corner(s.q, s.r, s.corner)] = Occupant(SETTLEMENT, pi)
            for c in player.cities:
                self._occupied[canonical_corner(c.q, c.r, c.corner)] = Occupant(CITY, pi)
        self._initialized = True
        logger.debug("Placement index rebuilt: %d structures", len(self._occupied))

    def ensure(self, players: Sequence[Player]) -> None:
        if not self._initialized:
            self.build_index_from_players(players)

    def reset(self) -> None:
        self._occupied.clear()
        self._initialized = False

    def mark_occupy(
        self,
        q: int,
        r: int,
        corner: int,
        kind: str,
        player_index: int,
        players: Sequence[Player],
    ) -> None:
        self.ensure(players)
        self._occupied[canonical_corner(q, r, corner)] = Occupant(kind, player_index)

    def unmark_occupy(self, q: int, r: int, corner: int, players: Sequence[Player]) -> None:
        self.ensure(players)
        self._occupied.pop(canonical_corner(q, r, corner), None)

    def occupant(self, corner: Corner) -> Optional[Occupant]:
        return self._occupied.get(canonical_corner(corner.q, corner.r, corner.corner))

    def is_occupied(self, corner: Corner) -> bool:
        return self.occupant(corner) is not None

    def is_blocked_by_distance(
        self,
        q: int,
        r: int,
        corner: int,
        players: Sequence[Player],
        collect: Optional[List[dict]] = None,
    ) -> bool:
        """True if the vertex or any vertex one edge away is occupied.

        When *collect* is given, the reason (``"same"`` or ``"adjacent"``) and
        the blocking occupant are appended to it.
        """
        self.ensure(players)
        canon = canonical_corner(q, r, corner)
        blocker = self._occupied.get(canon)
        if blocker is not None:
            if collect is not None:
                collect.append({"type": "same", "blocker": blocker})
            return True

        for eq in equivalent_corners(q, r, corner):
            for ac in ((eq.corner + 5) % 6, (eq.corner + 1) % 6):
                blocker = self._occupied.get(canonical_corner(eq.q, eq.r, ac))
                if blocker is not None:
                    if collect is not None:
                        collect.append({"type": "adjacent", "blocker": blocker})
                    return True
            # Corners meeting the shared edge on the neighbouring tile.
            nb = neighbor_corner(eq.q, eq.r, eq.corner)
            for nc in ((nb.corner + 1) % 6, (nb.corner + 5) % 6):
                blocker = self._occupied.get(canonical_corner(nb.q, nb.r, nc))
                if blocker is not None:
                    if collect is not None:
                        collect.append({"type": "adjacent", "blocker": blocker})
                    return True
        return False
