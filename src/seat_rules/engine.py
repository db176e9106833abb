"""
Seat booking rules engine.

Wraps one layout snapshot and the occupied seats of a showtime. The booking
session builds it once and calls ``build`` again whenever occupancy changes.
"""
from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Optional, Sequence

from .block import validate_block
from .config import Settings, get_settings
from .exceptions import EngineNotBuilt
from .index import SeatMapIndex, build_index
from .models import Seat, Verdict
from .recommend import SeatPreferences, find_best_seats
from .selection import validate_selection
from .suggestions import suggest

logger = logging.getLogger(__name__)


class SeatRulesEngine:
    """No single seat left behind: selection and block checks over a snapshot."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self.index: Optional[SeatMapIndex] = None
        self.occupied: FrozenSet[str] = frozenset()

    def build(self, seats: Iterable[Seat], occupied: Iterable[str] = ()) -> SeatMapIndex:
        """Index the layout and store the occupied snapshot."""
        self.index = build_index(seats)
        self.occupied = frozenset(occupied)
        logger.debug("Engine built with %d seats, %d occupied", len(self.index), len(self.occupied))
        return self.index

    def _require_index(self) -> SeatMapIndex:
        if self.index is None:
            raise EngineNotBuilt()
        return self.index

    # ----------------------------- operations -----------------------------
    def validate_seat_selection(self, candidate_seat_id: str, current_selection: Sequence[str]) -> Verdict:
        """Can ``candidate_seat_id`` join the current selection?"""
        return validate_selection(
            self._require_index(), self.occupied, current_selection, candidate_seat_id, settings=self.settings
        )

    def can_select_consecutive_seats(self, start_seat_id: str, count: int) -> Verdict:
        """Can ``count`` seats starting at ``start_seat_id`` be taken together?"""
        return validate_block(self._require_index(), self.occupied, start_seat_id, count)

    def suggest(self, current_selection: Sequence[str]) -> List[str]:
        return suggest(self._require_index(), self.occupied, current_selection, limit=self.settings.max_suggestions)

    def recommend(self, count: int, preferences: Optional[SeatPreferences] = None) -> List[str]:
        return find_best_seats(self._require_index(), self.occupied, count, preferences)
