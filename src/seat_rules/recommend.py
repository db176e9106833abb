"""
Best seat recommendation.

Scoring for each purchasable seat:
    center of the row:   +2 per position closer to the middle
    middle rows:         +3 per row closer to the middle row
    front two rows:      -50 when avoided
    back two rows:       -30 when avoided
    premium seat:        +20
The highest scoring seat that can start a valid consecutive block wins.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Dict, List, Optional, Tuple

from .block import validate_block
from .index import SeatMapIndex
from .models import Seat, SeatKind

logger = logging.getLogger(__name__)


@dataclass
class SeatPreferences:
    """Where in the room the customer would like to sit."""

    prefer_center: bool = True
    prefer_middle_rows: bool = True
    avoid_front_rows: bool = True
    avoid_back_rows: bool = False


def score_seat(index: SeatMapIndex, seat: Seat, preferences: SeatPreferences) -> int:
    """Score a single seat against ``preferences``. Higher is better."""
    rows = index.rows
    row_index = rows.index(seat.row)
    total_rows = len(rows)
    row_seats, position = index.position(seat.id)
    seats_in_row = len(row_seats)

    score = 0
    if preferences.prefer_center:
        center = seats_in_row // 2
        score += (seats_in_row - abs(position - center)) * 2
    if preferences.prefer_middle_rows:
        middle_row = total_rows // 2
        score += (total_rows - abs(row_index - middle_row)) * 3
    if preferences.avoid_front_rows and row_index < 2:
        score -= 50
    if preferences.avoid_back_rows and row_index > total_rows - 3:
        score -= 30
    if seat.kind is SeatKind.PREMIUM:
        score += 20
    return score


def find_best_seats(
    index: SeatMapIndex,
    occupied: AbstractSet[str],
    count: int,
    preferences: Optional[SeatPreferences] = None,
) -> List[str]:
    """Recommend ``count`` seats, preferring one consecutive block.

    Falls back to the best individual seats when no block fits, and returns
    an empty list when fewer than ``count`` seats are free.
    """
    preferences = preferences or SeatPreferences()
    free = [s for s in index.seats() if s.is_purchasable and s.id not in occupied]
    if count < 1 or len(free) < count:
        return []

    order: Dict[str, int] = {s.id: i for i, s in enumerate(free)}
    scored: List[Tuple[int, Seat]] = [(score_seat(index, s, preferences), s) for s in free]
    scored.sort(key=lambda item: (-item[0], order[item[1].id]))

    for _, seat in scored:
        verdict = validate_block(index, occupied, seat.id, count)
        if verdict.valid:
            logger.debug("Recommended block %s", ", ".join(verdict.seat_ids))
            return verdict.seat_ids

    logger.debug("No consecutive block of %d found, falling back to individual seats", count)
    return [seat.id for _, seat in scored[:count]]
