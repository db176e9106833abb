"""
Isolated seat detection.

A seat is isolated (stranded) when it is still sellable but both of its row
neighbors are blocking. A row boundary is blocking, so an edge seat is
stranded as soon as its single real neighbor is taken.
"""
from __future__ import annotations

import logging
from typing import AbstractSet, List, Optional, Sequence

from .index import SeatMapIndex
from .models import Seat

logger = logging.getLogger(__name__)


def is_blocking(seat: Optional[Seat], unavailable: AbstractSet[str]) -> bool:
    """Return True if ``seat`` cannot act as a sellable neighbor.

    ``None`` stands for the row boundary.
    """
    if seat is None:
        return True
    return seat.id in unavailable or seat.is_hidden


def find_isolated_in_row(row_seats: Sequence[Seat], unavailable: AbstractSet[str]) -> List[Seat]:
    """Return the stranded seats of a single column ordered row."""
    isolated: List[Seat] = []
    last = len(row_seats) - 1
    for i, seat in enumerate(row_seats):
        if seat.id in unavailable or seat.is_hidden:
            continue
        left = row_seats[i - 1] if i > 0 else None
        right = row_seats[i + 1] if i < last else None
        if is_blocking(left, unavailable) and is_blocking(right, unavailable):
            isolated.append(seat)
    return isolated


def find_isolated(index: SeatMapIndex, unavailable: AbstractSet[str]) -> List[Seat]:
    """Scan every row and return all stranded seats in layout order."""
    isolated: List[Seat] = []
    for label, row_seats in index.by_row.items():
        found = find_isolated_in_row(row_seats, unavailable)
        if found:
            logger.debug("Row %s has isolated seats: %s", label, ", ".join(s.id for s in found))
            isolated.extend(found)
    return isolated
