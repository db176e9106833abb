"""Consecutive block checks."""
from __future__ import annotations

import logging
from typing import AbstractSet, List

from .index import SeatMapIndex
from .models import Reason, SeatStatus, Verdict
from .scanner import find_isolated

logger = logging.getLogger(__name__)


def validate_block(
    index: SeatMapIndex,
    occupied: AbstractSet[str],
    start_seat_id: str,
    count: int,
) -> Verdict:
    """Check a run of ``count`` seats starting at ``start_seat_id``.

    The run extends to the right in column order. On success the verdict's
    ``seat_ids`` lists the seats to reserve.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    row_seats, start = index.position(start_seat_id)
    if start + count > len(row_seats):
        return Verdict(
            valid=False,
            reason=Reason.INSUFFICIENT_RUN,
            message=f"Not enough consecutive seats in row {row_seats[start].row}",
            details={"requested": count, "remaining": len(row_seats) - start},
        )

    collected: List[str] = []
    for seat in row_seats[start:start + count]:
        if seat.id in occupied or seat.is_hidden or seat.status is not SeatStatus.AVAILABLE:
            return Verdict(
                valid=False,
                reason=Reason.SEAT_UNAVAILABLE,
                message=f"Seat {seat.id} is not available",
                details={"seat_id": seat.id},
            )
        collected.append(seat.id)

    isolated = find_isolated(index, set(collected) | set(occupied) | index.status_blocked)
    if isolated:
        violating = [s.id for s in isolated]
        logger.info("Block %s+%d would strand seats: %s", start_seat_id, count, ", ".join(violating))
        return Verdict(
            valid=False,
            reason=Reason.VIOLATES_ISOLATION_RULE,
            message=f"This block would leave single seats ({', '.join(violating)})",
            violating_seats=violating,
        )

    return Verdict(
        valid=True,
        reason=Reason.OK,
        message="This group of seats can be selected",
        seat_ids=collected,
    )
