"""Single seat selection checks."""
from __future__ import annotations

import logging
from typing import AbstractSet, Optional, Sequence

from .config import Settings, get_settings
from .index import SeatMapIndex
from .models import Reason, Verdict
from .scanner import find_isolated
from .suggestions import suggest

logger = logging.getLogger(__name__)


def validate_selection(
    index: SeatMapIndex,
    occupied: AbstractSet[str],
    current_selection: Sequence[str],
    candidate: str,
    settings: Optional[Settings] = None,
) -> Verdict:
    """Check whether adding ``candidate`` to the selection strands any seat.

    Raises ``UnknownSeat`` when the candidate or a selected id is not in the
    layout. Nothing is mutated; committing the seat is up to the caller.
    """
    settings = settings or get_settings()
    seat = index.get(candidate)
    for seat_id in current_selection:
        index.get(seat_id)

    blocked = set(occupied) | index.status_blocked
    if seat.is_hidden or candidate in blocked:
        logger.info("Seat %s is not available for selection", candidate)
        return Verdict(
            valid=False,
            reason=Reason.SEAT_UNAVAILABLE,
            message=f"Seat {candidate} is not available",
            details={"seat_id": candidate},
        )

    trial = list(current_selection)
    if candidate not in trial:
        trial.append(candidate)
    isolated = find_isolated(index, set(trial) | blocked)

    if isolated:
        violating = [s.id for s in isolated]
        logger.info("Selecting %s would strand seats: %s", candidate, ", ".join(violating))
        return Verdict(
            valid=False,
            reason=Reason.VIOLATES_ISOLATION_RULE,
            message=(
                f"Selecting seat {candidate} would leave single seats ({', '.join(violating)}). "
                "Please choose another seat so no single seat is left empty."
            ),
            violating_seats=violating,
            suggested_seats=suggest(index, occupied, current_selection, limit=settings.max_suggestions),
        )

    logger.debug("Seat %s accepted with selection [%s]", candidate, ", ".join(current_selection))
    return Verdict(valid=True, reason=Reason.OK, message="Seat selection is valid")
