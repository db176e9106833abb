"""Alternative seats offered when a selection is rejected."""
from __future__ import annotations

import logging
from typing import AbstractSet, List, Optional, Sequence

from .config import get_settings
from .index import SeatMapIndex
from .scanner import find_isolated, is_blocking

logger = logging.getLogger(__name__)


def suggest(
    index: SeatMapIndex,
    occupied: AbstractSet[str],
    current_selection: Sequence[str],
    limit: Optional[int] = None,
) -> List[str]:
    """Return neighbors of the current selection that are safe to add.

    Each selected seat contributes its left then right neighbor, in selection
    order. A neighbor qualifies when it is free and adding it strands no seat.
    """
    if limit is None:
        limit = get_settings().max_suggestions

    selected = set(current_selection)
    unavailable = selected | set(occupied) | index.status_blocked
    suggestions: List[str] = []

    for seat_id in current_selection:
        if seat_id not in index:
            continue
        for neighbor in index.neighbors(seat_id):
            # also rejects hidden seats and the row boundary
            if is_blocking(neighbor, unavailable) or neighbor.id in suggestions:
                continue
            if not find_isolated(index, unavailable | {neighbor.id}):
                suggestions.append(neighbor.id)

    logger.debug("Suggested seats for [%s]: [%s]", ", ".join(current_selection), ", ".join(suggestions))
    return suggestions[:limit]
