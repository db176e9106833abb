"""Row partitioned lookup structures over a flat seat list."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple

from .exceptions import DuplicateSeatId, UnknownSeat
from .models import Seat, SeatStatus

logger = logging.getLogger(__name__)


class SeatMapIndex:
    """Immutable snapshot of a layout, indexed by id and by row.

    Rows keep the order in which they first appear in the layout and the
    seats of each row are sorted by ``column``. Build a new index whenever the
    layout or seat statuses change; it is never mutated in place.
    """

    __slots__ = ("_by_id", "_by_row", "_positions", "_status_blocked")

    def __init__(self, by_id: Dict[str, Seat], by_row: Dict[str, Tuple[Seat, ...]]) -> None:
        self._by_id = MappingProxyType(by_id)
        self._by_row = MappingProxyType(by_row)
        self._positions: Mapping[str, int] = MappingProxyType(
            {seat.id: i for row_seats in by_row.values() for i, seat in enumerate(row_seats)}
        )
        self._status_blocked: FrozenSet[str] = frozenset(
            seat.id for seat in by_id.values() if seat.status is not SeatStatus.AVAILABLE
        )

    @classmethod
    def build(cls, seats: Iterable[Seat]) -> "SeatMapIndex":
        """Partition ``seats`` by row and sort each row by column.

        Raises ``DuplicateSeatId`` if two seats share an id.
        """
        by_id: Dict[str, Seat] = {}
        rows: Dict[str, List[Seat]] = {}
        for seat in seats:
            if seat.id in by_id:
                raise DuplicateSeatId(seat.id)
            by_id[seat.id] = seat
            rows.setdefault(seat.row, []).append(seat)

        by_row = {label: tuple(sorted(members, key=lambda s: s.column)) for label, members in rows.items()}
        logger.debug("Built seat index for %d seats in %d rows", len(by_id), len(by_row))
        return cls(by_id, by_row)

    # ----------------------------- lookups -----------------------------
    @property
    def by_id(self) -> Mapping[str, Seat]:
        return self._by_id

    @property
    def by_row(self) -> Mapping[str, Tuple[Seat, ...]]:
        return self._by_row

    @property
    def rows(self) -> List[str]:
        return list(self._by_row)

    @property
    def status_blocked(self) -> FrozenSet[str]:
        """Ids of seats whose own status is occupied or maintenance."""
        return self._status_blocked

    def row(self, label: str) -> Tuple[Seat, ...]:
        return self._by_row.get(label, ())

    def get(self, seat_id: str) -> Seat:
        """Return the seat for ``seat_id`` or raise ``UnknownSeat``."""
        try:
            return self._by_id[seat_id]
        except KeyError:
            raise UnknownSeat(seat_id) from None

    def position(self, seat_id: str) -> Tuple[Tuple[Seat, ...], int]:
        """Return the seat's row and its index within that row."""
        seat = self.get(seat_id)
        return self._by_row[seat.row], self._positions[seat_id]

    def neighbors(self, seat_id: str) -> Tuple[Optional[Seat], Optional[Seat]]:
        """Left and right row neighbors, ``None`` at a row boundary."""
        row_seats, i = self.position(seat_id)
        left = row_seats[i - 1] if i > 0 else None
        right = row_seats[i + 1] if i < len(row_seats) - 1 else None
        return left, right

    def seats(self) -> Iterator[Seat]:
        """All seats, row by row in column order."""
        for row_seats in self._by_row.values():
            yield from row_seats

    def __contains__(self, seat_id: object) -> bool:
        return seat_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)


def build_index(seats: Iterable[Seat]) -> SeatMapIndex:
    """Construction and refresh entry point for callers."""
    return SeatMapIndex.build(seats)
