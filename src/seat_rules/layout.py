"""Generate sample seat grids for a screening room."""
from __future__ import annotations

from typing import List, Optional, Sequence

from .config import get_settings
from .models import Seat, SeatKind


def row_label(i: int) -> str:
    """0 -> A, 25 -> Z, 26 -> AA."""
    label = ""
    i += 1
    while i:
        i, rem = divmod(i - 1, 26)
        label = chr(65 + rem) + label
    return label


def generate_seat_grid(
    rows: int,
    seats_per_row: Sequence[int] = (),
    width: Optional[int] = None,
) -> List[Seat]:
    """Build a centered layout of ``rows`` rows.

    Each row is padded with hidden positions on both sides so it sits in the
    middle of ``width`` columns. Middle seats of the middle rows are premium,
    and every third inner position of the last row is a couple seat spanning
    two columns. All seats start available.
    """
    settings = get_settings()
    width = settings.grid_width if width is None else width
    seats: List[Seat] = []

    for i in range(rows):
        label = row_label(i)
        in_row = seats_per_row[i] if i < len(seats_per_row) and seats_per_row[i] else settings.default_row_length
        padding = max(0, (width - in_row) // 2)
        quarter = in_row // 4
        last_row = i == rows - 1

        for k in range(padding):
            seats.append(Seat(id=f"{label}-pad-L{k}", row=label, column=k + 1, kind=SeatKind.HIDDEN))

        j = 0
        while j < in_row:
            kind = SeatKind.STANDARD
            if 2 <= i <= rows - 3 and quarter <= j < in_row - quarter:
                kind = SeatKind.PREMIUM
            # edge seats of the back row stay standard
            couple = last_row and j % 3 == 0 and 0 < j < in_row - 1
            if couple:
                kind = SeatKind.COUPLE
            seats.append(Seat(id=f"{label}{j + 1}", row=label, column=padding + j + 1, kind=kind))
            j += 2 if couple else 1

        for k in range(padding):
            seats.append(
                Seat(id=f"{label}-pad-R{k}", row=label, column=padding + in_row + k + 1, kind=SeatKind.HIDDEN)
            )

    return seats
