"""CSV loading utilities."""
from __future__ import annotations

from pathlib import Path
from typing import IO, Any, FrozenSet, Iterable, List, Optional, Tuple, Union

import pandas as pd

from .models import Seat, SeatKind, is_hidden_status, parse_bool, parse_kind, parse_status

PathOrBuffer = Union[Path, str, IO[Any]]


def load_seats(path: PathOrBuffer) -> List[Seat]:
    """Load a layout from ``seats.csv``.

    Required columns are ``id``, ``row`` and ``column``. ``kind`` and
    ``status`` are optional. Rows with ``is_active`` set to false or with a
    ``hidden`` status are loaded as hidden positions.
    """
    df = pd.read_csv(path, dtype={"id": str, "row": str})
    missing = [col for col in ("id", "row", "column") if col not in df.columns]
    if missing:
        raise ValueError(f"Layout is missing columns: {', '.join(missing)}")

    seats: List[Seat] = []
    for _, row in df.iterrows():
        kind = parse_kind(row.get("kind", ""))
        status = row.get("status", "")
        if not parse_bool(row.get("is_active", "true"), default=True) or is_hidden_status(status):
            kind = SeatKind.HIDDEN
        seats.append(
            Seat(
                id=str(row["id"]).strip(),
                row=str(row["row"]).strip(),
                column=int(row["column"]),
                kind=kind,
                status=parse_status(status),
            )
        )
    return seats


def load_occupied(path: PathOrBuffer, seat_ids: Optional[Iterable[str]] = None) -> FrozenSet[str]:
    """Load occupied seat ids from a CSV with a ``seat_id`` column.

    If ``seat_ids`` is provided it validates that every id exists.
    """
    df = pd.read_csv(path, dtype={"seat_id": str})
    if "seat_id" not in df.columns:
        raise ValueError("Occupied seats file is missing column: seat_id")
    occupied = frozenset(str(v).strip() for v in df["seat_id"].dropna())
    if seat_ids is not None:
        unknown = sorted(occupied - set(seat_ids))
        if unknown:
            raise ValueError(f"Occupied seats not in layout: {', '.join(unknown)}")
    return occupied


def load_all(seats_path: PathOrBuffer, occupied_path: Optional[PathOrBuffer] = None) -> Tuple[List[Seat], FrozenSet[str]]:
    """Convenience wrapper returning the layout and occupied ids."""
    seats = load_seats(seats_path)
    if occupied_path is None:
        return seats, frozenset()
    return seats, load_occupied(occupied_path, {s.id for s in seats})


def write_seats(seats: Iterable[Seat], path: Path | str) -> None:
    """Write a layout in the format ``load_seats`` reads."""
    df = pd.DataFrame(
        [
            {"id": s.id, "row": s.row, "column": s.column, "kind": s.kind.value, "status": s.status.value}
            for s in seats
        ],
        columns=["id", "row", "column", "kind", "status"],
    )
    df.to_csv(path, index=False)
