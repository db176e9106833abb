import pathlib
import sys

import pytest

# Ensure src package is on path
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from seat_rules.index import SeatMapIndex
from seat_rules.models import Seat


@pytest.fixture
def make_row():
    """Factory for a row of plain seats ``<row>1..<row>n`` in columns 1..n."""

    def _make(row: str, n: int, **overrides):
        seats = []
        for i in range(1, n + 1):
            seat_id = f"{row}{i}"
            kwargs = overrides.get(seat_id, {})
            seats.append(Seat(id=seat_id, row=row, column=i, **kwargs))
        return seats

    return _make


@pytest.fixture
def row_of_five(make_row):
    return SeatMapIndex.build(make_row("A", 5))


@pytest.fixture
def row_of_six(make_row):
    return SeatMapIndex.build(make_row("A", 6))
