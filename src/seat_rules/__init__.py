"""SeatRules package."""
from .models import Seat, SeatKind, SeatStatus, Reason, Verdict
from .exceptions import SeatRulesError, UnknownSeat, DuplicateSeatId, EngineNotBuilt
from .index import SeatMapIndex, build_index
from .scanner import find_isolated, is_blocking
from .selection import validate_selection
from .block import validate_block
from .suggestions import suggest
from .recommend import SeatPreferences, find_best_seats
from .layout import generate_seat_grid
from .csv_loader import load_seats, load_occupied, load_all
from .engine import SeatRulesEngine

__all__ = [
    "Seat",
    "SeatKind",
    "SeatStatus",
    "Reason",
    "Verdict",
    "SeatRulesError",
    "UnknownSeat",
    "DuplicateSeatId",
    "EngineNotBuilt",
    "SeatMapIndex",
    "build_index",
    "find_isolated",
    "is_blocking",
    "validate_selection",
    "validate_block",
    "suggest",
    "SeatPreferences",
    "find_best_seats",
    "generate_seat_grid",
    "load_seats",
    "load_occupied",
    "load_all",
    "SeatRulesEngine",
]
