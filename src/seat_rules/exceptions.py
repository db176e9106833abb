"""
Exceptions raised by SeatRules.

Only caller contract violations are raised. Business rule outcomes such as a
stranded seat or a too-short run come back as a ``Verdict``.
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for hard failures."""

    UNKNOWN_SEAT = "UNKNOWN_SEAT"
    DUPLICATE_SEAT_ID = "DUPLICATE_SEAT_ID"
    ENGINE_NOT_BUILT = "ENGINE_NOT_BUILT"
    INVALID_INPUT = "INVALID_INPUT"


class SeatRulesError(Exception):
    """Base exception class for SeatRules."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for the booking UI."""
        result = {
            "error_code": self.error_code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class UnknownSeat(SeatRulesError, KeyError):
    """A seat id referenced by the caller is not part of the layout."""

    def __init__(self, seat_id: str):
        super().__init__(
            f"Seat {seat_id} does not exist in this layout",
            error_code=ErrorCode.UNKNOWN_SEAT,
            details={"seat_id": seat_id},
        )
        self.seat_id = seat_id

    def __str__(self) -> str:
        return self.message


class DuplicateSeatId(SeatRulesError, ValueError):
    """Two seats in a layout share the same id."""

    def __init__(self, seat_id: str):
        super().__init__(
            f"Seat id {seat_id} appears more than once in the layout",
            error_code=ErrorCode.DUPLICATE_SEAT_ID,
            details={"seat_id": seat_id},
        )
        self.seat_id = seat_id


class EngineNotBuilt(SeatRulesError, RuntimeError):
    """An engine operation was called before ``build``."""

    def __init__(self):
        super().__init__(
            "Seat map has not been built yet, call build() first",
            error_code=ErrorCode.ENGINE_NOT_BUILT,
        )
