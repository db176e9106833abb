"""Data models for SeatRules."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List
import math


class SeatKind(str, Enum):
    """Physical kind of a layout position."""

    STANDARD = "standard"
    PREMIUM = "premium"
    COUPLE = "couple"
    HIDDEN = "hidden"


class SeatStatus(str, Enum):
    """Occupancy of a seat, independent of the current user's selection."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class Reason(str, Enum):
    """Why a verdict was reached."""

    OK = "ok"
    VIOLATES_ISOLATION_RULE = "violates_isolation_rule"
    SEAT_UNAVAILABLE = "seat_unavailable"
    INSUFFICIENT_RUN = "insufficient_run"


_KIND_ALIASES = {
    "standard": SeatKind.STANDARD,
    "regular": SeatKind.STANDARD,
    "economy": SeatKind.STANDARD,
    "premium": SeatKind.PREMIUM,
    "vip": SeatKind.PREMIUM,
    "couple": SeatKind.COUPLE,
    "hidden": SeatKind.HIDDEN,
}


def _is_blank(value: object) -> bool:
    """``None``, empty strings and pandas ``nan`` all count as blank."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    text = str(value).strip()
    return not text or text.lower() == "nan"


def parse_bool(value: object, default: bool = False) -> bool:
    """Parse common truthy strings into bool."""
    if _is_blank(value):
        return default
    return str(value).strip().lower() in {"true", "1", "yes", "y"}


def parse_kind(value: object) -> SeatKind:
    """Parse a seat kind, accepting the layout editor's aliases.

    Blank values map to ``standard``. Unknown names raise ``ValueError``.
    """
    if isinstance(value, SeatKind):
        return value
    if _is_blank(value):
        return SeatKind.STANDARD
    key = str(value).strip().lower()
    try:
        return _KIND_ALIASES[key]
    except KeyError:
        raise ValueError(f"Unknown seat kind: {value}") from None


# Booking UI states. ``selecting`` is another user's hold, ``selected`` is
# the current user's pick which arrives separately as the selection.
_STATUS_ALIASES = {
    "blocked": SeatStatus.MAINTENANCE,
    "selecting": SeatStatus.OCCUPIED,
    "selected": SeatStatus.AVAILABLE,
    "hidden": SeatStatus.AVAILABLE,
}


def is_hidden_status(value: object) -> bool:
    """True when a layout marks a structural gap through its status."""
    return not _is_blank(value) and str(value).strip().lower() == "hidden"


def parse_status(value: object) -> SeatStatus:
    """Parse a seat status. Blank values map to ``available``.

    A ``hidden`` status parses as ``available``; callers turn it into a
    hidden kind with ``is_hidden_status``. Unknown names raise ``ValueError``.
    """
    if isinstance(value, SeatStatus):
        return value
    if _is_blank(value):
        return SeatStatus.AVAILABLE
    key = str(value).strip().lower()
    if key in _STATUS_ALIASES:
        return _STATUS_ALIASES[key]
    try:
        return SeatStatus(key)
    except ValueError:
        raise ValueError(f"Unknown seat status: {value}") from None


@dataclass(frozen=True)
class Seat:
    """A single position in a venue row."""

    id: str
    row: str
    column: int
    kind: SeatKind = SeatKind.STANDARD
    status: SeatStatus = SeatStatus.AVAILABLE

    @property
    def is_hidden(self) -> bool:
        return self.kind is SeatKind.HIDDEN

    @property
    def is_purchasable(self) -> bool:
        return not self.is_hidden and self.status is SeatStatus.AVAILABLE


@dataclass
class Verdict:
    """Outcome of a validation call.

    ``reason`` is a stable machine code, ``message`` is meant for display.
    Only ``violates_isolation_rule`` verdicts carry suggestions and only
    successful block checks carry ``seat_ids``.
    """

    valid: bool
    reason: Reason
    message: str = ""
    violating_seats: List[str] = field(default_factory=list)
    suggested_seats: List[str] = field(default_factory=list)
    seat_ids: List[str] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict, leaving out empty optional fields."""
        result: Dict[str, Any] = {
            "valid": self.valid,
            "reason": self.reason.value,
            "message": self.message,
        }
        if self.violating_seats:
            result["violating_seats"] = list(self.violating_seats)
        if self.suggested_seats:
            result["suggested_seats"] = list(self.suggested_seats)
        if self.seat_ids:
            result["seat_ids"] = list(self.seat_ids)
        if self.details:
            result["details"] = dict(self.details)
        return result
