"""Command line interface for SeatRules."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .csv_loader import load_all, write_seats
from .engine import SeatRulesEngine
from .exceptions import ErrorCode, SeatRulesError
from .layout import generate_seat_grid
from .logging_config import setup_logging
from .models import Verdict
from .recommend import SeatPreferences

logger = logging.getLogger(__name__)


def _add_layout_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--layout", required=True, type=Path, help="Path to seats.csv")
    parser.add_argument("--occupied", type=Path, help="Path to occupied.csv with a seat_id column.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seat selection rules: never leave a single seat behind")
    parser.add_argument("--log-level", default=None, help="Logging level, defaults to SEAT_RULES_LOG_LEVEL.")
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Check adding one seat to a selection.")
    _add_layout_args(validate)
    validate.add_argument("--seat", required=True, help="Candidate seat id.")
    validate.add_argument("--selected", nargs="*", default=[],
                          help="Seats already in the selection, in selection order.")

    block = sub.add_parser("block", help="Check a consecutive block of seats.")
    _add_layout_args(block)
    block.add_argument("--start", required=True, help="First seat of the block.")
    block.add_argument("--count", required=True, type=int, help="Number of seats.")

    recommend = sub.add_parser("recommend", help="Recommend the best available seats.")
    _add_layout_args(recommend)
    recommend.add_argument("--count", required=True, type=int, help="Number of seats.")
    recommend.add_argument("--no-center", action="store_true", help="Do not prefer the middle of a row.")
    recommend.add_argument("--no-middle-rows", action="store_true", help="Do not prefer middle rows.")
    recommend.add_argument("--allow-front-rows", action="store_true", help="Do not penalize the two front rows.")
    recommend.add_argument("--avoid-back-rows", action="store_true", help="Penalize the two back rows.")

    grid = sub.add_parser("grid", help="Write a generated sample layout CSV.")
    grid.add_argument("--rows", required=True, type=int, help="Number of rows.")
    grid.add_argument("--seats-per-row", nargs="*", type=int, default=[],
                      help="Seats in each row, front to back.")
    grid.add_argument("--width", type=int, default=None, help="Total columns per row including padding.")
    grid.add_argument("--out", required=True, type=Path, help="Where to write the layout CSV.")
    return parser


def print_verdict(verdict: Verdict) -> None:
    for key, value in verdict.to_dict().items():
        if isinstance(value, list):
            value = "|".join(value)
        print(f"{key}={value}")


def _load_engine(args: argparse.Namespace) -> SeatRulesEngine:
    seats, occupied = load_all(args.layout, args.occupied)
    engine = SeatRulesEngine()
    engine.build(seats, occupied)
    return engine


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by ``python -m seat_rules.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "grid":
        seats = generate_seat_grid(args.rows, args.seats_per_row, args.width)
        args.out.parent.mkdir(parents=True, exist_ok=True)
        write_seats(seats, args.out)
        print(f"Wrote {len(seats)} positions to {args.out}")
        return 0

    try:
        engine = _load_engine(args)
        if args.command == "validate":
            verdict = engine.validate_seat_selection(args.seat, args.selected)
        elif args.command == "block":
            verdict = engine.can_select_consecutive_seats(args.start, args.count)
        else:
            preferences = SeatPreferences(
                prefer_center=not args.no_center,
                prefer_middle_rows=not args.no_middle_rows,
                avoid_front_rows=not args.allow_front_rows,
                avoid_back_rows=args.avoid_back_rows,
            )
            seat_ids = engine.recommend(args.count, preferences)
            print("|".join(seat_ids))
            return 0 if seat_ids else 1
    except SeatRulesError as exc:
        logger.error("%s", exc.message)
        print(f"error={exc.error_code.value}")
        return 2
    except ValueError as exc:
        # malformed CSV input or a non-positive --count
        logger.error("%s", exc)
        print(f"error={ErrorCode.INVALID_INPUT.value}")
        return 2

    print_verdict(verdict)
    return 0 if verdict.valid else 1


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
