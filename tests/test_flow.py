import io
import pathlib

import pytest

from seat_rules import cli, csv_loader
from seat_rules.engine import SeatRulesEngine
from seat_rules.models import Reason, SeatKind, SeatStatus

DATA_DIR = pathlib.Path(__file__).parent / "data"
SEATS = DATA_DIR / "seats.csv"
OCCUPIED = DATA_DIR / "occupied.csv"


def test_full_flow():
    seats, occupied = csv_loader.load_all(SEATS, OCCUPIED)
    assert len(seats) == 12
    assert occupied == frozenset({"A3"})

    by_id = {s.id: s for s in seats}
    assert by_id["A3"].kind is SeatKind.PREMIUM
    assert by_id["B1"].kind is SeatKind.COUPLE
    assert by_id["B-gap"].kind is SeatKind.HIDDEN
    assert by_id["B4"].status is SeatStatus.MAINTENANCE
    assert by_id["A1"].status is SeatStatus.AVAILABLE

    engine = SeatRulesEngine()
    engine.build(seats, occupied)

    # A2 would be squeezed between A1 and the occupied A3
    verdict = engine.validate_seat_selection("A1", [])
    assert verdict.violating_seats == ["A2"]
    assert engine.validate_seat_selection("A4", []).valid

    # B6 would be left alone at the end of the row
    assert engine.validate_seat_selection("B5", []).violating_seats == ["B6"]
    assert engine.can_select_consecutive_seats("B5", 2).seat_ids == ["B5", "B6"]
    assert engine.can_select_consecutive_seats("B4", 1).reason is Reason.SEAT_UNAVAILABLE


def test_occupied_ids_must_exist():
    buf = io.StringIO("seat_id\nA1\nZ9\n")
    with pytest.raises(ValueError, match="Z9"):
        csv_loader.load_occupied(buf, {"A1", "A2"})


def test_layout_requires_columns():
    with pytest.raises(ValueError, match="column"):
        csv_loader.load_seats(io.StringIO("id,row\nA1,A\n"))


def test_layout_status_aliases():
    csv_text = (
        "id,row,column,status\n"
        "A1,A,1,available\n"
        "A2,A,2,hidden\n"
        "A3,A,3,blocked\n"
        "A4,A,4,selecting\n"
        "A5,A,5,selected\n"
    )
    by_id = {s.id: s for s in csv_loader.load_seats(io.StringIO(csv_text))}

    assert by_id["A2"].kind is SeatKind.HIDDEN
    assert by_id["A2"].status is SeatStatus.AVAILABLE
    assert by_id["A3"].status is SeatStatus.MAINTENANCE
    assert by_id["A4"].status is SeatStatus.OCCUPIED
    assert by_id["A5"].status is SeatStatus.AVAILABLE
    assert by_id["A1"].kind is SeatKind.STANDARD


def test_unknown_layout_status_is_rejected():
    with pytest.raises(ValueError, match="Unknown seat status: reserved"):
        csv_loader.load_seats(io.StringIO("id,row,column,status\nA1,A,1,reserved\n"))


def test_cli_validate(capsys):
    code = cli.main(["validate", "--layout", str(SEATS), "--occupied", str(OCCUPIED), "--seat", "A1"])
    out = capsys.readouterr().out
    assert code == 1
    assert "valid=False" in out
    assert "reason=violates_isolation_rule" in out
    assert "violating_seats=A2" in out

    code = cli.main(["validate", "--layout", str(SEATS), "--seat", "A2", "--selected", "A1"])
    assert code == 0
    assert "valid=True" in capsys.readouterr().out


def test_cli_block(capsys):
    code = cli.main(["block", "--layout", str(SEATS), "--occupied", str(OCCUPIED), "--start", "A4", "--count", "3"])
    assert code == 0
    assert "seat_ids=A4|A5|A6" in capsys.readouterr().out


def test_cli_unknown_seat(capsys):
    code = cli.main(["validate", "--layout", str(SEATS), "--seat", "Z1"])
    assert code == 2
    assert "error=UNKNOWN_SEAT" in capsys.readouterr().out


def test_cli_invalid_input(tmp_path, capsys):
    code = cli.main(["block", "--layout", str(SEATS), "--start", "A1", "--count", "0"])
    assert code == 2
    assert "error=INVALID_INPUT" in capsys.readouterr().out

    bad_occupied = tmp_path / "occupied.csv"
    bad_occupied.write_text("seat_id\nZ9\n")
    code = cli.main(["validate", "--layout", str(SEATS), "--occupied", str(bad_occupied), "--seat", "A1"])
    assert code == 2
    assert "error=INVALID_INPUT" in capsys.readouterr().out


def test_cli_grid_round_trip(tmp_path, capsys):
    out_file = tmp_path / "layouts" / "room.csv"
    assert cli.main(["grid", "--rows", "3", "--seats-per-row", "6", "6", "6", "--width", "8", "--out", str(out_file)]) == 0
    assert "Wrote 23 positions" in capsys.readouterr().out

    # the back row has a couple seat spanning two columns
    seats = csv_loader.load_seats(out_file)
    assert len(seats) == 23
    assert sum(1 for s in seats if s.kind is SeatKind.HIDDEN) == 6

    assert cli.main(["recommend", "--layout", str(out_file), "--count", "2"]) == 0
    picked = capsys.readouterr().out.strip().split("|")
    assert len(picked) == 2
