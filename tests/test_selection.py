"""Tests for single seat selection and the suggestions offered on rejection."""

import pytest

from seat_rules.config import Settings
from seat_rules.exceptions import UnknownSeat
from seat_rules.index import SeatMapIndex
from seat_rules.models import Reason, SeatKind, SeatStatus
from seat_rules.scanner import find_isolated
from seat_rules.selection import validate_selection
from seat_rules.suggestions import suggest


class TestValidateSelection:
    def test_edge_seat_with_free_neighbor_is_valid(self, row_of_five):
        verdict = validate_selection(row_of_five, set(), [], "A1")
        assert verdict.valid is True
        assert verdict.reason is Reason.OK
        assert verdict.violating_seats == []
        assert verdict.suggested_seats == []

    def test_skipping_a_seat_is_rejected_with_suggestion(self, row_of_five):
        verdict = validate_selection(row_of_five, set(), ["A1"], "A3")
        assert verdict.valid is False
        assert verdict.reason is Reason.VIOLATES_ISOLATION_RULE
        assert verdict.violating_seats == ["A2"]
        assert verdict.suggested_seats == ["A2"]
        assert "A2" in verdict.message

    def test_adjacent_seat_is_valid(self, row_of_five):
        assert validate_selection(row_of_five, set(), ["A1"], "A2").valid

    def test_occupied_seats_never_reported(self, row_of_five):
        verdict = validate_selection(row_of_five, {"A3"}, [], "A1")
        assert verdict.reason is Reason.VIOLATES_ISOLATION_RULE
        assert verdict.violating_seats == ["A2"]

    def test_layout_status_counts_as_occupied(self, make_row):
        index = SeatMapIndex.build(make_row("A", 5, A3={"status": SeatStatus.OCCUPIED}))
        verdict = validate_selection(index, set(), [], "A1")
        assert verdict.violating_seats == ["A2"]

    def test_taken_or_hidden_candidate_is_unavailable(self, make_row):
        index = SeatMapIndex.build(
            make_row("A", 6, A2={"kind": SeatKind.HIDDEN}, A5={"status": SeatStatus.MAINTENANCE})
        )
        for candidate in ("A2", "A4", "A5"):
            verdict = validate_selection(index, {"A4"}, [], candidate)
            assert verdict.valid is False
            assert verdict.reason is Reason.SEAT_UNAVAILABLE
            assert verdict.details == {"seat_id": candidate}

    def test_unknown_ids_raise(self, row_of_five):
        with pytest.raises(UnknownSeat):
            validate_selection(row_of_five, set(), [], "Z1")
        with pytest.raises(UnknownSeat):
            validate_selection(row_of_five, set(), ["Z1"], "A1")

    def test_repeated_calls_are_identical_and_pure(self, row_of_five):
        before = dict(row_of_five.by_row)
        selection = ["A1"]
        first = validate_selection(row_of_five, set(), selection, "A3")
        second = validate_selection(row_of_five, set(), selection, "A3")
        assert first == second
        assert selection == ["A1"]
        assert dict(row_of_five.by_row) == before

    def test_valid_verdicts_leave_no_isolated_seat(self, make_row):
        index = SeatMapIndex.build(make_row("A", 7) + make_row("B", 4))
        occupied = {"B1"}
        selection = []
        for candidate in ("A1", "A2", "A4", "A5", "B3", "B4", "A7"):
            verdict = validate_selection(index, occupied, selection, candidate)
            if verdict.valid:
                selection.append(candidate)
                assert find_isolated(index, set(selection) | occupied) == []
        assert selection == ["A1", "A2", "A5", "B4"]

    def test_suggestion_count_follows_settings(self, make_row):
        index = SeatMapIndex.build(make_row("A", 8))
        verdict = validate_selection(index, set(), ["A4"], "A6", settings=Settings(max_suggestions=1))
        assert verdict.violating_seats == ["A5"]
        assert verdict.suggested_seats == ["A3"]


class TestSuggest:
    def test_both_neighbors_in_selection_order(self, make_row):
        index = SeatMapIndex.build(make_row("A", 8))
        assert suggest(index, set(), ["A4"]) == ["A3", "A5"]

    def test_neighbors_shared_by_two_selected_seats_are_listed_once(self, make_row):
        index = SeatMapIndex.build(make_row("A", 8))
        assert suggest(index, set(), ["A3", "A5"]) == ["A4"]

    def test_skips_neighbors_already_selected(self, make_row):
        index = SeatMapIndex.build(make_row("A", 9))
        # A4 and A5 are each other's neighbor and must not be offered again
        assert suggest(index, set(), ["A4", "A5"]) == ["A3", "A6"]

    def test_skips_hidden_and_occupied_neighbors(self, make_row):
        index = SeatMapIndex.build(make_row("A", 8, A3={"kind": SeatKind.HIDDEN}))
        assert suggest(index, {"A5"}, ["A4"]) == []

    def test_capped_at_five(self, make_row):
        seats = []
        for row in "ABCDEF":
            seats += make_row(row, 7)
        index = SeatMapIndex.build(seats)
        selection = [f"{row}4" for row in "ABCDEF"]
        assert suggest(index, set(), selection) == ["A3", "A5", "B3", "B5", "C3"]
        assert suggest(index, set(), selection, limit=2) == ["A3", "A5"]

    def test_empty_selection_has_no_suggestions(self, row_of_five):
        assert suggest(row_of_five, set(), []) == []
