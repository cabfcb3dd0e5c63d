"""Tests for the bus seat map."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.person import Person
from models.bus import BusLayout, SeatAssignment
from engine.seat_map import (
    seat_number,
    seat_state,
    layout_rows,
    seat_position,
    build_seat_grid,
    occupancy_summary,
    unassigned_participants,
    assign_seat,
    release_seat,
    layout_from_preset,
    split_by_layout,
    preset_label,
)
from config.defaults import BUS_PRESETS


def make_layout(rows=11, seats_per_row=4, last_row_seats=None):
    return BusLayout(rows=rows, seats_per_row=seats_per_row, last_row_seats=last_row_seats)


def make_person(pid="P1", name="Mario Rossi"):
    return Person(pid, name)


def make_assignment(seat=1, pid="P1", name="Mario Rossi"):
    return SeatAssignment(seat, pid, name)


class TestSeatNumber:
    def test_example(self):
        assert seat_number(3, 2, 4) == 10

    def test_first_and_last_of_row(self):
        assert seat_number(1, 1, 4) == 1
        assert seat_number(1, 4, 4) == 4
        assert seat_number(2, 1, 4) == 5

    def test_uniform_grid_is_a_bijection(self):
        for rows, cols in [(11, 4), (5, 3), (1, 1), (7, 2)]:
            numbers = [seat_number(r, c, cols) for r in range(1, rows + 1) for c in range(1, cols + 1)]
            assert sorted(numbers) == list(range(1, rows * cols + 1))


class TestSeatState:
    def test_three_states(self):
        occupied = {5, 6, 10}
        assert seat_state(6, occupied, 6) == "selected"
        assert seat_state(5, occupied, 6) == "occupied"
        assert seat_state(1, occupied, 6) == "free"

    def test_no_selection(self):
        assert seat_state(5, {5}, None) == "occupied"
        assert seat_state(4, {5}) == "free"

    def test_selection_beats_occupancy(self):
        assert seat_state(10, [10], 10) == "selected"


class TestLayout:
    def test_uniform_total(self):
        assert make_layout(11, 4).total_seats == 44

    def test_last_row_total(self):
        assert make_layout(11, 4, last_row_seats=5).total_seats == 45
        assert make_layout(5, 4, last_row_seats=3).total_seats == 19

    def test_rows_are_contiguous_and_gapless(self):
        layout = make_layout(11, 4, last_row_seats=5)
        rows = layout_rows(layout)
        assert len(rows) == 11
        assert rows[0] == [1, 2, 3, 4]
        assert rows[-1] == [41, 42, 43, 44, 45]
        flat = [s for row in rows for s in row]
        assert flat == list(range(1, layout.total_seats + 1))

    def test_narrow_last_row(self):
        rows = layout_rows(make_layout(5, 4, last_row_seats=3))
        assert rows[-1] == [17, 18, 19]

    def test_seat_position_inverts_seat_number(self):
        layout = make_layout(11, 4, last_row_seats=5)
        for r, row in enumerate(layout_rows(layout), start=1):
            for c, seat in enumerate(row, start=1):
                assert seat_position(seat, layout) == (r, c)

    def test_seat_position_outside(self):
        layout = make_layout(3, 4)
        assert seat_position(0, layout) is None
        assert seat_position(13, layout) is None

    def test_presets_match_their_labels(self):
        for preset in BUS_PRESETS:
            layout = layout_from_preset(preset["label"])
            seats = int(preset["label"].split(" posti")[0].split()[-1])
            assert layout.total_seats == seats, preset["label"]

    def test_unknown_preset(self):
        assert layout_from_preset("Astronave") is None

    def test_preset_label(self):
        assert preset_label(layout_from_preset("GT 49 posti")) == "GT 49 posti"
        assert preset_label(make_layout(5, 4, last_row_seats=3)) is None
        assert preset_label(None) is None

    def test_preset_name_with_other_geometry_is_custom(self):
        layout = BusLayout(rows=9, last_row_seats=3, name="GT 49 posti")
        assert preset_label(layout) is None


class TestSeatGrid:
    def test_grid_states(self):
        layout = make_layout(3, 4)
        assignments = [make_assignment(5, "A", "Anna"), make_assignment(6, "B", "Bruno")]
        grid = build_seat_grid(layout, assignments, selected_seat=6)

        seats = {s["seat_number"]: s for row in grid for s in row}
        assert len(seats) == 12
        assert seats[5]["state"] == "occupied"
        assert seats[5]["clickable"] is False
        assert seats[5]["participant_name"] == "Anna"
        assert seats[6]["state"] == "selected"
        assert seats[6]["clickable"] is True
        assert seats[1]["state"] == "free"
        assert seats[1]["participant_name"] is None
        assert (seats[10]["row"], seats[10]["column"]) == (3, 2)

    def test_occupancy_summary(self):
        layout = make_layout(3, 4)
        assignments = [make_assignment(1, "A"), make_assignment(2, "B"), make_assignment(99, "C")]
        summary = occupancy_summary(layout, assignments)
        assert summary["total_seats"] == 12
        assert summary["occupied_seats"] == 2
        assert summary["free_seats"] == 10
        assert abs(summary["occupancy_pct"] - 2 / 12) < 1e-9

    def test_unassigned_keeps_input_order(self):
        people = [make_person("C"), make_person("A"), make_person("B")]
        result = unassigned_participants(people, [make_assignment(1, "A")])
        assert [p.person_id for p in result] == ["C", "B"]


class TestAssignSeat:
    def test_assign_free_seat(self):
        layout = make_layout(3, 4)
        updated = assign_seat([], layout, 7, make_person("A", "Anna Neri"))
        assert updated == [SeatAssignment(7, "A", "Anna Neri")]

    def test_assign_does_not_mutate(self):
        layout = make_layout(3, 4)
        original = [make_assignment(1, "B")]
        assign_seat(original, layout, 2, make_person("A"))
        assert original == [make_assignment(1, "B")]

    def test_moving_a_seated_person(self):
        layout = make_layout(3, 4)
        updated = assign_seat([make_assignment(3, "A")], layout, 9, make_person("A"))
        assert [a.seat_number for a in updated] == [9]

    def test_taken_seat_raises(self):
        layout = make_layout(3, 4)
        with pytest.raises(ValueError):
            assign_seat([make_assignment(4, "B")], layout, 4, make_person("A"))

    def test_seat_outside_layout_raises(self):
        with pytest.raises(ValueError):
            assign_seat([], make_layout(3, 4), 13, make_person("A"))

    def test_release(self):
        assignments = [make_assignment(1, "A"), make_assignment(2, "B")]
        assert [a.seat_number for a in release_seat(assignments, 1)] == [2]
        assert release_seat(assignments, 5) == assignments


class TestLayoutChange:
    def test_split_by_layout(self):
        small = layout_from_preset("Minibus 19 posti")
        assignments = [make_assignment(3, "A"), make_assignment(40, "B"), make_assignment(19, "C")]
        inside, outside = split_by_layout(assignments, small)
        assert [a.seat_number for a in inside] == [3, 19]
        assert [a.seat_number for a in outside] == [40]

    def test_seat_lost_in_smaller_bus_needs_a_new_one(self):
        person = make_person("A", "Anna Neri")
        assignments = assign_seat([], layout_from_preset("GT 49 posti"), 40, person)
        small = layout_from_preset("Minibus 19 posti")

        assert unassigned_participants([person], assignments, small) == [person]
        assert occupancy_summary(small, assignments)["occupied_seats"] == 0

    def test_without_layout_every_assignment_counts(self):
        person = make_person("A")
        assert unassigned_participants([person], [make_assignment(40, "A")]) == []


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
