"""Bus seat geometry, occupancy state, and seat assignment."""

import logging
from typing import Collection, List, Optional, Tuple

from models.bus import BusLayout, SeatAssignment
from models.person import Person
from config.defaults import (
    SEAT_FREE, SEAT_OCCUPIED, SEAT_SELECTED,
    BUS_PRESETS, DEFAULT_SEATS_PER_ROW,
)
from config.logging_config import get_logger

logger = get_logger(__name__, logging.DEBUG)


def seat_number(row: int, column: int, seats_per_row: int) -> int:
    """Linear seat number for a 1-indexed (row, column). No bounds checking."""
    return (row - 1) * seats_per_row + column


def seat_state(
    seat: int,
    occupied: Collection[int],
    selected_seat: Optional[int] = None,
) -> str:
    """Classify a seat as free, occupied or selected.

    Selection wins over occupancy so a participant re-selecting their own
    held seat is not blocked.
    """
    if selected_seat is not None and seat == selected_seat:
        return SEAT_SELECTED
    if seat in occupied:
        return SEAT_OCCUPIED
    return SEAT_FREE


def layout_rows(layout: BusLayout) -> List[List[int]]:
    """Seat numbers row by row; the last row may hold a different count."""
    rows = []
    for row in range(1, layout.rows + 1):
        rows.append([
            seat_number(row, col, layout.seats_per_row)
            for col in range(1, layout.row_capacity(row) + 1)
        ])
    return rows


def seat_position(seat: int, layout: BusLayout) -> Optional[Tuple[int, int]]:
    """Inverse of seat_number: (row, column) or None when outside the layout."""
    if seat < 1 or seat > layout.total_seats:
        return None
    row = (seat - 1) // layout.seats_per_row + 1
    column = seat - (row - 1) * layout.seats_per_row
    # a last row wider than the others spills past the uniform row boundary
    if row > layout.rows:
        row = layout.rows
        column = seat - (row - 1) * layout.seats_per_row
    return row, column


def build_seat_grid(
    layout: BusLayout,
    assignments: List[SeatAssignment],
    selected_seat: Optional[int] = None,
) -> List[List[dict]]:
    """Seat dicts per row for the clickable map."""
    by_seat = {a.seat_number: a for a in assignments}
    occupied = set(by_seat)

    grid = []
    for row_idx, row_seats in enumerate(layout_rows(layout), start=1):
        row = []
        for col_idx, seat in enumerate(row_seats, start=1):
            state = seat_state(seat, occupied, selected_seat)
            holder = by_seat.get(seat)
            row.append({
                "seat_number": seat,
                "row": row_idx,
                "column": col_idx,
                "state": state,
                "participant_name": holder.person_name if holder else None,
                "clickable": state != SEAT_OCCUPIED,
            })
        grid.append(row)
    return grid


def occupancy_summary(layout: BusLayout, assignments: List[SeatAssignment]) -> dict:
    """Seat totals; only assignments inside the layout count as occupied."""
    total = layout.total_seats
    occupied = len({a.seat_number for a in assignments if 1 <= a.seat_number <= total})
    return {
        "total_seats": total,
        "occupied_seats": occupied,
        "free_seats": total - occupied,
        "occupancy_pct": occupied / total if total > 0 else 0,
    }


def unassigned_participants(
    people: List[Person],
    assignments: List[SeatAssignment],
    layout: Optional[BusLayout] = None,
) -> List[Person]:
    """Participants without a seat, in input order.

    With a layout, a seat outside it does not count as a seat.
    """
    if layout is not None:
        assignments, _ = split_by_layout(assignments, layout)
    seated = {a.person_id for a in assignments}
    return [p for p in people if p.person_id not in seated]


def split_by_layout(
    assignments: List[SeatAssignment],
    layout: BusLayout,
) -> Tuple[List[SeatAssignment], List[SeatAssignment]]:
    """(inside, outside) the layout, each in the original order."""
    inside, outside = [], []
    for a in assignments:
        if seat_position(a.seat_number, layout) is None:
            outside.append(a)
        else:
            inside.append(a)
    return inside, outside


def assign_seat(
    assignments: List[SeatAssignment],
    layout: BusLayout,
    seat: int,
    person: Person,
) -> List[SeatAssignment]:
    """Return a new assignment list with the person on the given seat.

    A person already seated elsewhere is moved. Raises ValueError when the
    seat is outside the layout or held by someone else.
    """
    if seat_position(seat, layout) is None:
        raise ValueError(f"Seat {seat} is outside the bus layout (1-{layout.total_seats}).")

    for a in assignments:
        if a.seat_number == seat and a.person_id != person.person_id:
            raise ValueError(f"Seat {seat} is already taken by {a.person_name or a.person_id}.")

    updated = [a for a in assignments if a.person_id != person.person_id]
    updated.append(SeatAssignment(
        seat_number=seat,
        person_id=person.person_id,
        person_name=person.full_name,
    ))
    updated.sort(key=lambda a: a.seat_number)
    logger.debug("Seat %d assigned to %s", seat, person.full_name)
    return updated


def release_seat(assignments: List[SeatAssignment], seat: int) -> List[SeatAssignment]:
    """Return a new assignment list without the given seat."""
    return [a for a in assignments if a.seat_number != seat]


def layout_from_preset(label: str) -> Optional[BusLayout]:
    """Build a BusLayout from a named preset, or None if unknown."""
    for preset in BUS_PRESETS:
        if preset["label"] == label:
            return BusLayout(
                rows=preset["rows"],
                seats_per_row=DEFAULT_SEATS_PER_ROW,
                last_row_seats=preset["last_row_seats"],
                has_wc=preset["has_wc"],
                layout_type=preset["layout_type"],
                name=preset["label"],
            )
    return None


def preset_label(layout: Optional[BusLayout]) -> Optional[str]:
    """Label of the preset this layout was built from, or None for a custom layout."""
    if layout is None:
        return None
    preset = layout_from_preset(layout.name)
    if preset is None or preset.total_seats != layout.total_seats or preset.rows != layout.rows:
        return None
    return preset.name
