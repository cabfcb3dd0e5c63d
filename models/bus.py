from dataclasses import dataclass
from typing import Optional


@dataclass
class BusLayout:
    rows: int
    seats_per_row: int = 4
    last_row_seats: Optional[int] = None   # None = uniform layout
    has_wc: bool = False
    layout_type: str = "gt_standard"
    name: str = ""

    @property
    def total_seats(self) -> int:
        if self.rows <= 0:
            return 0
        if self.last_row_seats is None:
            return self.rows * self.seats_per_row
        return (self.rows - 1) * self.seats_per_row + self.last_row_seats

    def row_capacity(self, row: int) -> int:
        """Seats in a 1-indexed row."""
        if self.last_row_seats is not None and row == self.rows:
            return self.last_row_seats
        return self.seats_per_row


@dataclass
class SeatAssignment:
    seat_number: int
    person_id: str
    person_name: str = ""
