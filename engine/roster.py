"""Companion (tour leader) roster grouped by travel group, with bus seats."""

from typing import List, Optional

from models.person import Person
from models.bus import SeatAssignment
from engine.room_allocator import normalize_category
from config.defaults import ROOM_LABELS


def build_companion_roster(
    people: List[Person],
    seat_assignments: Optional[List[SeatAssignment]] = None,
) -> List[dict]:
    """Groups ascending, people without a group last; input order kept inside a group."""
    seats = {a.person_id: a.seat_number for a in (seat_assignments or [])}

    by_group = {}
    for p in people:
        by_group.setdefault(p.group_number, []).append(p)

    keys = sorted(k for k in by_group if k is not None)
    if None in by_group:
        keys.append(None)

    roster = []
    for key in keys:
        members = by_group[key]
        for idx, p in enumerate(members):
            roster.append({
                "group": key,
                "group_rowspan": len(members) if idx == 0 else 0,
                "person_id": p.person_id,
                "full_name": p.full_name,
                "seat_number": seats.get(p.person_id),
                "phone": p.phone or "-",
                "room": ROOM_LABELS[normalize_category(p.category)],
            })
    return roster
