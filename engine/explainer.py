"""Generates human-readable explanations for a room allocation."""

from typing import List

from models.room import AllocationResult, RoomUnit
from config.defaults import ROOM_LABELS


def _bucket_runs(units: List[RoomUnit]) -> List[List[RoomUnit]]:
    """Consecutive units of the same category form one (group, category) bucket."""
    runs: List[List[RoomUnit]] = []
    for unit in units:
        if runs and runs[-1][0].category == unit.category:
            runs[-1].append(unit)
        else:
            runs.append([unit])
    return runs


def _people_label(n: int) -> str:
    return f"{n} persona" if n == 1 else f"{n} persone"


def explain_bucket(group_number: int, units: List[RoomUnit]) -> str:
    category = units[0].category
    capacity = units[0].capacity
    people = sum(u.occupancy for u in units)
    label = ROOM_LABELS.get(category, category)
    rooms = f"{len(units)} camer{'e' if len(units) != 1 else 'a'}"
    step = (
        f"Gruppo {group_number} - {label}: {_people_label(people)} / capienza {capacity} "
        f"=> {rooms} (#{units[0].index}-#{units[-1].index})"
    )
    last = units[-1]
    if not last.is_full:
        step += f", ultima camera non completa ({last.occupancy}/{capacity})"
    return step


def explain_allocation(result: AllocationResult) -> List[str]:
    """Produce one explanation step per bucket, in print order."""
    steps = []

    for group_number in sorted(result.groups):
        for run in _bucket_runs(result.groups[group_number]):
            steps.append(explain_bucket(group_number, run))

    if result.ungrouped:
        steps.append(
            f"Senza gruppo: {_people_label(len(result.ungrouped))} "
            f"=> una camera ciascuna (#{result.ungrouped[0].index}-#{result.ungrouped[-1].index})"
        )

    steps.append(
        f"Totale: {_people_label(result.person_count)} in {result.unit_count} camere"
    )
    return steps
