from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from models.person import Person


@dataclass
class RoomUnit:
    category: str
    capacity: int
    group_number: Optional[int]      # None = ungrouped bucket
    persons: List[Person] = field(default_factory=list)
    index: int = 0                   # 1-based position in emission order

    @property
    def occupancy(self) -> int:
        return len(self.persons)

    @property
    def is_full(self) -> bool:
        return len(self.persons) >= self.capacity


@dataclass
class AllocationResult:
    """Units keyed by group number (ascending) plus the ungrouped singletons."""
    groups: Dict[int, List[RoomUnit]] = field(default_factory=dict)
    ungrouped: List[RoomUnit] = field(default_factory=list)

    def iter_units(self) -> Iterator[RoomUnit]:
        """Yield units in print order: grouped units first, then ungrouped."""
        for group_number in sorted(self.groups):
            yield from self.groups[group_number]
        yield from self.ungrouped

    @property
    def unit_count(self) -> int:
        return sum(len(units) for units in self.groups.values()) + len(self.ungrouped)

    @property
    def person_count(self) -> int:
        return sum(u.occupancy for u in self.iter_units())
