from dataclasses import dataclass
from datetime import date
from typing import Optional


def surname_of(full_name: str) -> str:
    """Last whitespace-delimited token of a display name."""
    parts = (full_name or "").split()
    return parts[-1] if parts else ""


@dataclass
class Person:
    person_id: str
    full_name: str
    group_number: Optional[int] = None   # None = travelling alone
    category: str = "altro"              # room category key, see config.defaults.ROOM_CAPACITIES
    date_of_birth: Optional[date] = None
    place_of_birth: Optional[str] = None
    phone: Optional[str] = None

    @property
    def surname(self) -> str:
        return surname_of(self.full_name)

    @property
    def is_grouped(self) -> bool:
        return self.group_number is not None
