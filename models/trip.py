from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Trip:
    trip_id: str
    title: str
    destination: str
    departure_date: Optional[date] = None
    return_date: Optional[date] = None
    companion_name: Optional[str] = None

    @property
    def duration_days(self) -> int:
        if self.departure_date is None or self.return_date is None:
            return 0
        return (self.return_date - self.departure_date).days + 1
