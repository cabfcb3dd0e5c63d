from models.person import Person
from models.room import RoomUnit, AllocationResult
from models.trip import Trip
from models.bus import BusLayout, SeatAssignment
