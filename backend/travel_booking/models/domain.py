from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, NamedTuple, Optional


class TravelType(str, Enum):
    flight = "Flight"
    train = "Train"
    bus = "Bus"


class BookingStatus(str, Enum):
    booked = "booked"
    cancelled = "cancelled"
    pending = "pending"


class Route(NamedTuple):
    origin: str
    destination: str


@dataclass
class Booking:
    id: int
    name: str
    route: Route
    travel_type: TravelType
    status: BookingStatus
    meal_preference: Optional[str] = None


@dataclass
class BookingLookup:
    booking_id: int
    booking: Optional[Booking] = None

    @property
    def found(self) -> bool:
        return self.booking is not None


@dataclass
class BookingSummary:
    total: int
    by_status: Dict[BookingStatus, int] = field(
        default_factory=lambda: {status: 0 for status in BookingStatus}
    )

    def count(self, status: BookingStatus) -> int:
        return self.by_status.get(status, 0)
