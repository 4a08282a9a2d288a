from typing import List, Optional, Tuple

from travel_booking.models.domain import Booking
from travel_booking.services.booking_service import BookingService

DEMO_BOOKINGS: List[Tuple[str, Tuple[str, str], Optional[str]]] = [
    ("John Doe", ("New York", "London"), None),
    ("Jane Smith", ("Paris", "Berlin"), "Business"),
    ("Bob Johnson", ("Tokyo", "Sydney"), None),
]


def seed_demo_bookings(service: BookingService) -> List[Booking]:
    return [
        service.create_booking(name, route, meal_preference)
        for name, route, meal_preference in DEMO_BOOKINGS
    ]
