import logging
from typing import List, Optional, Sequence, Union

from travel_booking.core.config import settings
from travel_booking.core.errors import raise_invalid_route
from travel_booking.models.domain import (
    Booking,
    BookingLookup,
    BookingStatus,
    BookingSummary,
    Route,
    TravelType,
)
from travel_booking.storage.repository import InMemoryRepository

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(
        self,
        repository: InMemoryRepository,
        default_meal_preference: Optional[str] = None,
    ):
        self.repository = repository
        self.default_meal_preference = (
            default_meal_preference or settings.default_meal_preference
        )

    def create_booking(
        self,
        name: str,
        route: Sequence[str],
        meal_preference: Optional[str] = None,
    ) -> Booking:
        """
        Book a flight for ``name`` along ``route``.

        Raises InvalidRouteError when origin and destination are the same;
        the caller is expected to handle it.
        """
        route = Route(*route)
        if route.origin == route.destination:
            raise_invalid_route(route)

        saved = self.repository.add_booking(
            lambda booking_id: Booking(
                id=booking_id,
                name=name,
                route=route,
                travel_type=TravelType.flight,
                status=BookingStatus.booked,
                meal_preference=meal_preference or self.default_meal_preference,
            )
        )
        logger.info(
            "Booking created: %s - %s to %s", name, route.origin, route.destination
        )
        return saved

    def find_booking(self, booking_id: int) -> Optional[Booking]:
        return self.repository.get_booking(booking_id)

    def list_bookings(self, *booking_ids: int) -> List[BookingLookup]:
        if not booking_ids:
            return [
                BookingLookup(booking_id=b.id, booking=b)
                for b in self.repository.list_bookings()
            ]

        lookups: List[BookingLookup] = []
        for booking_id in booking_ids:
            booking = self.repository.get_booking(booking_id)
            if booking is None:
                logger.warning("Booking with ID %s not found", booking_id)
            lookups.append(BookingLookup(booking_id=booking_id, booking=booking))
        return lookups

    def cancel_booking(self, ref: Union[int, Booking]) -> bool:
        booking_id = ref.id if isinstance(ref, Booking) else ref
        cancelled = self.repository.update_status(booking_id, BookingStatus.cancelled)
        if cancelled is None:
            logger.warning("Booking %s not found", booking_id)
            return False
        logger.info("Booking %s cancelled", booking_id)
        return True

    def summarize(self) -> BookingSummary:
        bookings = self.repository.list_bookings()
        summary = BookingSummary(total=len(bookings))
        for booking in bookings:
            summary.by_status[booking.status] += 1
        return summary

    def bookings_by_status(self, status: BookingStatus) -> List[Booking]:
        return [b for b in self.repository.list_bookings() if b.status == status]
