"""
Booking-related exceptions.
"""
from typing import NoReturn

from travel_booking.models.domain import Route


class BookingError(Exception):
    """Base exception for booking registry errors."""


class InvalidRouteError(BookingError):
    """Raised when a route starts and ends at the same place."""

    def __init__(self, route: Route):
        self.route = route
        super().__init__(
            f"Invalid route: {route.origin} and {route.destination} cannot be the same"
        )


def raise_invalid_route(route: Route) -> NoReturn:
    raise InvalidRouteError(route)
