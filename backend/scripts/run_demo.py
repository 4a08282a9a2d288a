#!/usr/bin/env python
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from travel_booking.core.config import settings
from travel_booking.core.errors import InvalidRouteError
from travel_booking.core.logging import configure_logging
from travel_booking.models.domain import BookingStatus
from travel_booking.services.booking_service import BookingService
from travel_booking.services.demo import seed_demo_bookings
from travel_booking.services.display import format_booking, format_summary
from travel_booking.storage.repository import InMemoryRepository


def display(service: BookingService, *booking_ids: int) -> None:
    if booking_ids:
        print(f"Displaying bookings with IDs: {', '.join(map(str, booking_ids))}")
    else:
        print("Displaying all bookings:")
    for lookup in service.list_bookings(*booking_ids):
        if lookup.booking:
            print(format_booking(lookup.booking))
        else:
            print(f"Booking with ID {lookup.booking_id} not found")


def print_summary(service: BookingService) -> None:
    print("\n=== Booking Summary ===")
    print(format_summary(service.summarize()))


def main() -> None:
    configure_logging(settings.log_level)
    service = BookingService(repository=InMemoryRepository())

    print("=== Travel Booking System ===")
    seed_demo_bookings(service)
    try:
        service.create_booking("Error Test", ("Mumbai", "Mumbai"))
    except InvalidRouteError as exc:
        print(exc, file=sys.stderr)

    display(service, 1, 2)
    display(service)
    print_summary(service)

    service.cancel_booking(1)

    print("\nBooked bookings:")
    for booking in service.bookings_by_status(BookingStatus.booked):
        print(format_booking(booking))

    print_summary(service)


if __name__ == "__main__":
    main()
