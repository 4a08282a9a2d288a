from travel_booking.models.domain import (
    Booking,
    BookingStatus,
    BookingSummary,
    Route,
    TravelType,
)
from travel_booking.services.display import format_booking, format_summary


def test_format_booking_without_meal():
    booking = Booking(
        id=3,
        name="Bob Johnson",
        route=Route("Tokyo", "Sydney"),
        travel_type=TravelType.flight,
        status=BookingStatus.booked,
    )

    assert format_booking(booking) == (
        "ID: 3, Name: Bob Johnson, Route: Tokyo → Sydney, "
        "Type: Flight, Status: booked, Meal: Not specified"
    )


def test_format_summary_lists_every_status():
    summary = BookingSummary(total=2)
    summary.by_status[BookingStatus.booked] = 1
    summary.by_status[BookingStatus.cancelled] = 1

    assert format_summary(summary) == (
        "Total bookings: 2\nBooked: 1, Cancelled: 1, Pending: 0"
    )
