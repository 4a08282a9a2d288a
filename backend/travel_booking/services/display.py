from travel_booking.models.domain import Booking, BookingStatus, BookingSummary


def format_booking(booking: Booking) -> str:
    return (
        f"ID: {booking.id}, Name: {booking.name}, "
        f"Route: {booking.route.origin} → {booking.route.destination}, "
        f"Type: {booking.travel_type.value}, Status: {booking.status.value}, "
        f"Meal: {booking.meal_preference or 'Not specified'}"
    )


def format_summary(summary: BookingSummary) -> str:
    counts = ", ".join(
        f"{status.value.title()}: {summary.count(status)}" for status in BookingStatus
    )
    return f"Total bookings: {summary.total}\n{counts}"
