import logging

import pytest

from travel_booking.core.errors import InvalidRouteError
from travel_booking.models.domain import BookingStatus, Route, TravelType
from travel_booking.services.booking_service import BookingService
from travel_booking.storage.repository import InMemoryRepository


def make_service() -> BookingService:
    return BookingService(repository=InMemoryRepository(), default_meal_preference="Vegetarian")


@pytest.fixture
def booking_logs(caplog):
    # The package logger does not propagate once configure_logging has run.
    package_logger = logging.getLogger("travel_booking")
    package_logger.addHandler(caplog.handler)
    caplog.set_level(logging.INFO, logger="travel_booking")
    yield caplog
    package_logger.removeHandler(caplog.handler)


def test_create_booking_assigns_defaults():
    service = make_service()

    booking = service.create_booking("John Doe", ("New York", "London"))

    assert booking.id == 1
    assert booking.route == Route("New York", "London")
    assert booking.travel_type == TravelType.flight
    assert booking.status == BookingStatus.booked
    assert booking.meal_preference == "Vegetarian"


def test_explicit_meal_preference_overrides_default():
    service = make_service()

    booking = service.create_booking("Jane Smith", ("Paris", "Berlin"), "Business")

    assert booking.meal_preference == "Business"


def test_ids_are_sequential_and_not_consumed_by_rejected_routes():
    service = make_service()

    first = service.create_booking("A", ("Oslo", "Rome"))
    with pytest.raises(InvalidRouteError):
        service.create_booking("B", ("Rome", "Rome"))
    second = service.create_booking("C", ("Rome", "Oslo"))

    assert (first.id, second.id) == (1, 2)


def test_invalid_route_error_carries_route():
    service = make_service()

    with pytest.raises(InvalidRouteError) as excinfo:
        service.create_booking("X", ("Tokyo", "Tokyo"))

    assert excinfo.value.route == ("Tokyo", "Tokyo")
    assert str(excinfo.value) == "Invalid route: Tokyo and Tokyo cannot be the same"
    assert len(service.repository) == 0


def test_empty_locations_are_accepted_when_different():
    service = make_service()

    booking = service.create_booking("", ("", "Lima"))

    assert booking.route.origin == ""


def test_list_bookings_without_ids_returns_all_in_order():
    service = make_service()
    service.create_booking("A", ("Oslo", "Rome"))
    service.create_booking("B", ("Rome", "Oslo"))

    lookups = service.list_bookings()

    assert [lookup.booking.name for lookup in lookups] == ["A", "B"]
    assert all(lookup.found for lookup in lookups)


def test_list_bookings_reports_missing_ids_without_failing():
    service = make_service()
    service.create_booking("A", ("Oslo", "Rome"))
    service.create_booking("B", ("Rome", "Oslo"))

    lookups = service.list_bookings(2, 7, 1)

    assert [lookup.booking_id for lookup in lookups] == [2, 7, 1]
    assert [lookup.found for lookup in lookups] == [True, False, True]
    assert lookups[1].booking is None


def test_cancel_is_idempotent_and_accepts_booking_values():
    service = make_service()
    booking = service.create_booking("A", ("Oslo", "Rome"))

    assert service.cancel_booking(booking.id) is True
    assert service.cancel_booking(booking) is True
    assert service.find_booking(booking.id).status == BookingStatus.cancelled


def test_cancel_missing_booking_leaves_registry_unchanged():
    service = make_service()
    service.create_booking("A", ("Oslo", "Rome"))

    assert service.cancel_booking(42) is False
    assert len(service.repository) == 1
    assert service.find_booking(1).status == BookingStatus.booked


def test_returned_bookings_are_copies():
    service = make_service()
    booking = service.create_booking("A", ("Oslo", "Rome"))

    booking.status = BookingStatus.cancelled

    assert service.find_booking(booking.id).status == BookingStatus.booked


def test_bookings_by_status_filters_in_insertion_order():
    service = make_service()
    for name in ["A", "B", "C"]:
        service.create_booking(name, ("Oslo", "Rome"))
    service.cancel_booking(2)

    booked = service.bookings_by_status(BookingStatus.booked)

    assert [b.name for b in booked] == ["A", "C"]
    assert service.bookings_by_status(BookingStatus.pending) == []


def test_summary_counts_sum_to_total():
    service = make_service()
    for idx in range(5):
        service.create_booking(f"T{idx}", ("Oslo", "Rome"))
    service.cancel_booking(1)
    service.cancel_booking(3)
    service.cancel_booking(3)

    summary = service.summarize()

    assert summary.total == 5
    assert sum(summary.by_status.values()) == summary.total
    assert set(summary.by_status) == set(BookingStatus)


def test_example_scenario():
    service = make_service()

    john = service.create_booking("John Doe", ("New York", "London"))
    jane = service.create_booking("Jane Smith", ("Paris", "Berlin"), "Business")
    with pytest.raises(InvalidRouteError):
        service.create_booking("X", ("Tokyo", "Tokyo"))
    service.cancel_booking(1)
    summary = service.summarize()

    assert john.id == 1 and john.meal_preference == "Vegetarian"
    assert jane.id == 2 and jane.meal_preference == "Business"
    assert summary.total == 2
    assert summary.count(BookingStatus.booked) == 1
    assert summary.count(BookingStatus.cancelled) == 1
    assert summary.count(BookingStatus.pending) == 0


def test_create_logs_confirmation(booking_logs):
    service = make_service()

    service.create_booking("John Doe", ("New York", "London"))

    assert "Booking created: John Doe - New York to London" in booking_logs.messages


def test_list_logs_each_missing_id(booking_logs):
    service = make_service()
    service.create_booking("A", ("Oslo", "Rome"))

    service.list_bookings(1, 4, 5)

    warnings = [r.getMessage() for r in booking_logs.records if r.levelno == logging.WARNING]
    assert "Booking with ID 4 not found" in warnings
    assert "Booking with ID 5 not found" in warnings
    assert "Booking with ID 1 not found" not in warnings


def test_cancel_logs_outcome(booking_logs):
    service = make_service()
    service.create_booking("A", ("Oslo", "Rome"))

    service.cancel_booking(1)
    service.cancel_booking(9)

    records = {r.getMessage(): r.levelno for r in booking_logs.records}
    assert records["Booking 1 cancelled"] == logging.INFO
    assert records["Booking 9 not found"] == logging.WARNING
