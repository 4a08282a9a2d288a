from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from travel_booking.api import get_repository
from travel_booking.models.domain import BookingStatus
from travel_booking.models.schemas import (
    BookingListResponse,
    BookingLookupSchema,
    BookingRequest,
    BookingSchema,
    BookingSummarySchema,
    CancelResponse,
)
from travel_booking.services.booking_service import BookingService
from travel_booking.storage.repository import InMemoryRepository

router = APIRouter()


def get_booking_service(
    repository: InMemoryRepository = Depends(get_repository),
) -> BookingService:
    return BookingService(repository=repository)


@router.post("", response_model=BookingSchema, status_code=201)
def create_booking(
    request: BookingRequest,
    service: BookingService = Depends(get_booking_service),
) -> BookingSchema:
    booking = service.create_booking(
        name=request.name,
        route=request.route,
        meal_preference=request.meal_preference,
    )
    return BookingSchema.from_domain(booking)


@router.get("", response_model=BookingListResponse)
def list_bookings(
    ids: List[int] = Query(default=[]),
    service: BookingService = Depends(get_booking_service),
) -> BookingListResponse:
    lookups = service.list_bookings(*ids)
    return BookingListResponse(
        bookings=[BookingLookupSchema.from_domain(lookup) for lookup in lookups]
    )


@router.get("/summary", response_model=BookingSummarySchema)
def summarize(
    service: BookingService = Depends(get_booking_service),
) -> BookingSummarySchema:
    return BookingSummarySchema.from_domain(service.summarize())


@router.get("/status/{status}", response_model=List[BookingSchema])
def bookings_by_status(
    status: BookingStatus,
    service: BookingService = Depends(get_booking_service),
) -> List[BookingSchema]:
    return [BookingSchema.from_domain(b) for b in service.bookings_by_status(status)]


@router.get("/{booking_id}", response_model=BookingSchema)
def get_booking(
    booking_id: int,
    service: BookingService = Depends(get_booking_service),
) -> BookingSchema:
    booking = service.find_booking(booking_id)
    if not booking:
        raise HTTPException(status_code=404, detail=f"Booking {booking_id} not found")
    return BookingSchema.from_domain(booking)


@router.post("/{booking_id}/cancel", response_model=CancelResponse)
def cancel_booking(
    booking_id: int,
    service: BookingService = Depends(get_booking_service),
) -> CancelResponse:
    return CancelResponse(
        booking_id=booking_id, cancelled=service.cancel_booking(booking_id)
    )
