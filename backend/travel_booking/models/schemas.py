from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from travel_booking.models.domain import (
    Booking,
    BookingLookup,
    BookingStatus,
    BookingSummary,
    TravelType,
)


class BookingRequest(BaseModel):
    name: str
    route: Tuple[str, str]
    meal_preference: Optional[str] = None


class BookingSchema(BaseModel):
    id: int
    name: str
    route: Tuple[str, str]
    travel_type: TravelType
    status: BookingStatus
    meal_preference: Optional[str] = None

    @classmethod
    def from_domain(cls, obj: Booking) -> "BookingSchema":
        return cls(
            id=obj.id,
            name=obj.name,
            route=(obj.route.origin, obj.route.destination),
            travel_type=obj.travel_type,
            status=obj.status,
            meal_preference=obj.meal_preference,
        )


class BookingLookupSchema(BaseModel):
    booking_id: int
    found: bool
    booking: Optional[BookingSchema] = None

    @classmethod
    def from_domain(cls, obj: BookingLookup) -> "BookingLookupSchema":
        return cls(
            booking_id=obj.booking_id,
            found=obj.found,
            booking=BookingSchema.from_domain(obj.booking) if obj.booking else None,
        )


class BookingListResponse(BaseModel):
    bookings: List[BookingLookupSchema] = Field(default_factory=list)


class BookingSummarySchema(BaseModel):
    total: int
    by_status: Dict[BookingStatus, int]

    @classmethod
    def from_domain(cls, obj: BookingSummary) -> "BookingSummarySchema":
        return cls(total=obj.total, by_status=dict(obj.by_status))


class CancelResponse(BaseModel):
    booking_id: int
    cancelled: bool
