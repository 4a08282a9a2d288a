from __future__ import annotations

import threading
from dataclasses import replace
from typing import Callable, List, Optional

from travel_booking.models.domain import Booking, BookingStatus


class InMemoryRepository:
    """
    Ordered in-memory store of bookings plus the id counter.

    Records are owned here; every read hands out a copy so callers cannot
    change a stored booking except through ``update_status``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.bookings: List[Booking] = []
        self._next_id = 1

    def reset(self) -> None:
        with self._lock:
            self.bookings = []
            self._next_id = 1

    def add_booking(self, build: Callable[[int], Booking]) -> Booking:
        """Build a booking with the next id and append it in one locked step."""
        with self._lock:
            booking = build(self._next_id)
            self._next_id += 1
            self.bookings.append(booking)
            return replace(booking)

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        with self._lock:
            booking = self._find(booking_id)
            return replace(booking) if booking else None

    def list_bookings(self) -> List[Booking]:
        with self._lock:
            return [replace(b) for b in self.bookings]

    def update_status(self, booking_id: int, status: BookingStatus) -> Optional[Booking]:
        with self._lock:
            booking = self._find(booking_id)
            if booking is None:
                return None
            booking.status = status
            return replace(booking)

    def _find(self, booking_id: int) -> Optional[Booking]:
        return next((b for b in self.bookings if b.id == booking_id), None)

    def __len__(self) -> int:
        with self._lock:
            return len(self.bookings)
