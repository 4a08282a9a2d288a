from fastapi import APIRouter, Depends

from travel_booking.api import get_repository
from travel_booking.storage.repository import InMemoryRepository

router = APIRouter()


@router.get("/health")
def healthcheck(repository: InMemoryRepository = Depends(get_repository)) -> dict:
    return {"status": "ok", "bookings": len(repository)}
