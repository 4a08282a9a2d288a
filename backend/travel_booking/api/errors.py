import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from travel_booking.core.errors import InvalidRouteError

logger = logging.getLogger(__name__)


async def invalid_route_handler(request: Request, exc: InvalidRouteError) -> JSONResponse:
    logger.warning("Rejected booking request: %s", exc)
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc), "route": list(exc.route)},
    )
