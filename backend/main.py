from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from travel_booking.api import routes_booking, routes_health
from travel_booking.api.errors import invalid_route_handler
from travel_booking.core.config import settings
from travel_booking.core.errors import InvalidRouteError
from travel_booking.core.logging import configure_logging
from travel_booking.services.booking_service import BookingService
from travel_booking.services.demo import seed_demo_bookings
from travel_booking.storage.repository import InMemoryRepository


def create_app(repository: InMemoryRepository | None = None) -> FastAPI:
    configure_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if repository is None:
        repository = InMemoryRepository()
        if settings.seed_demo_data:
            seed_demo_bookings(BookingService(repository=repository))

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(routes_booking.router, prefix="/bookings", tags=["booking"])
    app.add_exception_handler(InvalidRouteError, invalid_route_handler)

    # Inject repository into state for dependencies
    app.state.repository = repository
    app.state.settings = settings
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
