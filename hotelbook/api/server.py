from typing import Annotated, Optional
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, ORJSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from prometheus_client import Counter, Histogram, make_asgi_app

from hotelbook.api.dependencies import BookingServiceDep, RoomsDep
from hotelbook.api.views import templates
from hotelbook.config import Settings, configure_logging, get_settings
from hotelbook.db import HotelStore, create_store_engine
from hotelbook.exceptions.custom import ClientInputError, NotFound, StorageError
from hotelbook.exceptions.handlers import (
    client_input_error_handler,
    not_found_handler,
    storage_error_handler,
)
from hotelbook.utils.schemas import BookingForm, RoomSearch, parse_flag

logger = logging.getLogger(__name__)

# --- Metrics ---
latency_seconds = Histogram(
    "hotelbook_request_latency_seconds", "Request latency", ["method"]
)
bookings_created = Counter("hotelbook_bookings_created_total", "Bookings persisted")
bookings_rejected = Counter(
    "hotelbook_bookings_rejected_total", "Booking submissions that were refused"
)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        store = HotelStore(create_store_engine(settings.sqlalchemy_url)).init()
        app.state.store = store
        logger.info("Hotel booking site ready")
        try:
            yield
        finally:
            store.dispose()

    app = FastAPI(
        title="Hotelbook", lifespan=lifespan, default_response_class=ORJSONResponse
    )

    app.add_exception_handler(ClientInputError, client_input_error_handler)
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(StorageError, storage_error_handler)

    if settings.obs_on:

        @app.middleware("http")
        async def observe_latency(request: Request, call_next):
            start = time.perf_counter()
            try:
                return await call_next(request)
            finally:
                latency_seconds.labels(request.method).observe(time.perf_counter() - start)

        app.mount("/metrics", make_asgi_app())

    if Path(settings.static_dir).is_dir():
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")
    else:
        logger.warning("Static directory %s missing, /static not served", settings.static_dir)

    _register_routes(app)
    return app


def _register_routes(app: FastAPI) -> None:
    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    def home(request: Request, rooms: RoomsDep, has_pool: Optional[str] = None):
        pool = parse_flag(has_pool)
        hotels = rooms.list_hotels(pool)
        return templates.TemplateResponse(
            request,
            "home.html",
            {
                "hotels": hotels,
                "filter_all": pool is None,
                "filter_with_pool": pool is True,
                "filter_no_pool": pool is False,
            },
        )

    @app.get("/search", response_class=HTMLResponse)
    def search(
        request: Request,
        rooms: RoomsDep,
        city: Optional[str] = None,
        guests: Optional[str] = None,
        has_pool: Optional[str] = None,
    ):
        filters = RoomSearch.from_query(city=city, guests=guests, has_pool=has_pool)
        results = rooms.search_rooms(filters)
        return templates.TemplateResponse(
            request,
            "search.html",
            {
                "rooms": results,
                "city": city or "",
                "guests": guests or "",
                "has_pool": filters.has_pool is True,
            },
        )

    @app.get("/hotel/{hotel_id}", response_class=HTMLResponse)
    def hotel_detail(request: Request, hotel_id: int, rooms: RoomsDep):
        hotel = rooms.get_hotel(hotel_id)
        if hotel is None:
            raise NotFound("Hotel", hotel_id)
        return templates.TemplateResponse(
            request,
            "hotel_detail.html",
            {"hotel": hotel, "rooms": rooms.list_rooms_for_hotel(hotel_id)},
        )

    @app.get("/room/{room_id}", response_class=HTMLResponse)
    def room_detail(request: Request, room_id: int, rooms: RoomsDep):
        room = rooms.get_room(room_id)
        if room is None:
            raise NotFound("Room", room_id)
        return templates.TemplateResponse(request, "room_detail.html", {"room": room})

    @app.post("/room/{room_id}/book")
    def book_room(
        room_id: int,
        service: BookingServiceDep,
        guest_name: Annotated[str, Form()],
        guest_email: Annotated[str, Form()],
        check_in: Annotated[str, Form()],
        check_out: Annotated[str, Form()],
        guests: Annotated[str, Form()] = "",
    ):
        form = BookingForm(
            guest_name=guest_name,
            guest_email=guest_email,
            check_in=check_in,
            check_out=check_out,
            guests=guests,
        )
        try:
            booking_id = service.book(room_id, form)
        except (ClientInputError, NotFound):
            bookings_rejected.inc()
            raise
        bookings_created.inc()
        return RedirectResponse(f"/booking/{booking_id}", status_code=303)

    @app.get("/booking/{booking_id}", response_class=HTMLResponse)
    def booking_confirmation(request: Request, booking_id: int, service: BookingServiceDep):
        booking, room = service.confirmation(booking_id)
        return templates.TemplateResponse(
            request, "booking_confirmation.html", {"booking": booking, "room": room}
        )

