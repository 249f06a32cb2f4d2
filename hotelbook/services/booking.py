import logging
import re
from datetime import date
from typing import Tuple

from hotelbook.exceptions.custom import ClientInputError, NotFound
from hotelbook.models import Booking, RoomWithHotel
from hotelbook.repositories.booking_repo import BookingRepo
from hotelbook.repositories.rooms_repo import RoomsRepo
from hotelbook.utils.schemas import BookingForm, parse_int

logger = logging.getLogger(__name__)

ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_stay_date(value: str, field: str) -> date:
    value = (value or "").strip()
    if not ISO_DATE.fullmatch(value):
        raise ClientInputError(f"{field} must be a date in YYYY-MM-DD format", field=field)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ClientInputError(f"{field} is not a valid calendar date", field=field)


def parse_guest_count(value: str) -> int:
    """Party size from the form. Unparsable input falls back to 1 instead of being rejected."""
    guests = parse_int(value or "")
    if guests is None:
        return 1
    return max(guests, 1)


def quote_total(price_per_night_cents: int, check_in: date, check_out: date) -> Tuple[int, int]:
    """Return (nights, total in cents) for a stay."""
    nights = (check_out - check_in).days
    if nights <= 0:
        raise ClientInputError("check_out must be after check_in", field="check_out")
    return nights, price_per_night_cents * nights


class BookingService:
    def __init__(self, rooms: RoomsRepo, bookings: BookingRepo):
        self.rooms = rooms
        self.bookings = bookings

    def book(self, room_id: int, form: BookingForm) -> int:
        check_in = parse_stay_date(form.check_in, "check_in")
        check_out = parse_stay_date(form.check_out, "check_out")
        if check_out <= check_in:
            raise ClientInputError("check_out must be after check_in", field="check_out")
        guests = parse_guest_count(form.guests)

        room = self.rooms.get_room(room_id)
        if room is None:
            raise NotFound("Room", room_id)

        # price is copied into the booking; later rate changes don't touch it
        nights, total_cents = quote_total(room.price_per_night_cents, check_in, check_out)

        booking_id = self.bookings.create_booking(
            room_id=room_id,
            guest_name=form.guest_name,
            guest_email=form.guest_email,
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            total_cents=total_cents,
        )
        logger.info(
            "Booking %s created: room=%s nights=%s guests=%s total_cents=%s",
            booking_id, room_id, nights, guests, total_cents,
        )
        return booking_id

    def confirmation(self, booking_id: int) -> Tuple[Booking, RoomWithHotel]:
        booking = self.bookings.get_booking(booking_id)
        if booking is None:
            raise NotFound("Booking", booking_id)
        room = self.rooms.get_room(booking.room_id)
        if room is None:
            raise NotFound("Room", booking.room_id)
        return booking, room
