from datetime import date
from typing import Optional

from ..db import HotelStore
from ..models import Booking
from ..utils.schemas import fits_int64


class BookingRepo:
    def __init__(self, store: HotelStore):
        self.store = store

    def create_booking(
        self,
        room_id: int,
        guest_name: str,
        guest_email: str,
        check_in: date,
        check_out: date,
        guests: int,
        total_cents: int,
    ) -> int:
        """Insert one booking and return its id.

        No check that the room exists, that the dates are free or that the
        party fits the room. Callers resolve the room first.
        """
        booking = Booking(
            room_id=room_id,
            guest_name=guest_name,
            guest_email=guest_email,
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            total_cents=total_cents,
        )
        with self.store.session() as session:
            session.add(booking)
            session.commit()
            session.refresh(booking)
            return booking.id

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        if not fits_int64(booking_id):
            return None
        with self.store.session() as session:
            return session.get(Booking, booking_id)
