from typing import List, Optional
from sqlmodel import select
from sqlalchemy import func
from ..db import HotelStore
from ..models import Hotel, Room, RoomWithHotel
from ..utils.schemas import RoomSearch, fits_int64


def _joined(room: Room, hotel: Hotel) -> RoomWithHotel:
    return RoomWithHotel(
        id=room.id,
        hotel_id=room.hotel_id,
        name=room.name,
        description=room.description,
        room_type=room.room_type,
        price_per_night_cents=room.price_per_night_cents,
        max_guests=room.max_guests,
        image_url=room.image_url,
        hotel_name=hotel.name,
        hotel_city=hotel.city,
        hotel_has_pool=hotel.has_pool,
    )


class RoomsRepo:
    """Read side of the catalog: hotels, their rooms and the room search."""

    def __init__(self, store: HotelStore):
        self.store = store

    def list_hotels(self, has_pool: Optional[bool] = None) -> List[Hotel]:
        with self.store.session() as session:
            q = select(Hotel)
            if has_pool is not None:
                q = q.where(Hotel.has_pool == has_pool)
            return list(session.exec(q.order_by(Hotel.name)).all())

    def get_hotel(self, hotel_id: int) -> Optional[Hotel]:
        if not fits_int64(hotel_id):
            return None
        with self.store.session() as session:
            return session.get(Hotel, hotel_id)

    def list_rooms_for_hotel(self, hotel_id: int) -> List[Room]:
        if not fits_int64(hotel_id):
            return []
        with self.store.session() as session:
            q = (
                select(Room)
                .where(Room.hotel_id == hotel_id)
                .order_by(Room.price_per_night_cents, Room.id)
            )
            return list(session.exec(q).all())

    def search_rooms(self, filters: RoomSearch) -> List[RoomWithHotel]:
        with self.store.session() as session:
            q = select(Room, Hotel).join(Hotel, Hotel.id == Room.hotel_id)
            if filters.city is not None:
                q = q.where(func.lower(Hotel.city) == filters.city.lower())
            if filters.guests is not None:
                q = q.where(Room.max_guests >= filters.guests)
            if filters.has_pool is not None:
                q = q.where(Hotel.has_pool == filters.has_pool)

            q = q.order_by(Room.price_per_night_cents, Room.id)
            return [_joined(room, hotel) for room, hotel in session.exec(q).all()]

    def get_room(self, room_id: int) -> Optional[RoomWithHotel]:
        if not fits_int64(room_id):
            return None
        with self.store.session() as session:
            q = (
                select(Room, Hotel)
                .join(Hotel, Hotel.id == Room.hotel_id)
                .where(Room.id == room_id)
            )
            row = session.exec(q).first()
            return _joined(*row) if row else None

    def count_hotels(self) -> int:
        with self.store.session() as session:
            return session.exec(select(func.count()).select_from(Hotel)).one()

    def count_rooms(self) -> int:
        with self.store.session() as session:
            return session.exec(select(func.count()).select_from(Room)).one()
