from typing import Annotated

from fastapi import Depends, Request

from hotelbook.db import HotelStore
from hotelbook.repositories.booking_repo import BookingRepo
from hotelbook.repositories.rooms_repo import RoomsRepo
from hotelbook.services.booking import BookingService


def get_store(request: Request) -> HotelStore:
    return request.app.state.store


def get_rooms_repo(store: Annotated[HotelStore, Depends(get_store)]) -> RoomsRepo:
    return RoomsRepo(store)


def get_booking_service(store: Annotated[HotelStore, Depends(get_store)]) -> BookingService:
    return BookingService(RoomsRepo(store), BookingRepo(store))


RoomsDep = Annotated[RoomsRepo, Depends(get_rooms_repo)]
BookingServiceDep = Annotated[BookingService, Depends(get_booking_service)]
