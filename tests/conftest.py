import pytest
from fastapi.testclient import TestClient

from hotelbook.api.server import create_app
from hotelbook.config import Settings
from hotelbook.db import HotelStore, create_store_engine
from hotelbook.repositories.booking_repo import BookingRepo
from hotelbook.repositories.rooms_repo import RoomsRepo


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "hotel.db")


@pytest.fixture
def store(db_path):
    s = HotelStore(create_store_engine(f"sqlite:///{db_path}")).init()
    yield s
    s.dispose()


@pytest.fixture
def rooms(store):
    return RoomsRepo(store)


@pytest.fixture
def bookings(store):
    return BookingRepo(store)


@pytest.fixture
def client(db_path):
    app = create_app(Settings(database_url=db_path, obs_on=False))
    with TestClient(app) as c:
        yield c
