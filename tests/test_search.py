import pytest

from hotelbook.utils.schemas import RoomSearch


def _ids(rows):
    return [r.id for r in rows]


def test_unfiltered_search_returns_all_rooms_by_price(rooms):
    rows = rooms.search_rooms(RoomSearch())
    assert len(rows) == 8
    prices = [r.price_per_night_cents for r in rows]
    assert prices == sorted(prices)


def test_city_match_ignores_case(rooms):
    results = [
        _ids(rooms.search_rooms(RoomSearch(city=c, guests=2)))
        for c in ("New York", "NEW YORK", "new york")
    ]
    assert results[0] == results[1] == results[2]
    assert len(results[0]) == 3


def test_blank_city_means_no_filter(rooms):
    assert _ids(rooms.search_rooms(RoomSearch(city=""))) == _ids(rooms.search_rooms(RoomSearch()))
    assert _ids(rooms.search_rooms(RoomSearch(city="   "))) == _ids(rooms.search_rooms(RoomSearch()))


def test_unknown_city_matches_nothing(rooms):
    assert rooms.search_rooms(RoomSearch(city="Paris")) == []


@pytest.mark.parametrize("guests", [0, 1, 2, 3, 4, 5, 6, 7])
def test_guest_filter_respects_capacity(rooms, guests):
    rows = rooms.search_rooms(RoomSearch(guests=guests))
    assert all(r.max_guests >= guests for r in rows)
    everything = rooms.search_rooms(RoomSearch())
    assert len(rows) == sum(1 for r in everything if r.max_guests >= guests)


def test_pool_filter(rooms):
    with_pool = rooms.search_rooms(RoomSearch(has_pool=True))
    without_pool = rooms.search_rooms(RoomSearch(has_pool=False))
    assert len(with_pool) == 6
    assert all(r.hotel_has_pool for r in with_pool)
    assert {r.hotel_name for r in without_pool} == {"Mountain Lodge"}


def test_filters_are_combined(rooms):
    rows = rooms.search_rooms(RoomSearch(city="miami", guests=3, has_pool=True))
    assert [r.name for r in rows] == ["Beach Bungalow"]

    assert rooms.search_rooms(RoomSearch(city="aspen", has_pool=True)) == []
