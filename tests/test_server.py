from sqlalchemy import text

BOOKING = {
    "guest_name": "Ada Lovelace",
    "guest_email": "ada@example.com",
    "check_in": "2025-06-01",
    "check_out": "2025-06-04",
    "guests": "2",
}


def test_home_lists_hotels(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "text/html" in r.headers["content-type"]
    for name in ("Grand Plaza Hotel", "Seaside Resort", "Mountain Lodge"):
        assert name in r.text


def test_home_pool_filter(client):
    r = client.get("/", params={"has_pool": "0"})
    assert "Mountain Lodge" in r.text
    assert "Seaside Resort" not in r.text

    r = client.get("/", params={"has_pool": "yes"})
    assert "Mountain Lodge" not in r.text
    assert "Grand Plaza Hotel" in r.text


def test_home_unknown_pool_value_shows_everything(client):
    r = client.get("/", params={"has_pool": "perhaps"})
    assert "Mountain Lodge" in r.text
    assert "Seaside Resort" in r.text


def test_search(client):
    r = client.get("/search", params={"city": "MIAMI", "guests": "3"})
    assert r.status_code == 200
    assert "Beach Bungalow" in r.text
    assert "Ocean View Room" not in r.text
    assert "Family Suite" not in r.text


def test_search_ignores_unparsable_guests(client):
    r = client.get("/search", params={"guests": "lots"})
    assert r.status_code == 200
    assert "Family Suite" in r.text
    assert "Garden Room" in r.text


def test_hotel_detail(client):
    r = client.get("/hotel/1")
    assert r.status_code == 200
    assert "Executive Suite" in r.text
    assert "$189.00" in r.text


def test_hotel_detail_not_found(client):
    r = client.get("/hotel/999")
    assert r.status_code == 404


def test_room_detail(client):
    r = client.get("/room/8")
    assert r.status_code == 200
    assert "Family Suite" in r.text
    assert "Mountain Lodge" in r.text
    assert 'action="/room/8/book"' in r.text


def test_room_detail_not_found(client):
    assert client.get("/room/999").status_code == 404


def test_booking_redirects_to_confirmation(client):
    r = client.post("/room/1/book", data=BOOKING, follow_redirects=False)
    assert r.status_code == 303
    location = r.headers["location"]
    assert location.startswith("/booking/")

    page = client.get(location)
    assert page.status_code == 200
    assert "Deluxe King" in page.text
    assert "Grand Plaza Hotel" in page.text
    assert "$897.00" in page.text


def test_booking_rejects_same_day_checkout(client):
    data = dict(BOOKING, check_out="2025-06-01")
    r = client.post("/room/1/book", data=data, follow_redirects=False)
    assert r.status_code == 400


def test_booking_rejects_malformed_date(client):
    data = dict(BOOKING, check_in="June 1st")
    r = client.post("/room/1/book", data=data, follow_redirects=False)
    assert r.status_code == 400


def test_booking_unknown_room(client):
    r = client.post("/room/999/book", data=BOOKING, follow_redirects=False)
    assert r.status_code == 404


def test_booking_confirmation_not_found(client):
    assert client.get("/booking/999").status_code == 404


def test_storage_failure_is_500(client):
    store = client.app.state.store
    with store.engine.begin() as conn:
        conn.execute(text("DROP TABLE bookings"))

    r = client.get("/booking/1")
    assert r.status_code == 500
    assert "Something went wrong" in r.text
    assert "bookings" not in r.text


def test_healthz(client):
    assert client.get("/healthz").json() == {"status": "ok"}


def test_static_script_served(client):
    r = client.get("/static/js/app.js")
    assert r.status_code == 200
    assert "check_out" in r.text


def test_metrics_exposed_when_enabled(db_path):
    from fastapi.testclient import TestClient

    from hotelbook.api.server import create_app
    from hotelbook.config import Settings

    app = create_app(Settings(database_url=db_path, obs_on=True))
    with TestClient(app) as c:
        c.post("/room/2/book", data=BOOKING, follow_redirects=False)
        r = c.get("/metrics/")
    assert r.status_code == 200
    assert "hotelbook_bookings_created_total" in r.text
    assert "hotelbook_request_latency_seconds" in r.text


def test_ids_beyond_64_bits_are_not_found(client):
    huge = "99999999999999999999"
    assert client.get(f"/hotel/{huge}").status_code == 404
    assert client.get(f"/room/{huge}").status_code == 404
    assert client.get(f"/booking/{huge}").status_code == 404
    r = client.post(f"/room/{huge}/book", data=BOOKING, follow_redirects=False)
    assert r.status_code == 404


def test_search_oversized_guests_is_no_filter(client):
    r = client.get("/search", params={"guests": "99999999999999999999"})
    assert r.status_code == 200
    assert "Family Suite" in r.text
    assert "Garden Room" in r.text


def test_booking_oversized_guests_books_one(client):
    data = dict(BOOKING, guests="99999999999999999999")
    r = client.post("/room/1/book", data=data, follow_redirects=False)
    assert r.status_code == 303

    page = client.get(r.headers["location"])
    assert page.status_code == 200
    assert "<dt>Guests</dt><dd>1</dd>" in page.text


def test_create_app_reads_environment(monkeypatch, db_path):
    from fastapi.testclient import TestClient

    from hotelbook.api.server import create_app

    monkeypatch.setenv("DATABASE_URL", db_path)
    monkeypatch.setenv("OBS_ON", "off")
    with TestClient(create_app()) as c:
        assert c.get("/").status_code == 200
        assert c.get("/metrics/").status_code == 404
        assert c.app.state.store.engine.url.database == db_path
