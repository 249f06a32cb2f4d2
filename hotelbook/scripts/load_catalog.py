"""Load hotel and room reference data from CSV files.

Usage:
    python -m hotelbook.scripts.load_catalog data/hotels.csv data/rooms.csv

Hotels and rooms are never created through the website; this is the
out-of-band way to extend the catalog beyond the seed data.
"""
import argparse
import csv
import logging

from sqlalchemy import case, func, select, text

from hotelbook.config import configure_logging, get_settings
from hotelbook.db import HotelStore, create_store_engine
from hotelbook.models import Hotel

logger = logging.getLogger(__name__)


# -------- utils --------
def _clean(row: dict) -> dict:
    """Lower-case headers (dropping an Excel BOM) and strip cell whitespace."""
    cleaned = {}
    for key, value in row.items():
        key = (key or "").lstrip("\ufeff").strip().lower()
        cleaned[key] = value.strip() if isinstance(value, str) else value
    return cleaned


def _int(x, default=None):
    try:
        if x is None or x == "":
            return default
        return int(float(str(x).replace(",", "")))
    except ValueError:
        return default


def _cents(row: dict) -> int:
    """Accept either an integer cents column or a decimal price column."""
    if row.get("price_per_night_cents"):
        return _int(row["price_per_night_cents"], 0)
    price = row.get("price_per_night") or row.get("price") or "0"
    try:
        return round(float(str(price).replace(",", "").lstrip("$")) * 100)
    except ValueError:
        return 0


def _bool(x, default=False):
    if x is None:
        return default
    return str(x).strip().lower() in ("true", "1", "yes", "y")


# -------- loaders --------
def load_hotels(store: HotelStore, path: str) -> int:
    n = 0
    with store.engine.begin() as cx, open(path, newline="", encoding="utf-8") as f:
        for raw in csv.DictReader(f):
            r = _clean(raw)
            name = r.get("name") or r.get("hotel_name")
            if not name:
                continue
            cx.execute(
                text(
                    """
                INSERT INTO hotels (name,description,address,city,country,star_rating,has_pool,image_url)
                VALUES (:name,:description,:address,:city,:country,:star_rating,:has_pool,:image_url)
                """
                ),
                {
                    "name": name,
                    "description": r.get("description", ""),
                    "address": r.get("address", ""),
                    "city": r.get("city", ""),
                    "country": r.get("country", ""),
                    "star_rating": _int(r.get("star_rating") or r.get("stars"), 3),
                    "has_pool": _bool(r.get("has_pool") or r.get("pool")),
                    "image_url": r.get("image_url") or None,
                },
            )
            n += 1
    logger.info("Loaded %d hotels from %s", n, path)
    return n


def _hotel_id_by_name(cx, name: str | None, city: str | None = None) -> int | None:
    if not name:
        return None
    q = select(Hotel.id).where(func.lower(Hotel.name) == name.lower())
    if city:
        # same name in another city is still accepted, just ranked last
        q = q.order_by(case((func.lower(Hotel.city) == city.lower(), 0), else_=1), Hotel.id)
    return cx.execute(q.limit(1)).scalar()


def load_rooms(store: HotelStore, path: str) -> int:
    n = 0
    with store.engine.begin() as cx, open(path, newline="", encoding="utf-8") as f:
        for raw in csv.DictReader(f):
            r = _clean(raw)
            hotel_id = _int(r.get("hotel_id"))
            if hotel_id is None:
                hotel_id = _hotel_id_by_name(cx, r.get("hotel_name"), r.get("city"))
            if hotel_id is None:
                logger.warning("Skipping room %r: unknown hotel", r.get("name"))
                continue
            cx.execute(
                text(
                    """
                INSERT INTO rooms (hotel_id,name,description,room_type,price_per_night_cents,max_guests,image_url)
                VALUES (:hotel_id,:name,:description,:room_type,:price,:max_guests,:image_url)
                """
                ),
                {
                    "hotel_id": hotel_id,
                    "name": r.get("name") or r.get("room_name") or "",
                    "description": r.get("description", ""),
                    "room_type": r.get("room_type") or r.get("type") or "standard",
                    "price": max(_cents(r), 0),
                    "max_guests": max(_int(r.get("max_guests") or r.get("occupancy"), 2), 0),
                    "image_url": r.get("image_url") or None,
                },
            )
            n += 1
    logger.info("Loaded %d rooms from %s", n, path)
    return n


def main(argv=None):
    ap = argparse.ArgumentParser(description="Load hotels and rooms from CSV")
    ap.add_argument("hotels", help="CSV with hotel rows")
    ap.add_argument("rooms", nargs="?", help="CSV with room rows")
    args = ap.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    store = HotelStore(create_store_engine(settings.sqlalchemy_url)).init()
    try:
        hotels = load_hotels(store, args.hotels)
        rooms = load_rooms(store, args.rooms) if args.rooms else 0
    finally:
        store.dispose()
    print(f"Loaded {hotels} hotels, {rooms} rooms.")


if __name__ == "__main__":
    main()
