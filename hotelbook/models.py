from datetime import date, datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict
from sqlalchemy import CheckConstraint, Column, DateTime
from sqlmodel import Field, SQLModel


def format_cents(cents: int) -> str:
    """Render minor currency units as dollars, e.g. 29900 -> "$299.00"."""
    return f"${cents // 100}.{cents % 100:02d}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Hotel(SQLModel, table=True):
    __tablename__ = "hotels"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str
    address: str
    city: str
    country: str
    star_rating: int
    has_pool: bool = False
    image_url: Optional[str] = None

    @property
    def stars_display(self) -> str:
        return "★" * self.star_rating


class Room(SQLModel, table=True):
    __tablename__ = "rooms"
    __table_args__ = (
        CheckConstraint("price_per_night_cents >= 0", name="ck_rooms_price_non_negative"),
        CheckConstraint("max_guests >= 0", name="ck_rooms_max_guests_non_negative"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    hotel_id: int = Field(foreign_key="hotels.id", index=True)
    name: str
    description: str
    room_type: str
    price_per_night_cents: int
    max_guests: int
    image_url: Optional[str] = None

    @property
    def price_display(self) -> str:
        return format_cents(self.price_per_night_cents)


class Booking(SQLModel, table=True):
    __tablename__ = "bookings"

    id: Optional[int] = Field(default=None, primary_key=True)
    room_id: int = Field(foreign_key="rooms.id", index=True)
    guest_name: str
    guest_email: str
    check_in: date
    check_out: date
    guests: int
    total_cents: int
    created_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    @property
    def total_display(self) -> str:
        return format_cents(self.total_cents)


class RoomWithHotel(BaseModel):
    """A room joined with the hotel it belongs to. Computed per query, never stored."""

    model_config = ConfigDict(frozen=True)

    id: int
    hotel_id: int
    name: str
    description: str
    room_type: str
    price_per_night_cents: int
    max_guests: int
    image_url: Optional[str] = None
    hotel_name: str
    hotel_city: str
    hotel_has_pool: bool = False

    @property
    def price_display(self) -> str:
        return format_cents(self.price_per_night_cents)
