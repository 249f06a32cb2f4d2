from pydantic import BaseModel, field_validator
from typing import Optional


# SQLite INTEGER is a signed 64-bit value
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TRUE_FLAGS = ("1", "true", "yes", "on")
FALSE_FLAGS = ("0", "false", "no", "off")


def parse_flag(raw: Optional[str]) -> Optional[bool]:
    """Decode a yes/no query parameter. Unknown or missing values mean "no filter"."""
    if raw is None:
        return None
    v = raw.strip().lower()
    if v in TRUE_FLAGS:
        return True
    if v in FALSE_FLAGS:
        return False
    return None


def fits_int64(n: int) -> bool:
    return INT64_MIN <= n <= INT64_MAX


def parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        n = int(raw.strip())
    except ValueError:
        return None
    return n if fits_int64(n) else None


# -------- Search --------


class RoomSearch(BaseModel):
    city: Optional[str] = None
    guests: Optional[int] = None
    has_pool: Optional[bool] = None

    @field_validator("city")
    @classmethod
    def blank_city_is_no_filter(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("guests")
    @classmethod
    def out_of_range_guests_is_no_filter(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and not fits_int64(v):
            return None
        return v

    @classmethod
    def from_query(
        cls,
        city: Optional[str] = None,
        guests: Optional[str] = None,
        has_pool: Optional[str] = None,
    ) -> "RoomSearch":
        return cls(city=city, guests=parse_int(guests), has_pool=parse_flag(has_pool))


# -------- Booking --------


class BookingForm(BaseModel):
    guest_name: str
    guest_email: str
    check_in: str  # "YYYY-MM-DD"
    check_out: str  # "YYYY-MM-DD"
    guests: str = "1"
