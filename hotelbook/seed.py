"""Catalog inserted the first time the store is found empty."""

SEED_HOTELS = [
    {
        "name": "Grand Plaza Hotel",
        "description": "Luxury downtown hotel with stunning city views and rooftop pool.",
        "address": "100 Main Street",
        "city": "New York",
        "country": "USA",
        "star_rating": 5,
        "has_pool": True,
    },
    {
        "name": "Seaside Resort",
        "description": "Beachfront resort with private beach, spa and pool.",
        "address": "50 Ocean Drive",
        "city": "Miami",
        "country": "USA",
        "star_rating": 5,
        "has_pool": True,
    },
    {
        "name": "Mountain Lodge",
        "description": "Cozy lodge in the mountains. Perfect for skiing.",
        "address": "200 Pine Road",
        "city": "Aspen",
        "country": "USA",
        "star_rating": 4,
        "has_pool": False,
    },
]

# (index into SEED_HOTELS, room fields)
SEED_ROOMS = [
    (0, {"name": "Deluxe King", "description": "Spacious room with king bed and city view.",
         "room_type": "deluxe", "price_per_night_cents": 29900, "max_guests": 2}),
    (0, {"name": "Executive Suite", "description": "Luxury suite with living area and skyline view.",
         "room_type": "suite", "price_per_night_cents": 49900, "max_guests": 4}),
    (0, {"name": "Standard Double", "description": "Comfortable double room with all amenities.",
         "room_type": "standard", "price_per_night_cents": 18900, "max_guests": 2}),
    (1, {"name": "Ocean View Room", "description": "Wake up to the sound of the waves.",
         "room_type": "deluxe", "price_per_night_cents": 34900, "max_guests": 2}),
    (1, {"name": "Beach Bungalow", "description": "Private bungalow steps from the beach.",
         "room_type": "bungalow", "price_per_night_cents": 59900, "max_guests": 4}),
    (1, {"name": "Garden Room", "description": "Quiet room with garden view.",
         "room_type": "standard", "price_per_night_cents": 22900, "max_guests": 2}),
    (2, {"name": "Mountain View", "description": "Room with panoramic mountain views.",
         "room_type": "deluxe", "price_per_night_cents": 27900, "max_guests": 2}),
    (2, {"name": "Family Suite", "description": "Two bedrooms, ideal for families.",
         "room_type": "suite", "price_per_night_cents": 42900, "max_guests": 6}),
]
