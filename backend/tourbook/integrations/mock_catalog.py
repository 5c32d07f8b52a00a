from __future__ import annotations

import threading
from typing import Any

from tourbook.schemas.booking import Booking
from tourbook.schemas.payment import PaymentFormIn
from tourbook.schemas.tour import Destination, Tour
from tourbook.services.booking_service import confirm_payment
from tourbook.services.payment_service import Today

DESTINATIONS_DATA: list[dict[str, Any]] = [
    {
        "id": "1",
        "name": "Rio de Janeiro",
        "country": "Brazil",
        "continent": "South America",
        "coordinates": {"latitude": -22.9068, "longitude": -43.1729},
        "timezone": "America/Sao_Paulo",
        "currency": "BRL",
        "language": "Portuguese",
        "description": (
            "Rio de Janeiro is one of Brazil's most iconic cities, known for its "
            "beaches, vibrant culture and dramatic landscapes."
        ),
        "attractions": [
            "Christ the Redeemer",
            "Sugarloaf Mountain",
            "Copacabana Beach",
            "Ipanema Beach",
        ],
        "best_time_to_visit": "December to March",
        "climate": "Tropical",
    },
    {
        "id": "2",
        "name": "Patagonia",
        "country": "Argentina",
        "continent": "South America",
        "coordinates": {"latitude": -50.9423, "longitude": -73.4068},
        "timezone": "America/Argentina/Buenos_Aires",
        "currency": "ARS",
        "language": "Spanish",
        "description": (
            "Patagonia sits at the southern end of South America and is known "
            "for glaciers, peaks and pristine wilderness."
        ),
        "attractions": [
            "Torres del Paine",
            "Perito Moreno Glacier",
            "Mount Fitz Roy",
            "Ushuaia",
        ],
        "best_time_to_visit": "November to March",
        "climate": "Subpolar",
    },
    {
        "id": "3",
        "name": "Santorini",
        "country": "Greece",
        "continent": "Europe",
        "coordinates": {"latitude": 36.3932, "longitude": 25.4615},
        "timezone": "Europe/Athens",
        "currency": "EUR",
        "language": "Greek",
        "description": (
            "Santorini is a Greek island in the southern Aegean Sea, famous for "
            "its sunsets and white-washed architecture."
        ),
        "attractions": ["Oia Village", "Red Beach", "Akrotiri", "Fira Town"],
        "best_time_to_visit": "April to October",
        "climate": "Mediterranean",
    },
]

TOURS_DATA: list[dict[str, Any]] = [
    {
        "id": "1",
        "title": "Iconic Brazil Adventure",
        "short_description": (
            "Explore Rio's iconic landmarks, beaches and culture in this "
            "Brazilian adventure."
        ),
        "price": 2850,
        "original_price": 3200,
        "currency": "USD",
        "duration": 8,
        "max_group_size": 12,
        "difficulty": "moderate",
        "type": "international",
        "category": "cultural",
        "destination_id": "1",
        "inclusions": ["Accommodation", "Daily breakfast", "Professional guide"],
        "exclusions": ["International flights", "Travel insurance"],
        "rating": 4.8,
        "review_count": 143,
        "availability": [
            {
                "id": "1",
                "start_date": "2024-03-15",
                "end_date": "2024-03-23",
                "available_spots": 8,
                "price": 2850,
            }
        ],
        "start_date": "2024-03-15",
        "end_date": "2024-03-23",
        "is_active": True,
        "is_featured": True,
    },
    {
        "id": "2",
        "title": "Patagonia Wilderness Trek",
        "short_description": (
            "Trek through Patagonia's landscapes and some of the world's most "
            "dramatic scenery."
        ),
        "price": 4200,
        "currency": "USD",
        "duration": 12,
        "max_group_size": 8,
        "difficulty": "challenging",
        "type": "international",
        "category": "adventure",
        "destination_id": "2",
        "inclusions": ["Accommodation", "All meals", "Camping equipment"],
        "exclusions": ["International flights", "Personal gear", "Tips"],
        "rating": 4.9,
        "review_count": 87,
        "availability": [
            {
                "id": "2",
                "start_date": "2024-04-01",
                "end_date": "2024-04-13",
                "available_spots": 5,
                "price": 4200,
            }
        ],
        "start_date": "2024-04-01",
        "end_date": "2024-04-13",
        "is_active": True,
        "is_featured": False,
    },
    {
        "id": "3",
        "title": "Santorini Island Escape",
        "short_description": (
            "Relax on the Greek island of Santorini with its iconic architecture "
            "and sunsets."
        ),
        "price": 1850,
        "currency": "USD",
        "duration": 5,
        "max_group_size": 16,
        "difficulty": "easy",
        "type": "international",
        "category": "beach",
        "destination_id": "3",
        "inclusions": ["Accommodation", "Airport transfers", "Sunset cruise"],
        "exclusions": ["International flights", "Lunch and dinner"],
        "rating": 4.7,
        "review_count": 256,
        "availability": [
            {
                "id": "3",
                "start_date": "2024-05-10",
                "end_date": "2024-05-15",
                "available_spots": 12,
                "price": 1850,
            }
        ],
        "start_date": "2024-05-10",
        "end_date": "2024-05-15",
        "is_active": True,
        "is_featured": True,
    },
]

BOOKINGS_DATA: list[dict[str, Any]] = [
    {
        "id": "1",
        "user_id": "1",
        "tour_id": "1",
        "start_date": "2027-03-15",
        "status": "confirmed",
        "travelers": [
            {
                "first_name": "Vanessa",
                "last_name": "Johnson",
                "email": "vanessa@example.com",
                "phone": "+1234567890",
                "date_of_birth": "1990-05-15",
                "nationality": "US",
            }
        ],
        "total_amount": 2850,
        "currency": "USD",
        "payment_status": "paid",
        "payment_method": "card",
        "created_at": "2024-01-15T10:00:00Z",
        "updated_at": "2024-01-15T10:00:00Z",
    },
    {
        "id": "2",
        "user_id": "1",
        "tour_id": "2",
        "start_date": "2027-04-01",
        "status": "pending",
        "travelers": [
            {
                "first_name": "Vanessa",
                "last_name": "Johnson",
                "email": "vanessa@example.com",
                "phone": "+1234567890",
                "date_of_birth": "1990-05-15",
                "nationality": "US",
            }
        ],
        "total_amount": 4200,
        "currency": "USD",
        "payment_status": "pending",
        "created_at": "2024-01-20T14:30:00Z",
        "updated_at": "2024-01-20T14:30:00Z",
    },
]


class MockCatalog:
    """In-memory source of destinations, tours and bookings."""

    def __init__(
        self,
        *,
        destinations: list[dict[str, Any]] | None = None,
        tours: list[dict[str, Any]] | None = None,
        bookings: list[dict[str, Any]] | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._destinations = [
            Destination.model_validate(item)
            for item in (DESTINATIONS_DATA if destinations is None else destinations)
        ]
        by_id = {destination.id: destination for destination in self._destinations}
        self._tours = [
            _build_tour(item, by_id)
            for item in (TOURS_DATA if tours is None else tours)
        ]
        tours_by_id = {tour.id: tour for tour in self._tours}
        self._bookings = {
            booking.id: booking
            for booking in (
                _build_booking(item, tours_by_id)
                for item in (BOOKINGS_DATA if bookings is None else bookings)
            )
        }

    def list_destinations(self) -> list[Destination]:
        return list(self._destinations)

    def list_tours(self) -> list[Tour]:
        return list(self._tours)

    def get_tour(self, tour_id: str) -> Tour | None:
        return next((tour for tour in self._tours if tour.id == tour_id), None)

    def list_bookings(self) -> list[Booking]:
        with self._lock:
            return list(self._bookings.values())

    def get_booking(self, booking_id: str) -> Booking | None:
        with self._lock:
            return self._bookings.get(booking_id)

    def save_booking(self, booking: Booking) -> None:
        with self._lock:
            self._bookings[booking.id] = booking

    def pay_booking(
        self,
        booking_id: str,
        form: PaymentFormIn,
        *,
        today: Today = None,
    ) -> Booking | None:
        """Confirm payment for a stored booking; None when the id is unknown.

        Lookup, status check and write happen under one lock, so a booking is
        paid at most once.
        """
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                return None
            paid = confirm_payment(booking, form, today=today)
            self._bookings[booking_id] = paid
            return paid


def _build_tour(item: dict[str, Any], destinations: dict[str, Destination]) -> Tour:
    payload = dict(item)
    destination_id = payload.pop("destination_id")
    destination = destinations.get(destination_id)
    if destination is None:
        raise ValueError(f"Unknown destination_id for tour {item.get('id')}: {destination_id}")
    payload["destination"] = destination
    return Tour.model_validate(payload)


def _build_booking(item: dict[str, Any], tours: dict[str, Tour]) -> Booking:
    payload = dict(item)
    tour_id = payload.pop("tour_id")
    tour = tours.get(tour_id)
    if tour is None:
        raise ValueError(f"Unknown tour_id for booking {item.get('id')}: {tour_id}")
    payload["tour"] = tour
    return Booking.model_validate(payload)


_catalog: MockCatalog | None = None


def get_catalog() -> MockCatalog:
    global _catalog
    if _catalog is None:
        _catalog = MockCatalog()
    return _catalog
