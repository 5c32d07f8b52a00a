from tourbook.schemas.booking import Booking, BookingStatus, BookingTab, PaymentStatus, Traveler
from tourbook.schemas.payment import (
    InvalidReason,
    PaymentFormIn,
    PaymentInvalid,
    PaymentValid,
    PaymentValidation,
)
from tourbook.schemas.search import DurationRange, PriceRange, SearchFilters, SortOption
from tourbook.schemas.tour import (
    Coordinates,
    Destination,
    Tour,
    TourAvailability,
    TourCategory,
    TourDifficulty,
    TourType,
)

__all__ = [
    "Booking",
    "BookingStatus",
    "BookingTab",
    "PaymentStatus",
    "Traveler",
    "InvalidReason",
    "PaymentFormIn",
    "PaymentInvalid",
    "PaymentValid",
    "PaymentValidation",
    "DurationRange",
    "PriceRange",
    "SearchFilters",
    "SortOption",
    "Coordinates",
    "Destination",
    "Tour",
    "TourAvailability",
    "TourCategory",
    "TourDifficulty",
    "TourType",
]
