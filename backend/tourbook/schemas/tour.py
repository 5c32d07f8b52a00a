from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TourDifficulty(str, Enum):
    EASY = "easy"
    MODERATE = "moderate"
    CHALLENGING = "challenging"
    EXTREME = "extreme"


class TourType(str, Enum):
    DOMESTIC = "domestic"
    INTERNATIONAL = "international"


class TourCategory(str, Enum):
    ADVENTURE = "adventure"
    CULTURAL = "cultural"
    NATURE = "nature"
    HISTORICAL = "historical"
    BEACH = "beach"
    CITY = "city"
    WILDLIFE = "wildlife"
    LUXURY = "luxury"


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class Destination(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    country: str
    continent: str | None = None
    coordinates: Coordinates | None = None
    timezone: str | None = None
    currency: str | None = None
    language: str | None = None
    description: str = ""
    attractions: tuple[str, ...] = ()
    best_time_to_visit: str | None = None
    climate: str | None = None


class TourAvailability(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    start_date: date
    end_date: date
    available_spots: int = Field(..., ge=0)
    price: float = Field(..., ge=0)
    is_active: bool = True


class Tour(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    short_description: str = ""
    description: str = ""
    price: float = Field(..., ge=0)
    original_price: float | None = Field(None, ge=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    duration: int = Field(..., ge=1)
    max_group_size: int = Field(..., ge=1)
    difficulty: TourDifficulty
    type: TourType = TourType.INTERNATIONAL
    category: TourCategory
    destination: Destination
    rating: float = Field(0.0, ge=0.0, le=5.0)
    review_count: int = Field(0, ge=0)
    inclusions: tuple[str, ...] = ()
    exclusions: tuple[str, ...] = ()
    availability: tuple[TourAvailability, ...] = ()
    start_date: date | None = None
    end_date: date | None = None
    is_active: bool = True
    is_featured: bool = False

    @field_validator("currency", mode="before")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value
