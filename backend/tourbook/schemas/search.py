from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from tourbook.schemas.tour import Tour, TourCategory, TourDifficulty


class SortOption(str, Enum):
    PRICE_LOW_HIGH = "price_asc"
    PRICE_HIGH_LOW = "price_desc"
    RATING = "rating"
    DURATION = "duration"
    POPULARITY = "popularity"
    DATE = "date"


# min > max is allowed on purpose: the range then matches nothing.
class PriceRange(BaseModel):
    min: float
    max: float


class DurationRange(BaseModel):
    min: int
    max: int


class SearchFilters(BaseModel):
    price_range: PriceRange | None = None
    duration: DurationRange | None = None
    category: list[TourCategory] | None = None
    difficulty: list[TourDifficulty] | None = None
    rating: float | None = Field(None, ge=0, le=5)
    sort_by: SortOption | None = None


class SearchRequestIn(BaseModel):
    query: str | None = Field(None, max_length=200)
    filters: SearchFilters | None = None

    @field_validator("query", mode="before")
    @classmethod
    def _strip_query(cls, value: str | None) -> str | None:
        return value.strip() if isinstance(value, str) else value


class SearchResponse(BaseModel):
    search_key: str
    total: int
    tours: list[Tour]
