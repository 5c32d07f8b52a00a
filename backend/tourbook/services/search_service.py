from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Callable, Sequence

from tourbook.core.config import settings
from tourbook.schemas.search import (
    DurationRange,
    PriceRange,
    SearchFilters,
    SearchRequestIn,
    SortOption,
)
from tourbook.schemas.tour import Destination, Tour

logger = logging.getLogger(__name__)

TourPredicate = Callable[[Tour], bool]

# (sort key, descending); sorted() keeps ties in input order for both directions.
SORT_KEYS: dict[SortOption, tuple[Callable[[Tour], float], bool]] = {
    SortOption.PRICE_LOW_HIGH: (lambda tour: tour.price, False),
    SortOption.PRICE_HIGH_LOW: (lambda tour: tour.price, True),
    SortOption.RATING: (lambda tour: tour.rating, True),
    SortOption.DURATION: (lambda tour: tour.duration, False),
    SortOption.POPULARITY: (lambda tour: tour.review_count, True),
}


def search_tours(
    tours: Sequence[Tour],
    query: str | None = None,
    filters: SearchFilters | None = None,
) -> list[Tour]:
    """Filter and sort ``tours`` against a free-text query and a filter set.

    Every active constraint must hold for a tour to be kept. Constraints that
    are not set are skipped. The input sequence is never modified and the
    result is always a new list, in input order unless ``filters.sort_by``
    names a comparator.
    """
    predicates = _build_predicates(query, filters)
    results = [tour for tour in tours if all(check(tour) for check in predicates)]

    sort_by = filters.sort_by if filters else None
    sort_spec = SORT_KEYS.get(sort_by) if sort_by else None
    if sort_spec:
        key, descending = sort_spec
        results = sorted(results, key=key, reverse=descending)

    logger.debug(
        "search_tours matched %d of %d tours (query=%r, sort_by=%s)",
        len(results),
        len(tours),
        query,
        sort_by.value if sort_by else None,
    )
    return results


def get_featured_tours(tours: Sequence[Tour]) -> list[Tour]:
    return [tour for tour in tours if tour.is_featured]


def get_popular_destinations(
    destinations: Sequence[Destination], limit: int | None = None
) -> list[Destination]:
    if limit is None:
        limit = settings.popular_destinations_limit
    return list(destinations[: max(limit, 0)])


def default_filters() -> SearchFilters:
    """Filter state the search screen falls back to on reset."""
    return SearchFilters(
        price_range=PriceRange(
            min=settings.default_price_min, max=settings.default_price_max
        ),
        duration=DurationRange(
            min=settings.default_duration_min, max=settings.default_duration_max
        ),
        sort_by=SortOption.POPULARITY,
    )


def toggle_favorite(favorites: Sequence[str], tour_id: str) -> list[str]:
    if tour_id in favorites:
        return [fav for fav in favorites if fav != tour_id]
    return [*favorites, tour_id]


def compute_search_key(request: SearchRequestIn) -> str:
    payload = request.model_dump(mode="json")
    packed = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(packed.encode("utf-8")).hexdigest()


def _build_predicates(
    query: str | None, filters: SearchFilters | None
) -> list[TourPredicate]:
    predicates: list[TourPredicate] = []

    needle = (query or "").strip().lower()
    if needle:
        predicates.append(lambda tour: _matches_query(tour, needle))

    if filters is None:
        return predicates

    price_range = filters.price_range
    if price_range is not None:
        predicates.append(
            lambda tour: price_range.min <= tour.price <= price_range.max
        )

    duration = filters.duration
    if duration is not None:
        predicates.append(lambda tour: duration.min <= tour.duration <= duration.max)

    if filters.category:
        categories = set(filters.category)
        predicates.append(lambda tour: tour.category in categories)

    if filters.difficulty:
        difficulties = set(filters.difficulty)
        predicates.append(lambda tour: tour.difficulty in difficulties)

    min_rating = filters.rating
    if min_rating is not None:
        predicates.append(lambda tour: tour.rating >= min_rating)

    return predicates


def _matches_query(tour: Tour, needle: str) -> bool:
    fields = (
        tour.title,
        tour.destination.name,
        tour.destination.country,
        tour.category.value,
    )
    return any(needle in field.lower() for field in fields)
