from __future__ import annotations

from fastapi import APIRouter, Depends

from tourbook.integrations.mock_catalog import MockCatalog, get_catalog
from tourbook.schemas.search import SearchFilters, SearchRequestIn, SearchResponse
from tourbook.services.search_service import (
    compute_search_key,
    default_filters,
    search_tours,
)

router = APIRouter()


@router.post("/search", response_model=SearchResponse)
def create_search(
    payload: SearchRequestIn,
    catalog: MockCatalog = Depends(get_catalog),
) -> SearchResponse:
    tours = search_tours(catalog.list_tours(), payload.query, payload.filters)
    return SearchResponse(
        search_key=compute_search_key(payload),
        total=len(tours),
        tours=tours,
    )


@router.get("/search/defaults", response_model=SearchFilters)
def get_default_filters() -> SearchFilters:
    return default_filters()
