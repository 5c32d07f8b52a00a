from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from tourbook.integrations.mock_catalog import MockCatalog, get_catalog
from tourbook.schemas.tour import Destination, Tour
from tourbook.services.search_service import get_featured_tours, get_popular_destinations

router = APIRouter()


@router.get("/tours/featured", response_model=list[Tour])
def list_featured_tours(catalog: MockCatalog = Depends(get_catalog)) -> list[Tour]:
    return get_featured_tours(catalog.list_tours())


@router.get("/tours/{tour_id}", response_model=Tour)
def get_tour(tour_id: str, catalog: MockCatalog = Depends(get_catalog)) -> Tour:
    tour = catalog.get_tour(tour_id)
    if not tour:
        raise HTTPException(status_code=404, detail="tour_id not found")
    return tour


@router.get("/destinations/popular", response_model=list[Destination])
def list_popular_destinations(
    limit: int | None = Query(None, ge=1, le=50),
    catalog: MockCatalog = Depends(get_catalog),
) -> list[Destination]:
    return get_popular_destinations(catalog.list_destinations(), limit)
