from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from tourbook.integrations.mock_catalog import MockCatalog, get_catalog
from tourbook.schemas.booking import BookingOut, BookingTab
from tourbook.schemas.payment import PaymentFormIn
from tourbook.services.booking_service import (
    BookingNotPayable,
    PaymentRejected,
    filter_bookings,
    status_label,
)

router = APIRouter()


@router.get("/bookings", response_model=list[BookingOut])
def list_bookings(
    tab: BookingTab = Query(BookingTab.UPCOMING),
    catalog: MockCatalog = Depends(get_catalog),
) -> list[BookingOut]:
    bookings = filter_bookings(catalog.list_bookings(), tab)
    return [
        BookingOut(booking=booking, status_label=status_label(booking.status))
        for booking in bookings
    ]


@router.post("/bookings/{booking_id}/pay", response_model=BookingOut)
def pay_booking(
    booking_id: str,
    payload: PaymentFormIn,
    catalog: MockCatalog = Depends(get_catalog),
) -> BookingOut:
    try:
        paid = catalog.pay_booking(booking_id, payload)
    except PaymentRejected as exc:
        raise HTTPException(
            status_code=400,
            detail={"error": exc.result.reason.value, "message": exc.result.message},
        ) from exc
    except BookingNotPayable as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    if not paid:
        raise HTTPException(status_code=404, detail="booking_id not found")
    return BookingOut(booking=paid, status_label=status_label(paid.status))
