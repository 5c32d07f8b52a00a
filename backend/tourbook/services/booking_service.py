from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime, timezone

from tourbook.schemas.booking import Booking, BookingStatus, BookingTab, PaymentStatus
from tourbook.schemas.payment import PaymentFormIn, PaymentInvalid
from tourbook.services.payment_service import Today, validate_payment

logger = logging.getLogger(__name__)

STATUS_LABELS: dict[BookingStatus, str] = {
    BookingStatus.CONFIRMED: "Confirmed",
    BookingStatus.PENDING: "Pending Payment",
    BookingStatus.CANCELLED: "Cancelled",
    BookingStatus.COMPLETED: "Completed",
}


class PaymentRejected(ValueError):
    def __init__(self, result: PaymentInvalid) -> None:
        super().__init__(result.message)
        self.result = result


class BookingNotPayable(ValueError):
    pass


def filter_bookings(
    bookings: Sequence[Booking],
    tab: BookingTab,
    *,
    now: date | None = None,
) -> list[Booking]:
    today = now or date.today()
    if tab == BookingTab.UPCOMING:
        return [
            booking
            for booking in bookings
            if booking.start_date >= today
            and booking.status != BookingStatus.CANCELLED
        ]
    if tab == BookingTab.PAST:
        return [
            booking
            for booking in bookings
            if booking.start_date < today
            and booking.status == BookingStatus.COMPLETED
        ]
    return [
        booking for booking in bookings if booking.status == BookingStatus.CANCELLED
    ]


def status_label(status: BookingStatus) -> str:
    return STATUS_LABELS.get(status, status.value)


def confirm_payment(
    booking: Booking,
    form: PaymentFormIn,
    *,
    today: Today = None,
) -> Booking:
    """Validate ``form`` and return ``booking`` marked confirmed and paid.

    Raises ``BookingNotPayable`` when the booking is not awaiting payment and
    ``PaymentRejected`` when the form fails validation.
    """
    if booking.status != BookingStatus.PENDING:
        raise BookingNotPayable(
            f"Booking {booking.id} is {booking.status.value}, not pending payment."
        )

    result = validate_payment(form, today=today)
    if isinstance(result, PaymentInvalid):
        raise PaymentRejected(result)

    paid = booking.model_copy(
        update={
            "status": BookingStatus.CONFIRMED,
            "payment_status": PaymentStatus.PAID,
            "payment_method": "card",
            "updated_at": datetime.now(timezone.utc),
        }
    )
    logger.info("booking %s confirmed and paid", booking.id)
    return paid
