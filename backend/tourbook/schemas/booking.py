from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from tourbook.schemas.tour import Tour


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class BookingTab(str, Enum):
    UPCOMING = "upcoming"
    PAST = "past"
    CANCELLED = "cancelled"


class Traveler(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    email: str
    phone: str = ""
    date_of_birth: date | None = None
    passport_number: str | None = None
    nationality: str | None = None
    dietary_requirements: str | None = None
    medical_conditions: str | None = None


class Booking(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    tour: Tour
    start_date: date
    status: BookingStatus = BookingStatus.PENDING
    travelers: tuple[Traveler, ...] = ()
    total_amount: float = Field(..., ge=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method: str | None = None
    special_requests: str | None = None
    created_at: datetime
    updated_at: datetime


class BookingOut(BaseModel):
    booking: Booking
    status_label: str
