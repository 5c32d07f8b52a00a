from __future__ import annotations

from fastapi import APIRouter

from tourbook.schemas.payment import PaymentFormIn, PaymentValidationOut
from tourbook.services.payment_service import validate_payment

router = APIRouter()


@router.post("/payments/validate", response_model=PaymentValidationOut)
def validate_payment_form(payload: PaymentFormIn) -> PaymentValidationOut:
    return PaymentValidationOut.from_result(validate_payment(payload))
