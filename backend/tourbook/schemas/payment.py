from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from pydantic import BaseModel


class InvalidReason(str, Enum):
    INVALID_NAME = "invalid_name"
    INVALID_CARD_NUMBER = "invalid_card_number"
    INVALID_EXPIRY = "invalid_expiry"
    INVALID_CVV = "invalid_cvv"


class PaymentFormIn(BaseModel):
    card_name: str
    card_number: str
    expiry: str
    cvv: str


@dataclass(frozen=True)
class PaymentValid:
    pass


@dataclass(frozen=True)
class PaymentInvalid:
    reason: InvalidReason
    message: str


PaymentValidation = Union[PaymentValid, PaymentInvalid]


class PaymentValidationOut(BaseModel):
    valid: bool
    reason: InvalidReason | None = None
    message: str | None = None

    @classmethod
    def from_result(cls, result: PaymentValidation) -> "PaymentValidationOut":
        if isinstance(result, PaymentInvalid):
            return cls(valid=False, reason=result.reason, message=result.message)
        return cls(valid=True)
