from __future__ import annotations

import logging
import re
import unicodedata
from collections.abc import Callable
from datetime import date, datetime
from typing import Union

from tourbook.core.config import settings
from tourbook.schemas.payment import (
    InvalidReason,
    PaymentFormIn,
    PaymentInvalid,
    PaymentValid,
    PaymentValidation,
)

logger = logging.getLogger(__name__)

Today = Union[date, Callable[[], date], None]

EXPIRY_PATTERN = re.compile(r"([0-9]{2})/([0-9]{2})")
CARD_DIGITS_PATTERN = re.compile(r"[0-9]+")
CVV_PATTERN = re.compile(r"[0-9]{3,4}")

ERROR_MESSAGES: dict[InvalidReason, str] = {
    InvalidReason.INVALID_NAME: (
        "Please enter the cardholder name (letters and spaces only)."
    ),
    InvalidReason.INVALID_CARD_NUMBER: "Please enter a valid card number.",
    InvalidReason.INVALID_EXPIRY: "Expiry must be in MM/YY format and not in the past.",
    InvalidReason.INVALID_CVV: "Please enter a valid CVV (3 or 4 digits).",
}


def validate_payment_form(
    card_name: str,
    card_number: str,
    expiry: str,
    cvv: str,
    *,
    today: Today = None,
) -> PaymentValidation:
    """Check the payment form fields and report the first rule that fails.

    Rules run in a fixed order (name, card number, expiry, CVV). ``today`` is
    either a date or a callable returning one and only matters for the expiry
    check; it defaults to the system date.
    """
    for field_name, value in (
        ("card_name", card_name),
        ("card_number", card_number),
        ("expiry", expiry),
        ("cvv", cvv),
    ):
        if not isinstance(value, str):
            raise TypeError(f"{field_name} must be a str, got {type(value).__name__}")

    if not is_valid_name(card_name):
        return _invalid(InvalidReason.INVALID_NAME)
    if not is_valid_card_number(card_number):
        return _invalid(InvalidReason.INVALID_CARD_NUMBER)
    if not is_valid_expiry(expiry, _resolve_today(today)):
        return _invalid(InvalidReason.INVALID_EXPIRY)
    if not is_valid_cvv(cvv):
        return _invalid(InvalidReason.INVALID_CVV)
    return PaymentValid()


def validate_payment(form: PaymentFormIn, *, today: Today = None) -> PaymentValidation:
    return validate_payment_form(
        form.card_name,
        form.card_number,
        form.expiry,
        form.cvv,
        today=today,
    )


def is_valid_name(value: str) -> bool:
    if not value.strip():
        return False
    composed = unicodedata.normalize("NFC", value)
    return all(char.isalpha() or char == " " for char in composed)


def is_valid_card_number(value: str) -> bool:
    digits = value.replace(" ", "")
    if not CARD_DIGITS_PATTERN.fullmatch(digits):
        return False
    return (
        settings.card_number_min_length
        <= len(digits)
        <= settings.card_number_max_length
    )


def is_valid_expiry(value: str, today: date) -> bool:
    match = EXPIRY_PATTERN.fullmatch(value)
    if not match:
        return False
    month = int(match.group(1))
    if not 1 <= month <= 12:
        return False
    # %y pivots two-digit years: 00-68 -> 20xx, 69-99 -> 19xx.
    year = datetime.strptime(match.group(2), "%y").year
    return (year, month) >= (today.year, today.month)


def is_valid_cvv(value: str) -> bool:
    return bool(CVV_PATTERN.fullmatch(value))


def _resolve_today(today: Today) -> date:
    if today is None:
        return date.today()
    if callable(today):
        return today()
    return today


def _invalid(reason: InvalidReason) -> PaymentInvalid:
    logger.debug("payment form rejected: %s", reason.value)
    return PaymentInvalid(reason=reason, message=ERROR_MESSAGES[reason])
