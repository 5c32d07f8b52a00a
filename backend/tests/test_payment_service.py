"""Tests for tourbook.services.payment_service."""

from __future__ import annotations

from datetime import date
from unittest.mock import patch

import pytest

from tourbook.schemas.payment import (
    InvalidReason,
    PaymentFormIn,
    PaymentInvalid,
    PaymentValid,
    PaymentValidationOut,
)
from tourbook.services.payment_service import (
    settings,
    validate_payment,
    validate_payment_form,
)

VALID = dict(
    card_name="Jane Doe",
    card_number="4111111111111111",
    expiry="12/30",
    cvv="123",
)


def _validate(today, **overrides):
    fields = dict(VALID)
    fields.update(overrides)
    return validate_payment_form(**fields, today=today)


def _reason(result):
    assert isinstance(result, PaymentInvalid)
    return result.reason


def test_all_fields_valid(today):
    assert _validate(today) == PaymentValid()


def test_name_with_digits_fails_before_card_checks(today):
    result = _validate(today, card_name="Jane99", card_number="not a card")
    assert _reason(result) is InvalidReason.INVALID_NAME
    assert result.message == "Please enter the cardholder name (letters and spaces only)."


@pytest.mark.parametrize("name", ["", "   ", "O'Brien", "Jane-Doe"])
def test_invalid_names(today, name):
    assert _reason(_validate(today, card_name=name)) is InvalidReason.INVALID_NAME


def test_name_accepts_non_ascii_letters(today):
    assert _validate(today, card_name="Zoë Müller") == PaymentValid()


def test_name_accepts_decomposed_accents(today):
    assert _validate(today, card_name="Jose\u0301 Garci\u0301a") == PaymentValid()


@pytest.mark.parametrize(
    "number",
    ["", "4111 1111 1111 111a", "411111111111", "41111111111111111111", "4111-1111-1111-1111"],
)
def test_invalid_card_numbers(today, number):
    assert _reason(_validate(today, card_number=number)) is InvalidReason.INVALID_CARD_NUMBER


def test_card_number_spaces_are_ignored(today):
    assert _validate(today, card_number="4111 1111 1111 1111") == PaymentValid()


def test_card_number_length_bounds_come_from_settings(today):
    with patch.object(settings, "card_number_min_length", 16):
        result = _validate(today, card_number="4222222222222")
    assert _reason(result) is InvalidReason.INVALID_CARD_NUMBER
    assert _validate(today, card_number="4222222222222") == PaymentValid()


@pytest.mark.parametrize("expiry", ["1230", "12/2030", "1/30", "00/30", "13/30", "12/3a", " 12/30"])
def test_malformed_expiry(today, expiry):
    assert _reason(_validate(today, expiry=expiry)) is InvalidReason.INVALID_EXPIRY


def test_expiry_in_past_month_fails(today):
    assert _reason(_validate(today, expiry="05/26")) is InvalidReason.INVALID_EXPIRY


def test_expiry_in_current_month_passes(today):
    assert _validate(today, expiry="06/26") == PaymentValid()


def test_two_digit_year_99_is_in_the_past(today):
    result = _validate(today, card_name="John Doe", expiry="12/99")
    assert _reason(result) is InvalidReason.INVALID_EXPIRY
    assert result.message == "Expiry must be in MM/YY format and not in the past."


def test_two_digit_year_pivots_between_68_and_69(today):
    assert _validate(today, expiry="12/68") == PaymentValid()
    assert _reason(_validate(today, expiry="01/69")) is InvalidReason.INVALID_EXPIRY
    assert _reason(_validate(today, expiry="12/70")) is InvalidReason.INVALID_EXPIRY


def test_today_can_be_a_callable():
    assert _validate(lambda: date(2031, 1, 1)) != PaymentValid()
    assert _validate(lambda: date(2030, 12, 31)) == PaymentValid()


@pytest.mark.parametrize("cvv", ["", "12", "12345", "12a", "١٢٣"])
def test_invalid_cvv(today, cvv):
    assert _reason(_validate(today, cvv=cvv)) is InvalidReason.INVALID_CVV


def test_four_digit_cvv_passes(today):
    assert _validate(today, cvv="1234") == PaymentValid()


def test_non_string_field_raises_type_error(today):
    with pytest.raises(TypeError):
        _validate(today, cvv=None)


def test_validate_payment_wraps_form_model(today):
    form = PaymentFormIn(**dict(VALID, cvv="1"))
    result = validate_payment(form, today=today)
    out = PaymentValidationOut.from_result(result)
    assert out.valid is False
    assert out.reason is InvalidReason.INVALID_CVV
    assert PaymentValidationOut.from_result(PaymentValid()).valid is True
