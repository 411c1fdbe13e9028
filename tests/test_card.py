"""Tests for fieldcheck.validation.card — credit card form checks."""

import pytest

from fieldcheck.brands import CardBrand
from fieldcheck.config import CardConfig
from fieldcheck.validation.card import (
    CardField,
    CardForm,
    check_card_form,
    validate_cc_exp,
    validate_cc_form,
    validate_cc_number,
    validate_cvv,
)

VISA = "4111111111111111"


def _form(number: str = VISA, cvv: str = "123", exp: str = "01/2020") -> CardForm:
    return CardForm(CardField(number), CardField(cvv), CardField(exp))


# ---------------------------------------------------------------------------
# Card number
# ---------------------------------------------------------------------------


class TestValidateCCNumber:
    def test_valid_visa(self) -> None:
        assert validate_cc_number(CardField(VISA)).error == ""

    def test_invalid(self) -> None:
        field = validate_cc_number(CardField("1234"))
        assert field.error == "Enter a valid credit card number"

    @pytest.mark.parametrize(
        "number",
        [
            "4222222222222",
            "5555555555554444",
            "2221000000000009",
            "378282246310005",
            "6011111111111117",
            "3530111333300000",
            "30569309025904",
        ],
    )
    def test_each_issuer(self, number: str) -> None:
        assert validate_cc_number(CardField(number)).error == ""

    def test_spaces_rejected(self) -> None:
        field = validate_cc_number(CardField("4111 1111 1111 1111"))
        assert field.error == "Enter a valid credit card number"

    def test_empty_clears_error(self) -> None:
        field = validate_cc_number(CardField("", error="stale"))
        assert field.error == ""

    def test_valid_clears_stale_error(self) -> None:
        field = validate_cc_number(CardField(VISA, error="stale"))
        assert field.error == ""

    def test_keeps_value(self) -> None:
        assert validate_cc_number(CardField("1234")).value == "1234"

    def test_input_not_mutated(self) -> None:
        original = CardField("1234")
        result = validate_cc_number(original)
        assert original.error == ""
        assert result is not original

    def test_config_restricts_brands(self) -> None:
        config = CardConfig(brands=frozenset({CardBrand.MASTERCARD}))
        assert validate_cc_number(CardField(VISA), config).error != ""
        assert validate_cc_number(CardField("5555555555554444"), config).error == ""


# ---------------------------------------------------------------------------
# CVV
# ---------------------------------------------------------------------------


class TestValidateCVV:
    def test_too_short(self) -> None:
        assert validate_cvv(CardField("12")).error == "Please enter a valid CVV"

    def test_three_digits(self) -> None:
        assert validate_cvv(CardField("123")).error == ""

    def test_four_digits(self) -> None:
        assert validate_cvv(CardField("1234")).error == ""

    def test_too_long(self) -> None:
        assert validate_cvv(CardField("12345")).error != ""

    def test_letters(self) -> None:
        assert validate_cvv(CardField("12a")).error != ""

    def test_non_ascii_digits(self) -> None:
        assert validate_cvv(CardField("١٢٣")).error != ""

    def test_empty(self) -> None:
        assert validate_cvv(CardField("", error="stale")).error == ""


# ---------------------------------------------------------------------------
# Expiration
# ---------------------------------------------------------------------------


class TestValidateCCExp:
    def test_invalid_month(self) -> None:
        field = validate_cc_exp(CardField("13/2020"))
        assert field.error == "Please enter a valid expiration date (MM/YYYY)"

    def test_valid(self) -> None:
        assert validate_cc_exp(CardField("01/2020")).error == ""

    @pytest.mark.parametrize("value", ["12/2010", "06/2017", "09/2049"])
    def test_year_range(self, value: str) -> None:
        assert validate_cc_exp(CardField(value)).error == ""

    @pytest.mark.parametrize("value", ["01/2009", "01/2050", "00/2020", "1/2020", "01/20", "01-2020"])
    def test_rejected(self, value: str) -> None:
        assert validate_cc_exp(CardField(value)).error != ""

    def test_empty(self) -> None:
        assert validate_cc_exp(CardField("")).error == ""


# ---------------------------------------------------------------------------
# Whole form
# ---------------------------------------------------------------------------


class TestValidateCCForm:
    def test_complete_form(self) -> None:
        assert validate_cc_form(_form()) is True

    @pytest.mark.parametrize("empty", ["number", "cvv", "exp"])
    def test_empty_value(self, empty: str) -> None:
        assert validate_cc_form(_form(**{empty: ""})) is False

    def test_field_with_error(self) -> None:
        form = CardForm(
            CardField(VISA),
            CardField("123", error="Please enter a valid CVV"),
            CardField("01/2020"),
        )
        assert validate_cc_form(form) is False


class TestCheckCardForm:
    def test_runs_every_check(self) -> None:
        form = check_card_form(_form(number="1234", cvv="1", exp="13/2020"))
        assert form.cc_number.error == "Enter a valid credit card number"
        assert form.cvv.error == "Please enter a valid CVV"
        assert form.cc_exp.error == "Please enter a valid expiration date (MM/YYYY)"
        assert validate_cc_form(form) is False

    def test_valid_form(self) -> None:
        assert validate_cc_form(check_card_form(_form())) is True

    def test_frozen(self) -> None:
        form = _form()
        with pytest.raises(AttributeError):
            form.cvv = CardField("999")  # type: ignore[misc]
