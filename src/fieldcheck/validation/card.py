"""Credit card form checks.

These work on ``CardField`` values rather than through ``create_validator``.
Each check returns a new field with ``error`` recomputed; the field passed
in is never modified::

    number = validate_cc_number(CardField(form["cc_number"]))
    cvv = validate_cvv(CardField(form["cvv"]))
    exp = validate_cc_exp(CardField(form["cc_exp"]))
    if validate_cc_form(CardForm(number, cvv, exp)):
        ...

An empty value is treated as "not entered yet": the check clears the
error and stops. ``validate_cc_form`` is what rejects empty fields.
"""

import re
from dataclasses import dataclass, replace

from fieldcheck.brands import BRAND_PATTERNS
from fieldcheck.config import DEFAULT_CARD_CONFIG, CardConfig

_CVV_RE = re.compile(r"[0-9]{3,4}")

# MM/YYYY, months 01-12, years 2010-2049
_EXPIRY_RE = re.compile(r"(?:0[1-9]|1[0-2])/20[1-4][0-9]")


@dataclass(frozen=True, slots=True)
class CardField:
    """A card form input and its current error message (``""`` if none)."""

    value: str = ""
    error: str = ""


@dataclass(frozen=True, slots=True)
class CardForm:
    """The three inputs of a card payment form."""

    cc_number: CardField
    cvv: CardField
    cc_exp: CardField


def validate_cc_number(field: CardField, config: CardConfig | None = None) -> CardField:
    """Check the number against the accepted issuers' patterns."""
    if not field.value:
        return replace(field, error="")
    config = config or DEFAULT_CARD_CONFIG
    if any(BRAND_PATTERNS[brand].fullmatch(field.value) for brand in config.brands):
        return replace(field, error="")
    return replace(field, error="Enter a valid credit card number")


def validate_cvv(field: CardField) -> CardField:
    """CVV must be exactly 3 or 4 digits."""
    if not field.value or _CVV_RE.fullmatch(field.value):
        return replace(field, error="")
    return replace(field, error="Please enter a valid CVV")


def validate_cc_exp(field: CardField) -> CardField:
    """Expiration must be ``MM/YYYY``."""
    if not field.value or _EXPIRY_RE.fullmatch(field.value):
        return replace(field, error="")
    return replace(field, error="Please enter a valid expiration date (MM/YYYY)")


def validate_cc_form(form: CardForm) -> bool:
    """True when all three fields have a value and none has an error."""
    fields = (form.cc_number, form.cvv, form.cc_exp)
    return all(f.value and not f.error for f in fields)


def check_card_form(form: CardForm, config: CardConfig | None = None) -> CardForm:
    """Run every field check and return the updated form."""
    return CardForm(
        cc_number=validate_cc_number(form.cc_number, config),
        cvv=validate_cvv(form.cvv),
        cc_exp=validate_cc_exp(form.cc_exp),
    )
