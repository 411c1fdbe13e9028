"""Card issuers and the number patterns that identify them.

Patterns check prefix and length only. There is no checksum and no lookup
against a real issuer database.
"""

import re
from enum import Enum


class CardBrand(Enum):
    """A card issuer recognised by ``validate_cc_number``."""

    VISA = "visa"
    MASTERCARD = "mastercard"
    AMEX = "amex"
    DISCOVER = "discover"
    JCB = "jcb"
    DINERS_CLUB = "dinersclub"


# Checked in this order; the first match wins in card_brand().
BRAND_PATTERNS: dict[CardBrand, re.Pattern[str]] = {
    CardBrand.VISA: re.compile(r"4[0-9]{12}(?:[0-9]{3})?"),
    CardBrand.MASTERCARD: re.compile(
        r"(?:5[1-5][0-9]{2}|222[1-9]|22[3-9][0-9]|2[3-6][0-9]{2}|27[01][0-9]|2720)[0-9]{12}"
    ),
    CardBrand.AMEX: re.compile(r"3[47][0-9]{13}"),
    CardBrand.DISCOVER: re.compile(r"6(?:011|5[0-9]{2})[0-9]{12}"),
    CardBrand.JCB: re.compile(r"(?:2131|1800|35[0-9]{3})[0-9]{11}"),
    CardBrand.DINERS_CLUB: re.compile(r"3(?:0[0-5]|[68][0-9])[0-9]{11}"),
}


def card_brand(number: str) -> CardBrand | None:
    """Return the issuer whose pattern matches *number*, or ``None``.

    The whole string must match; spaces and dashes are not stripped::

        >>> card_brand("4111111111111111")
        <CardBrand.VISA: 'visa'>
        >>> card_brand("4111 1111 1111 1111") is None
        True
    """
    for brand, pattern in BRAND_PATTERNS.items():
        if pattern.fullmatch(number):
            return brand
    return None
