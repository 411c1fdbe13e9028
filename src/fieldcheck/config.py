"""Card validation configuration.

CardConfig is a frozen dataclass: immutable after creation, checked once
at construction.
"""

from dataclasses import dataclass, field

from fieldcheck.brands import CardBrand
from fieldcheck.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class CardConfig:
    """Which card issuers ``validate_cc_number`` accepts.

    Defaults to every known issuer. Narrow it for merchants that only
    take some brands::

        config = CardConfig(brands=frozenset({CardBrand.VISA, CardBrand.MASTERCARD}))
        field = validate_cc_number(field, config)
    """

    brands: frozenset[CardBrand] = field(default_factory=lambda: frozenset(CardBrand))

    def __post_init__(self) -> None:
        if not self.brands:
            raise ConfigurationError("CardConfig.brands must name at least one issuer")
        unknown = [b for b in self.brands if not isinstance(b, CardBrand)]
        if unknown:
            raise ConfigurationError(f"Unknown card brands: {unknown!r}")


DEFAULT_CARD_CONFIG = CardConfig()
