"""The outcome of a one-shot ``validate()`` call."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Errors for the fields that failed, values for the ones that passed.

    ``errors`` is the same mapping ``create_validator`` returns: one
    message per failing field, in rule-set order. ``data`` maps every
    other rule-set field to its value from the record, unchanged (a
    field missing from the record appears as ``None``). Fields outside
    the rule set appear in neither.

    Truthiness follows ``is_valid``::

        result = validate(record, {"name": required, "age": integer})
        if result:
            save(**result.data)
    """

    data: dict[str, Any]
    errors: dict[str, str]

    @property
    def is_valid(self) -> bool:
        """No field reported an error."""
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid
