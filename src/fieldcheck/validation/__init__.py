"""Field validation — composable rules, first error per field.

Usage::

    from fieldcheck.validation import create_validator, required, max_length, email

    validate_post = create_validator({
        "title": [required, max_length(200)],
        "author_email": [required, email],
    })
    errors = validate_post(form)
    if errors:
        return render("form.html", form=form, errors=errors)
"""

from collections.abc import Mapping
from typing import Any

from fieldcheck.validation.card import (
    CardField,
    CardForm,
    check_card_form,
    validate_cc_exp,
    validate_cc_form,
    validate_cc_number,
    validate_cvv,
)
from fieldcheck.validation.composer import ErrorMap, RuleSet, create_validator
from fieldcheck.validation.result import ValidationResult
from fieldcheck.validation.rules import (
    Rule,
    email,
    integer,
    is_valid_email,
    match,
    max_length,
    min_length,
    one_of,
    required,
)

__all__ = [
    "CardField",
    "CardForm",
    "ErrorMap",
    "Rule",
    "RuleSet",
    "ValidationResult",
    "check_card_form",
    "create_validator",
    "email",
    "integer",
    "is_valid_email",
    "match",
    "max_length",
    "min_length",
    "one_of",
    "required",
    "validate",
    "validate_cc_exp",
    "validate_cc_form",
    "validate_cc_number",
    "validate_cvv",
]


def validate(record: Mapping[str, Any] | None, rules: RuleSet) -> ValidationResult:
    """Validate *record* against *rules* in one call.

    Args:
        record: Any mapping of field names to values, or ``None``.
        rules: A dict mapping field names to a rule or a list of rules.

    Returns:
        A ``ValidationResult`` with ``.errors`` (field → first error
        message) and ``.data`` (field → value for every field that passed).

    Example::

        result = validate(form, {
            "name": required,
            "age": [required, integer],
        })
        if not result:
            # result.errors == {"age": "Must be an integer"}
            ...
    """
    record = record if record is not None else {}
    errors = create_validator(rules)(record)
    data = {name: record.get(name) for name in rules if name not in errors}
    return ValidationResult(data=data, errors=errors)
