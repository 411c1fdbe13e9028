"""Compose per-field rules into a single record validator.

A rule set maps each field name to one rule or an ordered sequence of
rules. The composed validator runs every field; within a field it stops
at the first rule that reports an error::

    validate_signup = create_validator({
        "email": [required, email],
        "password": [required, min_length(8)],
        "confirm": match("password"),
    })
    errors = validate_signup(form)
    # {"confirm": "Do not match"}

Rule set entries must be a rule or an iterable of rules. Anything else
surfaces as whatever TypeError Python raises; it is not checked up front.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeAlias

from fieldcheck.validation.rules import Rule

logger = logging.getLogger("fieldcheck.validation")

RuleSet: TypeAlias = Mapping[str, Rule | Iterable[Rule]]
ErrorMap: TypeAlias = dict[str, str]


def _as_sequence(rules: Rule | Iterable[Rule]) -> tuple[Rule, ...]:
    if callable(rules):
        return (rules,)
    return tuple(rules)


def _first_error(
    rules: tuple[Rule, ...], value: Any, record: Mapping[str, Any]
) -> str | None:
    for rule in rules:
        error = rule(value, record)
        if error:
            return error
    return None


def create_validator(rules: RuleSet) -> Callable[..., ErrorMap]:
    """Build a validator for *rules*.

    Returns ``validate(record=None) -> dict[str, str]``. The result has
    one entry per failing field, in the rule set's key order. Fields that
    pass are left out. A ``None`` record validates as ``{}``.
    """
    fields = {name: _as_sequence(field_rules) for name, field_rules in rules.items()}

    def validate(record: Mapping[str, Any] | None = None) -> ErrorMap:
        if record is None:
            record = {}
        errors: ErrorMap = {}
        for name, field_rules in fields.items():
            error = _first_error(field_rules, record.get(name), record)
            if error:
                logger.debug("Field %r failed validation: %s", name, error)
                errors[name] = error
        return errors

    return validate
