"""fieldcheck — small, composable validation rules for form records.

Rules return an error string or ``None``; a composed validator returns
the first error per failing field::

    from fieldcheck import create_validator, required, integer

    validate_person = create_validator({
        "name": required,
        "age": [required, integer],
    })
    validate_person({"name": "", "age": "x"})
    # {"name": "Required", "age": "Must be an integer"}

Credit card forms have their own checks::

    from fieldcheck import CardField, validate_cc_number

    validate_cc_number(CardField("1234")).error
    # "Enter a valid credit card number"
"""

__version__ = "0.1.0"
__all__ = [
    "CardBrand",
    "CardConfig",
    "CardField",
    "CardForm",
    "ConfigurationError",
    "FieldCheckError",
    "ValidationResult",
    "card_brand",
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

# Public name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "CardBrand": "fieldcheck.brands",
    "card_brand": "fieldcheck.brands",
    "CardConfig": "fieldcheck.config",
    "ConfigurationError": "fieldcheck.errors",
    "FieldCheckError": "fieldcheck.errors",
    "CardField": "fieldcheck.validation",
    "CardForm": "fieldcheck.validation",
    "ValidationResult": "fieldcheck.validation",
    "check_card_form": "fieldcheck.validation",
    "create_validator": "fieldcheck.validation",
    "email": "fieldcheck.validation",
    "integer": "fieldcheck.validation",
    "is_valid_email": "fieldcheck.validation",
    "match": "fieldcheck.validation",
    "max_length": "fieldcheck.validation",
    "min_length": "fieldcheck.validation",
    "one_of": "fieldcheck.validation",
    "required": "fieldcheck.validation",
    "validate": "fieldcheck.validation",
    "validate_cc_exp": "fieldcheck.validation",
    "validate_cc_form": "fieldcheck.validation",
    "validate_cc_number": "fieldcheck.validation",
    "validate_cvv": "fieldcheck.validation",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fieldcheck`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_path), name)
