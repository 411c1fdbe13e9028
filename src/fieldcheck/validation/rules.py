"""Built-in validation rules.

Each rule is a callable with the signature::

    def rule(value: Any, record: Mapping[str, Any] | None = None) -> str | None:
        '''Return error message, or None if valid.'''

``record`` is the whole mapping being validated. Most rules ignore it;
``match()`` uses it to compare against a sibling field.

Parameterized rules are factory functions that return a rule::

    def max_length(n: int) -> Rule:
        def check(value, record=None):
            if not _is_empty(value) and len(value) > n:
                return f"Must be no more than {n} characters"
            return None
        return check

Custom rules follow the same protocol and must accept both arguments.

Apart from ``required`` and ``integer``, rules pass on an empty value
(``None`` or ``""``). Pair them with ``required`` to enforce presence.
"""

import math
import re
from collections.abc import Callable, Mapping, Sequence, Sized
from typing import Any, TypeAlias

# Type alias for a rule function
Rule: TypeAlias = Callable[[Any, Mapping[str, Any] | None], str | None]


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(value: Any, record: Mapping[str, Any] | None = None) -> str | None:
    """Field must be present and not an empty string.

    Whitespace-only strings count as present.
    """
    if _is_empty(value):
        return "Required"
    return None


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def min_length(n: int) -> Rule:
    """Value must be at least *n* characters.

    Values without a length, such as numbers, pass.
    """

    def check(value: Any, record: Mapping[str, Any] | None = None) -> str | None:
        if isinstance(value, Sized) and not _is_empty(value) and len(value) < n:
            return f"Must be at least {n} characters"
        return None

    return check


def max_length(n: int) -> Rule:
    """Value must be no more than *n* characters. Unsized values pass."""

    def check(value: Any, record: Mapping[str, Any] | None = None) -> str | None:
        if isinstance(value, Sized) and not _is_empty(value) and len(value) > n:
            return f"Must be no more than {n} characters"
        return None

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Loose pattern for form input: local@domain.tld with a 2-4 letter TLD
_EMAIL_RE = re.compile(r"[A-Z0-9._%+\-]+@[A-Z0-9.\-]+\.[A-Z]{2,4}", re.IGNORECASE)

# Stricter pattern: quoted local parts and IPv4 domain literals, any TLD length
_STRICT_EMAIL_RE = re.compile(
    r"(?:"
    r"(?:[^<>()\[\]\\.,;:\s@\"]+(?:\.[^<>()\[\]\\.,;:\s@\"]+)*)"
    r"|(?:\".+\")"
    r")@(?:"
    r"(?:[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3})"
    r"|(?:(?:[a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,})"
    r")"
)


def email(value: Any, record: Mapping[str, Any] | None = None) -> str | None:
    """Value must look like an email address (basic format check)."""
    if not _is_empty(value) and not _EMAIL_RE.fullmatch(str(value)):
        return "Invalid email address"
    return None


def is_valid_email(value: Any) -> bool:
    """Check *value* against the stricter email pattern.

    This is a predicate, not a rule, and it does not agree with ``email``
    on every input: ``user@example.museum`` passes here but fails
    ``email``, and ``"john doe"@example.com`` is only accepted here.

    Examples::

        >>> is_valid_email("user@example.com")
        True
        >>> is_valid_email("user@[192.168.0.1]")
        False
        >>> is_valid_email("user@192.168.0.1")
        True
    """
    if not isinstance(value, str):
        return False
    return _STRICT_EMAIL_RE.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Type coercion
# ---------------------------------------------------------------------------


def _as_number(value: Any) -> int | float | None:
    if isinstance(value, int | float):
        return value
    # float() also takes digit separators ("1_000"); plain numbers only
    if isinstance(value, str) and value.strip() and "_" not in value:
        try:
            return float(value)
        except ValueError:
            return None
    return None


def integer(value: Any, record: Mapping[str, Any] | None = None) -> str | None:
    """Value must coerce to a whole number.

    ``"42"`` and ``"4.0"`` pass, ``"4.2"`` fails. Unlike the other
    rules an empty value is not skipped: ``""`` and ``None`` fail.
    """
    number = _as_number(value)
    if number is None:
        return "Must be an integer"
    if isinstance(number, float) and not (math.isfinite(number) and number.is_integer()):
        return "Must be an integer"
    return None


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(enumeration: Sequence[Any]) -> Rule:
    """Value must be one of the given choices.

    Membership is exact: a choice matches only a value of the same type,
    so ``True`` is not ``1`` and ``1.0`` is not ``1``.
    """
    choices = tuple(enumeration)
    options = ", ".join(str(choice) for choice in choices)

    def check(value: Any, record: Mapping[str, Any] | None = None) -> str | None:
        if not any(type(choice) is type(value) and choice == value for choice in choices):
            return f"Must be one of: {options}"
        return None

    return check


# ---------------------------------------------------------------------------
# Cross-field
# ---------------------------------------------------------------------------


def match(field: str) -> Rule:
    """Value must equal ``record[field]``.

    Passes when called without a record. An empty record still counts,
    so a missing sibling field compares as ``None``.
    """

    def check(value: Any, record: Mapping[str, Any] | None = None) -> str | None:
        if record is not None and value != record.get(field):
            return "Do not match"
        return None

    return check
