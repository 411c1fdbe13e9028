"""fieldcheck exception hierarchy.

Validation failures are plain strings, never exceptions. These types are
reserved for mistakes in how the library itself is configured.
"""


class FieldCheckError(Exception):
    """Base for all fieldcheck-specific errors."""


class ConfigurationError(FieldCheckError):
    """Raised when a configuration object is invalid.

    Typically raised from a config dataclass's ``__post_init__``, so a bad
    config fails at construction time instead of at first use.
    """
