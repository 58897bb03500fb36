"""
Error Taxonomy
==============
Every failure raised by the generators derives from ``PhyllotaxisError``,
which is a ``ValueError`` so callers validating user input can keep catching
the built-in type.

Classes:
    InvalidParameter: A size, ratio, count or curve is out of range or malformed.
    DegenerateInput: The input is valid in type but leaves nothing to normalise
        against (e.g. a single organ on a sphere).
"""


class PhyllotaxisError(ValueError):
    """Base class for all generator errors."""


class InvalidParameter(PhyllotaxisError):
    """Raised when a configuration field is outside its allowed range."""


class DegenerateInput(PhyllotaxisError):
    """Raised when the input cannot produce a meaningful distribution."""
