"""
Axis position formatter exceptions.

All formatter failures are local and recoverable: a caller displaying or
accepting typed coordinates catches FormatError (or ValueError) and keeps going.
"""


class FormatError(ValueError):
    """Base error of value <-> text conversion."""


class InvalidNumericInput(FormatError):
    """Text does not lex as a number, or is empty."""


class UnrecognizedUnit(FormatError):
    """Unit, prefix or code token absent from the formatter reverse lookup."""


class NonFiniteInput(FormatError):
    """NaN or infinite value passed to a formatter."""
