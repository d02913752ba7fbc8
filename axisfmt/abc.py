"""
Axis position formatter contract.

A formatter converts a single coordinate value along one axis (an angle, a
frequency, a velocity, ...) to display text and back. Callers such as display
widgets hold an AxisPosFormatter, never a concrete class, and call format() per
displayed value and parse() when accepting typed input.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import copy
from abc import ABC, abstractmethod
from enum import IntEnum, unique
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type


# Enums ----------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class Precision(IntEnum):
    """
    Reserved precision codes; any value >= 1 is a count of decimal digits.

    Attributes:
        NATURAL (int) : Formatter default rendering, also used for None and any code < -2
        DEGREES (int) : Nearest whole degree (hour); no finer field printed
        MINUTES (int) : Nearest minute
        SECONDS (int) : Nearest second, no fractional part; integer for decimal formatters
    """
    NATURAL = -3
    DEGREES = -2
    MINUTES = -1
    SECONDS = 0
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

class AxisPosFormatter(ABC):
    """
    Abstract converter between an axis position value and its text.

    parse() is not guaranteed to be the exact inverse of format(): a formatter may
    round, or map a continuous value onto a named code, so parse(format(x)) returns
    a canonical value within the precision used.
    """

    DESCRIPTION = "Coordinate Axis Position Formatter"

    @abstractmethod
    def format(self, value: Any, precision: int | None = None) -> str:
        """
        Convert a value to text.

        Args:
            value: Real number (int, float, or a float-convertible scalar).
            precision: Precision code, see Precision; None selects the natural rendering.

        Raises:
            NonFiniteInput: value is NaN or infinite.
            TypeError: value is not a real number.
        """

    @abstractmethod
    def parse(self, text: str) -> float:
        """
        Convert text back to a value.

        Raises:
            InvalidNumericInput: text is None, empty, or its numbers do not lex.
            UnrecognizedUnit: a unit, prefix or code token is not known to the formatter.
        """

    def describe(self) -> str:
        """Human-readable formatter name."""
        return self.DESCRIPTION

    def clone(self) -> Self:
        """Independent formatter with identical configuration."""
        return copy.copy(self)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# Methods --------------------------------------------------------------------------------------------------------------

def std_precision(precision: int | None, max_precision: int) -> int:
    """
    Normalize a precision code.

    None and every code below DEGREES map to NATURAL; codes above max_precision are
    clamped to it.

    Examples:
        >>> std_precision(None, 4)
        -3
        >>> std_precision(-7, 4)
        -3
        >>> std_precision(9, 4)
        4
    """
    if precision is None:
        return int(Precision.NATURAL)
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"precision must be int or None, got {fmt_type(precision)}")

    if precision < Precision.DEGREES:
        return int(Precision.NATURAL)
    return min(int(precision), max_precision)
