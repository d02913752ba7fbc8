#
# Axisfmt Generic Decimal Formatter
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .abc import AxisPosFormatter, std_precision
from .exceptions import InvalidNumericInput
from .numeric import DecimalConf, fmt_decimal, std_float
from .tools import fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

class GenericFormatter(AxisPosFormatter):
    """
    Plain decimal numbers, no unit.

    Examples:
        >>> fmt = GenericFormatter()
        >>> fmt.format(152.2345)
        '152.2345'
        >>> fmt.format(152.2345, 2)
        '152.23'
        >>> fmt.parse(" 1.5e3 ")
        1500.0
    """

    DESCRIPTION = "Generic Coordinate Axis Position Formatter"

    def format(self, value: Any, precision: int | None = None) -> str:
        return fmt_decimal(std_float(value), std_precision(precision, DecimalConf.MAX_PRECISION))

    def parse(self, text: str) -> float:
        return parse_number(text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GenericFormatter):
            return type(self) is type(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(type(self))


# Methods --------------------------------------------------------------------------------------------------------------

def parse_number(text: str) -> float:
    """
    Parse a finite decimal or E-notation number.

    Raises:
        InvalidNumericInput: None, empty text, or text that is not a finite number.
    """
    if text is None:
        raise InvalidNumericInput("cannot parse None as a number")
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {fmt_value(text)}")

    try:
        number = float(text)
    except ValueError as e:
        raise InvalidNumericInput(f"not a number: {fmt_value(text)}") from e

    if not math.isfinite(number):
        raise InvalidNumericInput(f"not a finite number: {fmt_value(text)}")
    return number
