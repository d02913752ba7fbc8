"""
Numeric helpers shared by the axis position formatters.

Converts real-number-like inputs to finite floats, wraps values into a circular
range, rounds half away from zero and renders plain decimal text with the
precision sentinels used across the package.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .exceptions import NonFiniteInput
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


class DecimalConf:
    """
    Decimal rendering constants.

    Attributes:
        MAX_PRECISION: Upper bound for a requested number of decimal places.
        MAX_NATURAL_DIGITS: Significant digits kept by the natural rendering;
            a float carries 15-17, the last ones are mostly binary noise.
    """
    MAX_PRECISION = 15
    MAX_NATURAL_DIGITS = 15


# Methods --------------------------------------------------------------------------------------------------------------

def std_float(value) -> float:
    """
    Convert a real-number-like value to a finite Python float.

    Supports int, float, Decimal, Fraction and third-party scalars via
    .item() (NumPy, PyTorch), .value (Astropy Quantity) or __float__.

    Raises:
        TypeError: bool, None, or a value with no numeric conversion.
        NonFiniteInput: NaN or infinite value.

    Examples:
        >>> std_float(3)
        3.0
        >>> std_float(Decimal("149.9823"))
        149.9823
        >>> std_float(float("nan"))
        Traceback (most recent call last):
            ...
        axisfmt.exceptions.NonFiniteInput: finite value required, got <float: nan>
    """
    if value is None or isinstance(value, bool):
        raise TypeError(f"real number required, got {fmt_type(value)}")

    if isinstance(value, (int, float)):
        try:
            result = float(value)
        except OverflowError as e:
            raise NonFiniteInput(f"value out of float range: {fmt_type(value)}") from e

    elif hasattr(value, "item") and callable(value.item):
        return std_float(value.item())

    elif hasattr(value, "value") and hasattr(value, "unit"):
        return std_float(value.value)

    elif isinstance(value, SupportsFloat):
        try:
            result = float(value)
        except OverflowError as e:
            raise NonFiniteInput(f"value out of float range: {fmt_type(value)}") from e
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    else:
        raise TypeError(f"real number required, got {fmt_type(value)}")

    if not math.isfinite(result):
        raise NonFiniteInput(f"finite value required, got {fmt_value(result)}")
    return result


def circular(value: float, period: float = 360.0) -> float:
    """
    Wrap a finite value into the half-open range [0, period).

    Values differing by a multiple of period wrap identically.

    Examples:
        >>> circular(-0.5)
        359.5
        >>> circular(725.0)
        5.0
        >>> circular(-1e-20)
        0.0
    """
    if not math.isfinite(value):
        raise NonFiniteInput(f"finite value required, got {fmt_value(value)}")

    wrapped = value % period
    # Tiny negatives round up to exactly period
    if wrapped >= period:
        wrapped = 0.0
    return wrapped + 0.0


def round_half_away(number: float, ndigits: int = 0) -> float:
    """
    Round to ndigits decimals, ties away from zero.

    Rounds the shortest decimal repr of the float rather than its binary
    expansion, so round_half_away(0.125, 2) == 0.13 and round_half_away(2.5) == 3.0,
    unlike the builtin round() which rounds half to even.
    """
    with localcontext() as ctx:
        # Room for every integer digit of a float plus the requested decimals
        ctx.prec = 330 + max(ndigits, 0)
        quantum = Decimal(1).scaleb(-ndigits)
        return float(Decimal(repr(number)).quantize(quantum, rounding=ROUND_HALF_UP))


def trimmed_digits(number: float, round_digits: int = DecimalConf.MAX_NATURAL_DIGITS) -> int:
    """
    Count significant digits of a float after dropping trailing zeros.

    The number is first rounded to round_digits significant digits to remove
    binary artifacts (0.1 + 0.2 counts as 1 digit, not 17).

    Examples:
        trimmed_digits(1.5) == 2
        trimmed_digits(150.0) == 2
        trimmed_digits(0.00123) == 3
        trimmed_digits(0.0) == 1
    """
    if number == 0:
        return 1

    str_number = f"{abs(number):.{round_digits - 1}e}"
    mantissa = str_number.split("e")[0]
    digits = mantissa.replace(".", "").rstrip("0")
    return max(len(digits), 1)


def magnitude(number: float) -> int:
    """Decimal order of magnitude, floor(log10(|number|)); 0 for zero."""
    if number == 0:
        return 0
    # Exponent of the shortest repr, exact at powers of ten
    return Decimal(repr(abs(number))).adjusted()


def fmt_decimal(number: float, precision: int | None = None) -> str:
    """
    Render a finite float as plain decimal text.

    Precision semantics:
        None or <= -3: natural, the trimmed significant digits of the value
        -2, -1, 0:     rounded to an integer, no decimal point
        >= 1:          exactly that many decimal places (capped at MAX_PRECISION)

    Rounding is half away from zero. Scientific notation is never produced.

    Examples:
        >>> fmt_decimal(1.5)
        '1.5'
        >>> fmt_decimal(150.0)
        '150'
        >>> fmt_decimal(2.5, 0)
        '3'
        >>> fmt_decimal(1.5, 3)
        '1.500'
    """
    if precision is None or precision <= -3:
        digits = trimmed_digits(number)
        decimals = max(0, digits - magnitude(number) - 1)
    else:
        decimals = min(max(precision, 0), DecimalConf.MAX_PRECISION)

    rounded = round_half_away(number, decimals)
    text = f"{rounded:.{decimals}f}"
    # Avoid "-0" and "-0.00" for values rounding to zero
    if rounded == 0 and text.startswith("-"):
        text = text[1:]
    return text
