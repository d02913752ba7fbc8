"""
Sexagesimal angle formatters: degrees:minutes:seconds and hours:minutes:seconds.

Angles are circular with period 360; values are wrapped into [0, 360) before
being split into an integer major field, integer minutes and fractional seconds.
Rounding of the finest printed field carries into the coarser ones.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import math
from dataclasses import dataclass
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .abc import AxisPosFormatter, Precision, std_precision
from .exceptions import InvalidNumericInput
from .numeric import circular, round_half_away, std_float
from .tools import fmt_value

logger = logging.getLogger(__name__)


# @formatter:off

class AngleConf:
    """
    Sexagesimal rendering constants.

    Attributes:
        MAX_PRECISION: Most decimal digits printed in the seconds field.
        NATURAL_DIGITS: Decimal digits of the seconds field in natural precision.
        ZERO_SECONDS: Seconds below this print as 00.0000 in natural precision.
        CARRY_EPSILON: Rounded seconds within this distance of 60 carry into minutes.
    """
    MAX_PRECISION = 4
    NATURAL_DIGITS = 4
    ZERO_SECONDS = 0.000099
    CARRY_EPSILON = 1e-9

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SexagesimalParts:
    """
    Major field (degrees or hours), minutes and seconds after rounding and carry.

    Fields finer than the requested precision are left as computed and not printed.
    """
    major: int
    minutes: int
    seconds: float


class SexagesimalFormatter(AxisPosFormatter):
    """
    Shared D:M:S machinery, parametrized by the size of one major unit in degrees.

    Subclasses set DEGREES_PER_UNIT (1 for degrees, 15 for hours) and MAJOR_WRAP,
    the major field value that wraps back to 0 after carry (None keeps it).
    """

    DEGREES_PER_UNIT: float = 1.0
    MAJOR_WRAP: int | None = None

    def format(self, value: Any, precision: int | None = None) -> str:
        """
        Format an angle in degrees as D:MM:SS text.

        Precision:
            None or < -2: natural, seconds with 4 decimals
            -2:  major field only, rounded
            -1:  D:MM rounded to the minute
             0:  D:MM:SS rounded to the second
            1-4: D:MM:SS.f... with that many decimals (larger values clamp to 4)

        Examples:
            >>> AngleFormatter().format(149.9823)
            '149:58:56.2800'
            >>> AngleFormatter().format(-0.5, -1)
            '359:30'
        """
        degrees = circular(std_float(value))
        precision = std_precision(precision, AngleConf.MAX_PRECISION)
        parts = self.split(degrees / self.DEGREES_PER_UNIT, precision)

        out = str(parts.major)
        if precision == Precision.DEGREES:
            return out

        out += f":{parts.minutes:02d}"
        if precision == Precision.MINUTES:
            return out

        return f"{out}:{_fmt_seconds(parts.seconds, precision)}"

    def parse(self, text: str) -> float:
        """
        Parse D[:M[:S]] text into an angle in degrees within [0, 360).

        The sign of the major token applies to the whole value; minutes and seconds
        are magnitudes, so "-10:30:00" is -10.5 major units.
        """
        if text is None:
            raise InvalidNumericInput("cannot parse None as an angle")
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {fmt_value(text)}")

        tokens = [token.strip() for token in text.split(":")]
        if len(tokens) > 3:
            raise InvalidNumericInput(f"at most 3 fields expected, got {fmt_value(text)}")

        fields = [_parse_field(token, text) for token in tokens]
        fields += [0.0] * (3 - len(fields))
        major, minutes, seconds = fields

        sign = math.copysign(1.0, major)
        total = major + sign * (abs(minutes) / 60.0 + abs(seconds) / 3600.0)
        return circular(total * self.DEGREES_PER_UNIT)

    def split(self, units: float, precision: int) -> SexagesimalParts:
        """
        Decompose a non-negative value into rounded major, minutes, seconds fields.

        Carries chain: seconds reaching 60 bump minutes, minutes reaching 60 bump
        the major field. The major field is wrapped only when MAJOR_WRAP is set.
        """
        major = math.floor(units)
        minutes = math.floor((units - major) * 60.0)
        seconds = max((units - major - minutes / 60.0) * 3600.0, 0.0)

        if precision >= Precision.SECONDS:
            seconds = round_half_away(seconds, precision)
        elif precision == Precision.NATURAL:
            seconds = round_half_away(seconds, AngleConf.NATURAL_DIGITS)

        if seconds >= 60.0 - AngleConf.CARRY_EPSILON:
            seconds = max(seconds - 60.0, 0.0)
            minutes += 1
        if precision == Precision.MINUTES and seconds >= 30.0:
            minutes += 1

        if minutes >= 60:
            minutes -= 60
            major += 1
        if precision == Precision.DEGREES and minutes >= 30:
            major += 1

        if self.MAJOR_WRAP is not None and major >= self.MAJOR_WRAP:
            logger.debug("%s carry wrapped major field %d to %d",
                         type(self).__name__, major, major - self.MAJOR_WRAP)
            major -= self.MAJOR_WRAP

        return SexagesimalParts(major, minutes, seconds)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SexagesimalFormatter):
            return type(self) is type(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(type(self))


class AngleFormatter(SexagesimalFormatter):
    """
    Degrees:minutes:seconds over the circular range [0, 360).

    After a carry the degree field is not wrapped again, so a value just below
    360 can display as 360:00:00 at coarse precision.

    Examples:
        >>> fmt = AngleFormatter()
        >>> fmt.format(0.0, 0)
        '0:00:00'
        >>> fmt.parse("-10:30:0")
        349.5
    """

    DESCRIPTION = "Degree-Angle (0 - 360) Coordinate Axis Position Formatter"


class TimeAngleFormatter(SexagesimalFormatter):
    """
    Hours:minutes:seconds rendering of an angle, 15 degrees per hour, range [0, 24).

    Input and parsed values are degrees; the hour field wraps 24 to 0 after carry.

    Examples:
        >>> fmt = TimeAngleFormatter()
        >>> fmt.format(187.5, 0)
        '12:30:00'
        >>> fmt.parse("12:30")
        187.5
    """

    DESCRIPTION = "Time-Angle Coordinate Axis Position Formatter"
    DEGREES_PER_UNIT = 15.0
    MAJOR_WRAP = 24


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_seconds(seconds: float, precision: int) -> str:
    """Seconds field with a zero-padded 2-digit integer part."""
    if precision == Precision.SECONDS:
        return f"{int(seconds):02d}"

    if precision == Precision.NATURAL:
        if seconds < AngleConf.ZERO_SECONDS:
            return "00." + "0" * AngleConf.NATURAL_DIGITS
        precision = AngleConf.NATURAL_DIGITS

    return f"{seconds:0{precision + 3}.{precision}f}"


def _parse_field(token: str, text: str) -> float:
    if not token:
        raise InvalidNumericInput(f"empty field in {fmt_value(text)}")
    try:
        number = float(token)
    except ValueError as e:
        raise InvalidNumericInput(f"field {fmt_value(token)} of {fmt_value(text)} is not a number") from e

    if not math.isfinite(number):
        raise InvalidNumericInput(f"field {fmt_value(token)} of {fmt_value(text)} is not finite")
    return number
