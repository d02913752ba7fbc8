#
# Axisfmt Stokes Polarization Formatter
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .abc import AxisPosFormatter
from .collections import FrozenBiMap
from .exceptions import InvalidNumericInput, UnrecognizedUnit
from .numeric import round_half_away, std_float
from .tools import fmt_value


# Constants ------------------------------------------------------------------------------------------------------------

# @formatter:off
# FITS STOKES axis codes
STOKES_CODES: FrozenBiMap[int, str] = FrozenBiMap({
     1: "I",   2: "Q",   3: "U",   4: "V",
    -1: "RR", -2: "LL", -3: "RL", -4: "LR",
    -5: "XX", -6: "YY", -7: "XY", -8: "YX",
})
# @formatter:on

UNKNOWN = "Unknown"

# Lower-case spellings accepted by parse()
_FOLDED_NAMES: frozendict[str, int] = frozendict((name.casefold(), code) for code, name in STOKES_CODES.items())


# Classes --------------------------------------------------------------------------------------------------------------

class StokesFormatter(AxisPosFormatter):
    """
    Polarization axis values as Stokes parameter names.

    The axis value is a FITS Stokes code; format() rounds it to the nearest integer
    code, ignores precision, and prints "Unknown" for codes without a name.

    Codes follow the FITS STOKES convention (RR=-1, LL=-2, ..., YX=-8), not the
    NRAO-ordered table that indexes floor(code + 8.5) and so reads -1 as LL and
    0 as RR. Axes labeled with NRAO ordering need their codes converted first.

    Examples:
        >>> fmt = StokesFormatter()
        >>> fmt.format(1)
        'I'
        >>> fmt.format(-5.2)
        'XX'
        >>> fmt.format(9)
        'Unknown'
        >>> fmt.parse("rl")
        -3.0
    """

    DESCRIPTION = "Stokes Polarization Coordinate Axis Position Formatter"

    def format(self, value: Any, precision: int | None = None) -> str:
        code = int(round_half_away(std_float(value)))
        return STOKES_CODES.get(code, UNKNOWN)

    def parse(self, text: str) -> float:
        """Code of a Stokes parameter name, case-insensitive."""
        if text is None:
            raise InvalidNumericInput("cannot parse None as a Stokes parameter")
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {fmt_value(text)}")

        name = text.strip()
        if not name:
            raise InvalidNumericInput("empty Stokes parameter")

        code = _FOLDED_NAMES.get(name.casefold())
        if code is None:
            raise UnrecognizedUnit(f"unknown Stokes parameter {fmt_value(name)}")
        return float(code)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StokesFormatter):
            return type(self) is type(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(type(self))
