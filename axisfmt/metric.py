"""
Metric formatters: a number followed by a prefixed physical unit, e.g. "1.5 MHz".

Input values are expressed in units of 10^input_power relative to the base unit.
The output prefix is either fixed by an output power hint or chosen per value
from a PrefixTable; the value is rescaled accordingly and rendered as a plain
decimal. Parsing reverses the process into the input power frame.

Subclasses fix the base unit identity and may suppress prefixes that are not
conventionally used for their quantity; the suppressed table is a private copy.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import dataclasses
import functools
import logging
import math
from dataclasses import dataclass
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .abc import AxisPosFormatter, std_precision
from .exceptions import InvalidNumericInput, NonFiniteInput, UnrecognizedUnit
from .generic import parse_number
from .numeric import DecimalConf, fmt_decimal, magnitude, std_float
from .prefixes import PrefixTable, SI_PREFIXES
from .tools import fmt_type, fmt_value

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class MetricConfig:
    """
    Immutable metric formatter configuration.

    Attributes:
        unit_name: Full base unit name, e.g. "Hertz"; "" prints prefixes only.
        unit_abbrev: Base unit abbreviation, e.g. "Hz"; defaults to unit_name.
        input_power: Values passed to format() are in units of 10^input_power.
        output_power: Fixed output prefix power, or None to choose per value.
        abbreviate: Print abbreviations ("MHz") rather than names ("MegaHertz").
    """
    unit_name: str = ""
    unit_abbrev: str | None = None
    input_power: int = 0
    output_power: int | None = None
    abbreviate: bool = True

    def __post_init__(self):
        if not isinstance(self.unit_name, str):
            raise TypeError(f"unit_name must be str, got {fmt_type(self.unit_name)}")
        if self.unit_abbrev is None:
            object.__setattr__(self, "unit_abbrev", self.unit_name)
        elif not isinstance(self.unit_abbrev, str):
            raise TypeError(f"unit_abbrev must be str or None, got {fmt_type(self.unit_abbrev)}")

        if type(self.input_power) is not int:
            raise TypeError(f"input_power must be int, got {fmt_type(self.input_power)}")
        if self.output_power is not None and type(self.output_power) is not int:
            raise TypeError(f"output_power must be int or None, got {fmt_type(self.output_power)}")

        object.__setattr__(self, "abbreviate", bool(self.abbreviate))

    @property
    def unit(self) -> str:
        """Unit label in the current abbreviation mode."""
        return self.unit_abbrev if self.abbreviate else self.unit_name


class MetricFormatter(AxisPosFormatter):
    """
    Values of a physical quantity with automatically chosen metric prefixes.

    Args:
        unit_name: Full base unit name; "" formats bare prefixes.
        unit_abbrev: Base unit abbreviation; defaults to unit_name.
        input_power: Input values are in units of 10^input_power of the base unit.
        output_power: Prefix power to always use; an unknown power is floored to the
            nearest known one below it. None picks the best prefix per value.
        abbreviate: Use prefix and unit abbreviations.
        prefixes: Prefix table, SI_PREFIXES by default.

    Examples:
        >>> fmt = MetricFormatter("meter", "m")
        >>> fmt.format(4.823e-17)
        '48.23 am'
        >>> fmt.format(0.25, 1)
        '2.5 dm'
        >>> fmt.parse("2.5 dm")
        0.25
        >>> MetricFormatter("meter", "m", input_power=3, abbreviate=False).format(1.5)
        '1.5 kilometer'
    """

    DESCRIPTION = "Metric Coordinate Axis Position Formatter"
    SUPPRESSED_POWERS: tuple[int, ...] = ()

    def __init__(
            self,
            unit_name: str = "",
            unit_abbrev: str | None = None,
            input_power: int = 0,
            output_power: int | None = None,
            abbreviate: bool = True,
            *,
            prefixes: PrefixTable | None = None,
    ):
        self._prefixes = self._suppress(SI_PREFIXES if prefixes is None else prefixes)
        self._config = self._fix_output_power(
            MetricConfig(unit_name, unit_abbrev, input_power, output_power, abbreviate)
        )

    # ----- AxisPosFormatter -----

    def format(self, value: Any, precision: int | None = None) -> str:
        """
        Format value x 10^input_power base units with the best (or fixed) prefix.

        Precision: None or <= -3 natural digits, -2..0 integer, >= 1 decimal places.
        """
        number = std_float(value)
        precision = std_precision(precision, DecimalConf.MAX_PRECISION)

        power = self.power_for(number)
        text = fmt_decimal(_rescale(number, self.input_power - power), precision)
        units = self.units_for(power)
        return f"{text} {units}" if units else text

    def parse(self, text: str) -> float:
        """
        Parse "<number> <prefix><unit>" into a value in the input power frame.

        Both abbreviated and full prefix/unit spellings are accepted regardless of
        the current abbreviation mode. The number and unit must be separated by
        whitespace.

        Raises:
            InvalidNumericInput: None, empty text, a malformed number, or a value out of float range.
            UnrecognizedUnit: missing or unknown unit, or unknown prefix.
        """
        if text is not None and not isinstance(text, str):
            raise TypeError(f"text must be str, got {fmt_value(text)}")

        tokens = (text or "").split(None, 1)
        number = parse_number(tokens[0] if tokens else "")
        unit_token = tokens[1].strip() if len(tokens) > 1 else ""

        power = self._unit_power(unit_token)
        if power is None:
            raise UnrecognizedUnit(
                f"unrecognized unit {fmt_value(unit_token)}, expected a prefixed {fmt_value(self.unit)}"
            )
        try:
            return _rescale(number, power - self.input_power)
        except NonFiniteInput as e:
            raise InvalidNumericInput(f"{fmt_value(text)} is out of float range") from e

    # ----- Configuration -----

    @property
    def config(self) -> MetricConfig:
        return self._config

    @property
    def prefixes(self) -> PrefixTable:
        return self._prefixes

    @property
    def unit(self) -> str:
        return self._config.unit

    @property
    def unit_name(self) -> str:
        return self._config.unit_name

    @property
    def unit_abbrev(self) -> str:
        return self._config.unit_abbrev

    @property
    def input_power(self) -> int:
        return self._config.input_power

    @property
    def output_power(self) -> int | None:
        """The fixed output prefix power, or None if prefixes are chosen per value."""
        return self._config.output_power

    @property
    def is_fixed(self) -> bool:
        return self._config.output_power is not None

    @property
    def is_abbreviated(self) -> bool:
        return self._config.abbreviate

    def set_abbreviated(self, abbreviate: bool) -> None:
        """Switch between abbreviations and full names; affects this instance only."""
        self._config = dataclasses.replace(self._config, abbreviate=abbreviate)

    def replace(self, *, prefixes: PrefixTable | None = None, **changes) -> Self:
        """
        Return a new formatter with MetricConfig fields (and optionally the prefix table) replaced.

        Examples:
            >>> FrequencyFormatter().replace(output_power=6).format(2.5e9)
            '2500 MHz'
        """
        new = self.clone()
        if prefixes is not None:
            new._prefixes = self._suppress(prefixes)
        new._config = new._fix_output_power(dataclasses.replace(self._config, **changes))
        return new

    def prefix_for(self, power: int) -> str | None:
        return self._prefixes.prefix_for(power)

    def abbrev_for(self, power: int) -> str | None:
        return self._prefixes.abbrev_for(power)

    # ----- Scaling -----

    def power_for(self, number: float) -> int:
        """
        Prefix power used to display a value given in the input power frame.

        The fixed output power if configured, else the largest known power p with
        |number x 10^input_power| >= 10^p, or 0 for zero and tiny values.
        """
        if self.is_fixed:
            return self._config.output_power
        if number == 0:
            return 0
        return self._prefixes.floor_power(magnitude(number) + self.input_power)

    def units_for(self, power: int) -> str:
        """Prefix plus unit label for a power; an unlabeled power gives the bare unit."""
        prefix = self._prefixes.label_for(power, self.is_abbreviated) or ""
        return f"{prefix}{self.unit}"

    # ----- Equality and representation -----

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MetricFormatter):
            return (type(self) is type(other)
                    and self._config == other._config
                    and self._prefixes == other._prefixes)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self), self._config, self._prefixes))

    def __repr__(self) -> str:
        c = self._config
        return (f"{type(self).__name__}(unit_name={c.unit_name!r}, unit_abbrev={c.unit_abbrev!r}, "
                f"input_power={c.input_power}, output_power={c.output_power}, abbreviate={c.abbreviate})")

    # ----- Private -----

    def _fix_output_power(self, config: MetricConfig) -> MetricConfig:
        if config.output_power is None:
            return config
        floored = self._prefixes.floor_power(config.output_power)
        if floored != config.output_power:
            logger.debug("%s output power %d has no prefix, using %d",
                         type(self).__name__, config.output_power, floored)
        return dataclasses.replace(config, output_power=floored)

    def _suppress(self, table: PrefixTable) -> PrefixTable:
        if not self.SUPPRESSED_POWERS or table.min_power > min(self.SUPPRESSED_POWERS):
            return table
        return _without_powers(table, self.SUPPRESSED_POWERS)

    def _unit_power(self, token: str) -> int | None:
        """Power of ten of a prefixed unit token, or None if not recognized."""
        c = self._config
        candidates = [(c.unit_abbrev, True), (c.unit_name, False)]
        if not c.abbreviate:
            candidates.reverse()

        for unit, abbreviate in candidates:
            if not token.endswith(unit):
                continue
            prefix = token[:len(token) - len(unit)]
            power = self._prefixes.power_of(prefix, abbreviate=abbreviate)
            if power is not None:
                return power
        return None


class FrequencyFormatter(MetricFormatter):
    """
    Frequencies in Hertz; deca- and hecto- prefixes are not used.

    Examples:
        >>> FrequencyFormatter().format(1_500_000)
        '1.5 MHz'
        >>> FrequencyFormatter(abbreviate=False).format(1.5, 2)
        '1.50 Hertz'
        >>> FrequencyFormatter(input_power=9).parse("1420 MHz")
        1.42
    """

    DESCRIPTION = "Frequency Coordinate Axis Position Formatter"
    UNIT_NAME = "Hertz"
    UNIT_ABBREV = "Hz"
    SUPPRESSED_POWERS = (1, 2)

    def __init__(
            self,
            input_power: int = 0,
            abbreviate: bool = True,
            output_power: int | None = None,
            *,
            prefixes: PrefixTable | None = None,
    ):
        super().__init__(self.UNIT_NAME, self.UNIT_ABBREV, input_power, output_power, abbreviate, prefixes=prefixes)


class VelocityFormatter(MetricFormatter):
    """
    Velocities in meters/second; deca- and hecto- prefixes are not used.

    Examples:
        >>> VelocityFormatter().format(-12500.0)
        '-12.5 km/s'
    """

    DESCRIPTION = "Metric Velocity Coordinate Axis Position Formatter"
    UNIT_NAME = "meters/second"
    UNIT_ABBREV = "m/s"
    SUPPRESSED_POWERS = (1, 2)

    def __init__(
            self,
            input_power: int = 0,
            abbreviate: bool = True,
            output_power: int | None = None,
            *,
            prefixes: PrefixTable | None = None,
    ):
        super().__init__(self.UNIT_NAME, self.UNIT_ABBREV, input_power, output_power, abbreviate, prefixes=prefixes)


# Private Methods ------------------------------------------------------------------------------------------------------

@functools.lru_cache(maxsize=32)
def _without_powers(table: PrefixTable, powers: tuple[int, ...]) -> PrefixTable:
    """Suppressed copy of a table, built once per (table, powers) pair."""
    return table.without(*powers)


def _rescale(number: float, shift: int) -> float:
    """number x 10^shift, dividing for negative shifts."""
    if shift >= 0:
        result = number * 10.0 ** shift
    else:
        result = number / 10.0 ** -shift
    if not math.isfinite(result):
        raise NonFiniteInput(f"{fmt_value(number)} x 10^{shift} is out of float range")
    return result
