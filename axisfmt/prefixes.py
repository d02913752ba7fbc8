#
# Axisfmt Metric Prefix Tables
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Self

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import FrozenBiMap
from .tools import fmt_type, fmt_value

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PrefixEntry:
    """
    One metric prefix: the power of ten it stands for, its name and abbreviation.

    The base unit itself is the entry with power 0 and empty strings.
    """
    power: int
    name: str
    abbrev: str

    def __post_init__(self):
        if type(self.power) is not int:
            raise TypeError(f"power must be int, got {fmt_type(self.power)}")
        if not isinstance(self.name, str) or not isinstance(self.abbrev, str):
            raise TypeError(f"name and abbrev must be str, got {fmt_value(self.name)}, {fmt_value(self.abbrev)}")


class PrefixTable:
    """
    Immutable, sparse table of metric prefixes keyed by power of ten.

    Lookups go both ways: power -> name/abbreviation via prefix_for()/abbrev_for(),
    and name/abbreviation -> power via power_of(). Not every power needs an entry;
    floor_power() degrades to the nearest labeled power below a request.

    Customization never mutates a table: without() and with_entry() return a new
    table, so a shared constant like SI_PREFIXES stays intact for every formatter.

    Examples:
        >>> SI_PREFIXES.abbrev_for(6)
        'M'
        >>> SI_PREFIXES.power_of("kilo")
        3
        >>> SI_PREFIXES.floor_power(5)
        3
        >>> SI_PREFIXES.without(1, 2).floor_power(2)
        0
    """

    __slots__ = ("_names", "_abbrevs", "_aliases")

    def __init__(self, entries: Iterable[PrefixEntry], aliases: dict[str, int] | None = None) -> None:
        entries = sorted(entries, key=lambda e: e.power)
        if not entries:
            raise ValueError("PrefixTable requires at least one entry")

        self._names: FrozenBiMap[int, str] = FrozenBiMap((e.power, e.name) for e in entries)
        self._abbrevs: FrozenBiMap[int, str] = FrozenBiMap((e.power, e.abbrev) for e in entries)
        # Aliases resolve only to powers still present in the table
        self._aliases: frozendict[str, int] = frozendict(
            (k, v) for k, v in (aliases or {}).items() if v in self._names
        )

    def __contains__(self, power: object) -> bool:
        return power in self._names

    def __iter__(self) -> Iterator[PrefixEntry]:
        for power in self._names:
            yield PrefixEntry(power, self._names[power], self._abbrevs[power])

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PrefixTable):
            return list(self) == list(other) and self._aliases == other._aliases
        return NotImplemented

    def __hash__(self) -> int:
        return hash((tuple(self), tuple(self._aliases.items())))

    def __repr__(self) -> str:
        powers = ", ".join(f"{e.power}: {e.abbrev!r}" for e in self)
        return f"PrefixTable({{{powers}}})"

    @property
    def powers(self) -> tuple[int, ...]:
        """Known powers in ascending order."""
        return tuple(self._names)

    @property
    def min_power(self) -> int:
        return self.powers[0]

    @property
    def max_power(self) -> int:
        return self.powers[-1]

    def prefix_for(self, power: int) -> str | None:
        """The full prefix name for a power, or None if the power has no prefix."""
        return self._names.get(power)

    def abbrev_for(self, power: int) -> str | None:
        """The prefix abbreviation for a power, or None if the power has no prefix."""
        return self._abbrevs.get(power)

    def label_for(self, power: int, abbreviate: bool = True) -> str | None:
        return self.abbrev_for(power) if abbreviate else self.prefix_for(power)

    def floor_power(self, power: int) -> int:
        """
        Return the highest known power that is less than or equal to the requested power.

        A request below every known power falls back to the base unit, power 0,
        never rounding up past an unlabeled magnitude.
        """
        if type(power) is not int:
            raise TypeError(f"power must be int, got {fmt_type(power)}")

        if power in self._names:
            return power

        candidates = [p for p in self._names if p <= power]
        floored = max(candidates) if candidates else 0
        logger.debug("No prefix for power %d, using power %d", power, floored)
        return floored

    def power_of(self, label: str, abbreviate: bool | None = None) -> int | None:
        """
        Reverse lookup of a prefix name or abbreviation.

        Args:
            label: Prefix text, "" for the base unit.
            abbreviate: Search abbreviations first (True), names first (False);
                None searches abbreviations then names. Both are always searched.

        Returns:
            The power of ten, or None if the label is not a known prefix.
        """
        maps = (self._names, self._abbrevs) if abbreviate is False else (self._abbrevs, self._names)
        for bimap in maps:
            if bimap.has_value(label):
                return bimap.get_key(label)
        if label in self._aliases:
            return self._aliases[label]
        return None

    def without(self, *powers: int) -> Self:
        """Return a copy of the table with the given powers removed; the reverse lookup follows."""
        table = object.__new__(type(self))
        table._names = self._names.discard(*powers)
        table._abbrevs = self._abbrevs.discard(*powers)
        table._aliases = frozendict((k, v) for k, v in self._aliases.items() if v not in powers)
        if not table._names:
            raise ValueError(f"cannot remove every prefix from {self!r}")
        logger.debug("Prefix powers %s suppressed", powers)
        return table

    def with_entry(self, power: int, name: str | None = None, abbrev: str | None = None) -> Self:
        """
        Return a copy of the table with a prefix added or replaced for a power.

        Either label may be omitted to keep the current one (or "" for a new power).
        """
        entry = PrefixEntry(
            power,
            name if name is not None else (self.prefix_for(power) or ""),
            abbrev if abbrev is not None else (self.abbrev_for(power) or ""),
        )
        entries = [e for e in self if e.power != power] + [entry]
        return type(self)(entries, aliases=dict(self._aliases.items()))


# Constants ------------------------------------------------------------------------------------------------------------

# @formatter:off
SI_PREFIXES = PrefixTable(
    [
        PrefixEntry(-24, "yocto", "y"),
        PrefixEntry(-21, "zepto", "z"),
        PrefixEntry(-18, "atto",  "a"),
        PrefixEntry(-15, "femto", "f"),
        PrefixEntry(-12, "pico",  "p"),
        PrefixEntry(-9,  "nano",  "n"),
        PrefixEntry(-6,  "micro", "µ"),
        PrefixEntry(-3,  "milli", "m"),
        PrefixEntry(-2,  "centi", "c"),
        PrefixEntry(-1,  "deci",  "d"),
        PrefixEntry(0,   "",      ""),
        PrefixEntry(1,   "deca",  "da"),
        PrefixEntry(2,   "hecto", "h"),
        PrefixEntry(3,   "kilo",  "k"),
        PrefixEntry(6,   "Mega",  "M"),
        PrefixEntry(9,   "Giga",  "G"),
        PrefixEntry(12,  "Tera",  "T"),
        PrefixEntry(15,  "Peta",  "P"),
        PrefixEntry(18,  "Exa",   "E"),
        PrefixEntry(21,  "Zetta", "Z"),
        PrefixEntry(24,  "Yotta", "Y"),
    ],
    # Micro sign typed as ASCII u or as Greek small mu
    aliases={"u": -6, "μ": -6},
)
# @formatter:on


# Module Sanity Checks -------------------------------------------------------------------------------------------------

if SI_PREFIXES.prefix_for(0) != "" or SI_PREFIXES.abbrev_for(0) != "":
    raise AssertionError("Configuration Error: SI_PREFIXES must label the base unit power 0 with empty strings.")
