"""
Axisfmt CLI Tools

Usage:
    axisfmt format angle 149.9823
    axisfmt format frequency 1500000 -p 2 --full-names
    axisfmt format metric 0.25 --unit meter/m
    axisfmt parse frequency 1.5 MHz
    axisfmt describe time

Values starting with "-" that are not plain numbers are read as options;
pass them after "--", e.g. axisfmt parse angle -- -10:30:00
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import logging
import sys
from typing import Callable, Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .abc import AxisPosFormatter
from .angle import AngleFormatter, TimeAngleFormatter
from .exceptions import FormatError
from .generic import GenericFormatter, parse_number
from .metric import FrequencyFormatter, MetricFormatter, VelocityFormatter
from .stokes import StokesFormatter

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

EXIT_OK = 0
EXIT_FORMAT_ERROR = 2

_HANDLER: logging.Handler | None = None


# Methods --------------------------------------------------------------------------------------------------------------

def setup_logging(level: int = logging.WARNING) -> None:
    """Attach a console handler on the current stderr to the package logger, replacing a previous one."""
    global _HANDLER

    package_logger = logging.getLogger("axisfmt")
    package_logger.setLevel(level)
    if _HANDLER is not None:
        package_logger.removeHandler(_HANDLER)

    _HANDLER = logging.StreamHandler()
    _HANDLER.setLevel(level)
    _HANDLER.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    package_logger.addHandler(_HANDLER)


def build_formatter(
        kind: str,
        *,
        input_power: int = 0,
        output_power: int | None = None,
        full_names: bool = False,
        unit: str | None = None,
) -> AxisPosFormatter:
    """
    Formatter for a CLI kind name.

    Power and naming options apply to the metric kinds only; unit is "NAME[/ABBREV]"
    for the metric kind.

    Raises:
        ValueError: unknown kind.
    """
    if kind not in KINDS:
        raise ValueError(f"unknown formatter kind {kind!r}, expected one of {', '.join(KINDS)}")

    if kind == "metric":
        name, _, abbrev = (unit or "").partition("/")
        return MetricFormatter(name, abbrev or None, input_power, output_power, not full_names)
    if kind in ("frequency", "velocity"):
        return KINDS[kind](input_power, not full_names, output_power)
    return KINDS[kind]()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="axisfmt",
        description="Format and parse coordinate axis positions.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fmt_cmd = subparsers.add_parser("format", help="Format a value as text")
    fmt_cmd.add_argument("kind", choices=list(KINDS))
    fmt_cmd.add_argument("value", help="Number to format")
    fmt_cmd.add_argument("-p", "--precision", type=int, default=None,
                         help="Precision code: -3 natural, -2 degrees, -1 minutes, 0 seconds, N decimals")
    _add_metric_options(fmt_cmd)
    fmt_cmd.set_defaults(func=cmd_format)

    parse_cmd = subparsers.add_parser("parse", help="Parse text into a value")
    parse_cmd.add_argument("kind", choices=list(KINDS))
    parse_cmd.add_argument("text", nargs="+", help="Text to parse; words are joined by single spaces")
    _add_metric_options(parse_cmd)
    parse_cmd.set_defaults(func=cmd_parse)

    describe_cmd = subparsers.add_parser("describe", help="Print the formatter description")
    describe_cmd.add_argument("kind", choices=list(KINDS))
    describe_cmd.set_defaults(func=cmd_describe)

    return parser


def cmd_format(args: argparse.Namespace) -> int:
    formatter = _formatter_from_args(args)
    print(formatter.format(parse_number(args.value), args.precision))
    return EXIT_OK


def cmd_parse(args: argparse.Namespace) -> int:
    formatter = _formatter_from_args(args)
    print(formatter.parse(" ".join(args.text)))
    return EXIT_OK


def cmd_describe(args: argparse.Namespace) -> int:
    print(build_formatter(args.kind).describe())
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        return args.func(args)
    except FormatError as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"axisfmt: {exc}", file=sys.stderr)
        return EXIT_FORMAT_ERROR


# Private Methods ------------------------------------------------------------------------------------------------------

def _add_metric_options(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("metric options")
    group.add_argument("--input-power", type=int, default=0,
                       help="Values are in units of 10^N of the base unit")
    group.add_argument("--output-power", type=int, default=None,
                       help="Always print with the prefix for 10^N")
    group.add_argument("--full-names", action="store_true",
                       help="Print prefix and unit names instead of abbreviations")
    group.add_argument("--unit", default=None, metavar="NAME[/ABBREV]",
                       help="Base unit of the metric kind, e.g. meter/m")


def _formatter_from_args(args: argparse.Namespace) -> AxisPosFormatter:
    return build_formatter(
        args.kind,
        input_power=args.input_power,
        output_power=args.output_power,
        full_names=args.full_names,
        unit=args.unit,
    )


# Constants ------------------------------------------------------------------------------------------------------------

# @formatter:off
KINDS: dict[str, Callable[..., AxisPosFormatter]] = {
    "angle":     AngleFormatter,
    "time":      TimeAngleFormatter,
    "generic":   GenericFormatter,
    "metric":    MetricFormatter,
    "frequency": FrequencyFormatter,
    "velocity":  VelocityFormatter,
    "stokes":    StokesFormatter,
}
# @formatter:on


if __name__ == "__main__":
    sys.exit(main())
