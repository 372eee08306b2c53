"""Generic harness for numeric command-line calculators.

Every calculator has the same shape: a fixed list of positional numeric
arguments, a validator that rejects out-of-domain values, a pure compute
function returning one or more result records, and a JSON result on stdout.
`NumericCalculator` implements that shape once; each tool only declares its
arguments and functions.

Typical usage example:
    from flightcalc.cli.harness import Argument, NumericCalculator

    WIND = NumericCalculator(
        name="wind-calculator",
        description="Headwind and crosswind components",
        arguments=(Argument("track", "Ground track (degrees true)"), ...),
        validate=_validate_wind,
        compute=_compute_wind,
    )
    sys.exit(WIND.run())
"""

import argparse
import math
import re
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from flightcalc.cli.output import record_items, render_json
from flightcalc.core.config import resolve_log_config_path
from flightcalc.core.logging_system import LoggingError, get_logger, initialize_logging
from flightcalc.errors import CalculatorError, UsageError

logger = get_logger(__name__)


# Signed decimal literals, exponent forms included ("-1.5e3", "-9e1", "-.5")
NEGATIVE_NUMBER = re.compile(r"^-(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$")


class CalculatorArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2.

    Every negative decimal literal is read as a positional value, not only
    the plain forms argparse recognizes on its own.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._negative_number_matcher = NEGATIVE_NUMBER

    def error(self, message: str):
        raise UsageError(message)


def finite_float(text: str) -> float:
    """Parse a numeric literal, rejecting NaN and infinities.

    Raises:
        argparse.ArgumentTypeError: If the text is not a finite number.
    """
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"number must be finite: {text!r}")
    return value


@dataclass(frozen=True)
class Argument:
    """One positional numeric argument.

    Attributes:
        name: Argument name, also the keyword passed to validate/compute
        help: One-line description shown in the usage text
        optional: True if the argument may be omitted (trailing only)
        default: Value used when an optional argument is omitted
    """

    name: str
    help: str
    optional: bool = False
    default: float = 0.0


@dataclass
class NumericCalculator:
    """A parse, validate, compute and print command-line calculator.

    Attributes:
        name: Program name shown in the usage text
        description: One-line summary
        arguments: Positional arguments in command-line order
        validate: Called with every argument as a keyword; raises DomainError
        compute: Called with every argument as a keyword; returns a result
            dataclass or a tuple of them, rendered in order
        example: Example argument list for the usage text and demos
        example_note: Plain-language reading of the example
    """

    name: str
    description: str
    arguments: Sequence[Argument]
    validate: Callable[..., None]
    compute: Callable[..., Any]
    example: Sequence[str] = field(default_factory=tuple)
    example_note: str = ""

    def __post_init__(self) -> None:
        seen_optional = False
        for argument in self.arguments:
            if seen_optional and not argument.optional:
                raise ValueError(f"{self.name}: required argument {argument.name} follows an optional one")
            seen_optional = seen_optional or argument.optional

    def build_parser(self, prog: str | None = None) -> CalculatorArgumentParser:
        """Build the argument parser for this calculator.

        Args:
            prog: Program name override, e.g. "flightcalc turn".

        Returns:
            Parser whose errors raise UsageError.
        """
        prog = prog or self.name
        epilog = ""
        if self.example:
            epilog = f"Example:\n  {prog} {' '.join(self.example)}"
            if self.example_note:
                epilog += f"\n  ({self.example_note})"

        parser = CalculatorArgumentParser(
            prog=prog,
            description=self.description,
            epilog=epilog,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        for argument in self.arguments:
            if argument.optional:
                parser.add_argument(
                    argument.name,
                    type=finite_float,
                    nargs="?",
                    default=argument.default,
                    help=f"{argument.help} (optional, default {argument.default:g})",
                )
            else:
                parser.add_argument(argument.name, type=finite_float, help=argument.help)

        parser.add_argument(
            "--log-config",
            metavar="PATH",
            help="YAML logging configuration (default: $FLIGHTCALC_LOG_CONFIG)",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Log calculation details to stderr",
        )

        return parser

    def evaluate(self, values: dict[str, float]) -> list[tuple[str, float | bool]]:
        """Validate the inputs and compute the result fields.

        Args:
            values: Parsed argument values keyed by argument name.

        Returns:
            Ordered (field name, value) pairs of every result record.

        Raises:
            DomainError: If the validator rejects the inputs.
        """
        self.validate(**values)
        result = self.compute(**values)
        records = result if isinstance(result, tuple) else (result,)
        return record_items(*records)

    def run(self, argv: Sequence[str] | None = None, prog: str | None = None) -> int:
        """Run the calculator as a command-line program.

        Args:
            argv: Arguments without the program name (default: sys.argv[1:]).
            prog: Program name override for the usage text.

        Returns:
            Exit code: 0 on success, 1 on usage or domain errors.

        Raises:
            SystemExit: With code 0 after printing the help text for -h/--help.
        """
        parser = self.build_parser(prog)

        try:
            args = parser.parse_args(argv)
        except UsageError as e:
            return self._fail(parser, e)

        try:
            initialize_logging(resolve_log_config_path(args.log_config), verbose=args.verbose)
        except LoggingError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        values = {argument.name: getattr(args, argument.name) for argument in self.arguments}
        logger.debug("%s invoked with %s", parser.prog, values)

        try:
            items = self.evaluate(values)
        except CalculatorError as e:
            return self._fail(parser, e)

        sys.stdout.write(render_json(items))
        return 0

    def _fail(self, parser: argparse.ArgumentParser, error: CalculatorError) -> int:
        logger.debug("%s rejected input: %s", parser.prog, error)
        print(f"Error: {error}", file=sys.stderr)
        print(parser.format_help(), file=sys.stderr)
        return 1
