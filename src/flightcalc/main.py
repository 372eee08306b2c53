"""FlightCalc - single entry point for all calculators.

Forwards to the turn, VNAV or wind calculator named by the first argument.

Typical usage:
    flightcalc turn 250 25 90
    flightcalc vnav 35000 10000 100 450 -1500
    flightcalc wind 90 85 270 15
    flightcalc --list
"""

import argparse
import sys
from typing import Sequence

from flightcalc.cli.commands import CALCULATORS
from flightcalc.cli.harness import CalculatorArgumentParser
from flightcalc.errors import UsageError


def build_parser() -> CalculatorArgumentParser:
    """Build the dispatcher argument parser.

    Returns:
        Parser collecting the calculator name and its raw arguments.
    """
    parser = CalculatorArgumentParser(
        prog="flightcalc",
        description="FlightCalc - turn, VNAV and wind calculators",
        epilog="Run 'flightcalc <calculator> --help' for the arguments of a calculator.",
    )
    parser.add_argument(
        "calculator",
        nargs="?",
        choices=sorted(CALCULATORS),
        help="Calculator to run",
    )
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="Arguments passed to the calculator",
    )
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="List the available calculators and exit",
    )
    return parser


def list_calculators() -> str:
    """Describe every calculator on one line each."""
    return "\n".join(
        f"  {name:<6} {calculator.description}" for name, calculator in sorted(CALCULATORS.items())
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code of the calculator, or 1 if no valid calculator was named.
    """
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        if args.list:
            print("Available calculators:")
            print(list_calculators())
            return 0
        if args.calculator is None:
            raise UsageError("no calculator given")
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(parser.format_usage(), file=sys.stderr)
        print("Available calculators:", file=sys.stderr)
        print(list_calculators(), file=sys.stderr)
        return 1

    calculator = CALCULATORS[args.calculator]
    return calculator.run(args.args, prog=f"flightcalc {args.calculator}")


if __name__ == "__main__":
    sys.exit(main())
