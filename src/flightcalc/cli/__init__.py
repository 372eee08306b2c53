"""Command-line front end: argument parsing, validation and JSON output."""

from flightcalc.cli.commands import CALCULATORS, TURN, VNAV, WIND
from flightcalc.cli.harness import Argument, NumericCalculator

__all__ = ["Argument", "CALCULATORS", "NumericCalculator", "TURN", "VNAV", "WIND"]
