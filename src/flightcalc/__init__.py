"""FlightCalc - command-line turn, VNAV and wind calculators."""

__version__ = "0.1.0"
