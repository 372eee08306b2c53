"""Closed-form flight calculators.

This module provides the pure formula side of each command-line tool:
- Turn performance (radius, rate, lead distance, load factor)
- Vertical navigation (flight path angle, required VS, top of descent)
- Wind components (headwind, crosswind, drift)
"""

from flightcalc.calculators.turn import TurnResult, calculate_turn_performance
from flightcalc.calculators.vnav import (
    VnavHelpers,
    VnavResult,
    calculate_vnav,
    calculate_vnav_helpers,
)
from flightcalc.calculators.wind import WindResult, calculate_wind

__all__ = [
    "TurnResult",
    "VnavHelpers",
    "VnavResult",
    "WindResult",
    "calculate_turn_performance",
    "calculate_vnav",
    "calculate_vnav_helpers",
    "calculate_wind",
]
