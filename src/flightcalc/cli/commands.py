"""The turn, VNAV and wind command-line calculators.

Each calculator is declared once here and exposed as a console script:
    turn-calculator <tas_kts> <bank_deg> <course_change_deg>
    vnav-calculator <current_alt_ft> <target_alt_ft> <distance_nm> <groundspeed_kts> [current_vs_fpm]
    wind-calculator <track> <heading> <wind_dir> <wind_speed>
"""

from typing import Sequence

from flightcalc.calculators.turn import calculate_turn_performance, validate_turn_inputs
from flightcalc.calculators.vnav import (
    VnavHelpers,
    VnavResult,
    calculate_vnav,
    calculate_vnav_helpers,
    validate_vnav_inputs,
)
from flightcalc.calculators.wind import calculate_wind, validate_wind_inputs
from flightcalc.cli.harness import Argument, NumericCalculator


def _validate_turn(tas_kts: float, bank_deg: float, course_change_deg: float) -> None:
    validate_turn_inputs(tas_kts, bank_deg)


def _validate_vnav(
    current_alt_ft: float,
    target_alt_ft: float,
    distance_nm: float,
    groundspeed_kts: float,
    current_vs_fpm: float,
) -> None:
    validate_vnav_inputs(distance_nm, groundspeed_kts)


def _compute_vnav(
    current_alt_ft: float,
    target_alt_ft: float,
    distance_nm: float,
    groundspeed_kts: float,
    current_vs_fpm: float,
) -> tuple[VnavResult, VnavHelpers]:
    vnav = calculate_vnav(current_alt_ft, target_alt_ft, distance_nm, groundspeed_kts)
    helpers = calculate_vnav_helpers(
        groundspeed_kts, current_vs_fpm, target_alt_ft - current_alt_ft
    )
    return vnav, helpers


def _validate_wind(track: float, heading: float, wind_dir: float, wind_speed: float) -> None:
    validate_wind_inputs(wind_speed)


TURN = NumericCalculator(
    name="turn-calculator",
    description="Turn performance: radius, rate, lead distance, load factor and standard-rate bank.",
    arguments=(
        Argument("tas_kts", "True airspeed (knots)"),
        Argument("bank_deg", "Bank angle (degrees)"),
        Argument("course_change_deg", "Course change required (degrees)"),
    ),
    validate=_validate_turn,
    compute=calculate_turn_performance,
    example=("250", "25", "90"),
    example_note="250 knots TAS, 25° bank, 90° turn",
)

VNAV = NumericCalculator(
    name="vnav-calculator",
    description="Vertical navigation: flight path angle, required VS, top of descent.",
    arguments=(
        Argument("current_alt_ft", "Current altitude (feet)"),
        Argument("target_alt_ft", "Target altitude at constraint (feet)"),
        Argument("distance_nm", "Distance to constraint (nautical miles)"),
        Argument("groundspeed_kts", "Current groundspeed (knots)"),
        Argument("current_vs_fpm", "Current vertical speed (ft/min)", optional=True),
    ),
    validate=_validate_vnav,
    compute=_compute_vnav,
    example=("35000", "10000", "100", "450", "-1500"),
    example_note="Descend from FL350 to 10000 ft, 100 nm away, GS 450 kts, VS -1500 fpm",
)

WIND = NumericCalculator(
    name="wind-calculator",
    description="Wind components: headwind, crosswind and drift relative to track.",
    arguments=(
        Argument("track", "Ground track (degrees true)"),
        Argument("heading", "Aircraft heading (degrees)"),
        Argument("wind_dir", "Wind direction FROM (degrees)"),
        Argument("wind_speed", "Wind speed (knots)"),
    ),
    validate=_validate_wind,
    compute=calculate_wind,
    example=("90", "85", "270", "15"),
    example_note="Track 90°, Heading 85°, Wind from 270° at 15 knots",
)

CALCULATORS: dict[str, NumericCalculator] = {
    "turn": TURN,
    "vnav": VNAV,
    "wind": WIND,
}


def turn_main(argv: Sequence[str] | None = None) -> int:
    """Entry point for turn-calculator."""
    return TURN.run(argv)


def vnav_main(argv: Sequence[str] | None = None) -> int:
    """Entry point for vnav-calculator."""
    return VNAV.run(argv)


def wind_main(argv: Sequence[str] | None = None) -> int:
    """Entry point for wind-calculator."""
    return WIND.run(argv)
