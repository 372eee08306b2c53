"""Vertical navigation (VNAV) calculator.

Computes the vertical path to an altitude constraint: flight path angle,
required vertical speed, top of descent for a 3° path, time to the
constraint and whether the path is flyable at idle. A helper computes
reference descent rates and the distance covered at the current vertical
speed.

Key formulas:
    - Flight path angle: γ = atan(Δh / distance)
    - Required VS: VS_fpm = 101.27 * GS_kts * tan(γ)
    - TOD for 3°: D_nm = Δh_ft / (6076.12 * tan(3°)), about Δh / 318
"""

import math
from dataclasses import dataclass

from flightcalc.calculators.units import (
    DEG_TO_RAD,
    NM_TO_FT,
    RAD_TO_DEG,
    SENTINEL,
    VS_PER_GS_TAN,
)
from flightcalc.core.logging_system import get_logger
from flightcalc.errors import DomainError

logger = get_logger(__name__)

THREE_DEG_RAD = 3.0 * DEG_TO_RAD
FIVE_DEG_RAD = 5.0 * DEG_TO_RAD

MIN_DISTANCE_NM = 0.01
MIN_GROUNDSPEED_KTS = 1.0

# Altitude changes and vertical speeds at or below these are treated as level
MIN_ALTITUDE_CHANGE_FT = 10.0
MIN_VS_FPM = 10.0

IDLE_DESCENT_BAND_DEG = (2.0, 4.0)
CLIMB_BAND_DEG = (0.5, 15.0)


@dataclass(frozen=True)
class VnavResult:
    """Vertical path to an altitude constraint.

    Attributes:
        altitude_to_lose_ft: Current minus target altitude (ft), negative for climbs
        flight_path_angle_deg: Path angle (deg), positive climb, negative descent
        required_vs_fpm: Vertical speed to meet the constraint (fpm), signed
        tod_distance_nm: Top of descent distance on a 3° path (nm), 0 for climbs
        time_to_constraint_min: Time to reach the constraint at current GS (min)
        distance_per_1000ft: Distance flown per 1000 ft of altitude change (nm)
        is_descent: True if the constraint is below the aircraft
        on_idle_path: True if the path angle is within the idle band
    """

    altitude_to_lose_ft: float
    flight_path_angle_deg: float
    required_vs_fpm: float
    tod_distance_nm: float
    time_to_constraint_min: float
    distance_per_1000ft: float
    is_descent: bool
    on_idle_path: bool


@dataclass(frozen=True)
class VnavHelpers:
    """Reference vertical speeds and projection at the current vertical speed.

    Attributes:
        vs_for_3deg: VS for a 3° descent at current GS (fpm, negative)
        vs_for_5deg: VS for a 5° descent at current GS (fpm, negative)
        distance_at_current_vs_nm: Distance flown before reaching the target
            altitude if the current VS is held (nm)
    """

    vs_for_3deg: float
    vs_for_5deg: float
    distance_at_current_vs_nm: float


def validate_vnav_inputs(distance_nm: float, groundspeed_kts: float) -> None:
    """Check VNAV inputs before any computation.

    Raises:
        DomainError: If distance is negative or groundspeed is not positive.
    """
    if distance_nm < 0:
        raise DomainError("Distance cannot be negative")
    if groundspeed_kts <= 0:
        raise DomainError("Groundspeed must be positive")


def _on_idle_path(is_descent: bool, flight_path_angle_deg: float) -> bool:
    if is_descent:
        low, high = IDLE_DESCENT_BAND_DEG
        return low <= abs(flight_path_angle_deg) <= high
    low, high = CLIMB_BAND_DEG
    return low <= flight_path_angle_deg <= high


def calculate_vnav(
    current_alt_ft: float,
    target_alt_ft: float,
    distance_nm: float,
    groundspeed_kts: float,
) -> VnavResult:
    """Calculate the vertical path to an altitude constraint.

    Distance and groundspeed are floored to 0.01 nm and 1 kt so that the
    divisions below stay defined.

    Args:
        current_alt_ft: Current altitude (ft)
        target_alt_ft: Altitude at the constraint (ft)
        distance_nm: Distance to the constraint (nm)
        groundspeed_kts: Current groundspeed (kts)

    Returns:
        VnavResult describing the path.

    Examples:
        >>> vnav = calculate_vnav(35000.0, 10000.0, 100.0, 450.0)
        >>> vnav.is_descent
        True
    """
    # Positive = need to climb, negative = need to descend
    altitude_change_ft = target_alt_ft - current_alt_ft
    is_descent = altitude_change_ft < 0

    distance_nm = max(distance_nm, MIN_DISTANCE_NM)
    groundspeed_kts = max(groundspeed_kts, MIN_GROUNDSPEED_KTS)

    gamma_rad = math.atan(altitude_change_ft / (distance_nm * NM_TO_FT))
    flight_path_angle_deg = gamma_rad * RAD_TO_DEG

    required_vs_fpm = VS_PER_GS_TAN * groundspeed_kts * math.tan(gamma_rad)

    if is_descent:
        tod_distance_nm = abs(altitude_change_ft) / (NM_TO_FT * math.tan(THREE_DEG_RAD))
    else:
        tod_distance_nm = 0.0

    time_to_constraint_min = (distance_nm / groundspeed_kts) * 60.0

    if abs(altitude_change_ft) > MIN_ALTITUDE_CHANGE_FT:
        distance_per_1000ft = (distance_nm * 1000.0) / abs(altitude_change_ft)
    else:
        distance_per_1000ft = SENTINEL

    result = VnavResult(
        altitude_to_lose_ft=-altitude_change_ft,
        flight_path_angle_deg=flight_path_angle_deg,
        required_vs_fpm=required_vs_fpm,
        tod_distance_nm=tod_distance_nm,
        time_to_constraint_min=time_to_constraint_min,
        distance_per_1000ft=distance_per_1000ft,
        is_descent=is_descent,
        on_idle_path=_on_idle_path(is_descent, flight_path_angle_deg),
    )

    logger.debug(
        "VNAV %.0f -> %.0f ft over %.2f nm: fpa=%.2f deg, vs=%.0f fpm",
        current_alt_ft,
        target_alt_ft,
        distance_nm,
        flight_path_angle_deg,
        required_vs_fpm,
    )

    return result


def calculate_vnav_helpers(
    groundspeed_kts: float, current_vs_fpm: float, altitude_change_ft: float
) -> VnavHelpers:
    """Calculate reference descent rates and the current-VS projection.

    Reference rates are always descent-signed, whatever the direction of
    the constraint. The projection is 999.9 when the current VS is level
    (|VS| <= 10 fpm), the groundspeed is at most 1 kt, or the current VS
    moves away from the target altitude.

    Args:
        groundspeed_kts: Current groundspeed (kts)
        current_vs_fpm: Current vertical speed (fpm)
        altitude_change_ft: Target minus current altitude (ft)

    Returns:
        VnavHelpers with reference rates and projected distance.
    """
    vs_for_3deg = -VS_PER_GS_TAN * groundspeed_kts * math.tan(THREE_DEG_RAD)
    vs_for_5deg = -VS_PER_GS_TAN * groundspeed_kts * math.tan(FIVE_DEG_RAD)

    distance = SENTINEL
    if abs(current_vs_fpm) > MIN_VS_FPM and groundspeed_kts > MIN_GROUNDSPEED_KTS:
        time_min = altitude_change_ft / current_vs_fpm
        distance = (time_min * groundspeed_kts) / 60.0
        if distance < 0:
            distance = SENTINEL

    return VnavHelpers(
        vs_for_3deg=vs_for_3deg,
        vs_for_5deg=vs_for_5deg,
        distance_at_current_vs_nm=distance,
    )
