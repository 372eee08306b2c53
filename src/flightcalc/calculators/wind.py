"""Wind component calculator.

Splits a wind vector into headwind and crosswind components relative to the
aircraft ground track, and reports the drift angle.

Sign conventions:
    - headwind: positive when the wind opposes motion, negative for a tailwind
    - crosswind: positive when the wind comes from the right
    - drift: track minus heading, in (-180, 180]

The wind correction angle needs true airspeed, which this calculator does not
take; it is always reported as 0.0.

Typical usage example:
    from flightcalc.calculators.wind import calculate_wind

    wind = calculate_wind(track=90.0, heading=85.0, wind_dir=270.0, wind_speed=15.0)
    print(f"Headwind: {wind.headwind:.1f} kts")
"""

import math
from dataclasses import dataclass

from flightcalc.calculators.units import DEG_TO_RAD, normalize_angle, wrap_angle
from flightcalc.core.logging_system import get_logger
from flightcalc.errors import DomainError

logger = get_logger(__name__)


@dataclass(frozen=True)
class WindResult:
    """Wind components relative to the ground track.

    Attributes:
        headwind: Along-track component (kts), positive = headwind
        crosswind: Across-track component (kts), positive = from the right
        total_wind: Wind speed (kts)
        wca: Wind correction angle (deg), always 0.0
        drift: Drift angle (deg)
    """

    headwind: float
    crosswind: float
    total_wind: float
    wca: float
    drift: float


def validate_wind_inputs(wind_speed: float) -> None:
    """Raise DomainError if the wind speed is negative."""
    if wind_speed < 0:
        raise DomainError("Wind speed cannot be negative")


def calculate_wind(track: float, heading: float, wind_dir: float, wind_speed: float) -> WindResult:
    """Calculate wind components relative to the aircraft track.

    Args:
        track: Ground track (deg true), any real value
        heading: Aircraft heading (deg), any real value
        wind_dir: Direction the wind blows FROM (deg), any real value
        wind_speed: Wind speed (kts)

    Returns:
        WindResult with headwind, crosswind and drift.

    Examples:
        >>> wind = calculate_wind(90.0, 85.0, 270.0, 15.0)
        >>> round(wind.headwind, 2), wind.drift
        (15.0, 5.0)
    """
    track = normalize_angle(track)
    heading = normalize_angle(heading)
    wind_dir = normalize_angle(wind_dir)

    drift = wrap_angle(track - heading)

    # 0° = wind from behind, 180° = wind from straight ahead
    wind_from_rad = wrap_angle(wind_dir - track) * DEG_TO_RAD

    headwind = -wind_speed * math.cos(wind_from_rad)
    crosswind = wind_speed * math.sin(wind_from_rad)

    logger.debug(
        "Wind %.0f@%.0f on track %.0f: headwind=%.1f, crosswind=%.1f, drift=%.1f",
        wind_dir,
        wind_speed,
        track,
        headwind,
        crosswind,
        drift,
    )

    return WindResult(
        headwind=headwind,
        crosswind=crosswind,
        total_wind=wind_speed,
        wca=0.0,
        drift=drift,
    )
