"""Unit conversions, physical constants and angle helpers.

Every calculator works in degrees, knots, feet and nautical miles at its
boundary and converts to SI units and radians internally.

Typical usage example:
    from flightcalc.calculators.units import KTS_TO_MS, normalize_angle

    v_ms = tas_kts * KTS_TO_MS
    track = normalize_angle(-90.0)  # 270.0
"""

import math

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

GRAVITY_MS2 = 9.80665
KTS_TO_MS = 0.514444
M_TO_FT = 3.28084
NM_TO_FT = 6076.12

STANDARD_RATE_DPS = 3.0

# VS (fpm) = VS_PER_GS_TAN * groundspeed (kt) * tan(flight path angle)
# 60 / (6076.12 * pi / 180), rounded as published.
VS_PER_GS_TAN = 101.27

# "Effectively infinite" values reported in place of undefined results
SENTINEL = 999.9
SENTINEL_FT = 999900.0


def normalize_angle(angle: float) -> float:
    """Normalize an angle to the range [0, 360).

    Args:
        angle: Angle in degrees, any real value.

    Returns:
        Equivalent angle in [0, 360).

    Examples:
        >>> normalize_angle(370.0)
        10.0
        >>> normalize_angle(-90.0)
        270.0
    """
    angle = math.fmod(angle, 360.0)
    if angle < 0.0:
        angle += 360.0
    if angle >= 360.0:
        # -1e-15 + 360.0 rounds up to 360.0
        angle -= 360.0
    return angle


def wrap_angle(angle: float) -> float:
    """Wrap an angle to the range (-180, 180].

    Args:
        angle: Angle in degrees, any real value.

    Returns:
        Equivalent signed angle, 180 stays 180.

    Examples:
        >>> wrap_angle(270.0)
        -90.0
        >>> wrap_angle(180.0)
        180.0
    """
    angle = normalize_angle(angle)
    if angle > 180.0:
        angle -= 360.0
    return angle
