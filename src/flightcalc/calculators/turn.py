"""Turn performance calculator.

Derives turn radius, turn rate, lead-turn distance, time to turn, load
factor and the standard-rate bank angle from true airspeed and bank angle.

Formulas:
    - Turn radius: R = V² / (g * tan φ)
    - Turn rate: ω = (g * tan φ) / V
    - Lead distance: L = R * tan(Δψ / 2)
    - Load factor: n = 1 / cos φ
    - Standard rate bank: φ = atan(ω_std * V / g), ω_std = 3°/s

Typical usage example:
    from flightcalc.calculators.turn import calculate_turn_performance

    turn = calculate_turn_performance(tas_kts=250.0, bank_deg=25.0, course_change_deg=90.0)
    print(f"Radius: {turn.radius_nm:.2f} nm")
"""

import math
from dataclasses import dataclass

from flightcalc.calculators.units import (
    DEG_TO_RAD,
    GRAVITY_MS2,
    KTS_TO_MS,
    M_TO_FT,
    NM_TO_FT,
    RAD_TO_DEG,
    SENTINEL,
    SENTINEL_FT,
    STANDARD_RATE_DPS,
)
from flightcalc.core.logging_system import get_logger
from flightcalc.errors import DomainError

logger = get_logger(__name__)

MAX_BANK_DEG = 85.0

# Below this |tan φ| the aircraft is treated as wings-level
WINGS_LEVEL_TAN = 0.001

MIN_TURN_RATE_DPS = 0.01


@dataclass(frozen=True)
class TurnResult:
    """Turn performance results.

    Attributes:
        radius_nm: Turn radius (nm)
        radius_ft: Turn radius (ft)
        turn_rate_dps: Turn rate (deg/s)
        lead_distance_nm: Distance before the fix to start the turn (nm)
        lead_distance_ft: Lead distance (ft)
        time_to_turn_sec: Time to complete the course change (sec)
        load_factor: G-loading in a level turn
        standard_rate_bank: Bank angle for a 3°/s turn at this TAS (deg)
    """

    radius_nm: float
    radius_ft: float
    turn_rate_dps: float
    lead_distance_nm: float
    lead_distance_ft: float
    time_to_turn_sec: float
    load_factor: float
    standard_rate_bank: float


def validate_turn_inputs(tas_kts: float, bank_deg: float) -> None:
    """Check turn inputs before any computation.

    Args:
        tas_kts: True airspeed (kts)
        bank_deg: Bank angle (deg)

    Raises:
        DomainError: If TAS is not positive or |bank| exceeds 85°.
    """
    if tas_kts <= 0:
        raise DomainError("TAS must be positive")
    if abs(bank_deg) > MAX_BANK_DEG:
        raise DomainError("Bank angle must be between -85 and 85 degrees")


def standard_rate_bank_deg(tas_kts: float) -> float:
    """Bank angle giving a standard-rate (3°/s) turn.

    Args:
        tas_kts: True airspeed (kts)

    Returns:
        Bank angle in degrees.

    Examples:
        >>> round(standard_rate_bank_deg(120.0), 1)
        18.2
    """
    v_ms = tas_kts * KTS_TO_MS
    omega_std_rad_s = STANDARD_RATE_DPS * DEG_TO_RAD
    return math.atan((omega_std_rad_s * v_ms) / GRAVITY_MS2) * RAD_TO_DEG


def calculate_turn_performance(
    tas_kts: float, bank_deg: float, course_change_deg: float
) -> TurnResult:
    """Calculate turn performance for a coordinated level turn.

    A wings-level bank (|tan φ| < 0.001) cannot turn: radius and time
    saturate to 999.9 nm / 999900 ft / 999.9 s and rate and lead are zero.

    Args:
        tas_kts: True airspeed (kts), must be positive
        bank_deg: Bank angle (deg), |bank| <= 85
        course_change_deg: Course change to fly (deg), any sign

    Returns:
        TurnResult with all turn metrics.
    """
    v_ms = tas_kts * KTS_TO_MS
    phi_rad = bank_deg * DEG_TO_RAD
    delta_psi_rad = course_change_deg * DEG_TO_RAD

    load_factor = 1.0 / math.cos(phi_rad)

    tan_phi = math.tan(phi_rad)
    if abs(tan_phi) < WINGS_LEVEL_TAN:
        radius_nm = SENTINEL
        radius_ft = SENTINEL_FT
        turn_rate_dps = 0.0
        lead_distance_nm = 0.0
        lead_distance_ft = 0.0
        time_to_turn_sec = SENTINEL
    else:
        radius_m = (v_ms * v_ms) / (GRAVITY_MS2 * tan_phi)
        radius_ft = radius_m * M_TO_FT
        radius_nm = radius_ft / NM_TO_FT

        omega_rad_s = (GRAVITY_MS2 * tan_phi) / v_ms
        turn_rate_dps = omega_rad_s * RAD_TO_DEG

        lead_m = radius_m * math.tan(delta_psi_rad / 2.0)
        lead_distance_ft = lead_m * M_TO_FT
        lead_distance_nm = lead_distance_ft / NM_TO_FT

        # Left banks give a negative rate and fall through to the sentinel
        if turn_rate_dps > MIN_TURN_RATE_DPS:
            time_to_turn_sec = abs(course_change_deg) / turn_rate_dps
        else:
            time_to_turn_sec = SENTINEL

    result = TurnResult(
        radius_nm=radius_nm,
        radius_ft=radius_ft,
        turn_rate_dps=turn_rate_dps,
        lead_distance_nm=lead_distance_nm,
        lead_distance_ft=lead_distance_ft,
        time_to_turn_sec=time_to_turn_sec,
        load_factor=load_factor,
        standard_rate_bank=standard_rate_bank_deg(tas_kts),
    )

    logger.debug(
        "Turn at %.0f kts, %.1f° bank: radius=%.2f nm, rate=%.2f deg/s, n=%.2f",
        tas_kts,
        bank_deg,
        radius_nm,
        turn_rate_dps,
        load_factor,
    )

    return result
