"""Tests for the wind component calculator and angle helpers."""

import pytest

from flightcalc.calculators.units import normalize_angle, wrap_angle
from flightcalc.calculators.wind import calculate_wind, validate_wind_inputs
from flightcalc.errors import DomainError


class TestAngleHelpers:
    """Test angle normalization."""

    @pytest.mark.parametrize(
        "angle, expected",
        [(0.0, 0.0), (359.5, 359.5), (360.0, 0.0), (370.0, 10.0), (-90.0, 270.0), (-720.0, 0.0), (1085.0, 5.0)],
    )
    def test_normalize_angle(self, angle: float, expected: float) -> None:
        """Test angles map into [0, 360)."""
        assert normalize_angle(angle) == pytest.approx(expected)

    def test_normalize_tiny_negative(self) -> None:
        """Test a tiny negative angle never normalizes to 360."""
        assert 0.0 <= normalize_angle(-1e-15) < 360.0

    @pytest.mark.parametrize(
        "angle, expected",
        [(180.0, 180.0), (-180.0, 180.0), (181.0, -179.0), (270.0, -90.0), (90.0, 90.0), (0.0, 0.0)],
    )
    def test_wrap_angle(self, angle: float, expected: float) -> None:
        """Test angles map into (-180, 180]."""
        assert wrap_angle(angle) == pytest.approx(expected)


class TestWindComponents:
    """Test headwind, crosswind and drift."""

    def test_reference_case(self) -> None:
        """Test track 90, heading 85, wind 270 at 15."""
        wind = calculate_wind(90.0, 85.0, 270.0, 15.0)

        assert wind.drift == pytest.approx(5.0)
        assert wind.headwind == pytest.approx(15.0)
        assert wind.crosswind == pytest.approx(0.0, abs=1e-9)
        assert wind.total_wind == 15.0
        assert wind.wca == 0.0

    def test_wind_from_track_direction(self) -> None:
        """Test relative angle 0 gives the most negative headwind."""
        wind = calculate_wind(90.0, 90.0, 90.0, 20.0)
        assert wind.headwind == pytest.approx(-20.0)
        assert wind.crosswind == pytest.approx(0.0, abs=1e-9)

    def test_crosswind_from_right(self) -> None:
        """Test wind 90° right of track is a positive crosswind."""
        wind = calculate_wind(0.0, 0.0, 90.0, 12.0)
        assert wind.crosswind == pytest.approx(12.0)
        assert wind.headwind == pytest.approx(0.0, abs=1e-9)

    def test_crosswind_from_left(self) -> None:
        """Test wind 90° left of track is a negative crosswind."""
        wind = calculate_wind(0.0, 0.0, 270.0, 12.0)
        assert wind.crosswind == pytest.approx(-12.0)

    def test_components_preserve_magnitude(self) -> None:
        """Test headwind² + crosswind² equals wind speed²."""
        wind = calculate_wind(47.0, 50.0, 313.0, 23.0)
        assert wind.headwind**2 + wind.crosswind**2 == pytest.approx(23.0**2)

    def test_negative_drift(self) -> None:
        """Test heading right of track gives negative drift."""
        wind = calculate_wind(350.0, 10.0, 0.0, 5.0)
        assert wind.drift == pytest.approx(-20.0)

    def test_drift_wraps_to_180(self) -> None:
        """Test opposite track and heading give drift of +180."""
        wind = calculate_wind(0.0, 180.0, 0.0, 5.0)
        assert wind.drift == pytest.approx(180.0)

    def test_calm_wind(self) -> None:
        """Test zero wind speed gives zero components."""
        wind = calculate_wind(123.0, 120.0, 45.0, 0.0)
        assert wind.headwind == pytest.approx(0.0)
        assert wind.crosswind == pytest.approx(0.0)

    def test_wca_is_never_computed(self) -> None:
        """Test the wind correction angle stays 0.0 with a strong crosswind."""
        assert calculate_wind(0.0, 0.0, 90.0, 50.0).wca == 0.0

    @pytest.mark.parametrize("turns", [-2, -1, 1, 3])
    def test_periodic_in_360(self, turns: int) -> None:
        """Test inputs congruent modulo 360 give the same result."""
        base = calculate_wind(90.0, 85.0, 200.0, 15.0)
        shifted = calculate_wind(90.0 + 360.0 * turns, 85.0 - 360.0 * turns, 200.0 + 360.0 * turns, 15.0)

        assert shifted.headwind == pytest.approx(base.headwind)
        assert shifted.crosswind == pytest.approx(base.crosswind)
        assert shifted.drift == pytest.approx(base.drift)


class TestWindValidation:
    """Test wind input validation."""

    def test_rejects_negative_speed(self) -> None:
        """Test negative wind speed is rejected."""
        with pytest.raises(DomainError, match="Wind speed cannot be negative"):
            validate_wind_inputs(-1.0)

    def test_accepts_calm(self) -> None:
        """Test zero wind speed is valid."""
        validate_wind_inputs(0.0)
