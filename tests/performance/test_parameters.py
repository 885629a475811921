"""Tests for the derived takeoff parameters."""

from dataclasses import replace

import pytest

from takeoffperf.performance.parameters import (
    calculate_isa_temp,
    calculate_parameters,
    calculate_pressure_altitude,
    calculate_tflexmax,
    calculate_tmax,
    calculate_tref,
    calculate_tvmcg,
)
from takeoffperf.performance.types import LineupAngle, TakeoffConfiguration, TakeoffInputs


class TestAtmosphere:
    """Test ISA temperature and pressure altitude."""

    def test_isa_sea_level(self) -> None:
        """Test ISA is 15 °C at sea level."""
        assert calculate_isa_temp(0.0) == pytest.approx(15.0)

    def test_isa_lapse_rate(self) -> None:
        """Test ISA drops about 2 °C per 1000 ft."""
        assert calculate_isa_temp(5000.0) == pytest.approx(15.0 - 9.906)

    def test_standard_qnh(self) -> None:
        """Test pressure altitude equals elevation at 1013.25 hPa."""
        assert calculate_pressure_altitude(0.0, 1013.25) == pytest.approx(0.0, abs=1e-9)
        assert calculate_pressure_altitude(2500.0, 1013.25) == pytest.approx(2500.0)

    def test_low_qnh_raises_pressure_altitude(self) -> None:
        """Test about 27 ft per hPa below standard."""
        assert calculate_pressure_altitude(0.0, 1003.25) == pytest.approx(274.0, abs=2.0)

    def test_high_qnh_lowers_pressure_altitude(self) -> None:
        """Test a high QNH gives a negative pressure altitude."""
        assert calculate_pressure_altitude(0.0, 1030.0) < 0.0


class TestReferenceTemperatures:
    """Test Tref, Tmax and Tflexmax."""

    def test_tref(self) -> None:
        """Test Tref samples and interpolation."""
        assert calculate_tref(0.0) == pytest.approx(44.0)
        assert calculate_tref(750.0) == pytest.approx(42.5)
        assert calculate_tref(9200.0) == pytest.approx(13.5)

    def test_tref_clamps(self) -> None:
        """Test Tref clamps outside the table."""
        assert calculate_tref(-5000.0) == pytest.approx(48.0)
        assert calculate_tref(12000.0) == pytest.approx(13.5)

    def test_tmax(self) -> None:
        """Test Tmax is flat below sea level and decreases above."""
        assert calculate_tmax(-1000.0) == pytest.approx(55.0)
        assert calculate_tmax(4600.0) == pytest.approx(46.5)

    def test_tflexmax(self) -> None:
        """Test Tflexmax is ISA + 59."""
        assert calculate_tflexmax(15.0) == pytest.approx(74.0)


class TestCalculateParameters:
    """Test the parameter bundle."""

    def test_sea_level(self, dry_inputs: TakeoffInputs) -> None:
        """Test parameters for the reference case."""
        params = calculate_parameters(dry_inputs)
        assert params.adjusted_tora == pytest.approx(4000.0)
        assert params.pressure_alt == pytest.approx(0.0, abs=1e-9)
        assert params.isa_temp == pytest.approx(15.0)
        assert params.t_ref == pytest.approx(44.0)
        assert params.t_max == pytest.approx(55.0)
        assert params.t_flex_max == pytest.approx(74.0)
        assert params.headwind == pytest.approx(0.0)
        assert params.flex_limiting_factor is None

    @pytest.mark.parametrize(
        "angle,expected",
        [
            (LineupAngle.ZERO, 4000.0),
            (LineupAngle.NINETY, 3979.5),
            (LineupAngle.ONE_EIGHTY, 3959.0),
        ],
    )
    def test_lineup_penalty(self, dry_inputs: TakeoffInputs, angle: LineupAngle, expected: float) -> None:
        """Test the line-up distance is removed from TORA."""
        params = calculate_parameters(replace(dry_inputs, lineup_angle=angle))
        assert params.adjusted_tora == pytest.approx(expected)

    def test_headwind_capped(self, dry_inputs: TakeoffInputs) -> None:
        """Test headwind credit is capped at 45 kt."""
        params = calculate_parameters(replace(dry_inputs, wind=60.0))
        assert params.headwind == pytest.approx(45.0)

    def test_tailwind_not_capped(self, dry_inputs: TakeoffInputs) -> None:
        """Test tailwind passes through unchanged."""
        params = calculate_parameters(replace(dry_inputs, wind=-20.0))
        assert params.headwind == pytest.approx(-20.0)


class TestTvmcg:
    """Test the wet runway VMCG temperature."""

    def test_conf2_no_wind(self, dry_inputs: TakeoffInputs) -> None:
        """Test T-VMCG = f1 * (TORA - PA / 10) + f2."""
        params = calculate_parameters(dry_inputs)
        assert calculate_tvmcg(TakeoffConfiguration.CONF_2, params) == pytest.approx(0.10579 * 4000 - 132.96)

    def test_tailwind_floored(self, dry_inputs: TakeoffInputs) -> None:
        """Test tailwinds beyond 15 kt use the 15 kt factors."""
        at_limit = calculate_parameters(replace(dry_inputs, wind=-15.0))
        beyond = calculate_parameters(replace(dry_inputs, wind=-25.0))
        conf = TakeoffConfiguration.CONF_3
        assert calculate_tvmcg(conf, beyond) == pytest.approx(calculate_tvmcg(conf, at_limit))
