"""Tests for input validation, the CG envelope and crosswind limits."""

from dataclasses import replace

import pytest

from takeoffperf.performance.parameters import calculate_parameters
from takeoffperf.performance.types import (
    PerformanceCalculationError,
    RunwayCondition,
    TakeoffInputs,
    TakeoffPerformanceError,
)
from takeoffperf.performance.validation import (
    check_inputs,
    get_cg_limits,
    get_crosswind_limit,
    is_cg_within_limits,
)


def _check(inputs: TakeoffInputs) -> TakeoffPerformanceError:
    return check_inputs(inputs, calculate_parameters(inputs))


class TestCheckInputs:
    """Test the ordered precondition checks."""

    def test_valid(self, dry_inputs: TakeoffInputs) -> None:
        """Test valid inputs pass."""
        assert _check(dry_inputs) is TakeoffPerformanceError.NONE

    def test_invalid_conf(self, dry_inputs: TakeoffInputs) -> None:
        """Test an unknown configuration is invalid data."""
        assert _check(replace(dry_inputs, conf=4)) is TakeoffPerformanceError.INVALID_DATA

    def test_structural_mtow(self, dry_inputs: TakeoffInputs) -> None:
        """Test weights above 512 t are rejected, 512 t itself is not."""
        assert _check(replace(dry_inputs, tow=512_001.0)) is TakeoffPerformanceError.STRUCTURAL_MTOW
        assert _check(replace(dry_inputs, tow=512_000.0)) is TakeoffPerformanceError.NONE

    def test_pressure_altitude(self, dry_inputs: TakeoffInputs) -> None:
        """Test fields above 9200 ft pressure altitude are rejected."""
        inputs = replace(dry_inputs, elevation=9500.0, oat=0.0)
        assert _check(inputs) is TakeoffPerformanceError.MAXIMUM_PRESSURE_ALT

    def test_maximum_temperature(self, dry_inputs: TakeoffInputs) -> None:
        """Test OAT above Tmax is rejected."""
        assert _check(replace(dry_inputs, oat=56.0)) is TakeoffPerformanceError.MAXIMUM_TEMPERATURE
        assert _check(replace(dry_inputs, oat=55.0)) is TakeoffPerformanceError.NONE

    def test_operating_empty_weight(self, dry_inputs: TakeoffInputs) -> None:
        """Test weights below OEW are rejected."""
        assert _check(replace(dry_inputs, tow=275_000.0)) is TakeoffPerformanceError.OPERATING_EMPTY_WEIGHT

    def test_cg_out_of_limits(self, dry_inputs: TakeoffInputs) -> None:
        """Test a CG outside the envelope is rejected."""
        assert _check(replace(dry_inputs, cg=45.0)) is TakeoffPerformanceError.CG_OUT_OF_LIMITS
        assert _check(replace(dry_inputs, cg=30.0)) is TakeoffPerformanceError.NONE

    def test_tailwind(self, dry_inputs: TakeoffInputs) -> None:
        """Test tailwind beyond 15 kt is rejected."""
        assert _check(replace(dry_inputs, wind=-16.0)) is TakeoffPerformanceError.MAXIMUM_TAILWIND
        assert _check(replace(dry_inputs, wind=-15.0)) is TakeoffPerformanceError.NONE

    def test_slope(self, dry_inputs: TakeoffInputs) -> None:
        """Test slopes beyond ±2 % are rejected."""
        assert _check(replace(dry_inputs, slope=-2.5)) is TakeoffPerformanceError.MAXIMUM_RUNWAY_SLOPE
        assert _check(replace(dry_inputs, slope=2.0)) is TakeoffPerformanceError.NONE

    def test_first_failure_wins(self, dry_inputs: TakeoffInputs) -> None:
        """Test the checks run in a fixed order."""
        inputs = replace(dry_inputs, tow=600_000.0, wind=-30.0, slope=5.0)
        assert _check(inputs) is TakeoffPerformanceError.STRUCTURAL_MTOW


class TestCgEnvelope:
    """Test the takeoff CG envelope."""

    def test_light_weight_limits(self) -> None:
        """Test the envelope at its lightest sample."""
        assert get_cg_limits(262_481.0) == pytest.approx((15.0, 32.5))

    def test_limits_clamp(self) -> None:
        """Test weights outside the table use the boundary limits."""
        assert get_cg_limits(200_000.0) == pytest.approx((15.0, 32.5))
        assert get_cg_limits(520_000.0) == pytest.approx((24.0, 37.2))

    def test_interpolated_aft_limit(self) -> None:
        """Test the aft limit is interpolated between samples."""
        _, aft = get_cg_limits(300_000.0)
        assert 32.5 < aft < 37.0

    def test_bounds_inclusive(self) -> None:
        """Test CGs on the limits are accepted."""
        assert is_cg_within_limits(15.0, 262_481.0)
        assert is_cg_within_limits(32.5, 262_481.0)
        assert not is_cg_within_limits(14.9, 262_481.0)
        assert not is_cg_within_limits(32.6, 262_481.0)


class TestCrosswindLimits:
    """Test crosswind limits per runway condition."""

    @pytest.mark.parametrize(
        "condition,expected",
        [
            (RunwayCondition.DRY, 35.0),
            (RunwayCondition.WET, 35.0),
            (RunwayCondition.DRY_SNOW_10MM, 25.0),
            (RunwayCondition.WET_SNOW_30MM, 25.0),
            (RunwayCondition.WATER_6MM, 20.0),
            (RunwayCondition.SLUSH_13MM, 20.0),
        ],
    )
    def test_limits(self, condition: RunwayCondition, expected: float) -> None:
        """Test the fixed limits."""
        assert get_crosswind_limit(condition, 10.0) == expected

    def test_compacted_snow_depends_on_oat(self) -> None:
        """Test compacted snow allows more crosswind at or below -15 °C."""
        assert get_crosswind_limit(RunwayCondition.COMPACTED_SNOW, -15.0) == 29.0
        assert get_crosswind_limit(RunwayCondition.COMPACTED_SNOW, -14.0) == 25.0

    def test_unknown_condition(self) -> None:
        """Test a value that is not a runway condition fails fast."""
        with pytest.raises(PerformanceCalculationError):
            get_crosswind_limit("ice", 0.0)  # type: ignore[arg-type]

    def test_every_condition_has_a_limit(self) -> None:
        """Test every runway condition is covered."""
        for condition in RunwayCondition:
            assert get_crosswind_limit(condition, 0.0) > 0
