"""Tests for the V-speed regressions."""

from dataclasses import replace

import pytest

from takeoffperf.performance.parameters import calculate_parameters, calculate_tvmcg
from takeoffperf.performance.types import (
    LimitingFactor,
    PerformanceCalculationError,
    RunwayCondition,
    TakeoffConfiguration,
    TakeoffInputs,
    TakeoffSpeeds,
)
from takeoffperf.performance.vspeeds import FORWARD_CG_VR_CORRECTION, VSpeedCalculator

CONF2 = TakeoffConfiguration.CONF_2


def _calculator(inputs: TakeoffInputs, conf: TakeoffConfiguration = CONF2) -> VSpeedCalculator:
    return VSpeedCalculator(inputs, conf, calculate_parameters(inputs))


class TestRunwayVmcgRegression:
    """Test the runway and VMCG limited regression."""

    @pytest.mark.parametrize("factor", [LimitingFactor.RUNWAY, LimitingFactor.VMCG])
    def test_terms_add_up(self, dry_inputs: TakeoffInputs, factor: LimitingFactor) -> None:
        """Test raw speeds are the sum of their terms."""
        inputs = replace(dry_inputs, slope=0.5, wind=10.0, elevation=1000.0)
        speeds, _ = _calculator(inputs).calculate_dry_speeds(factor, False)
        assert speeds.vr == pytest.approx(
            speeds.vr_base + speeds.vr_delta_runway + speeds.vr_delta_alt + speeds.vr_delta_slope + speeds.vr_delta_wind
        )
        assert speeds.v1 == pytest.approx(
            speeds.v1_base + speeds.v1_delta_runway + speeds.v1_delta_alt + speeds.v1_delta_slope + speeds.v1_delta_wind
        )
        assert speeds.v2 == pytest.approx(speeds.v2_base + speeds.v2_delta_alt)
        assert speeds.v2_table2_threshold is None

    def test_forward_cg_lowers_vr(self, dry_inputs: TakeoffInputs) -> None:
        """Test the forward CG correction takes 1 kt off raw VR only."""
        calc = _calculator(dry_inputs)
        plain, _ = calc.calculate_dry_speeds(LimitingFactor.RUNWAY, False)
        corrected, _ = calc.calculate_dry_speeds(LimitingFactor.RUNWAY, True)
        assert corrected.vr == pytest.approx(plain.vr + FORWARD_CG_VR_CORRECTION)
        assert corrected.v1 == pytest.approx(plain.v1)
        assert corrected.v2 == pytest.approx(plain.v2)

    def test_speeds_rise_with_weight(self, dry_inputs: TakeoffInputs) -> None:
        """Test heavier takeoffs need higher raw speeds."""
        light, _ = _calculator(replace(dry_inputs, tow=350_000.0)).calculate_dry_speeds(LimitingFactor.RUNWAY, False)
        heavy, _ = _calculator(replace(dry_inputs, tow=480_000.0)).calculate_dry_speeds(LimitingFactor.RUNWAY, False)
        assert heavy.v2 > light.v2
        assert heavy.vr > light.vr


class TestSecondSegmentBrakeRegression:
    """Test the second segment and brake energy limited regression."""

    @pytest.mark.parametrize("tow", [300_000.0, 380_000.0, 450_000.0, 510_000.0])
    @pytest.mark.parametrize("tora", [2500.0, 3500.0, 4500.0])
    @pytest.mark.parametrize("factor", [LimitingFactor.SECOND_SEGMENT, LimitingFactor.BRAKE_ENERGY])
    def test_table_selection(self, dry_inputs: TakeoffInputs, tow: float, tora: float, factor: LimitingFactor) -> None:
        """Test table 2 is used exactly when no-wind V2 reaches the threshold."""
        inputs = replace(dry_inputs, tow=tow, tora=tora, wind=5.0)
        speeds, dry = _calculator(inputs).calculate_dry_speeds(factor, False)

        assert speeds.v2_table2_threshold is not None
        if speeds.v2_no_wind is not None:
            assert speeds.v2_no_wind >= speeds.v2_table2_threshold
        if speeds.v1_table2 is not None:
            assert speeds.v2_no_wind is not None
            assert speeds.v2 - speeds.v1_table2 > 8.0
        assert dry.v1 <= dry.vr <= dry.v2

    def test_wind_applied_to_final_v2(self, dry_inputs: TakeoffInputs) -> None:
        """Test the final V2 includes its wind term."""
        inputs = replace(dry_inputs, wind=10.0)
        speeds, _ = _calculator(inputs).calculate_dry_speeds(LimitingFactor.SECOND_SEGMENT, False)
        assert speeds.v2 == pytest.approx(
            speeds.v2_base + speeds.v2_delta_runway + speeds.v2_delta_alt + speeds.v2_delta_slope + speeds.v2_delta_wind
        )


class TestCalculate:
    """Test speeds per runway condition."""

    def test_dry_keeps_intermediate_speeds(self, dry_inputs: TakeoffInputs) -> None:
        """Test dry results carry the regression terms and dry speeds."""
        result = _calculator(dry_inputs).calculate(LimitingFactor.RUNWAY, False, 290.0)
        assert isinstance(result.intermediate, TakeoffSpeeds)
        assert (result.intermediate.dry_v1, result.intermediate.dry_vr, result.intermediate.dry_v2) == (
            result.v1,
            result.vr,
            result.v2,
        )
        assert result.v1 <= result.vr <= result.v2

    @pytest.mark.parametrize("oat", [5.0, 30.0])
    @pytest.mark.parametrize("tora", [2000.0, 3000.0, 4000.0])
    def test_wet_never_above_dry(self, dry_inputs: TakeoffInputs, oat: float, tora: float) -> None:
        """Test wet speeds never exceed the dry speeds they start from."""
        inputs = replace(dry_inputs, runway_condition=RunwayCondition.WET, oat=oat, tora=tora)
        params = calculate_parameters(inputs)
        tvmcg = calculate_tvmcg(CONF2, params)
        result = VSpeedCalculator(inputs, CONF2, params).calculate(LimitingFactor.RUNWAY, False, tvmcg)
        dry = result.intermediate
        assert result.v1 <= dry.dry_v1
        assert result.vr <= dry.dry_vr
        assert result.v2 <= dry.dry_v2
        assert result.v1 <= result.vr <= result.v2

    def test_wet_requires_dry_speeds(self, dry_inputs: TakeoffInputs) -> None:
        """Test wet speeds cannot be computed from nothing."""
        with pytest.raises(PerformanceCalculationError, match="Dry speeds"):
            _calculator(dry_inputs).calculate_wet_speeds(TakeoffSpeeds(), 290.0)

    def test_contaminated_from_table(self, dry_inputs: TakeoffInputs) -> None:
        """Test contaminated speeds come from the weight table."""
        inputs = replace(dry_inputs, runway_condition=RunwayCondition.WATER_6MM, tow=308_496.0)
        result = _calculator(inputs).calculate(LimitingFactor.RUNWAY, False, 0.0)
        assert (result.v1, result.vr, result.v2) == (122, 126, 127)
        assert result.intermediate is None
        assert result.error is None

    @pytest.mark.parametrize("condition", [c for c in RunwayCondition if c.is_contaminated])
    def test_every_contaminated_condition(self, dry_inputs: TakeoffInputs, condition: RunwayCondition) -> None:
        """Test every contaminated condition yields ordered speeds."""
        inputs = replace(dry_inputs, runway_condition=condition)
        result = _calculator(inputs).calculate(LimitingFactor.RUNWAY, False, 0.0)
        assert result.v1 <= result.vr <= result.v2
