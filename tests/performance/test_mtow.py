"""Tests for MTOW resolution on dry, wet and contaminated runways."""

from dataclasses import replace

import pytest

from takeoffperf.performance.contamination import CONTAMINATION_PROFILES, get_contamination_profile
from takeoffperf.performance.mtow import calculate_forward_cg_weight_correction, resolve_mtow
from takeoffperf.performance.parameters import calculate_parameters
from takeoffperf.performance.types import (
    LimitingFactor,
    PerformanceCalculationError,
    RunwayCondition,
    TakeoffConfiguration,
    TakeoffInputs,
    TakeoffParameters,
    TvmcgRegime,
)
from takeoffperf.performance.wet_runway import (
    MTOW_FACTORS,
    V2_FACTORS,
    calculate_wet_adjustment,
    length_altitude_coefficient,
    two_term_minimum,
)

CONF2 = TakeoffConfiguration.CONF_2


def _params(adjusted_tora: float = 4000.0, headwind: float = 0.0, pressure_alt: float = 0.0) -> TakeoffParameters:
    return TakeoffParameters(
        adjusted_tora=adjusted_tora,
        pressure_alt=pressure_alt,
        isa_temp=15.0,
        t_ref=44.0,
        t_max=55.0,
        t_flex_max=74.0,
        headwind=headwind,
    )


class TestWetAdjustment:
    """Test the wet correction formula."""

    def test_coefficient(self) -> None:
        """Test x = adjusted TORA - pressure altitude / 20."""
        assert length_altitude_coefficient(_params(3000.0, pressure_alt=2000.0)) == pytest.approx(2900.0)

    def test_two_term_minimum_never_positive(self) -> None:
        """Test the correction is capped at zero."""
        assert two_term_minimum((0.01, 5.0, 0.02, 1.0), 1000.0) == 0.0
        assert two_term_minimum((0.01, -30.0, 0.0, -5.0), 1000.0) == pytest.approx(-20.0)
        assert two_term_minimum((0.01, -5.0, 0.0, -8.0), 1000.0) == pytest.approx(-8.0)

    def test_mtow_at_or_below_tvmcg(self) -> None:
        """Test the MTOW correction for CONF 2 without wind."""
        adjustment = calculate_wet_adjustment(MTOW_FACTORS, TvmcgRegime.AT_OR_BELOW, CONF2, _params(1500.0))
        assert adjustment == pytest.approx(0.02686 * 1500 - 48.63)

    def test_missing_regime_is_zero(self) -> None:
        """Test families without an above-T-VMCG table do not correct."""
        assert calculate_wet_adjustment(V2_FACTORS, TvmcgRegime.ABOVE, CONF2, _params(1500.0)) == 0.0

    @pytest.mark.parametrize("tora", [1500.0, 2500.0, 3500.0, 4500.0])
    @pytest.mark.parametrize("headwind", [-15.0, 0.0, 10.0])
    @pytest.mark.parametrize("regime", list(TvmcgRegime))
    def test_never_positive(self, tora: float, headwind: float, regime: TvmcgRegime) -> None:
        """Test a wet runway never raises MTOW."""
        for conf in TakeoffConfiguration:
            assert calculate_wet_adjustment(MTOW_FACTORS, regime, conf, _params(tora, headwind)) <= 0.0

    def test_regime_selection(self) -> None:
        """Test OAT equal to T-VMCG uses the at-or-below family."""
        assert TvmcgRegime.for_temperature(20.0, 20.0) is TvmcgRegime.AT_OR_BELOW
        assert TvmcgRegime.for_temperature(20.5, 20.0) is TvmcgRegime.ABOVE


class TestContaminationProfiles:
    """Test contaminated runway MTOW and speeds."""

    def test_every_contaminated_condition_has_a_profile(self) -> None:
        """Test the ten contaminated conditions are covered."""
        contaminated = {c for c in RunwayCondition if c.is_contaminated}
        assert set(CONTAMINATION_PROFILES) == contaminated
        assert len(contaminated) == 10

    @pytest.mark.parametrize("condition", [RunwayCondition.DRY, RunwayCondition.WET])
    def test_not_contaminated(self, condition: RunwayCondition) -> None:
        """Test dry and wet runways have no profile."""
        with pytest.raises(PerformanceCalculationError):
            get_contamination_profile(condition)

    def test_mtow_from_corrected_weight(self) -> None:
        """Test the dry MTOW less the correction maps through the MTOW table."""
        profile = get_contamination_profile(RunwayCondition.WATER_6MM)
        result = profile.calculate_mtow(CONF2, 500_000.0, 2500.0)
        assert result.corrected_weight == pytest.approx(500_000.0 - 112_770.0)
        assert result.mtow == pytest.approx(387_230.0)
        assert not result.too_light

    def test_too_light(self) -> None:
        """Test a corrected weight below the data floor is flagged."""
        profile = get_contamination_profile(RunwayCondition.WATER_6MM)
        result = profile.calculate_mtow(CONF2, 470_000.0, 2500.0)
        assert result.too_light
        assert result.mtow == pytest.approx(308_496.0)

    def test_speeds(self) -> None:
        """Test speeds come from the weight table."""
        profile = get_contamination_profile(RunwayCondition.WATER_6MM)
        assert profile.calculate_speeds(CONF2, 308_496.0) == pytest.approx((122.0, 126.0, 127.0))
        assert profile.calculate_speeds(CONF2, 512_000.0) == pytest.approx((144.0, 163.0, 164.0))

    def test_speeds_increase_with_weight(self) -> None:
        """Test every profile gives higher VR for heavier weights."""
        for profile in CONTAMINATION_PROFILES.values():
            for conf in TakeoffConfiguration:
                _, light_vr, _ = profile.calculate_speeds(conf, 320_000.0)
                _, heavy_vr, _ = profile.calculate_speeds(conf, 500_000.0)
                assert heavy_vr > light_vr


class TestForwardCgCorrection:
    """Test the forward CG weight bump."""

    def test_never_negative(self) -> None:
        """Test the correction is clamped at zero."""
        assert calculate_forward_cg_weight_correction(CONF2, 400_000.0) == 0.0

    def test_linear_in_weight(self) -> None:
        """Test the linear expression where it is positive."""
        assert calculate_forward_cg_weight_correction(CONF2, 50.0) == pytest.approx(-0.03277 * 50 + 2.686)


class TestResolveMtow:
    """Test the MTOW resolver."""

    def test_dry(self, dry_inputs: TakeoffInputs) -> None:
        """Test the dry MTOW is used as is."""
        params = calculate_parameters(dry_inputs)
        result = resolve_mtow(dry_inputs, CONF2, params, 450_000.0, LimitingFactor.SECOND_SEGMENT, 290.0)
        assert result.mtow == 450_000.0
        assert not result.too_light
        assert not result.forward_cg_weight_correction
        assert not result.forward_cg_speed_correction

    def test_wet_never_exceeds_dry(self, dry_inputs: TakeoffInputs) -> None:
        """Test the wet correction is added and never positive."""
        inputs = replace(dry_inputs, runway_condition=RunwayCondition.WET)
        params = calculate_parameters(inputs)
        expected = 450_000.0 + calculate_wet_adjustment(MTOW_FACTORS, TvmcgRegime.AT_OR_BELOW, CONF2, params)
        result = resolve_mtow(inputs, CONF2, params, 450_000.0, LimitingFactor.RUNWAY, 290.0)
        assert result.mtow == pytest.approx(expected)
        assert result.mtow <= 450_000.0

    def test_wet_above_tvmcg(self, dry_inputs: TakeoffInputs) -> None:
        """Test OAT above T-VMCG switches coefficient family."""
        inputs = replace(dry_inputs, runway_condition=RunwayCondition.WET, tora=1500.0)
        params = calculate_parameters(inputs)
        expected = 450_000.0 + calculate_wet_adjustment(MTOW_FACTORS, TvmcgRegime.ABOVE, CONF2, params)
        result = resolve_mtow(inputs, CONF2, params, 450_000.0, LimitingFactor.RUNWAY, 10.0)
        assert result.mtow == pytest.approx(expected)

    def test_contaminated(self, dry_inputs: TakeoffInputs) -> None:
        """Test contaminated runways use their profile."""
        inputs = replace(dry_inputs, runway_condition=RunwayCondition.WATER_6MM, tora=2500.0)
        params = calculate_parameters(inputs)
        result = resolve_mtow(inputs, CONF2, params, 500_000.0, LimitingFactor.RUNWAY, 0.0)
        assert result.mtow == pytest.approx(387_230.0)
        assert not result.too_light

    def test_contaminated_too_light(self, dry_inputs: TakeoffInputs) -> None:
        """Test the data floor is reported."""
        inputs = replace(dry_inputs, runway_condition=RunwayCondition.WATER_6MM, tora=2500.0)
        params = calculate_parameters(inputs)
        result = resolve_mtow(inputs, CONF2, params, 400_000.0, LimitingFactor.RUNWAY, 0.0)
        assert result.too_light

    @pytest.mark.parametrize("factor", [LimitingFactor.RUNWAY, LimitingFactor.VMCG])
    def test_forward_cg_applies(self, dry_inputs: TakeoffInputs, factor: LimitingFactor) -> None:
        """Test the forward CG corrections apply for runway and VMCG limits."""
        inputs = replace(dry_inputs, forward_cg=True)
        result = resolve_mtow(inputs, CONF2, calculate_parameters(inputs), 400_000.0, factor, 290.0)
        assert result.forward_cg_weight_correction
        assert result.forward_cg_speed_correction

    def test_forward_cg_speed_correction_weight_limit(self, dry_inputs: TakeoffInputs) -> None:
        """Test the VR correction is dropped above 473,114 kg."""
        inputs = replace(dry_inputs, forward_cg=True)
        params = calculate_parameters(inputs)
        at_limit = resolve_mtow(inputs, CONF2, params, 473_114.0, LimitingFactor.RUNWAY, 290.0)
        above = resolve_mtow(inputs, CONF2, params, 473_115.0, LimitingFactor.RUNWAY, 290.0)
        assert at_limit.forward_cg_speed_correction
        assert above.forward_cg_weight_correction
        assert not above.forward_cg_speed_correction

    @pytest.mark.parametrize("factor", [LimitingFactor.SECOND_SEGMENT, LimitingFactor.BRAKE_ENERGY])
    def test_forward_cg_not_applicable(self, dry_inputs: TakeoffInputs, factor: LimitingFactor) -> None:
        """Test climb and brake energy limits get no forward CG credit."""
        inputs = replace(dry_inputs, forward_cg=True)
        result = resolve_mtow(inputs, CONF2, calculate_parameters(inputs), 400_000.0, factor, 290.0)
        assert not result.forward_cg_weight_correction
        assert not result.forward_cg_speed_correction
