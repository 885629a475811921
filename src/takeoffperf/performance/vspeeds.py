"""V-speed regression evaluation.

Dry and wet runways use one of two regression families, chosen by the
factor limiting the takeoff (the flex limiting factor when flex is used):

- Runway or VMCG limited: each speed is a weight-linear base plus runway
  length, pressure altitude, slope and wind corrections.
- Second segment or brake energy limited: the same structure, but V2 and
  VR switch between two coefficient tables depending on a no-wind V2
  against a runway-length threshold.

Wet speeds are the reconciled dry speeds plus wet corrections. Contaminated
speeds come from the contamination profile's weight-keyed table.
"""

from dataclasses import dataclass

from takeoffperf.core.logging_system import get_logger
from takeoffperf.performance import airframe, wet_runway
from takeoffperf.performance.contamination import get_contamination_profile
from takeoffperf.performance.data import speeds as data
from takeoffperf.performance.reconciliation import ReconciledSpeeds, reconcile_speeds
from takeoffperf.performance.types import (
    LimitingFactor,
    PerformanceCalculationError,
    RegressionTable,
    RunwayCondition,
    TakeoffConfiguration,
    TakeoffInputs,
    TakeoffParameters,
    TakeoffPerformanceError,
    TakeoffSpeeds,
    TvmcgRegime,
)

logger = get_logger(__name__)

_V2_BASE = {
    RegressionTable.TABLE_1: data.V2_SECOND_SEG_BRAKE_BASE_TABLE1,
    RegressionTable.TABLE_2: data.V2_SECOND_SEG_BRAKE_BASE_TABLE2,
}
_V2_RUNWAY = {
    RegressionTable.TABLE_1: data.V2_SECOND_SEG_BRAKE_RUNWAY_TABLE1,
    RegressionTable.TABLE_2: data.V2_SECOND_SEG_BRAKE_RUNWAY_TABLE2,
}
_VR_BASE = {
    RegressionTable.TABLE_1: data.VR_SECOND_SEG_BRAKE_BASE_TABLE1,
    RegressionTable.TABLE_2: data.VR_SECOND_SEG_BRAKE_BASE_TABLE2,
}
_VR_RUNWAY = {
    RegressionTable.TABLE_1: data.VR_SECOND_SEG_BRAKE_RUNWAY_TABLE1,
    RegressionTable.TABLE_2: data.VR_SECOND_SEG_BRAKE_RUNWAY_TABLE2,
}
_VR_ALT = {
    RegressionTable.TABLE_1: data.VR_SECOND_SEG_BRAKE_ALT_TABLE1,
    RegressionTable.TABLE_2: data.VR_SECOND_SEG_BRAKE_ALT_TABLE2,
}
_V1_BASE = {
    RegressionTable.TABLE_1: data.V1_SECOND_SEG_BRAKE_BASE_TABLE1,
    RegressionTable.TABLE_2: data.V1_SECOND_SEG_BRAKE_BASE_TABLE2,
}
_V1_RUNWAY = {
    RegressionTable.TABLE_1: data.V1_SECOND_SEG_BRAKE_RUNWAY_TABLE1,
    RegressionTable.TABLE_2: data.V1_SECOND_SEG_BRAKE_RUNWAY_TABLE2,
}
_V1_ALT = {
    RegressionTable.TABLE_1: data.V1_SECOND_SEG_BRAKE_ALT_TABLE1,
    RegressionTable.TABLE_2: data.V1_SECOND_SEG_BRAKE_ALT_TABLE2,
}

# Forward CG VR correction (kt)
FORWARD_CG_VR_CORRECTION = -1.0


@dataclass
class VSpeedResult:
    """Speeds of one calculation.

    Attributes:
        v1: Decision speed (kt).
        vr: Rotation speed (kt).
        v2: Takeoff safety speed (kt).
        intermediate: Regression terms, None for contaminated runways.
        error: Last limit violated during reconciliation, if any.
    """

    v1: int
    vr: int
    v2: int
    intermediate: TakeoffSpeeds | None = None
    error: TakeoffPerformanceError | None = None


class VSpeedCalculator:
    """Evaluate V1, VR and V2 for one takeoff.

    Examples:
        >>> calc = VSpeedCalculator(inputs, TakeoffConfiguration.CONF_2, params)
        >>> speeds = calc.calculate(LimitingFactor.RUNWAY, False, tvmcg)
        >>> speeds.v1 <= speeds.vr <= speeds.v2
        True
    """

    def __init__(self, inputs: TakeoffInputs, conf: TakeoffConfiguration, params: TakeoffParameters) -> None:
        self.inputs = inputs
        self.conf = conf
        self.params = params

    @property
    def _tonnes(self) -> float:
        return self.inputs.tow / 1000

    def calculate(
        self,
        limiting_factor: LimitingFactor,
        forward_cg_speed_correction: bool,
        tvmcg: float,
    ) -> VSpeedResult:
        """Compute final speeds for the runway condition.

        Args:
            limiting_factor: Flex limiting factor, else the factor limiting at OAT.
            forward_cg_speed_correction: Whether VR gets the forward CG correction.
            tvmcg: T-VMCG (°C), selects the wet correction family.

        Returns:
            Reconciled speeds with their intermediate terms.
        """
        condition = self.inputs.runway_condition

        if condition.is_contaminated:
            v1, vr, v2 = get_contamination_profile(condition).calculate_speeds(self.conf, self.inputs.tow)
            reconciled = self._reconcile(v1, vr, v2)
            return VSpeedResult(reconciled.v1, reconciled.vr, reconciled.v2, None, reconciled.error)

        speeds, dry = self.calculate_dry_speeds(limiting_factor, forward_cg_speed_correction)
        if condition is RunwayCondition.DRY:
            return VSpeedResult(dry.v1, dry.vr, dry.v2, speeds, dry.error)

        wet = self.calculate_wet_speeds(speeds, tvmcg)
        return VSpeedResult(wet.v1, wet.vr, wet.v2, speeds, wet.error or dry.error)

    def calculate_dry_speeds(
        self,
        limiting_factor: LimitingFactor,
        forward_cg_speed_correction: bool,
    ) -> tuple[TakeoffSpeeds, ReconciledSpeeds]:
        """Evaluate the dry regression and reconcile it.

        The reconciled speeds are also stored as ``dry_*`` on the returned
        intermediate speeds.
        """
        speeds = TakeoffSpeeds()

        if limiting_factor in (LimitingFactor.RUNWAY, LimitingFactor.VMCG):
            v1, vr, v2 = self._runway_vmcg_speeds(speeds, forward_cg_speed_correction)
        else:
            v1, vr, v2 = self._second_segment_brake_speeds(speeds)

        speeds.v1, speeds.vr, speeds.v2 = v1, vr, v2
        dry = self._reconcile(v1, vr, v2)
        speeds.dry_v1, speeds.dry_vr, speeds.dry_v2 = dry.v1, dry.vr, dry.v2

        logger.debug(
            f"{self.conf.name} {limiting_factor.value} limited dry speeds "
            f"{dry.v1}/{dry.vr}/{dry.v2} (raw {v1:.1f}/{vr:.1f}/{v2:.1f})"
        )
        return speeds, dry

    def calculate_wet_speeds(self, speeds: TakeoffSpeeds, tvmcg: float) -> ReconciledSpeeds:
        """Apply wet corrections to the reconciled dry speeds and reconcile again."""
        if speeds.dry_v1 is None or speeds.dry_vr is None or speeds.dry_v2 is None:
            raise PerformanceCalculationError("Dry speeds must be calculated before wet speeds")

        regime = TvmcgRegime.for_temperature(self.inputs.oat, tvmcg)
        v1 = speeds.dry_v1 + wet_runway.calculate_wet_adjustment(wet_runway.V1_FACTORS, regime, self.conf, self.params)
        vr = speeds.dry_vr + wet_runway.calculate_wet_adjustment(wet_runway.VR_FACTORS, regime, self.conf, self.params)
        v2 = speeds.dry_v2 + wet_runway.calculate_wet_adjustment(wet_runway.V2_FACTORS, regime, self.conf, self.params)
        return self._reconcile(v1, vr, v2)

    def _reconcile(self, v1: float, vr: float, v2: float) -> ReconciledSpeeds:
        return reconcile_speeds(v1, vr, v2, self.conf, self.params.pressure_alt, self.inputs.tow)

    def _runway_vmcg_speeds(
        self,
        speeds: TakeoffSpeeds,
        forward_cg_speed_correction: bool,
    ) -> tuple[float, float, float]:
        conf, params, tonnes = self.conf, self.params, self._tonnes
        headwind = params.headwind

        # V2
        base1, base2 = data.V2_RUNWAY_VMCG_BASE_FACTORS[conf]
        speeds.v2_base = tonnes * base1 + base2
        alt1, alt2 = data.V2_RUNWAY_VMCG_ALT_FACTORS[conf]
        speeds.v2_delta_alt = (tonnes * alt1 + alt2) * params.pressure_alt
        v2 = speeds.v2_base + speeds.v2_delta_alt

        # VR
        base1, base2 = data.VR_RUNWAY_VMCG_BASE_FACTORS[conf]
        speeds.vr_base = tonnes * base1 + base2
        base_length, runway1, runway2 = data.VR_RUNWAY_VMCG_RUNWAY_FACTORS[conf]
        speeds.vr_delta_runway = (base_length - params.adjusted_tora) * (tonnes * runway1 + runway2)
        alt1, alt2 = data.VR_RUNWAY_VMCG_ALT_FACTORS[conf]
        speeds.vr_delta_alt = params.pressure_alt * (tonnes * alt1 + alt2)
        speeds.vr_delta_slope = self.inputs.slope * params.adjusted_tora * data.VR_RUNWAY_VMCG_SLOPE_FACTORS[conf]
        wind1, wind2 = (
            data.VR_RUNWAY_VMCG_HEADWIND_FACTORS if headwind >= 0 else data.VR_RUNWAY_VMCG_TAILWIND_FACTORS
        )[conf]
        speeds.vr_delta_wind = headwind * (tonnes * wind1 + wind2)
        vr = (
            speeds.vr_base
            + speeds.vr_delta_runway
            + speeds.vr_delta_alt
            + speeds.vr_delta_slope
            + speeds.vr_delta_wind
            + (FORWARD_CG_VR_CORRECTION if forward_cg_speed_correction else 0.0)
        )

        # V1
        base1, base2 = data.V1_RUNWAY_VMCG_BASE_FACTORS[conf]
        speeds.v1_base = tonnes * base1 + base2
        base_length, runway1, runway2 = data.V1_RUNWAY_VMCG_RUNWAY_FACTORS[conf]
        speeds.v1_delta_runway = (base_length - params.adjusted_tora) * (tonnes * runway1 + runway2)
        alt1, alt2 = data.V1_RUNWAY_VMCG_ALT_FACTORS[conf]
        speeds.v1_delta_alt = params.pressure_alt * (tonnes * alt1 + alt2)
        speeds.v1_delta_slope = self.inputs.slope * params.adjusted_tora * data.V1_RUNWAY_VMCG_SLOPE_FACTORS[conf]
        wind1, wind2 = (
            data.V1_RUNWAY_VMCG_HEADWIND_FACTORS if headwind >= 0 else data.V1_RUNWAY_VMCG_TAILWIND_FACTORS
        )[conf]
        speeds.v1_delta_wind = headwind * (tonnes * wind1 + wind2)
        v1 = (
            speeds.v1_base
            + speeds.v1_delta_runway
            + speeds.v1_delta_alt
            + speeds.v1_delta_slope
            + speeds.v1_delta_wind
        )

        return v1, vr, v2

    def _second_segment_brake_speeds(self, speeds: TakeoffSpeeds) -> tuple[float, float, float]:
        conf, params, tonnes = self.conf, self.params, self._tonnes

        # V2, choosing the table from the no-wind table 1 value
        v2_no_wind = self._second_segment_brake_v2(speeds, correct_wind=False, table=RegressionTable.TABLE_1)
        threshold1, threshold2 = data.V2_SECOND_SEG_BRAKE_THRESHOLDS[conf]
        speeds.v2_table2_threshold = params.adjusted_tora * threshold1 + threshold2
        table = RegressionTable.TABLE_2 if v2_no_wind >= speeds.v2_table2_threshold else RegressionTable.TABLE_1
        if table is RegressionTable.TABLE_2:
            speeds.v2_no_wind = v2_no_wind
        v2 = self._second_segment_brake_v2(speeds, correct_wind=True, table=table)

        # VR
        base1, base2 = _VR_BASE[table][conf]
        speeds.vr_base = tonnes * base1 + base2
        base_length, runway1, runway2 = _VR_RUNWAY[table][conf]
        speeds.vr_delta_runway = (base_length - params.adjusted_tora) * (tonnes * runway1 + runway2)
        alt1, alt2, alt3, alt4 = _VR_ALT[table][conf]
        speeds.vr_delta_alt = (
            params.pressure_alt * (tonnes * alt1 + alt2) * (params.adjusted_tora * alt3 + alt4)
        )
        slope1, slope2 = data.VR_SECOND_SEG_BRAKE_SLOPE_FACTORS[conf]
        speeds.vr_delta_slope = self.inputs.slope * params.adjusted_tora * (tonnes * slope1 + slope2)
        wind1, wind2 = (
            data.VR_SECOND_SEG_BRAKE_HEADWIND_FACTORS
            if params.headwind >= 0
            else data.VR_SECOND_SEG_BRAKE_TAILWIND_FACTORS
        )[conf]
        speeds.vr_delta_wind = params.headwind * (tonnes * wind1 + wind2)
        vr = (
            speeds.vr_base
            + speeds.vr_delta_runway
            + speeds.vr_delta_alt
            + speeds.vr_delta_slope
            + speeds.vr_delta_wind
        )

        # V1 from the same table, falling back to table 1 when the spread to V2 is implausible
        v1 = self._second_segment_brake_v1(speeds, table)
        if table is RegressionTable.TABLE_2 and v2 - v1 > airframe.MAX_TABLE2_V1_SPREAD:
            logger.debug(f"Table 2 V1 {v1:.1f} more than {airframe.MAX_TABLE2_V1_SPREAD} kt below V2, using table 1")
            speeds.v1_table2 = v1
            v1 = self._second_segment_brake_v1(speeds, RegressionTable.TABLE_1)

        return v1, vr, v2

    def _second_segment_brake_v2(self, speeds: TakeoffSpeeds, correct_wind: bool, table: RegressionTable) -> float:
        conf, params, tonnes = self.conf, self.params, self._tonnes

        base1, base2 = _V2_BASE[table][conf]
        speeds.v2_base = tonnes * base1 + base2
        base_length, runway_factor = _V2_RUNWAY[table][conf]
        speeds.v2_delta_runway = (base_length - params.adjusted_tora) * runway_factor
        alt1, alt2, alt3, alt4 = data.V2_SECOND_SEG_BRAKE_ALT_FACTORS[conf]
        speeds.v2_delta_alt = (
            params.pressure_alt * (tonnes * alt1 + alt2) * (params.adjusted_tora * alt3 + alt4)
        )
        slope1, slope2 = data.V2_SECOND_SEG_BRAKE_SLOPE_FACTORS[conf]
        speeds.v2_delta_slope = self.inputs.slope * params.adjusted_tora * (tonnes * slope1 + slope2)

        if correct_wind:
            wind_factor = (
                data.V2_SECOND_SEG_BRAKE_HEADWIND_FACTORS
                if params.headwind >= 0
                else data.V2_SECOND_SEG_BRAKE_TAILWIND_FACTORS
            )[conf]
            speeds.v2_delta_wind = params.headwind * wind_factor
        else:
            speeds.v2_delta_wind = 0.0

        return (
            speeds.v2_base
            + speeds.v2_delta_runway
            + speeds.v2_delta_alt
            + speeds.v2_delta_slope
            + speeds.v2_delta_wind
        )

    def _second_segment_brake_v1(self, speeds: TakeoffSpeeds, table: RegressionTable) -> float:
        conf, params, tonnes = self.conf, self.params, self._tonnes

        base1, base2 = _V1_BASE[table][conf]
        speeds.v1_base = tonnes * base1 + base2
        base_length, runway1, runway2 = _V1_RUNWAY[table][conf]
        speeds.v1_delta_runway = (base_length - params.adjusted_tora) * (tonnes * runway1 + runway2)
        alt1, alt2, alt3, alt4 = _V1_ALT[table][conf]
        speeds.v1_delta_alt = (
            params.pressure_alt * (tonnes * alt1 + alt2) * (params.adjusted_tora * alt3 + alt4)
        )
        slope1, slope2 = data.V1_SECOND_SEG_BRAKE_SLOPE_FACTORS[conf]
        speeds.v1_delta_slope = self.inputs.slope * params.adjusted_tora * (tonnes * slope1 + slope2)
        wind1, wind2 = (
            data.V1_SECOND_SEG_BRAKE_HEADWIND_FACTORS
            if params.headwind >= 0
            else data.V1_SECOND_SEG_BRAKE_TAILWIND_FACTORS
        )[conf]
        speeds.v1_delta_wind = params.headwind * (tonnes * wind1 + wind2)

        return (
            speeds.v1_base
            + speeds.v1_delta_runway
            + speeds.v1_delta_alt
            + speeds.v1_delta_slope
            + speeds.v1_delta_wind
        )
