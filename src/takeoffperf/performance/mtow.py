"""Maximum takeoff weight resolution for the runway condition."""

from dataclasses import dataclass

from takeoffperf.core.logging_system import get_logger
from takeoffperf.performance import airframe, wet_runway
from takeoffperf.performance.contamination import get_contamination_profile
from takeoffperf.performance.data.cg import CG_FACTORS
from takeoffperf.performance.types import (
    LimitingFactor,
    RunwayCondition,
    TakeoffConfiguration,
    TakeoffInputs,
    TakeoffParameters,
    TvmcgRegime,
)

logger = get_logger(__name__)

_FORWARD_CG_FACTORS = (LimitingFactor.RUNWAY, LimitingFactor.VMCG)


@dataclass(frozen=True)
class MtowResolution:
    """Outcome of the MTOW resolver.

    Attributes:
        mtow: Maximum takeoff weight after every correction (kg).
        too_light: Contaminated corrected weight fell below the data floor.
        forward_cg_weight_correction: Whether the forward CG bump was applied.
        forward_cg_speed_correction: Whether VR gets the forward CG correction.
    """

    mtow: float
    too_light: bool = False
    forward_cg_weight_correction: bool = False
    forward_cg_speed_correction: bool = False


def calculate_forward_cg_weight_correction(conf: TakeoffConfiguration, mtow: float) -> float:
    """Get the extra weight (kg) a forward CG allows, never negative."""
    slope, offset = CG_FACTORS[conf]
    return max(0.0, slope * mtow + offset)


def resolve_mtow(
    inputs: TakeoffInputs,
    conf: TakeoffConfiguration,
    params: TakeoffParameters,
    dry_mtow: float,
    oat_limiting_factor: LimitingFactor,
    tvmcg: float,
) -> MtowResolution:
    """Derive the MTOW for the actual runway condition.

    Args:
        inputs: Takeoff inputs.
        conf: Takeoff configuration.
        params: Derived parameters.
        dry_mtow: OAT ceiling of the factor limiting at Tref (kg).
        oat_limiting_factor: Factor limiting at OAT.
        tvmcg: T-VMCG (°C).

    Returns:
        The resolved MTOW and the corrections that apply.
    """
    too_light = False
    condition = inputs.runway_condition

    if condition is RunwayCondition.DRY:
        mtow = dry_mtow
    elif condition is RunwayCondition.WET:
        regime = TvmcgRegime.for_temperature(inputs.oat, tvmcg)
        mtow = dry_mtow + wet_runway.calculate_wet_adjustment(wet_runway.MTOW_FACTORS, regime, conf, params)
    else:
        contaminated = get_contamination_profile(condition).calculate_mtow(conf, dry_mtow, params.adjusted_tora)
        mtow = contaminated.mtow
        too_light = contaminated.too_light
        if too_light:
            logger.debug(
                f"Corrected weight {contaminated.corrected_weight:.0f} kg below "
                f"{condition.value} data for {conf.name}"
            )

    weight_correction = inputs.forward_cg and oat_limiting_factor in _FORWARD_CG_FACTORS
    speed_correction = weight_correction and mtow <= airframe.FORWARD_CG_SPEED_CORRECTION_MAX_MTOW

    if weight_correction:
        mtow += calculate_forward_cg_weight_correction(conf, mtow)

    return MtowResolution(
        mtow=mtow,
        too_light=too_light,
        forward_cg_weight_correction=weight_correction,
        forward_cg_speed_correction=speed_correction,
    )
