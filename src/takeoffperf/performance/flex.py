"""Flex (assumed) temperature search.

The flex temperature is the highest temperature at which the actual takeoff
weight still respects the weight ceilings. The search picks the reference
temperature interval the weight falls in, scans it in one degree steps
against the limiting factors at both ends, then applies the bleed, envelope
and wet runway corrections.
"""

import math
from dataclasses import dataclass

from takeoffperf.core.logging_system import get_logger
from takeoffperf.performance import airframe, wet_runway
from takeoffperf.performance.types import (
    AntiIceSetting,
    LimitingFactor,
    LimitWeight,
    ReferenceTemperature,
    RunwayCondition,
    TakeoffConfiguration,
    TakeoffInputs,
    TakeoffParameters,
    TvmcgRegime,
)
from takeoffperf.performance.weight_limits import WEIGHT_LIMIT_MODELS

logger = get_logger(__name__)


@dataclass(frozen=True)
class FlexSearchInterval:
    """Temperatures to scan and the factors limiting at each end."""

    start: float
    end: float
    from_factor: LimitingFactor
    to_factor: LimitingFactor


def calculate_flex_limit_weight(
    factor: LimitingFactor,
    limit_weight: LimitWeight,
    conf: TakeoffConfiguration,
    params: TakeoffParameters,
    temperature: float,
) -> float:
    """Get a factor's no-bleed ceiling (kg) at a candidate flex temperature.

    Returns NaN above Tflexmax.
    """
    return WEIGHT_LIMIT_MODELS[factor].limit_at(temperature, conf, params, limit_weight.alt_limit)


def select_flex_interval(
    tow: float,
    params: TakeoffParameters,
    limits: dict[LimitingFactor, LimitWeight],
    t_ref_factor: LimitingFactor,
    t_max_factor: LimitingFactor,
    t_flex_max_factor: LimitingFactor,
) -> FlexSearchInterval:
    """Choose which reference temperature interval holds the flex temperature.

    Above Tflexmax the interval is extended so that bleed penalties applied
    later can still be absorbed before clamping to Tflexmax.
    """
    if tow > limits[t_max_factor].at(ReferenceTemperature.TMAX).limit_no_bleed:
        return FlexSearchInterval(params.t_ref, params.t_max, t_ref_factor, t_max_factor)

    if tow > limits[t_flex_max_factor].at(ReferenceTemperature.TFLEXMAX).limit_no_bleed:
        return FlexSearchInterval(params.t_max, params.t_flex_max, t_max_factor, t_flex_max_factor)

    return FlexSearchInterval(
        params.t_flex_max,
        params.t_flex_max + airframe.FLEX_EXTRAPOLATION_MARGIN,
        t_flex_max_factor,
        t_flex_max_factor,
    )


def scan_flex_interval(
    tow: float,
    conf: TakeoffConfiguration,
    params: TakeoffParameters,
    limits: dict[LimitingFactor, LimitWeight],
    interval: FlexSearchInterval,
) -> tuple[float | None, LimitingFactor | None]:
    """Scan an interval for the highest temperature the weight allows.

    Steps whose ceilings are undefined (beyond the flex envelope) never
    qualify.

    Returns:
        (temperature, tighter factor at that temperature), or (None, None).
    """
    flex: float | None = None
    flex_factor: LimitingFactor | None = None

    from_weights = limits[interval.from_factor]
    to_weights = limits[interval.to_factor]

    temperature = interval.start
    while temperature <= interval.end:
        from_limit = calculate_flex_limit_weight(interval.from_factor, from_weights, conf, params, temperature)
        to_limit = calculate_flex_limit_weight(interval.to_factor, to_weights, conf, params, temperature)

        if not (math.isnan(from_limit) or math.isnan(to_limit)) and tow <= min(from_limit, to_limit):
            flex = temperature
            flex_factor = interval.from_factor if from_limit <= to_limit else interval.to_factor

        temperature += 1

    return flex, flex_factor


def calculate_bleed_penalty(inputs: TakeoffInputs) -> float:
    """Get the flex temperature lost (°C) to anti-ice and packs bleed."""
    penalty = 0.0
    if inputs.anti_ice is AntiIceSetting.ENGINE:
        penalty += airframe.ENGINE_ANTI_ICE_FLEX_PENALTY
    elif inputs.anti_ice is AntiIceSetting.ENGINE_WING:
        penalty += airframe.ENGINE_WING_ANTI_ICE_FLEX_PENALTY
    if inputs.packs:
        penalty += airframe.PACKS_FLEX_PENALTY
    return penalty


def calculate_flex_temperature(
    inputs: TakeoffInputs,
    conf: TakeoffConfiguration,
    params: TakeoffParameters,
    limits: dict[LimitingFactor, LimitWeight],
    t_ref_factor: LimitingFactor,
    t_max_factor: LimitingFactor,
    t_flex_max_factor: LimitingFactor,
    tvmcg: float,
) -> tuple[float | None, LimitingFactor | None]:
    """Find the flex temperature of a takeoff.

    Args:
        inputs: Takeoff inputs.
        conf: Takeoff configuration.
        params: Derived parameters.
        limits: Weight limits of every factor.
        t_ref_factor: Factor limiting at Tref.
        t_max_factor: Factor limiting at Tmax.
        t_flex_max_factor: Factor limiting at Tflexmax.
        tvmcg: T-VMCG (°C), selects the wet correction family.

    Returns:
        (flex temperature, limiting factor), or (None, None) when the
        takeoff needs full thrust.
    """
    if inputs.tow >= limits[t_ref_factor].at(ReferenceTemperature.TREF).limit:
        return None, None

    interval = select_flex_interval(inputs.tow, params, limits, t_ref_factor, t_max_factor, t_flex_max_factor)
    flex, flex_factor = scan_flex_interval(inputs.tow, conf, params, limits, interval)

    if flex is None or flex_factor is None:
        logger.debug(f"No flex temperature between {interval.start:.1f} and {interval.end:.1f}")
        return None, None

    flex -= calculate_bleed_penalty(inputs)
    flex = math.trunc(min(flex, params.t_flex_max))

    if inputs.runway_condition is RunwayCondition.WET:
        regime = TvmcgRegime.for_temperature(inputs.oat, tvmcg)
        flex += wet_runway.calculate_wet_adjustment(wet_runway.FLEX_FACTORS, regime, conf, params)

    if flex <= inputs.oat:
        logger.debug(f"Flex {flex} not above OAT {inputs.oat}, full thrust required")
        return None, None

    logger.debug(f"Flex {flex} limited by {flex_factor.value}")
    return flex, flex_factor
