"""Weight-limit pipeline and limiting-factor selection.

Each limiting factor turns the runway into a chain of weight ceilings:
base weight, corrected for slope, then pressure altitude, then temperature
and wind at the four reference temperatures. Every correction is a
"delta" that is subtracted, so a negative delta raises the ceiling.

Temperature and wind deltas are undefined above Tflexmax and return NaN
there; only the flex search probes temperatures that high and it treats
NaN ceilings as unusable.

Typical usage example:
    limits = calculate_all_weight_limits(conf, inputs, params)
    factor = get_limiting_factor(limits, ReferenceTemperature.TREF)
    dry_mtow = limits[factor].at(ReferenceTemperature.OAT).limit
"""

import math
from abc import ABC, abstractmethod

import numpy as np

from takeoffperf.performance import airframe
from takeoffperf.performance.data import weight_limits as data
from takeoffperf.performance.types import (
    AntiIceSetting,
    LimitingFactor,
    LimitWeight,
    PerConfiguration,
    PerformanceCalculationError,
    ReferenceTemperature,
    TakeoffConfiguration,
    TakeoffInputs,
    TakeoffParameters,
    TemperatureLimit,
)


def _discard_same_sign(weight_delta: float, wind: float) -> float:
    # A wind delta with the same sign as the wind is an artifact near the ends of the data
    if np.sign(weight_delta) == np.sign(wind):
        return 0.0
    return weight_delta


class WeightLimitModel(ABC):
    """Weight ceiling formulas of one limiting factor.

    Subclasses provide the base weight and the temperature and wind deltas;
    slope and pressure altitude corrections share one form.
    """

    factor: LimitingFactor

    def __init__(
        self,
        slope_factors: PerConfiguration[float],
        pressure_alt_factors: PerConfiguration[tuple[float, float]],
    ) -> None:
        self.slope_factors = slope_factors
        self.pressure_alt_factors = pressure_alt_factors

    @abstractmethod
    def base_limit(self, conf: TakeoffConfiguration, adjusted_tora: float) -> float:
        """Get the uncorrected weight ceiling (kg) for a runway length (m)."""

    @abstractmethod
    def temperature_delta(self, temp: float, conf: TakeoffConfiguration, params: TakeoffParameters) -> float:
        """Get the weight lost (kg) at a temperature, NaN above Tflexmax."""

    @abstractmethod
    def wind_delta(self, temp: float, conf: TakeoffConfiguration, params: TakeoffParameters) -> float:
        """Get the weight lost (kg) to the credited wind, NaN above Tflexmax."""

    def slope_delta(self, conf: TakeoffConfiguration, params: TakeoffParameters, slope: float) -> float:
        return 1000 * self.slope_factors[conf] * params.adjusted_tora * slope

    def altitude_delta(self, conf: TakeoffConfiguration, params: TakeoffParameters) -> float:
        quadratic, linear = self.pressure_alt_factors[conf]
        pressure_alt = params.pressure_alt
        return 1000 * pressure_alt * (pressure_alt * quadratic + linear)

    def limit_at(
        self,
        temp: float,
        conf: TakeoffConfiguration,
        params: TakeoffParameters,
        alt_limit: float,
    ) -> float:
        """Get the no-bleed ceiling (kg) at an arbitrary temperature."""
        return alt_limit - self.temperature_delta(temp, conf, params) - self.wind_delta(temp, conf, params)


class _LinearBaseModel(WeightLimitModel):
    """Model whose base weight is linear in runway length."""

    def __init__(
        self,
        base_factors: PerConfiguration[tuple[float, float]],
        slope_factors: PerConfiguration[float],
        pressure_alt_factors: PerConfiguration[tuple[float, float]],
    ) -> None:
        super().__init__(slope_factors, pressure_alt_factors)
        self.base_factors = base_factors

    def base_limit(self, conf: TakeoffConfiguration, adjusted_tora: float) -> float:
        per_metre, constant = self.base_factors[conf]
        return 1000 * (adjusted_tora * per_metre + constant)


class _ThreeSegmentWindMixin:
    """Wind delta shared by the runway, second segment and brake energy models."""

    head_wind_factors: PerConfiguration[tuple[float, float, float, float]]
    tail_wind_factors: PerConfiguration[tuple[float, float, float, float]]

    def wind_delta(self, temp: float, conf: TakeoffConfiguration, params: TakeoffParameters) -> float:
        if temp > params.t_flex_max:
            return math.nan

        wind = params.headwind
        length = params.adjusted_tora
        w0, w1, w2, w3 = (self.head_wind_factors if wind >= 0 else self.tail_wind_factors)[conf]

        weight_delta = 1000 * (length * w0 + w1) * wind
        if temp > params.t_ref:
            weight_delta += 1000 * w2 * wind * (min(temp, params.t_max) - params.t_ref)
        if temp > params.t_max:
            weight_delta += 1000 * w3 * wind * (temp - params.t_max)

        return _discard_same_sign(weight_delta, wind)


class RunwayLimitModel(_ThreeSegmentWindMixin, WeightLimitModel):
    """Runway length (accelerate-stop/go distance) limit."""

    factor = LimitingFactor.RUNWAY

    def __init__(self) -> None:
        super().__init__(data.RUNWAY_SLOPE_FACTOR, data.RUNWAY_PRESSURE_ALT_FACTOR)
        self.head_wind_factors = data.RUNWAY_HEAD_WIND_FACTOR
        self.tail_wind_factors = data.RUNWAY_TAIL_WIND_FACTOR

    def base_limit(self, conf: TakeoffConfiguration, adjusted_tora: float) -> float:
        return data.RUNWAY_PERF_LIMIT[conf].get(adjusted_tora)

    def temperature_delta(self, temp: float, conf: TakeoffConfiguration, params: TakeoffParameters) -> float:
        if temp > params.t_flex_max:
            return math.nan

        f0, f1, f2, f3, f4, f5 = data.RUNWAY_TEMPERATURE_FACTOR[conf]
        length = params.adjusted_tora - params.pressure_alt / 12

        weight_delta = 1000 * (length * f0 + f1) * (min(temp, params.t_ref) - params.isa_temp)
        if temp > params.t_ref:
            weight_delta += 1000 * (length * f2 + f3) * (min(temp, params.t_max) - params.t_ref)
        if temp > params.t_max:
            weight_delta += 1000 * (length * f4 + f5) * (temp - params.t_max)
        return weight_delta


class SecondSegmentLimitModel(_ThreeSegmentWindMixin, _LinearBaseModel):
    """One-engine-out second segment climb gradient limit."""

    factor = LimitingFactor.SECOND_SEGMENT

    def __init__(self) -> None:
        super().__init__(
            data.SECOND_SEGMENT_BASE_FACTOR,
            data.SECOND_SEGMENT_SLOPE_FACTOR,
            data.SECOND_SEGMENT_PRESSURE_ALT_FACTOR,
        )
        self.head_wind_factors = data.SECOND_SEGMENT_HEAD_WIND_FACTOR
        self.tail_wind_factors = data.SECOND_SEGMENT_TAIL_WIND_FACTOR

    def temperature_delta(self, temp: float, conf: TakeoffConfiguration, params: TakeoffParameters) -> float:
        if temp > params.t_flex_max:
            return math.nan

        f0, f1, f2, f3, f4, f5 = data.SECOND_SEGMENT_TEMPERATURE_FACTOR[conf]
        length = params.adjusted_tora - params.pressure_alt / 5

        weight_delta = 1000 * (length * f0 + f1) * (min(temp, params.t_ref) - params.isa_temp)
        if temp > params.t_ref:
            weight_delta += 1000 * (length * f2 + f3) * (min(temp, params.t_max) - params.t_ref)
        if temp > params.t_max:
            weight_delta += 1000 * (length * f4 + f5) * (temp - params.t_max)
        return weight_delta


class BrakeEnergyLimitModel(_ThreeSegmentWindMixin, _LinearBaseModel):
    """Brake energy limit of a rejected takeoff."""

    factor = LimitingFactor.BRAKE_ENERGY

    def __init__(self) -> None:
        super().__init__(
            data.BRAKE_ENERGY_BASE_FACTOR,
            data.BRAKE_ENERGY_SLOPE_FACTOR,
            data.BRAKE_ENERGY_PRESSURE_ALT_FACTOR,
        )
        self.head_wind_factors = data.BRAKE_ENERGY_HEAD_WIND_FACTOR
        self.tail_wind_factors = data.BRAKE_ENERGY_TAIL_WIND_FACTOR

    def temperature_delta(self, temp: float, conf: TakeoffConfiguration, params: TakeoffParameters) -> float:
        if temp > params.t_flex_max:
            return math.nan

        f0, f1 = data.BRAKE_ENERGY_TEMPERATURE_FACTOR[conf]

        weight_delta = 1000 * f0 * (min(temp, params.t_ref) - params.isa_temp)
        if temp > params.t_ref:
            weight_delta += 1000 * f1 * (min(temp, params.t_max) - params.t_ref)
        return weight_delta


class VmcgLimitModel(_LinearBaseModel):
    """Minimum ground control speed limit."""

    factor = LimitingFactor.VMCG

    def __init__(self) -> None:
        super().__init__(data.VMCG_BASE_FACTOR, data.VMCG_SLOPE_FACTOR, data.VMCG_PRESSURE_ALT_FACTOR)

    def temperature_delta(self, temp: float, conf: TakeoffConfiguration, params: TakeoffParameters) -> float:
        if temp > params.t_flex_max:
            return math.nan

        f0, f1, f2, f3, f4, f5 = data.VMCG_TEMPERATURE_FACTOR[conf]
        length = params.adjusted_tora

        weight_delta = 1000 * (length * f0 + f1) * (min(temp, params.t_ref) - params.isa_temp)
        if temp > params.t_ref:
            weight_delta += 1000 * (length * f2 + f3) * (min(temp, params.t_max) - params.t_ref)
        if temp > params.t_max:
            weight_delta += 1000 * (length * f4 + f5) * (temp - params.t_max)
        return weight_delta

    def wind_delta(self, temp: float, conf: TakeoffConfiguration, params: TakeoffParameters) -> float:
        if temp > params.t_flex_max:
            return math.nan

        wind = params.headwind
        length = params.adjusted_tora
        isa_temp, t_ref, t_max = params.isa_temp, params.t_ref, params.t_max

        if wind >= 0:
            w0, w1, w2, w3, w4, w5, w6, w7 = data.VMCG_HEAD_WIND_FACTOR[conf]
            weight_delta = 1000 * (length * w0 + w1) * wind
            if temp > isa_temp:
                weight_delta += 1000 * (length * w2 + w3) * wind * (min(temp, t_ref) - isa_temp)
            if temp > t_ref:
                weight_delta += 1000 * (length * w4 + w5) * wind * (min(temp, t_max) - t_ref)
            if temp >= t_max:
                weight_delta += 1000 * (length * w6 + w7) * wind * (temp - t_max)
        else:
            w0, w1, w2, w3, w4, w5 = data.VMCG_TAIL_WIND_FACTOR[conf]
            weight_delta = 1000 * (length * w0 + w1) * wind
            if temp > isa_temp:
                weight_delta += 1000 * (length * w2 + w3) * wind * (min(temp, t_ref) - isa_temp)
            if temp > t_ref:
                weight_delta += 1000 * w4 * wind * (min(temp, t_max) - t_ref)
            if temp > t_max:
                weight_delta += 1000 * w5 * wind * (temp - t_max)

        return _discard_same_sign(weight_delta, wind)


WEIGHT_LIMIT_MODELS: dict[LimitingFactor, WeightLimitModel] = {
    model.factor: model
    for model in (RunwayLimitModel(), SecondSegmentLimitModel(), BrakeEnergyLimitModel(), VmcgLimitModel())
}


def reference_temperature(reference: ReferenceTemperature, inputs: TakeoffInputs, params: TakeoffParameters) -> float:
    """Get the temperature (°C) a reference stands for in this calculation."""
    if reference is ReferenceTemperature.OAT:
        return inputs.oat
    if reference is ReferenceTemperature.TREF:
        return params.t_ref
    if reference is ReferenceTemperature.TMAX:
        return params.t_max
    return params.t_flex_max


def calculate_bleed_deduction(inputs: TakeoffInputs) -> float:
    """Get the weight (kg) lost to wing anti-ice and packs bleed."""
    deduction = 0.0
    if inputs.anti_ice is AntiIceSetting.ENGINE_WING:
        deduction += airframe.WING_ANTI_ICE_BLEED_WEIGHT
    if inputs.packs:
        deduction += airframe.PACKS_BLEED_WEIGHT
    return deduction


def calculate_weight_limits(
    factor: LimitingFactor,
    conf: TakeoffConfiguration,
    inputs: TakeoffInputs,
    params: TakeoffParameters,
) -> LimitWeight:
    """Run the weight-limit pipeline for one limiting factor.

    Args:
        factor: Limiting factor to evaluate.
        conf: Takeoff configuration.
        inputs: Takeoff inputs.
        params: Derived parameters.

    Returns:
        The full chain of ceilings, including the four reference temperatures.
    """
    model = WEIGHT_LIMIT_MODELS[factor]

    base_limit = model.base_limit(conf, params.adjusted_tora)
    delta_slope = model.slope_delta(conf, params, inputs.slope)
    slope_limit = base_limit - delta_slope
    delta_alt = model.altitude_delta(conf, params)
    alt_limit = slope_limit - delta_alt

    weights = LimitWeight(
        base_limit=base_limit,
        delta_slope=delta_slope,
        slope_limit=slope_limit,
        delta_alt=delta_alt,
        alt_limit=alt_limit,
    )

    delta_bleed = calculate_bleed_deduction(inputs)
    for reference in ReferenceTemperature:
        temp = reference_temperature(reference, inputs, params)
        delta_temp = model.temperature_delta(temp, conf, params)
        delta_wind = model.wind_delta(temp, conf, params)
        limit_no_bleed = alt_limit - delta_temp - delta_wind
        weights.temperatures[reference] = TemperatureLimit(
            delta_temp=delta_temp,
            delta_wind=delta_wind,
            limit_no_bleed=limit_no_bleed,
            limit=limit_no_bleed - delta_bleed,
        )

    return weights


def calculate_all_weight_limits(
    conf: TakeoffConfiguration,
    inputs: TakeoffInputs,
    params: TakeoffParameters,
) -> dict[LimitingFactor, LimitWeight]:
    """Run the pipeline for every limiting factor, in evaluation order."""
    return {factor: calculate_weight_limits(factor, conf, inputs, params) for factor in LimitingFactor}


def get_limiting_factor(
    limits: dict[LimitingFactor, LimitWeight],
    reference: ReferenceTemperature,
) -> LimitingFactor:
    """Pick the most restrictive factor at a reference temperature.

    Ties go to the factor evaluated first.

    Raises:
        PerformanceCalculationError: If any factor has not been evaluated.
    """
    limiting_factor: LimitingFactor | None = None
    lowest = math.inf

    for factor in LimitingFactor:
        if factor not in limits:
            raise PerformanceCalculationError(f"Weight limits missing for {factor.value}")
        limit = limits[factor].at(reference).limit
        if limiting_factor is None or limit < lowest:
            limiting_factor = factor
            lowest = limit

    return limiting_factor
