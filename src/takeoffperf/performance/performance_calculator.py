"""Takeoff performance calculator for the A380-842.

This module ties the engine stages together: validation, derived
parameters, weight limits, MTOW, flex temperature and V-speeds. It also
selects the best takeoff configuration when the caller leaves the choice
to the engine.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

import numpy as np

from takeoffperf.core.logging_system import get_logger
from takeoffperf.performance import airframe, validation
from takeoffperf.performance.flex import calculate_flex_temperature
from takeoffperf.performance.mtow import resolve_mtow
from takeoffperf.performance.parameters import calculate_parameters, calculate_tvmcg
from takeoffperf.performance.reconciliation import round_half_up
from takeoffperf.performance.types import (
    ReferenceTemperature,
    RunwayCondition,
    TakeoffConfiguration,
    TakeoffInputs,
    TakeoffPerformanceError,
    TakeoffResult,
)
from takeoffperf.performance.vspeeds import VSpeedCalculator
from takeoffperf.performance.weight_limits import calculate_all_weight_limits, get_limiting_factor

logger = get_logger(__name__)


def calculate_stab_trim(cg: float) -> float:
    """Get the takeoff stabilizer trim (degrees, positive nose up) for a CG.

    Args:
        cg: Centre of gravity (%MAC).

    Returns:
        Trim interpolated over the CG range, clamped, rounded to 0.1.
    """
    trim = float(np.interp(cg, airframe.STAB_TRIM_CG_RANGE, airframe.STAB_TRIM_RANGE))
    return round_half_up(trim * 10) / 10


class TakeoffPerformanceCalculator:
    """Calculate takeoff performance.

    The calculator holds no per-calculation state; one instance can serve
    concurrent callers.

    Examples:
        >>> calc = TakeoffPerformanceCalculator()
        >>> result = calc.calculate(inputs)
        >>> if result.succeeded:
        ...     print(result.flex, result.v1, result.vr, result.v2)
    """

    structural_mtow = airframe.STRUCTURAL_MTOW
    max_pressure_alt = airframe.MAX_PRESSURE_ALT
    oew = airframe.OPERATING_EMPTY_WEIGHT
    max_headwind = airframe.MAX_HEADWIND
    max_tailwind = airframe.MAX_TAILWIND

    def calculate(self, inputs: TakeoffInputs) -> TakeoffResult:
        """Calculate takeoff performance for one configuration.

        Args:
            inputs: Takeoff inputs, including the configuration.

        Returns:
            A fresh result. Expected failures are reported through
            ``result.error``, never raised.
        """
        params = calculate_parameters(inputs)
        result = TakeoffResult(inputs=inputs, params=params)

        result.error = validation.check_inputs(inputs, params)
        if result.error is TakeoffPerformanceError.NONE:
            self._calculate_performance(result)

        if inputs.cg is not None:
            result.stab_trim = calculate_stab_trim(inputs.cg)

        logger.debug(
            f"CONF {inputs.conf} {inputs.runway_condition.value}: error={result.error.value} "
            f"mtow={result.mtow} flex={result.flex} speeds={result.v1}/{result.vr}/{result.v2}"
        )
        return result

    def _calculate_performance(self, result: TakeoffResult) -> None:
        inputs, params = result.inputs, result.params
        conf = TakeoffConfiguration(inputs.conf)

        limits = calculate_all_weight_limits(conf, inputs, params)
        result.limits = limits
        result.oat_limiting_factor = get_limiting_factor(limits, ReferenceTemperature.OAT)
        result.t_ref_limiting_factor = get_limiting_factor(limits, ReferenceTemperature.TREF)
        result.t_max_limiting_factor = get_limiting_factor(limits, ReferenceTemperature.TMAX)
        result.t_flex_max_limiting_factor = get_limiting_factor(limits, ReferenceTemperature.TFLEXMAX)

        dry_mtow = limits[result.t_ref_limiting_factor].at(ReferenceTemperature.OAT).limit
        result.tvmcg = calculate_tvmcg(conf, params)

        resolution = resolve_mtow(inputs, conf, params, dry_mtow, result.oat_limiting_factor, result.tvmcg)
        result.mtow = resolution.mtow
        if resolution.too_light:
            result.error = TakeoffPerformanceError.TOO_LIGHT

        if resolution.mtow < inputs.tow:
            result.error = TakeoffPerformanceError.TOO_HEAVY
            return

        if inputs.force_toga:
            if self._copy_tailwind_speeds(result):
                return
        elif not inputs.runway_condition.is_contaminated:
            result.flex, params.flex_limiting_factor = calculate_flex_temperature(
                inputs,
                conf,
                params,
                limits,
                result.t_ref_limiting_factor,
                result.t_max_limiting_factor,
                result.t_flex_max_limiting_factor,
                result.tvmcg,
            )

        limiting_factor = (
            params.flex_limiting_factor if params.flex_limiting_factor is not None else result.oat_limiting_factor
        )
        speeds = VSpeedCalculator(inputs, conf, params).calculate(
            limiting_factor, resolution.forward_cg_speed_correction, result.tvmcg
        )
        result.v1, result.vr, result.v2 = speeds.v1, speeds.vr, speeds.v2
        result.intermediate_speeds = speeds.intermediate
        if speeds.error is not None:
            result.error = speeds.error

    def _copy_tailwind_speeds(self, result: TakeoffResult) -> bool:
        """Use the speeds of a 15 kt tailwind takeoff for a forced TOGA takeoff.

        Returns:
            True if the tailwind calculation succeeded and its speeds were used.
        """
        tailwind_inputs = replace(result.inputs, wind=airframe.FORCE_TOGA_TAILWIND, force_toga=False)
        tailwind_result = self.calculate(tailwind_inputs)

        if not tailwind_result.succeeded:
            logger.debug(f"Tailwind speeds unavailable ({tailwind_result.error.value}), using own speeds")
            return False

        result.v1, result.vr, result.v2 = tailwind_result.v1, tailwind_result.vr, tailwind_result.v2
        if tailwind_result.intermediate_speeds is not None:
            result.intermediate_speeds = replace(tailwind_result.intermediate_speeds)
        return True

    def calculate_optimal_configuration(self, inputs: TakeoffInputs, max_workers: int | None = None) -> TakeoffResult:
        """Calculate every configuration and return the best result.

        Successful results are ranked by highest flex temperature (no flex
        counts as 0), then lowest V1. If no configuration succeeds the
        CONF 3 result is returned.

        Args:
            inputs: Takeoff inputs; the configuration is ignored.
            max_workers: Evaluate configurations on a thread pool of this size.
                None evaluates them one after the other.

        Returns:
            A copy of the selected result.
        """
        candidates = [replace(inputs, conf=conf.value) for conf in TakeoffConfiguration]

        if max_workers:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                results = list(executor.map(self.calculate, candidates))
        else:
            results = [self.calculate(candidate) for candidate in candidates]

        successful = [result for result in results if result.succeeded]
        if not successful:
            logger.info(f"No configuration succeeded, reporting CONF {results[-1].inputs.conf}")
            return results[-1].copy()

        best = min(successful, key=lambda result: (-(result.flex or 0), result.v1))
        logger.info(f"Optimal configuration CONF {best.inputs.conf} (flex={best.flex}, V1={best.v1})")
        return best.copy()

    def is_cg_within_limits(self, cg: float, tow: float) -> bool:
        """Check a CG (%MAC) against the takeoff envelope at a weight (kg)."""
        return validation.is_cg_within_limits(cg, tow)

    def get_crosswind_limit(self, runway_condition: RunwayCondition, oat: float) -> float:
        """Get the crosswind limit (kt) for a runway condition and OAT (°C)."""
        return validation.get_crosswind_limit(runway_condition, oat)
