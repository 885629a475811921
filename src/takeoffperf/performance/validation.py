"""Input validation and auxiliary envelope queries.

``check_inputs`` returns the first violated precondition of a calculation.
The CG envelope and crosswind limits are also exposed on their own for
callers that need them without running a full calculation.
"""

from takeoffperf.performance import airframe
from takeoffperf.performance.data.cg import TAKEOFF_CG_LIMITS
from takeoffperf.performance.types import (
    PerformanceCalculationError,
    RunwayCondition,
    TakeoffConfiguration,
    TakeoffInputs,
    TakeoffParameters,
    TakeoffPerformanceError,
)

_VALID_CONFIGURATIONS = frozenset(conf.value for conf in TakeoffConfiguration)

# Crosswind limits (kt) by runway condition
_CROSSWIND_LIMITS: dict[RunwayCondition, float] = {
    RunwayCondition.DRY: 35.0,
    RunwayCondition.WET: 35.0,
    RunwayCondition.DRY_SNOW_10MM: 25.0,
    RunwayCondition.DRY_SNOW_100MM: 25.0,
    RunwayCondition.WET_SNOW_5MM: 25.0,
    RunwayCondition.WET_SNOW_15MM: 25.0,
    RunwayCondition.WET_SNOW_30MM: 25.0,
    RunwayCondition.WATER_6MM: 20.0,
    RunwayCondition.WATER_13MM: 20.0,
    RunwayCondition.SLUSH_6MM: 20.0,
    RunwayCondition.SLUSH_13MM: 20.0,
}

COMPACTED_SNOW_COLD_OAT = -15.0
COMPACTED_SNOW_COLD_CROSSWIND = 29.0
COMPACTED_SNOW_CROSSWIND = 25.0


def get_cg_limits(tow: float) -> tuple[float, float]:
    """Get the (forward, aft) takeoff CG limits in %MAC for a weight (kg)."""
    forward, aft = TAKEOFF_CG_LIMITS.get(tow)
    return forward, aft


def is_cg_within_limits(cg: float, tow: float) -> bool:
    """Check a CG (%MAC) against the takeoff envelope at a weight (kg).

    Examples:
        >>> is_cg_within_limits(30.0, 400_000.0)
        True
        >>> is_cg_within_limits(45.0, 400_000.0)
        False
    """
    forward, aft = get_cg_limits(tow)
    return forward <= cg <= aft


def get_crosswind_limit(runway_condition: RunwayCondition, oat: float) -> float:
    """Get the maximum demonstrated crosswind for a runway condition.

    Args:
        runway_condition: Runway surface state.
        oat: Outside air temperature (°C), only relevant on compacted snow.

    Returns:
        Crosswind limit in knots.

    Raises:
        PerformanceCalculationError: For a value that is not a runway condition.
    """
    if runway_condition is RunwayCondition.COMPACTED_SNOW:
        if oat <= COMPACTED_SNOW_COLD_OAT:
            return COMPACTED_SNOW_COLD_CROSSWIND
        return COMPACTED_SNOW_CROSSWIND

    try:
        return _CROSSWIND_LIMITS[runway_condition]
    except KeyError:
        raise PerformanceCalculationError(f"Unknown runway condition: {runway_condition!r}") from None


def check_inputs(inputs: TakeoffInputs, params: TakeoffParameters) -> TakeoffPerformanceError:
    """Validate inputs in a fixed order.

    Args:
        inputs: Takeoff inputs.
        params: Parameters derived from the inputs.

    Returns:
        The first violated condition, or ``TakeoffPerformanceError.NONE``.
    """
    if inputs.conf not in _VALID_CONFIGURATIONS:
        return TakeoffPerformanceError.INVALID_DATA
    if inputs.tow > airframe.STRUCTURAL_MTOW:
        return TakeoffPerformanceError.STRUCTURAL_MTOW
    if params.pressure_alt > airframe.MAX_PRESSURE_ALT:
        return TakeoffPerformanceError.MAXIMUM_PRESSURE_ALT
    if inputs.oat > params.t_max:
        return TakeoffPerformanceError.MAXIMUM_TEMPERATURE
    if inputs.tow < airframe.OPERATING_EMPTY_WEIGHT:
        return TakeoffPerformanceError.OPERATING_EMPTY_WEIGHT
    if inputs.cg is not None and not is_cg_within_limits(inputs.cg, inputs.tow):
        return TakeoffPerformanceError.CG_OUT_OF_LIMITS
    if inputs.wind < -airframe.MAX_TAILWIND:
        return TakeoffPerformanceError.MAXIMUM_TAILWIND
    if abs(inputs.slope) > airframe.MAX_RUNWAY_SLOPE:
        return TakeoffPerformanceError.MAXIMUM_RUNWAY_SLOPE
    return TakeoffPerformanceError.NONE
