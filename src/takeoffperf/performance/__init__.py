"""A380-842 takeoff performance.

This package computes, for a takeoff configuration and the current
conditions:
- Maximum takeoff weight (MTOW) and its limiting factor
- Flex (assumed) temperature for reduced thrust takeoffs
- V1, VR and V2, reconciled against regulatory floors and tire limits
- Wet and contaminated runway corrections
"""

from takeoffperf.performance.performance_calculator import TakeoffPerformanceCalculator, calculate_stab_trim
from takeoffperf.performance.types import (
    AntiIceSetting,
    LimitingFactor,
    LineupAngle,
    RunwayCondition,
    TakeoffConfiguration,
    TakeoffInputs,
    TakeoffPerformanceError,
    TakeoffResult,
)
from takeoffperf.performance.vspeeds import VSpeedCalculator

__all__ = [
    "AntiIceSetting",
    "LimitingFactor",
    "LineupAngle",
    "RunwayCondition",
    "TakeoffConfiguration",
    "TakeoffInputs",
    "TakeoffPerformanceCalculator",
    "TakeoffPerformanceError",
    "TakeoffResult",
    "VSpeedCalculator",
    "calculate_stab_trim",
]
