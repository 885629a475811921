"""Final V-speed reconciliation.

Raw regression speeds are raised to the minimum control and unstick speed
floors, rounded to whole knots and forced into V1 <= VR <= V2 order. V2 is
held to the tire speed limit and VR to the ceiling it implies.
"""

import math
from dataclasses import dataclass

from takeoffperf.performance import airframe
from takeoffperf.performance.data.speeds import (
    MINIMUM_V1_VMC,
    MINIMUM_V2_VMC,
    MINIMUM_V2_VMU,
    MINIMUM_VR_VMC,
)
from takeoffperf.performance.types import TakeoffConfiguration, TakeoffPerformanceError


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity.

    Examples:
        >>> round_half_up(140.5)
        141
        >>> round_half_up(-0.5)
        0
    """
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class SpeedFloors:
    """Minimum speeds (kt), already rounded up to whole knots."""

    v1: int
    vr: int
    v2_vmc: int
    v2_vmu: int

    @classmethod
    def for_takeoff(cls, conf: TakeoffConfiguration, pressure_alt: float, tow: float) -> "SpeedFloors":
        return cls(
            v1=math.ceil(MINIMUM_V1_VMC.get(pressure_alt)),
            vr=math.ceil(MINIMUM_VR_VMC.get(pressure_alt)),
            v2_vmc=math.ceil(MINIMUM_V2_VMC[conf].get(pressure_alt)),
            v2_vmu=math.ceil(MINIMUM_V2_VMU[conf].get(pressure_alt, tow)),
        )


@dataclass(frozen=True)
class ReconciledSpeeds:
    """Final speeds and the limit they violated, if any."""

    v1: int
    vr: int
    v2: int
    error: TakeoffPerformanceError | None = None


def reconcile_speeds(
    v1: float,
    vr: float,
    v2: float,
    conf: TakeoffConfiguration,
    pressure_alt: float,
    tow: float,
) -> ReconciledSpeeds:
    """Turn raw speeds into final whole-knot speeds.

    Args:
        v1: Raw decision speed (kt).
        vr: Raw rotation speed (kt).
        v2: Raw takeoff safety speed (kt).
        conf: Takeoff configuration.
        pressure_alt: Pressure altitude (ft).
        tow: Takeoff weight (kg).

    Returns:
        Reconciled speeds. ``error`` is ``VMCG_VMCA_LIMITS`` when a clamp
        pushed a speed below its floor, ``MAXIMUM_TIRE_SPEED`` when V2 is
        above the tire limit, otherwise None.
    """
    floors = SpeedFloors.for_takeoff(conf, pressure_alt, tow)
    error: TakeoffPerformanceError | None = None

    v1_corrected = round_half_up(max(v1, floors.v1))
    vr_corrected = round_half_up(max(vr, floors.vr))
    v2_corrected = round_half_up(max(v2, floors.v2_vmc, floors.v2_vmu))

    if vr_corrected > v2_corrected:
        vr_corrected = v2_corrected
        if vr_corrected < floors.vr:
            error = TakeoffPerformanceError.VMCG_VMCA_LIMITS

    tire_limit = airframe.MAX_TIRE_SPEED
    if v2_corrected > tire_limit:
        error = TakeoffPerformanceError.MAXIMUM_TIRE_SPEED
    else:
        max_vr = math.trunc(tire_limit - (v2_corrected - tire_limit))
        if vr_corrected > max_vr:
            vr_corrected = max_vr
            if vr_corrected < floors.vr:
                error = TakeoffPerformanceError.VMCG_VMCA_LIMITS

    if v1_corrected > vr_corrected:
        v1_corrected = vr_corrected
        if v1_corrected < floors.v1:
            error = TakeoffPerformanceError.VMCG_VMCA_LIMITS

    return ReconciledSpeeds(v1_corrected, vr_corrected, v2_corrected, error)
