"""Contaminated runway profiles.

A contaminated takeoff reuses the dry MTOW: it is reduced by a runway-length
dependent correction and mapped through the condition's MTOW table. Speeds
come straight from a weight-keyed table. Each contamination
state is one ``ContaminationProfile``.
"""

from dataclasses import dataclass

from takeoffperf.interpolation import LookupTable, VectorLookupTable
from takeoffperf.performance.data import contamination as data
from takeoffperf.performance.types import (
    PerConfiguration,
    PerformanceCalculationError,
    RunwayCondition,
    TakeoffConfiguration,
)


@dataclass(frozen=True)
class ContaminatedMtow:
    """MTOW resolved for a contaminated runway.

    Attributes:
        corrected_weight: Dry MTOW less the contamination correction (kg).
        mtow: Maximum takeoff weight (kg).
        too_light: Whether the corrected weight is below the data floor.
    """

    corrected_weight: float
    mtow: float
    too_light: bool


@dataclass(frozen=True)
class ContaminationProfile:
    """Performance data of one contamination state."""

    condition: RunwayCondition
    weight_correction: PerConfiguration[LookupTable]
    min_corrected_weight: PerConfiguration[float]
    mtow: PerConfiguration[LookupTable]
    speeds: PerConfiguration[VectorLookupTable]

    def calculate_mtow(
        self,
        conf: TakeoffConfiguration,
        dry_mtow: float,
        adjusted_tora: float,
    ) -> ContaminatedMtow:
        """Resolve the MTOW from the dry MTOW.

        Args:
            conf: Takeoff configuration.
            dry_mtow: Dry runway MTOW (kg).
            adjusted_tora: Runway length after lineup (m).

        Returns:
            The corrected weight, MTOW and whether the data floor was hit.
        """
        corrected_weight = dry_mtow - self.weight_correction[conf].get(adjusted_tora)
        return ContaminatedMtow(
            corrected_weight=corrected_weight,
            mtow=self.mtow[conf].get(corrected_weight),
            too_light=corrected_weight < self.min_corrected_weight[conf],
        )

    def calculate_speeds(self, conf: TakeoffConfiguration, tow: float) -> tuple[float, float, float]:
        """Get unreconciled (V1, VR, V2) for a takeoff weight (kg)."""
        v1, vr, v2 = self.speeds[conf].get(tow)
        return v1, vr, v2


CONTAMINATION_PROFILES: dict[RunwayCondition, ContaminationProfile] = {
    profile.condition: profile
    for profile in (
        ContaminationProfile(
            RunwayCondition.WATER_6MM,
            data.WEIGHT_CORRECTION_CONTAMINATED_6MM_WATER,
            data.MIN_CORRECTED_TOW_CONTAMINATED_6MM_WATER,
            data.MTOW_CONTAMINATED_6MM_WATER,
            data.V_SPEEDS_CONTAMINATED_6MM_WATER,
        ),
        ContaminationProfile(
            RunwayCondition.WATER_13MM,
            data.WEIGHT_CORRECTION_CONTAMINATED_13MM_WATER,
            data.MIN_CORRECTED_TOW_CONTAMINATED_13MM_WATER,
            data.MTOW_CONTAMINATED_13MM_WATER,
            data.V_SPEEDS_CONTAMINATED_13MM_WATER,
        ),
        ContaminationProfile(
            RunwayCondition.SLUSH_6MM,
            data.WEIGHT_CORRECTION_CONTAMINATED_6MM_SLUSH,
            data.MIN_CORRECTED_TOW_CONTAMINATED_6MM_SLUSH,
            data.MTOW_CONTAMINATED_6MM_SLUSH,
            data.V_SPEEDS_CONTAMINATED_6MM_SLUSH,
        ),
        ContaminationProfile(
            RunwayCondition.SLUSH_13MM,
            data.WEIGHT_CORRECTION_CONTAMINATED_13MM_SLUSH,
            data.MIN_CORRECTED_TOW_CONTAMINATED_13MM_SLUSH,
            data.MTOW_CONTAMINATED_13MM_SLUSH,
            data.V_SPEEDS_CONTAMINATED_13MM_SLUSH,
        ),
        ContaminationProfile(
            RunwayCondition.COMPACTED_SNOW,
            data.WEIGHT_CORRECTION_CONTAMINATED_COMPACTED_SNOW,
            data.MIN_CORRECTED_TOW_CONTAMINATED_COMPACTED_SNOW,
            data.MTOW_CONTAMINATED_COMPACTED_SNOW,
            data.V_SPEEDS_CONTAMINATED_COMPACTED_SNOW,
        ),
        ContaminationProfile(
            RunwayCondition.WET_SNOW_5MM,
            data.WEIGHT_CORRECTION_CONTAMINATED_5MM_WET_SNOW,
            data.MIN_CORRECTED_TOW_CONTAMINATED_5MM_WET_SNOW,
            data.MTOW_CONTAMINATED_5MM_WET_SNOW,
            data.V_SPEEDS_CONTAMINATED_5MM_WET_SNOW,
        ),
        ContaminationProfile(
            RunwayCondition.WET_SNOW_15MM,
            data.WEIGHT_CORRECTION_CONTAMINATED_15MM_WET_SNOW,
            data.MIN_CORRECTED_TOW_CONTAMINATED_15MM_WET_SNOW,
            data.MTOW_CONTAMINATED_15MM_WET_SNOW,
            data.V_SPEEDS_CONTAMINATED_15MM_WET_SNOW,
        ),
        ContaminationProfile(
            RunwayCondition.WET_SNOW_30MM,
            data.WEIGHT_CORRECTION_CONTAMINATED_30MM_WET_SNOW,
            data.MIN_CORRECTED_TOW_CONTAMINATED_30MM_WET_SNOW,
            data.MTOW_CONTAMINATED_30MM_WET_SNOW,
            data.V_SPEEDS_CONTAMINATED_30MM_WET_SNOW,
        ),
        ContaminationProfile(
            RunwayCondition.DRY_SNOW_10MM,
            data.WEIGHT_CORRECTION_CONTAMINATED_10MM_DRY_SNOW,
            data.MIN_CORRECTED_TOW_CONTAMINATED_10MM_DRY_SNOW,
            data.MTOW_CONTAMINATED_10MM_DRY_SNOW,
            data.V_SPEEDS_CONTAMINATED_10MM_DRY_SNOW,
        ),
        ContaminationProfile(
            RunwayCondition.DRY_SNOW_100MM,
            data.WEIGHT_CORRECTION_CONTAMINATED_100MM_DRY_SNOW,
            data.MIN_CORRECTED_TOW_CONTAMINATED_100MM_DRY_SNOW,
            data.MTOW_CONTAMINATED_100MM_DRY_SNOW,
            data.V_SPEEDS_CONTAMINATED_100MM_DRY_SNOW,
        ),
    )
}


def get_contamination_profile(condition: RunwayCondition) -> ContaminationProfile:
    """Get the profile of a contaminated runway condition.

    Raises:
        PerformanceCalculationError: If the condition is dry, wet or unknown.
    """
    try:
        return CONTAMINATION_PROFILES[condition]
    except KeyError:
        raise PerformanceCalculationError(f"Not a contaminated runway condition: {condition!r}") from None
