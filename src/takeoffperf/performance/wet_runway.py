"""Wet runway corrections.

Every wet correction (MTOW, flex temperature, V1, VR, V2) has the same
shape: two linear expressions in ``adjusted TORA - pressure altitude / 20``
whose minimum, capped at zero, is added to the dry value. The coefficients
are keyed by headwind and come from one of two families depending on
whether OAT is above T-VMCG.
"""

from takeoffperf.interpolation import VectorLookupTable
from takeoffperf.performance.data import wet as data
from takeoffperf.performance.types import (
    PerConfiguration,
    TakeoffConfiguration,
    TakeoffParameters,
    TvmcgRegime,
)

WetFactorTables = dict[TvmcgRegime, PerConfiguration[VectorLookupTable]]

MTOW_FACTORS: WetFactorTables = {
    TvmcgRegime.AT_OR_BELOW: data.WET_TOW_ADJUSTMENT_FACTORS_AT_OR_BELOW_TVMCG,
    TvmcgRegime.ABOVE: data.WET_TOW_ADJUSTMENT_FACTORS_ABOVE_TVMCG,
}

FLEX_FACTORS: WetFactorTables = {
    TvmcgRegime.AT_OR_BELOW: data.WET_FLEX_ADJUSTMENT_FACTORS_AT_OR_BELOW_TVMCG,
    TvmcgRegime.ABOVE: data.WET_FLEX_ADJUSTMENT_FACTORS_ABOVE_TVMCG,
}

V1_FACTORS: WetFactorTables = {
    TvmcgRegime.AT_OR_BELOW: data.WET_V1_ADJUSTMENT_FACTORS_AT_OR_BELOW_TVMCG,
    TvmcgRegime.ABOVE: data.WET_V1_ADJUSTMENT_FACTORS_ABOVE_TVMCG,
}

# Above T-VMCG VR and V2 are not corrected
VR_FACTORS: WetFactorTables = {
    TvmcgRegime.AT_OR_BELOW: data.WET_VR_ADJUSTMENT_FACTORS_AT_OR_BELOW_TVMCG,
}

V2_FACTORS: WetFactorTables = {
    TvmcgRegime.AT_OR_BELOW: data.WET_V2_ADJUSTMENT_FACTORS_AT_OR_BELOW_TVMCG,
}


def length_altitude_coefficient(params: TakeoffParameters) -> float:
    return params.adjusted_tora - params.pressure_alt / 20


def two_term_minimum(factors: tuple[float, ...], coefficient: float) -> float:
    """Get ``min(0, a*x + b, c*x + d)`` for factors (a, b, c, d).

    Examples:
        >>> two_term_minimum((0.01, -30.0, 0.0, 0.0), 2000.0)
        -10.0
        >>> two_term_minimum((0.01, -10.0, 0.0, 5.0), 2000.0)
        0.0
    """
    a, b, c, d = factors
    return min(0.0, a * coefficient + b, c * coefficient + d)


def calculate_wet_adjustment(
    tables: WetFactorTables,
    regime: TvmcgRegime,
    conf: TakeoffConfiguration,
    params: TakeoffParameters,
) -> float:
    """Get a wet correction (never positive) to add to a dry value.

    Args:
        tables: Coefficient family, e.g. ``MTOW_FACTORS``.
        regime: Whether OAT is above T-VMCG.
        conf: Takeoff configuration.
        params: Derived parameters.

    Returns:
        The correction, or 0 when the family has no table for the regime.
    """
    per_configuration = tables.get(regime)
    if per_configuration is None:
        return 0.0

    factors = per_configuration[conf].get(params.headwind)
    return two_term_minimum(factors, length_altitude_coefficient(params))
