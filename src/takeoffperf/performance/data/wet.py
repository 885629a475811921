"""Wet runway coefficients.

All tables are keyed by headwind (kt). T-VMCG factors are (slope, offset);
adjustment factors are two (slope, offset) pairs whose minimum, capped at
zero, is the wet correction.
"""

from takeoffperf.interpolation import VectorLookupTable
from takeoffperf.performance.types import PerConfiguration

TVMCG_FACTORS = PerConfiguration(
    conf1=VectorLookupTable([
        (-15, (0.06485, -99.47)),
        (0, (0.9895, -116.54)),
        (10, (0.13858, -171.15)),
    ]),
    conf2=VectorLookupTable([
        (-15, (0.06573, -102.97)),
        (0, (0.10579, -132.96)),
        (10, (0.06575, -64.4)),
    ]),
    conf3=VectorLookupTable([
        (-15, (0.07002, -106.62)),
        (0, (0.08804, -108.42)),
        (10, (0.07728, -82.08)),
    ]),
)

WET_TOW_ADJUSTMENT_FACTORS_AT_OR_BELOW_TVMCG = PerConfiguration(
    conf1=VectorLookupTable([
        (-15, (0.05498, -126.98, 0.00903, -28.35)),
        (0, (0.02391, -48.94, 0.00043, -1.64)),
        (10, (0.01044, -21.53, 0.00022, -1.12)),
    ]),
    conf2=VectorLookupTable([
        (-15, (0.03856, -94.674, 0.00965, -30.09)),
        (0, (0.02686, -48.63, -0.00011, -0.08)),
        (10, (0.00057, -2.94, -0.00004, -0.13)),
    ]),
    conf3=VectorLookupTable([
        (-15, (0.01924, -57.58, 0, 0)),
        (0, (0.02184, -44.91, -0.00019, 0.1)),
        (10, (0.00057, -2.94, 0.00047, -1.6)),
    ]),
)

WET_TOW_ADJUSTMENT_FACTORS_ABOVE_TVMCG = PerConfiguration(
    conf1=VectorLookupTable([
        (-15, (0.0197, -61.23, 0, 0)),
        (0, (0.01887, -48.47, 0, 0)),
        (10, (0.045, -86.32, 0, 0)),
    ]),
    conf2=VectorLookupTable([
        (-15, (0.01941, -60.02, 0, 0)),
        (0, (0.02797, -61.99, 0, 0)),
        (10, (0.03129, -63.61, 0, 0)),
    ]),
    conf3=VectorLookupTable([
        (-15, (0.01978, -61.43, 0, 0)),
        (0, (0.02765, -61.88, 0, 0)),
        (10, (0.03662, -72.45, 0, 0)),
    ]),
)

WET_FLEX_ADJUSTMENT_FACTORS_AT_OR_BELOW_TVMCG = PerConfiguration(
    conf1=VectorLookupTable([
        (-15, (0.07933, -190.57, 0.02074, -65.05)),
        (0, (0.04331, -90.86, 0.00098, -3.88)),
        (10, (0.0233, -48.8, 0.00072, -3.14)),
    ]),
    conf2=VectorLookupTable([
        (-15, (0.029, -89.9, 0.0099, -38.42)),
        (0, (0.03845, -80.2, -1, 0)),
        (10, (0.00167, -7.01, 0.000266, -1.61)),
    ]),
    conf3=VectorLookupTable([
        (-15, (0.03993, -94.09, 0, 0)),
        (0, (0.03845, -80.2, -1, 0)),
        (10, (0.00835, -18.34, -1, 0)),
    ]),
)

WET_FLEX_ADJUSTMENT_FACTORS_ABOVE_TVMCG = PerConfiguration(
    conf1=VectorLookupTable([
        (-15, (-0.03716, 31.85, 0.08618, -234.92)),
        (0, (-0.05861, 51.01, 0.04322, -113.39)),
        (10, (0.1012, -195.48, 0, 0)),
    ]),
    conf2=VectorLookupTable([
        (-15, (-0.0285, 19.43, 0.06951, -193.38)),
        (0, (-0.04698, 37.58, 0.06438, -139.9)),
        (10, (0.06159, -126.56, 0, 0)),
    ]),
    conf3=VectorLookupTable([
        (-15, (-0.0024, 4.25, -0.02118, 46.2)),
        (0, (-0.02645, 9.81, 0.06116, -131.79)),
        (10, (0.04841, -104.22, 0, 0)),
    ]),
)

WET_V1_ADJUSTMENT_FACTORS_AT_OR_BELOW_TVMCG = PerConfiguration(
    conf1=VectorLookupTable([
        (-15, (0.01428, -32.58, 0.00048, -2.03)),
        (0, (-0.00786, 6.81, 0.00234, -14.23)),
        (10, (-0.00246, -3.68, 0.00145, -11.32)),
    ]),
    conf2=VectorLookupTable([
        (-15, (-0.01563, 28.93, -0.00559, 6.36)),
        (0, (-0.00474, 6.98, 0.0024, -13.2)),
        (10, (0.00236, -11.92, 0, 0)),
    ]),
    conf3=VectorLookupTable([
        (-15, (-0.01018, 18.83, 0, 0)),
        (0, (-0.00931, 10.01, 0.00017, -8.5)),
        (10, (-0.00005, -7.98, 0, 0)),
    ]),
)

WET_V1_ADJUSTMENT_FACTORS_ABOVE_TVMCG = PerConfiguration(
    conf1=VectorLookupTable([
        (-15, (-0.00131, 0.91, -0.02013, 42.56)),
        (0, (0.10383, -169.42, -0.00529, 6.73)),
        (10, (-0.01594, 21.8, 0, 0)),
    ]),
    conf2=VectorLookupTable([
        (-15, (-0.00789, 15.29, 0, 0)),
        (0, (-0.00971, 14, 0, 0)),
        (10, (-0.00684, 8.43, 0, 0)),
    ]),
    conf3=VectorLookupTable([
        (-15, (-0.0024, 4.25, -0.02118, 46.2)),
        (0, (-0.00727, 10.12, 0, 0)),
        (10, (-0.00671, 8.65, -0.0333, 50.84)),
    ]),
)

WET_VR_ADJUSTMENT_FACTORS_AT_OR_BELOW_TVMCG = PerConfiguration(
    conf1=VectorLookupTable([
        (-15, (0.01428, -32.58, 0.00048, -2.03)),
        (0, (0.00353, -7.19, 0.00022, -0.64)),
        (10, (0.0022, -4.14, 0.00053, -1.54)),
    ]),
    conf2=VectorLookupTable([
        (-15, (0.00693, -16.96, -0.00559, 6.36)),
        (0, (0.00864, -17.08, 0, 0)),
        (10, (0, 0, 0, 0)),
    ]),
    conf3=VectorLookupTable([
        (-15, (0.00151, -6.16, 0, 0)),
        (0, (-0.00557, -11.68, -0.0004, 0.54)),
        (10, (-0.0001, -0.11, 0, 0)),
    ]),
)

WET_V2_ADJUSTMENT_FACTORS_AT_OR_BELOW_TVMCG = PerConfiguration(
    conf1=VectorLookupTable([
        (-15, (0.01936, -43.79, 0.000483, -2.03)),
        (0, (0.00353, -7.19, 0.00022, -0.64)),
        (10, (0.0022, -4.14, 0.00053, -1.54)),
    ]),
    conf2=VectorLookupTable([
        (-15, (0.01198, -28.31, 0, 0)),
        (0, (0.00864, -17.08, 0, 0)),
        (10, (0, 0, 0, 0)),
    ]),
    conf3=VectorLookupTable([
        (-15, (0.00246, -8.65, 0, 0)),
        (0, (0.00114, -3.52, 0, 0)),
        (10, (-0.0001, -0.11, 0, 0)),
    ]),
)
