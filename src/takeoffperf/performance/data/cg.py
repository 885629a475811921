"""Centre of gravity envelope and forward CG weight correction factors."""

import numpy as np

from takeoffperf.interpolation import VectorLookupTable
from takeoffperf.performance.types import PerConfiguration


def _lerp(x: float, x0: float, x1: float, y0: float, y1: float) -> float:
    return float(np.interp(x, (x0, x1), (y0, y1)))


# Takeoff weight (kg) -> (forward limit, aft limit) in %MAC
TAKEOFF_CG_LIMITS = VectorLookupTable([
    (262_481, (15, 32.5)),
    (324_051, (15, 37)),
    (343_494, (15, _lerp(343_494, 324_051, 435_524, 37, 40))),
    (408_304, (17, _lerp(408_304, 324_051, 435_524, 37, 40))),
    (435_524, (17, 40)),
    (466_633, (17, 40)),
    (474_410, (_lerp(474_410, 466_633, 499_038, 17, 24), 40)),
    (499_038, (24, 37.2)),
])

CG_FACTORS = PerConfiguration(
    conf1=(-0.041448, 3.357),
    conf2=(-0.03277, 2.686),
    conf3=(-0.0249, 2.086),
)
