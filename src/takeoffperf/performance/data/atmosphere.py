"""Reference temperature tables.

Tref is keyed by field elevation (ft), Tmax by pressure altitude (ft).
"""

from takeoffperf.interpolation import LookupTable

T_REF_TABLE = LookupTable([
    (-2000, 48),
    (0, 44),
    (500, 43),
    (1000, 42),
    (2000, 40),
    (3000, 36.4),
    (3479, 35),
    (8348, 16.4),
    (9200, 13.5),
])

T_MAX_TABLE = LookupTable([
    (-2000, 55),
    (0, 55),
    (9200, 38),
])

